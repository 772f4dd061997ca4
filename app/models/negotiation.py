from pydantic import BaseModel, Field


class NegotiationRequest(BaseModel):
    load_id: int
    offered_rate: float = Field(
        ..., allow_inf_nan=False, description="Rate presented to the carrier"
    )
    counter_offer: float = Field(
        ..., allow_inf_nan=False, description="Carrier's counter-proposal"
    )


class NegotiationResponse(BaseModel):
    new_rate: float
