from datetime import datetime
from typing import Annotated, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator

# JSON numbers only: "245" is rejected rather than coerced.
StrictCount = Annotated[int, Field(strict=True, ge=0)]
StrictAmount = Annotated[float, Field(strict=True, allow_inf_nan=False)]

_SUCCESS_LITERAL = "Success"


class CallDataRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "call-20240115-001",
                "duration": 245,
                "mc_number": 123456,
                "final_offer": 4000,
                "final_counter_offer": 4200,
                "offer_iterations": 2,
                "successful": "Success",
                "sentiment": "positive",
            }
        }
    )

    id: Annotated[str, Field(strict=True, min_length=1)]
    duration: StrictCount
    mc_number: Annotated[int, Field(strict=True)]
    final_offer: StrictAmount
    final_counter_offer: StrictAmount
    offer_iterations: StrictCount
    successful: Union[StrictBool, str]
    sentiment: Annotated[str, Field(strict=True)]
    created_at: Optional[datetime] = None

    @field_validator("successful", mode="after")
    @classmethod
    def normalise_successful(cls, v):
        if isinstance(v, str):
            if v == _SUCCESS_LITERAL:
                return True
            raise ValueError(
                f"successful must be a boolean or the string {_SUCCESS_LITERAL!r}"
            )
        return v


class CallDataResponse(BaseModel):
    message: str = "Call data saved successfully"
    id: str


class CallRecord(BaseModel):
    """A completed negotiation call as persisted in the call store."""

    id: str
    duration: int
    mc_number: int
    final_offer: float
    final_counter_offer: float
    offer_iterations: int
    successful: bool
    sentiment: str
    created_at: datetime
