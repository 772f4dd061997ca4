from fastapi import APIRouter, Depends, HTTPException, Query, Security

from app.db.stores import LoadStore
from app.models.negotiation import NegotiationRequest, NegotiationResponse
from app.routes._auth import verify_api_key
from app.routes._stores import get_load_store
from app.services.negotiation_service import negotiate

router = APIRouter(prefix="/api/negotiate", tags=["Negotiation"])


def _negotiation_request(
    load_id: int = Query(..., description="Load under negotiation"),
    offered_rate: float = Query(
        ..., allow_inf_nan=False, description="Rate presented to the carrier"
    ),
    counter_offer: float = Query(
        ..., allow_inf_nan=False, description="Carrier's counter-proposal"
    ),
) -> NegotiationRequest:
    return NegotiationRequest(
        load_id=load_id,
        offered_rate=offered_rate,
        counter_offer=counter_offer,
    )


@router.get(
    "",
    response_model=NegotiationResponse,
    dependencies=[Security(verify_api_key)],
)
def negotiate_route(
    req: NegotiationRequest = Depends(_negotiation_request),
    load_store: LoadStore = Depends(get_load_store),
):
    """
    Next rate to propose to the carrier: the midpoint between our offer and
    their counter (or the shipper ceiling, if they asked above it), rounded
    to $100 and never above the ceiling or the counter itself.
    """
    result, error = negotiate(req, load_store)
    if error:
        raise HTTPException(404, error)
    return result
