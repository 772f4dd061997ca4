import logging
from decimal import Decimal, ROUND_HALF_UP, localcontext

from app.db.stores import LoadStore
from app.models.negotiation import NegotiationRequest, NegotiationResponse

log = logging.getLogger(__name__)

_RATE_INCREMENT = Decimal(100)
# Wide enough to hold the integer part of any finite float
_ROUNDING_PRECISION = 400


def _round_to_hundred(rate: float) -> float:
    """Nearest multiple of 100, halves rounded away from zero."""
    with localcontext() as ctx:
        ctx.prec = _ROUNDING_PRECISION
        steps = (Decimal(rate) / _RATE_INCREMENT).quantize(
            Decimal(1), rounding=ROUND_HALF_UP
        )
        return float(steps * _RATE_INCREMENT)


def compute_next_rate(
    loadboard_rate: float,
    maximum_rate: float,
    counter_offer: float,
) -> float:
    """
    Split the gap between our offer and the carrier's counter. A counter
    above the shipper's ceiling is ignored and the gap to the ceiling is
    split instead. The midpoint is rounded to the nearest $100 and then
    clamped so we never offer more than the ceiling or than was asked.
    """
    if counter_offer > maximum_rate:
        difference = maximum_rate - loadboard_rate
    else:
        difference = counter_offer - loadboard_rate
    provisional_rate = loadboard_rate + difference / 2

    rounded = _round_to_hundred(provisional_rate)
    return min(rounded, maximum_rate, counter_offer)


def negotiate(
    req: NegotiationRequest,
    load_store: LoadStore,
) -> tuple[NegotiationResponse, None] | tuple[None, str]:
    load = load_store.get_by_id(req.load_id)
    if load is None:
        return None, "Load not found"

    new_rate = compute_next_rate(
        loadboard_rate=req.offered_rate,
        maximum_rate=load.maximum_rate,
        counter_offer=req.counter_offer,
    )
    log.info("Negotiation load_id=%s offered=%s counter=%s -> new_rate=%s",
             req.load_id, req.offered_rate, req.counter_offer, new_rate)
    return NegotiationResponse(new_rate=new_rate), None
