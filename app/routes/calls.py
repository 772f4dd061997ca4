from fastapi import APIRouter, Depends, Security, status

from app.db.stores import CallStore
from app.models.call import CallDataRequest, CallDataResponse
from app.routes._auth import verify_api_key
from app.routes._stores import get_call_store
from app.services.call_service import record_call

router = APIRouter(prefix="/api/callsdata", tags=["Calls"])


@router.post(
    "",
    response_model=CallDataResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Security(verify_api_key)],
)
def record_call_route(
    req: CallDataRequest,
    call_store: CallStore = Depends(get_call_store),
):
    """Log the outcome of a finished negotiation call."""
    return record_call(req, call_store)
