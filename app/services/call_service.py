import logging
from datetime import datetime, timezone

from app.db.stores import CallStore
from app.models.call import CallDataRequest, CallDataResponse, CallRecord

log = logging.getLogger(__name__)


def record_call(req: CallDataRequest, call_store: CallStore) -> CallDataResponse:
    """Persist a completed call. DuplicateCallError propagates to the route."""
    log.info("POST /api/callsdata received: id=%s successful=%s sentiment=%s",
             req.id, req.successful, req.sentiment)

    record = CallRecord(
        **req.model_dump(exclude={"created_at"}),
        created_at=req.created_at or datetime.now(timezone.utc),
    )
    call_store.insert(record)

    log.info("Call inserted: id=%s created_at=%s",
             record.id, record.created_at.isoformat())
    return CallDataResponse(id=record.id)
