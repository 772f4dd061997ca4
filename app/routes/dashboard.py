from fastapi import APIRouter, Depends

from app.db.stores import CallStore
from app.models.dashboard import DashboardSnapshot
from app.routes._stores import get_call_store
from app.services.analytics_service import get_dashboard

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get("", response_model=DashboardSnapshot)
def dashboard_route(call_store: CallStore = Depends(get_call_store)):
    """Success rate, sentiment split and 7-day daily averages over all calls."""
    return get_dashboard(call_store)
