from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Security

from app.db.stores import LoadStore
from app.models.load import LoadDetails
from app.routes._auth import verify_api_key
from app.routes._stores import get_load_store
from app.services.load_service import get_load, list_loads

router = APIRouter(prefix="/api/loads", tags=["Loads"])


@router.get(
    "",
    response_model=list[LoadDetails],
    dependencies=[Security(verify_api_key)],
)
def list_loads_route(
    origin: Optional[str] = Query(None, description="Exact origin city"),
    destination: Optional[str] = Query(
        None, description="Exact destination city"
    ),
    load_store: LoadStore = Depends(get_load_store),
):
    """List loads, optionally filtered by origin and destination."""
    return list_loads(load_store, origin=origin, destination=destination)


@router.get(
    "/{load_id}",
    response_model=LoadDetails,
    dependencies=[Security(verify_api_key)],
)
def get_load_route(
    load_id: int,
    load_store: LoadStore = Depends(get_load_store),
):
    """Get single load by ID."""
    load = get_load(load_store, load_id)
    if not load:
        raise HTTPException(404, "Load not found")
    return load
