from typing import Optional

from app.db.stores import LoadStore
from app.models.load import Load


def list_loads(
    load_store: LoadStore,
    origin: Optional[str] = None,
    destination: Optional[str] = None,
) -> list[Load]:
    return load_store.search(origin=origin, destination=destination)


def get_load(load_store: LoadStore, load_id: int) -> Optional[Load]:
    return load_store.get_by_id(load_id)
