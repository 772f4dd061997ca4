"""Collaborator contracts consumed by the services.

The sqlite repositories implement these; tests substitute in-memory fakes.
"""

from typing import Optional, Protocol, Sequence

from app.models.call import CallRecord
from app.models.load import Load


class DuplicateCallError(Exception):
    def __init__(self, call_id: str):
        super().__init__(f"Call {call_id} already recorded")
        self.call_id = call_id


class LoadStore(Protocol):
    def get_by_id(self, load_id: int) -> Optional[Load]: ...

    def search(
        self,
        origin: Optional[str] = None,
        destination: Optional[str] = None,
    ) -> list[Load]: ...


class CallStore(Protocol):
    def insert(self, record: CallRecord) -> None:
        """Persist a call. Raises DuplicateCallError on an existing id."""
        ...

    def all(self) -> Sequence[CallRecord]: ...
