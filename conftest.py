from datetime import datetime, timezone
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.db.stores import DuplicateCallError
from app.main import create_app
from app.models.call import CallRecord
from app.models.load import Load

API_KEY = "test-api-key"
HEADERS = {"X-API-Key": API_KEY}


class InMemoryLoadStore:
    def __init__(self, loads: list[Load]):
        self.loads = {load.load_id: load for load in loads}

    def get_by_id(self, load_id: int) -> Optional[Load]:
        return self.loads.get(load_id)

    def search(self, origin=None, destination=None) -> list[Load]:
        return [
            load for _, load in sorted(self.loads.items())
            if (not origin or load.origin == origin)
            and (not destination or load.destination == destination)
        ]


class InMemoryCallStore:
    def __init__(self, records: Optional[list[CallRecord]] = None):
        self.records = {r.id: r for r in records or []}

    def insert(self, record: CallRecord) -> None:
        if record.id in self.records:
            raise DuplicateCallError(record.id)
        self.records[record.id] = record

    def all(self) -> list[CallRecord]:
        return list(self.records.values())


def make_load(load_id: int = 1, **overrides) -> Load:
    data = {
        "load_id": load_id,
        "origin": "Los Angeles",
        "destination": "New York",
        "pickup_datetime": "2024-01-15 08:00:00",
        "delivery_datetime": "2024-01-18 17:00:00",
        "equipment_type": "Dry Van",
        "loadboard_rate": 3500.0,
        "weight": 42000,
        "commodity_type": "Electronics",
        "num_of_pieces": 150,
        "miles": 2789,
        "dimensions": "53ft x 8.5ft x 9ft",
        "maximum_rate": 5000.0,
    }
    data.update(overrides)
    return Load(**data)


def make_call(call_id: str = "call-1", **overrides) -> CallRecord:
    data = {
        "id": call_id,
        "duration": 120,
        "mc_number": 123456,
        "final_offer": 4000,
        "final_counter_offer": 4200,
        "offer_iterations": 2,
        "successful": True,
        "sentiment": "positive",
        "created_at": datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc),
    }
    data.update(overrides)
    return CallRecord(**data)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        api_key=API_KEY,
        database_path=tmp_path / "loads.db",
        seed_on_startup=True,
    )


@pytest.fixture
def client(settings) -> TestClient:
    with TestClient(create_app(settings)) as c:
        yield c
