from pydantic import BaseModel, ConfigDict, model_validator


class LoadDetails(BaseModel):
    """What a carrier may see about a load."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "load_id": 1,
                "origin": "Los Angeles",
                "destination": "New York",
                "pickup_datetime": "2024-01-15 08:00:00",
                "delivery_datetime": "2024-01-18 17:00:00",
                "equipment_type": "Dry Van",
                "loadboard_rate": 3500.0,
                "notes": "Fragile items, handle with care",
                "weight": 42000,
                "commodity_type": "Electronics",
                "num_of_pieces": 150,
                "miles": 2789,
                "dimensions": "53ft x 8.5ft x 9ft",
            }
        }
    )

    load_id: int
    origin: str
    destination: str
    pickup_datetime: str
    delivery_datetime: str
    equipment_type: str
    loadboard_rate: float
    notes: str = ""
    weight: float
    commodity_type: str
    num_of_pieces: int
    miles: int
    dimensions: str


class Load(LoadDetails):
    """Full load record, including the shipper's undisclosed ceiling."""

    maximum_rate: float

    @model_validator(mode="after")
    def ceiling_above_loadboard(self):
        if self.maximum_rate <= self.loadboard_rate:
            raise ValueError("maximum_rate must be greater than loadboard_rate")
        return self
