import logging

from app.db.connection import Database

log = logging.getLogger(__name__)

SEED_LOADS: list[dict] = [
    {
        "origin": "Los Angeles",
        "destination": "New York",
        "pickup_datetime": "2024-01-15 08:00:00",
        "delivery_datetime": "2024-01-18 17:00:00",
        "equipment_type": "Dry Van",
        "loadboard_rate": 3500.00,
        "notes": "Fragile items, handle with care",
        "weight": 42000,
        "commodity_type": "Electronics",
        "num_of_pieces": 150,
        "miles": 2789,
        "dimensions": "53ft x 8.5ft x 9ft",
        "maximum_rate": 5000.00,
    },
    {
        "origin": "Chicago",
        "destination": "Houston",
        "pickup_datetime": "2024-01-16 10:00:00",
        "delivery_datetime": "2024-01-17 14:00:00",
        "equipment_type": "Flatbed",
        "loadboard_rate": 2800.00,
        "notes": "Heavy machinery, requires special handling",
        "weight": 45000,
        "commodity_type": "Industrial Equipment",
        "num_of_pieces": 8,
        "miles": 1087,
        "dimensions": "48ft x 8.5ft x 8ft",
        "maximum_rate": 4000.00,
    },
    {
        "origin": "Miami",
        "destination": "Atlanta",
        "pickup_datetime": "2024-01-17 06:00:00",
        "delivery_datetime": "2024-01-18 12:00:00",
        "equipment_type": "Refrigerated",
        "loadboard_rate": 2200.00,
        "notes": "Temperature controlled, maintain 38°F",
        "weight": 38000,
        "commodity_type": "Food Products",
        "num_of_pieces": 200,
        "miles": 661,
        "dimensions": "53ft x 8.5ft x 9ft",
        "maximum_rate": 3200.00,
    },
]


def seed_loads(db: Database) -> int:
    """Insert the demo loads when the table is empty. Returns rows inserted."""
    with db.connect() as conn:
        count = conn.execute("SELECT COUNT(*) FROM loads").fetchone()[0]
        if count:
            return 0
        conn.executemany(
            """INSERT INTO loads
               (origin, destination, pickup_datetime, delivery_datetime,
                equipment_type, loadboard_rate, notes, weight,
                commodity_type, num_of_pieces, miles, dimensions,
                maximum_rate)
               VALUES (:origin, :destination, :pickup_datetime,
                       :delivery_datetime, :equipment_type, :loadboard_rate,
                       :notes, :weight, :commodity_type, :num_of_pieces,
                       :miles, :dimensions, :maximum_rate)""",
            SEED_LOADS,
        )
    log.info("Database seeded with %d load records", len(SEED_LOADS))
    return len(SEED_LOADS)
