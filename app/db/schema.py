from app.db.connection import Database


def init_db(db: Database) -> None:
    with db.connect() as conn:
        conn.executescript("""
            CREATE TABLE IF NOT EXISTS loads (
                load_id INTEGER PRIMARY KEY AUTOINCREMENT,
                origin TEXT NOT NULL,
                destination TEXT NOT NULL,
                pickup_datetime TEXT NOT NULL,
                delivery_datetime TEXT NOT NULL,
                equipment_type TEXT NOT NULL,
                loadboard_rate REAL NOT NULL,
                notes TEXT DEFAULT '',
                weight REAL NOT NULL,
                commodity_type TEXT NOT NULL,
                num_of_pieces INTEGER NOT NULL,
                miles INTEGER NOT NULL,
                dimensions TEXT NOT NULL,
                maximum_rate REAL NOT NULL,
                CHECK (maximum_rate > loadboard_rate)
            );

            CREATE TABLE IF NOT EXISTS calls (
                id TEXT PRIMARY KEY,
                duration INTEGER NOT NULL,
                mc_number INTEGER NOT NULL,
                final_offer REAL NOT NULL,
                final_counter_offer REAL NOT NULL,
                offer_iterations INTEGER NOT NULL,
                successful INTEGER NOT NULL,
                sentiment TEXT NOT NULL,
                created_at TEXT NOT NULL
            );

            CREATE INDEX IF NOT EXISTS idx_calls_created_at
                ON calls (created_at);
        """)
