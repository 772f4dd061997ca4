import sqlite3
from datetime import datetime, timezone

from app.db.connection import Database
from app.db.stores import DuplicateCallError
from app.models.call import CallRecord


def _to_utc_iso(dt: datetime) -> str:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat()


def _row_to_record(row) -> CallRecord:
    d = dict(row)
    d["successful"] = bool(d["successful"])
    return CallRecord(**d)


class CallRepository:
    def __init__(self, db: Database):
        self.db = db

    def insert(self, record: CallRecord) -> None:
        try:
            with self.db.connect() as conn:
                conn.execute(
                    """INSERT INTO calls
                       (id, duration, mc_number, final_offer,
                        final_counter_offer, offer_iterations, successful,
                        sentiment, created_at)
                       VALUES (?,?,?,?,?,?,?,?,?)""",
                    (
                        record.id,
                        record.duration,
                        record.mc_number,
                        record.final_offer,
                        record.final_counter_offer,
                        record.offer_iterations,
                        1 if record.successful else 0,
                        record.sentiment,
                        _to_utc_iso(record.created_at),
                    ),
                )
        except sqlite3.IntegrityError as e:
            if "calls.id" in str(e):
                raise DuplicateCallError(record.id) from e
            raise

    def all(self) -> list[CallRecord]:
        with self.db.connect() as conn:
            rows = conn.execute(
                "SELECT * FROM calls ORDER BY created_at"
            ).fetchall()
        return [_row_to_record(r) for r in rows]
