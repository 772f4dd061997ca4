from typing import Optional

from app.db.connection import Database
from app.models.load import Load


class LoadRepository:
    def __init__(self, db: Database):
        self.db = db

    def get_by_id(self, load_id: int) -> Optional[Load]:
        with self.db.connect() as conn:
            row = conn.execute(
                "SELECT * FROM loads WHERE load_id = ?", (load_id,)
            ).fetchone()
        if row is None:
            return None
        return Load(**dict(row))

    def search(
        self,
        origin: Optional[str] = None,
        destination: Optional[str] = None,
    ) -> list[Load]:
        clauses: list[str] = []
        params: list = []

        if origin:
            clauses.append("origin = ?")
            params.append(origin)
        if destination:
            clauses.append("destination = ?")
            params.append(destination)

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with self.db.connect() as conn:
            rows = conn.execute(
                f"SELECT * FROM loads {where} ORDER BY load_id", params
            ).fetchall()
        return [Load(**dict(r)) for r in rows]
