from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .repository import CollectionStore
from .schema import RecordSchema


class MySQLCollectionStore(CollectionStore):
    def __init__(self, conn_factory: DatabaseConnection, schema: RecordSchema):
        self._conn_factory = conn_factory
        self._schema = schema
        self._select = f"SELECT id, {', '.join(schema.columns)} FROM {schema.table}"

    def _to_record(self, row: dict) -> dict[str, Any]:
        record: dict[str, Any] = {"id": int(row["id"])}
        for f in self._schema.fields:
            record[f.name] = f.from_db(row.get(f.column))
        return record

    def _get(self, cur, record_id: int, *, lock: bool = False) -> Optional[dict[str, Any]]:
        sql = f"{self._select} WHERE id=%s"
        if lock:
            sql += " FOR UPDATE"
        cur.execute(sql, (int(record_id),))
        row = fetchone(cur)
        return self._to_record(row) if row else None

    def list_all(self) -> Sequence[dict[str, Any]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{self._select} ORDER BY id")
            return [self._to_record(r) for r in fetchall(cur)]

    def create(self, values: dict[str, Any]) -> dict[str, Any]:
        fields = [f for f in self._schema.fields if f.name in values]
        columns = ", ".join(f.column for f in fields)
        placeholders = ",".join(["%s"] * len(fields))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO {self._schema.table}({columns}) VALUES({placeholders})",
                tuple(values[f.name] for f in fields),
            )
            new_id = int(cur.lastrowid)
            return self._get(cur, new_id)

    def update(
        self,
        record_id: int,
        payload: Any,
        prepare: Callable[[Any], dict[str, Any]],
    ) -> Optional[dict[str, Any]]:
        with db_cursor(self._conn_factory) as (_, cur):
            if not self._get(cur, record_id, lock=True):
                return None

            values = prepare(payload)

            fields = [f for f in self._schema.fields if f.name in values]
            if fields:
                assignments = ", ".join(f"{f.column}=%s" for f in fields)
                cur.execute(
                    f"UPDATE {self._schema.table} SET {assignments} WHERE id=%s",
                    tuple(values[f.name] for f in fields) + (int(record_id),),
                )
            return self._get(cur, record_id)

    def delete(self, record_id: int) -> Optional[dict[str, Any]]:
        with db_cursor(self._conn_factory) as (_, cur):
            prior = self._get(cur, record_id, lock=True)
            if not prior:
                return None
            cur.execute(f"DELETE FROM {self._schema.table} WHERE id=%s", (int(record_id),))
            return prior
