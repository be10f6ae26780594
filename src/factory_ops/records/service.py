from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.validators import require_record_id
from ..core.constants import METHOD_OPERATIONS
from ..core.enums import Operation
from ..core.exceptions import MethodNotAllowedError, NotFoundError
from .filters import filter_records
from .repository import CollectionStore
from .schema import RecordSchema

logger = logging.getLogger(__name__)

SEARCH_PARAM = "q"


@dataclass(frozen=True)
class Outcome:
    """Result of one dispatched operation: HTTP-style status plus JSON-ready body."""

    status: int
    body: Any


class ResourceHandler:
    """Use case: list/create/update/delete records of one collection.

    Every operation performs exactly one call on the collection store.
    """

    def __init__(self, schema: RecordSchema, store: CollectionStore):
        self._schema = schema
        self._store = store

    @property
    def name(self) -> str:
        return self._schema.resource

    @property
    def schema(self) -> RecordSchema:
        return self._schema

    def list_records(
        self,
        *,
        search: Optional[str] = None,
        filters: Optional[Mapping[str, str]] = None,
    ) -> list[dict[str, Any]]:
        records = self._schema.dump_many(self._store.list_all())
        if not search and not filters:
            return records
        return filter_records(
            records,
            search=search,
            search_fields=self._schema.search_fields,
            filters=filters,
        )

    def create(self, payload: Any) -> dict[str, Any]:
        values = self._schema.validate_create(payload)
        record = self._store.create(values)
        logger.info("Created %s #%s", self.name, record.get("id"))
        return self._schema.dump(record)

    def update(self, record_id: int, payload: Any) -> dict[str, Any]:
        record = self._store.update(int(record_id), payload, self._schema.validate_update)
        if record is None:
            raise NotFoundError(f"{self.name} #{record_id} not found")
        logger.info("Updated %s #%s", self.name, record_id)
        return self._schema.dump(record)

    def delete(self, record_id: int) -> dict[str, Any]:
        record = self._store.delete(int(record_id))
        if record is None:
            raise NotFoundError(f"{self.name} #{record_id} not found")
        logger.info("Deleted %s #%s", self.name, record_id)
        return self._schema.dump(record)

    def _list_params(self, query: Mapping[str, Any]) -> tuple[Optional[str], dict[str, str]]:
        search = query.get(SEARCH_PARAM) or None
        filters = {name: str(query[name]) for name in self._schema.filter_fields if query.get(name)}
        return search, filters

    def dispatch(
        self,
        method: str,
        *,
        query: Optional[Mapping[str, Any]] = None,
        body: Any = None,
    ) -> Outcome:
        """Map an HTTP verb onto one operation.

        PUT and DELETE read the record id from query parameter `id`.
        """
        verb = (method or "").upper()
        operation = METHOD_OPERATIONS.get(verb)
        if operation is None:
            raise MethodNotAllowedError(verb)

        query = query or {}

        if operation == Operation.LIST:
            search, filters = self._list_params(query)
            return Outcome(200, self.list_records(search=search, filters=filters))

        if operation == Operation.CREATE:
            return Outcome(201, self.create(body))

        record_id = require_record_id(query.get("id"))
        if operation == Operation.UPDATE:
            return Outcome(200, self.update(record_id, body))
        return Outcome(200, self.delete(record_id))
