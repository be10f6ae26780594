from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from enum import Enum
from typing import Any, Iterable, Mapping, Optional

from ..common.datetime_utils import format_date, format_time
from ..common.validators import coerce_choice, coerce_date, coerce_int, coerce_str, coerce_time
from ..core.exceptions import ValidationError
from ..database.mysql_base import normalize_mysql_date, normalize_mysql_int, normalize_mysql_time


class FieldKind(str, Enum):
    STR = "str"
    INT = "int"
    DATE = "date"
    TIME = "time"
    CHOICE = "choice"


@dataclass(frozen=True)
class Field:
    """One business field of a record: wire name, column name and value kind."""

    name: str
    column: str
    kind: FieldKind = FieldKind.STR
    required: bool = False
    choices: tuple[str, ...] = ()
    default: Any = None

    def coerce(self, value: Any) -> Any:
        if self.kind == FieldKind.INT:
            return coerce_int(value, self.name)
        if self.kind == FieldKind.DATE:
            return coerce_date(value, self.name)
        if self.kind == FieldKind.TIME:
            return coerce_time(value, self.name)
        if self.kind == FieldKind.CHOICE:
            return coerce_choice(value, self.name, self.choices)
        return coerce_str(value, self.name)

    def from_db(self, value: Any) -> Any:
        if self.kind == FieldKind.INT:
            return normalize_mysql_int(value)
        if self.kind == FieldKind.DATE:
            return normalize_mysql_date(value)
        if self.kind == FieldKind.TIME:
            return normalize_mysql_time(value)
        return value

    def dump(self, value: Any) -> Any:
        if isinstance(value, date):
            return format_date(value)
        if isinstance(value, time):
            return format_time(value)
        return value


def choice(name: str, column: str, enum_cls: type[Enum], *, default: Optional[Enum] = None) -> Field:
    return Field(
        name=name,
        column=column,
        kind=FieldKind.CHOICE,
        choices=tuple(m.value for m in enum_cls),
        default=default.value if default is not None else None,
    )


@dataclass(frozen=True)
class RecordSchema:
    """Shape of one record collection (one table).

    `resource` is the public name used in URLs, `table` the backing table.
    Records travel inside the app as plain dicts keyed by field name plus "id".
    """

    resource: str
    table: str
    fields: tuple[Field, ...]
    search_fields: tuple[str, ...] = ()
    filter_fields: tuple[str, ...] = ()
    _by_name: dict = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        self._by_name.update({f.name: f for f in self.fields})
        unknown = [n for n in (*self.search_fields, *self.filter_fields) if n not in self._by_name]
        if unknown:
            raise ValueError(f"{self.resource}: unknown search/filter fields {unknown}")

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    @property
    def columns(self) -> list[str]:
        return [f.column for f in self.fields]

    def get_field(self, name: str) -> Optional[Field]:
        return self._by_name.get(name)

    def _check_payload(self, payload: Any) -> Mapping[str, Any]:
        if not isinstance(payload, Mapping):
            raise ValidationError("Request body must be a JSON object")
        unknown = sorted(k for k in payload if k != "id" and k not in self._by_name)
        if unknown:
            raise ValidationError(f"Unknown field(s) for {self.resource}: {', '.join(unknown)}")
        return payload

    def validate_create(self, payload: Any) -> dict[str, Any]:
        data = self._check_payload(payload)
        if data.get("id") is not None:
            raise ValidationError("id is assigned by the system and cannot be set")

        values: dict[str, Any] = {}
        missing: list[str] = []
        for f in self.fields:
            value = f.coerce(data.get(f.name))
            if value is None or (isinstance(value, str) and not value.strip() and f.required):
                value = f.default
            if f.required and value is None:
                missing.append(f.name)
            values[f.name] = value

        if missing:
            raise ValidationError(f"Missing required field(s): {', '.join(missing)}")
        return values

    def validate_update(self, payload: Any) -> dict[str, Any]:
        data = self._check_payload(payload)

        values: dict[str, Any] = {}
        for name, raw in data.items():
            if name == "id":
                # The identifier comes from the query string; the body copy is ignored.
                continue
            f = self._by_name[name]
            value = f.coerce(raw)
            blank = value is None or (isinstance(value, str) and not value.strip())
            # Enum and defaulted columns are NOT NULL in the table.
            if blank and (f.required or f.kind == FieldKind.CHOICE or f.default is not None):
                raise ValidationError(f"{name} cannot be empty")
            values[name] = value
        return values

    def dump(self, record: Mapping[str, Any]) -> dict[str, Any]:
        out: dict[str, Any] = {"id": record.get("id")}
        for f in self.fields:
            out[f.name] = f.dump(record.get(f.name))
        return out

    def dump_many(self, records: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
        return [self.dump(r) for r in records]
