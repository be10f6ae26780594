from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, Iterable, Optional

from ..core.constants import DATE_FORMAT, TIME_FORMAT
from ..core.exceptions import ValidationError


def require_record_id(value: Any) -> int:
    """Parse a record identifier taken from a query string or form."""
    if value is None or str(value).strip() == "":
        raise ValidationError("Query parameter 'id' is required")
    try:
        record_id = int(str(value).strip())
    except ValueError:
        raise ValidationError(f"Invalid id: {value!r}")
    if record_id <= 0:
        raise ValidationError(f"Invalid id: {value!r}")
    return record_id


def coerce_str(value: Any, field_name: str) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        raise ValidationError(f"{field_name} must be a string")
    return str(value)


def coerce_int(value: Any, field_name: str) -> Optional[int]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a whole number")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValidationError(f"{field_name} must be a whole number")
        value = int(value)
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number")
    if number < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return number


def coerce_date(value: Any, field_name: str) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    v = str(value).strip()
    try:
        if len(v) > 10 and v[10] == "T":
            return datetime.fromisoformat(v).date()
        return datetime.strptime(v, DATE_FORMAT).date()
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def coerce_time(value: Any, field_name: str) -> Optional[time]:
    if value is None or value == "":
        return None
    if isinstance(value, time):
        return value
    v = str(value).strip()
    for fmt in (TIME_FORMAT, "%H:%M:%S"):
        try:
            return datetime.strptime(v, fmt).time()
        except ValueError:
            continue
    raise ValidationError(f"{field_name} must be a time (HH:MM)")


def coerce_choice(value: Any, field_name: str, choices: Iterable[str]) -> Optional[str]:
    if value is None or value == "":
        return None
    allowed = list(choices)
    v = str(value).strip()
    if v not in allowed:
        raise ValidationError(f"{field_name} must be one of: {', '.join(allowed)}")
    return v
