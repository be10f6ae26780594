from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

ALL = "all"


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def matches_search(record: Mapping[str, Any], term: str, fields: Iterable[str]) -> bool:
    needle = term.strip().lower()
    if not needle:
        return True
    return any(needle in _text(record.get(f)).lower() for f in fields)


def matches_filters(record: Mapping[str, Any], filters: Mapping[str, str]) -> bool:
    for name, wanted in filters.items():
        if wanted is None or wanted == "" or wanted == ALL:
            continue
        if _text(record.get(name)) != wanted:
            return False
    return True


def filter_records(
    records: Iterable[Mapping[str, Any]],
    *,
    search: Optional[str] = None,
    search_fields: Iterable[str] = (),
    filters: Optional[Mapping[str, str]] = None,
) -> list[Mapping[str, Any]]:
    """Narrow dumped records by a free-text term and exact field filters."""
    search_fields = tuple(search_fields)
    out = []
    for r in records:
        if search and not matches_search(r, search, search_fields):
            continue
        if filters and not matches_filters(r, filters):
            continue
        out.append(r)
    return out
