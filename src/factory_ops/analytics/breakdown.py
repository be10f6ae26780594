from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence


def _percentage(count: int, total: int) -> float:
    return round(count * 100.0 / total, 1) if total else 0.0


def count_by(
    records: Sequence[Mapping[str, Any]],
    field: str,
    *,
    known: Iterable[str] = (),
    with_percentage: bool = False,
) -> list[dict]:
    """Count records per value of `field`.

    Known values come first (with zero counts), then any other value seen, in order of appearance.
    Records with an empty value are not counted.
    """
    counts: dict[str, int] = {k: 0 for k in known}
    for r in records:
        value = r.get(field)
        if value is None or value == "":
            continue
        counts[str(value)] = counts.get(str(value), 0) + 1

    total = sum(counts.values())
    out = []
    for name, count in counts.items():
        row: dict = {"name": name, "count": count}
        if with_percentage:
            row["percentage"] = _percentage(count, total)
        out.append(row)
    return out


def sum_by(
    records: Sequence[Mapping[str, Any]],
    key_field: str,
    value_fields: Sequence[str],
    *,
    known: Iterable[str] = (),
    key_name: str = "name",
) -> list[dict]:
    """Sum numeric `value_fields` per value of `key_field`."""
    totals: dict[str, dict] = {}
    for k in known:
        totals[k] = {key_name: k, **{f: 0 for f in value_fields}}

    for r in records:
        key = r.get(key_field)
        if key is None or key == "":
            continue
        row = totals.setdefault(str(key), {key_name: str(key), **{f: 0 for f in value_fields}})
        for f in value_fields:
            row[f] += int(r.get(f) or 0)
    return list(totals.values())


def total(records: Sequence[Mapping[str, Any]], field: str) -> int:
    return sum(int(r.get(field) or 0) for r in records)
