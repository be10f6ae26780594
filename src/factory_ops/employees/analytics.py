from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..core.enums import EmployeeStatus
from .model import DEPARTMENTS


def summarize_employees(records: Sequence[Mapping[str, Any]]) -> dict:
    per_department: dict[str, dict] = {d: {"name": d, "count": 0, "active": 0} for d in DEPARTMENTS}
    active = 0

    for r in records:
        is_active = r.get("status") == EmployeeStatus.ACTIVE.value
        active += int(is_active)

        dept = r.get("department")
        if not dept:
            continue
        row = per_department.setdefault(dept, {"name": dept, "count": 0, "active": 0})
        row["count"] += 1
        row["active"] += int(is_active)

    return {
        "total": len(records),
        "active": active,
        "inactive": len(records) - active,
        "departmentCount": sum(1 for d in per_department.values() if d["count"]),
        "departments": list(per_department.values()),
    }
