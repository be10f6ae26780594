from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..analytics.breakdown import count_by
from ..core.enums import AttendanceStatus, RequestStatus
from .model import LEAVE_TYPES


def summarize_attendance(records: Sequence[Mapping[str, Any]]) -> dict:
    by_date: dict[str, dict] = {}
    for r in records:
        day = r.get("date")
        if not day:
            continue
        row = by_date.setdefault(day, {"date": day, "present": 0, "absent": 0})
        if r.get("status") == AttendanceStatus.ABSENT.value:
            row["absent"] += 1
        else:
            row["present"] += 1

    return {
        "total": len(records),
        "statuses": count_by(records, "status", known=[s.value for s in AttendanceStatus], with_percentage=True),
        "trend": sorted(by_date.values(), key=lambda x: x["date"]),
    }


def summarize_leave(records: Sequence[Mapping[str, Any]]) -> dict:
    return {
        "total": len(records),
        "statuses": count_by(records, "status", known=[s.value for s in RequestStatus]),
        "leaveTypes": count_by(records, "leaveType", known=LEAVE_TYPES),
    }
