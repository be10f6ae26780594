from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..analytics.breakdown import count_by
from ..core.enums import MaterialStatus


def summarize_materials(records: Sequence[Mapping[str, Any]]) -> dict:
    return {
        "total": len(records),
        "statuses": count_by(records, "status", known=[s.value for s in MaterialStatus]),
        "suppliers": count_by(records, "supplierName"),
    }
