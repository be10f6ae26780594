from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..analytics.breakdown import sum_by, total
from .model import REJECTION_REASONS, SHIFTS

QUANTITIES = ("machinedQty", "finishedQty", "rejectedQty")


def summarize_production(records: Sequence[Mapping[str, Any]]) -> dict:
    reasons = sum_by(records, "rejectionReason", ["rejectedQty"], known=REJECTION_REASONS)
    return {
        "totalMachined": total(records, "machinedQty"),
        "totalFinished": total(records, "finishedQty"),
        "totalRejected": total(records, "rejectedQty"),
        "shifts": sum_by(records, "shift", QUANTITIES, known=SHIFTS),
        "rejectionReasons": [{"name": r["name"], "value": r["rejectedQty"]} for r in reasons],
        "trend": sorted(sum_by(records, "date", QUANTITIES, key_name="date"), key=lambda x: x["date"]),
    }
