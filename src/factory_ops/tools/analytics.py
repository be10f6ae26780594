from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..analytics.breakdown import count_by, sum_by, total
from ..core.enums import RequestStatus, ToolStockStatus
from .model import CATEGORIES


def summarize_tool_stock(records: Sequence[Mapping[str, Any]]) -> dict:
    return {
        "total": len(records),
        "totalQuantity": total(records, "quantity"),
        "statuses": count_by(records, "status", known=[s.value for s in ToolStockStatus], with_percentage=True),
        "categories": sum_by(records, "category", ["quantity"], known=CATEGORIES),
    }


def summarize_stock_requests(records: Sequence[Mapping[str, Any]]) -> dict:
    return {
        "total": len(records),
        "requestedQuantity": total(records, "quantity"),
        "statuses": count_by(records, "status", known=[s.value for s in RequestStatus]),
    }
