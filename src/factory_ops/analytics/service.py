from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence

from ..attendance.analytics import summarize_attendance, summarize_leave
from ..employees.analytics import summarize_employees
from ..materials.analytics import summarize_materials
from ..production.analytics import summarize_production
from ..records.registry import HandlerRegistry
from ..tools.analytics import summarize_stock_requests, summarize_tool_stock

Summarizer = Callable[[Sequence[Mapping[str, Any]]], dict]

SUMMARIZERS: dict[str, Summarizer] = {
    "employee": summarize_employees,
    "attendance": summarize_attendance,
    "leave": summarize_leave,
    "production": summarize_production,
    "raw-material": summarize_materials,
    "tool-stock": summarize_tool_stock,
    "stock-request": summarize_stock_requests,
}


class AnalyticsService:
    """Chart data computed from the current records of a resource."""

    def __init__(self, registry: HandlerRegistry, summarizers: Mapping[str, Summarizer] | None = None):
        self._registry = registry
        self._summarizers = dict(summarizers or SUMMARIZERS)

    def summarize(self, resource: str) -> dict:
        handler = self._registry.get(resource)
        summarizer = self._summarizers.get(handler.name)
        records = handler.list_records()
        if summarizer is None:
            return {"total": len(records)}
        return summarizer(records)
