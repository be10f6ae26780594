from __future__ import annotations

from ..core.enums import RequestStatus, ToolStockStatus
from ..records.schema import Field, FieldKind, RecordSchema, choice

CATEGORIES = ("Electronics", "Hand Tools", "Power Tools", "Measuring Tools", "Safety Gear")

TOOL_STOCK_SCHEMA = RecordSchema(
    resource="tool-stock",
    table="tool_stocks",
    fields=(
        Field("toolName", "tool_name", required=True),
        Field("toolId", "tool_code", required=True),
        Field("category", "category"),
        Field("quantity", "quantity", FieldKind.INT),
        Field("location", "location"),
        choice("status", "status", ToolStockStatus, default=ToolStockStatus.IN_STOCK),
        Field("lastUpdated", "last_updated", FieldKind.DATE),
        Field("notes", "notes"),
    ),
    search_fields=("toolName", "toolId"),
    filter_fields=("category", "status"),
)

STOCK_REQUEST_SCHEMA = RecordSchema(
    resource="stock-request",
    table="stock_requests",
    fields=(
        Field("toolName", "tool_name", required=True),
        Field("toolId", "tool_code"),
        Field("quantity", "quantity", FieldKind.INT, required=True),
        Field("requestDate", "request_date", FieldKind.DATE),
        choice("status", "status", RequestStatus, default=RequestStatus.PENDING),
    ),
    search_fields=("toolName", "toolId"),
    filter_fields=("status",),
)
