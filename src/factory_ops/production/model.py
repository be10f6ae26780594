from __future__ import annotations

from ..records.schema import Field, FieldKind, RecordSchema

SHIFTS = ("Shift 1", "Shift 2")
REJECTION_REASONS = ("Surface finishing", "Inner diameter finishing", "Hole chipped", "Tool Broken")

PRODUCTION_SCHEMA = RecordSchema(
    resource="production",
    table="production_records",
    fields=(
        Field("date", "production_date", FieldKind.DATE, required=True),
        Field("shift", "shift", required=True),
        Field("componentName", "component_name", required=True),
        Field("projectName", "project_name"),
        Field("machinedQty", "machined_qty", FieldKind.INT, default=0),
        Field("finishedQty", "finished_qty", FieldKind.INT, default=0),
        Field("rejectedQty", "rejected_qty", FieldKind.INT, default=0),
        Field("rejectionReason", "rejection_reason"),
        Field("operatorName", "operator_name"),
    ),
    search_fields=("componentName", "projectName", "operatorName", "shift"),
    filter_fields=("shift",),
)
