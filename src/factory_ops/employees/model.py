from __future__ import annotations

from ..core.enums import EmployeeStatus
from ..records.schema import Field, FieldKind, RecordSchema, choice

DEPARTMENTS = ("Engineering", "Production", "Quality Control", "Administration", "Maintenance")

EMPLOYEE_SCHEMA = RecordSchema(
    resource="employee",
    table="employees",
    fields=(
        Field("name", "name", required=True),
        Field("email", "email", required=True),
        Field("department", "department"),
        Field("position", "position"),
        Field("phone", "phone"),
        Field("joinDate", "join_date", FieldKind.DATE),
        choice("status", "status", EmployeeStatus, default=EmployeeStatus.ACTIVE),
    ),
    search_fields=("name", "email", "position"),
    filter_fields=("department", "status"),
)
