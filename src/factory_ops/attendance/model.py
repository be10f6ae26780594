from __future__ import annotations

from ..core.enums import AttendanceStatus, RequestStatus
from ..records.schema import Field, FieldKind, RecordSchema, choice

LEAVE_TYPES = ("Sick Leave", "Annual Leave", "Emergency Leave", "Maternity Leave", "Paternity Leave")

ATTENDANCE_SCHEMA = RecordSchema(
    resource="attendance",
    table="attendance_records",
    fields=(
        Field("employeeId", "employee_id", required=True),
        Field("employeeName", "employee_name"),
        Field("date", "work_date", FieldKind.DATE, required=True),
        Field("checkIn", "check_in", FieldKind.TIME),
        Field("checkOut", "check_out", FieldKind.TIME),
        choice("status", "status", AttendanceStatus, default=AttendanceStatus.PRESENT),
        Field("notes", "notes"),
    ),
    search_fields=("employeeName", "employeeId"),
    filter_fields=("status",),
)

LEAVE_SCHEMA = RecordSchema(
    resource="leave",
    table="leave_requests",
    fields=(
        Field("employeeId", "employee_id", required=True),
        Field("employeeName", "employee_name"),
        Field("leaveType", "leave_type", required=True),
        Field("startDate", "start_date", FieldKind.DATE, required=True),
        Field("endDate", "end_date", FieldKind.DATE, required=True),
        Field("reason", "reason"),
        Field("managerEmail", "manager_email"),
        choice("status", "status", RequestStatus, default=RequestStatus.PENDING),
    ),
    search_fields=("employeeName", "employeeId", "leaveType"),
    filter_fields=("leaveType", "status"),
)
