from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role of an authenticated principal."""

    ADMIN = "admin"
    GUEST = "guest"


class EmployeeStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class AttendanceStatus(str, Enum):
    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"
    HALF_DAY = "Half Day"


class RequestStatus(str, Enum):
    """Approval flow status shared by leave and stock requests."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class MaterialStatus(str, Enum):
    IN_STOCK = "In Stock"
    LOW_STOCK = "Low Stock"
    OUT_OF_STOCK = "Out of Stock"


class ToolStockStatus(str, Enum):
    IN_STOCK = "In Stock"
    OUT_OF_STOCK = "Out of Stock"
    RESERVED = "Reserved"


class Operation(str, Enum):
    """Operations a resource handler understands."""

    LIST = "list"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
