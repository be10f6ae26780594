"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import Operation

DEFAULT_SESSION_DAYS = 7

# HTTP verb -> resource operation
METHOD_OPERATIONS = {
    "GET": Operation.LIST,
    "POST": Operation.CREATE,
    "PUT": Operation.UPDATE,
    "DELETE": Operation.DELETE,
}

ALLOWED_METHODS = tuple(METHOD_OPERATIONS)

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"

IMPORT_EXTENSIONS = {".csv", ".xls", ".xlsx"}
