from __future__ import annotations

from ..core.enums import MaterialStatus
from ..records.schema import Field, FieldKind, RecordSchema, choice

RAW_MATERIAL_SCHEMA = RecordSchema(
    resource="raw-material",
    table="raw_materials",
    fields=(
        Field("materialName", "material_name", required=True),
        Field("specification", "specification"),
        Field("grade", "grade"),
        Field("quantity", "quantity", FieldKind.INT),
        Field("unit", "unit"),
        Field("supplierName", "supplier_name"),
        Field("dateReceived", "date_received", FieldKind.DATE),
        choice("status", "status", MaterialStatus, default=MaterialStatus.IN_STOCK),
    ),
    search_fields=("materialName", "supplierName", "specification"),
    filter_fields=("status",),
)
