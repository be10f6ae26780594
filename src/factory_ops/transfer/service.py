from __future__ import annotations

import csv
import io
import logging
import re
from pathlib import PurePath
from typing import IO, Any
from zipfile import BadZipFile

import pandas as pd

from ..core.constants import IMPORT_EXTENSIONS
from ..core.exceptions import ValidationError
from ..records.registry import HandlerRegistry
from ..records.schema import RecordSchema

logger = logging.getLogger(__name__)


def _normalize_header(value: Any) -> str:
    return re.sub(r"[^a-z0-9]", "", str(value).lower())


def _clean_cell(value: Any) -> Any:
    if value is None or pd.isna(value):
        return None
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    if hasattr(value, "item"):
        # numpy scalar -> python scalar
        return value.item()
    return value


class RecordTransferService:
    """Spreadsheet import/export for resource collections."""

    def __init__(self, registry: HandlerRegistry):
        self._registry = registry

    @staticmethod
    def _column_map(schema: RecordSchema, headers) -> dict[str, str]:
        lookup: dict[str, str] = {}
        for f in schema.fields:
            lookup[_normalize_header(f.name)] = f.name
            lookup[_normalize_header(f.column)] = f.name

        mapping: dict[str, str] = {}
        for h in headers:
            key = _normalize_header(h)
            if key == "id":
                continue
            if key not in lookup:
                raise ValidationError(f"Unknown column for {schema.resource}: {h}")
            mapping[h] = lookup[key]
        return mapping

    @staticmethod
    def _read_frame(filename: str, stream: IO[bytes]) -> pd.DataFrame:
        ext = PurePath(filename or "").suffix.lower()
        if ext not in IMPORT_EXTENSIONS:
            raise ValidationError("Please upload only CSV or Excel files")
        try:
            if ext == ".csv":
                return pd.read_csv(stream, dtype=object, keep_default_na=True)
            return pd.read_excel(stream, dtype=object)
        except (ValueError, BadZipFile) as e:
            raise ValidationError(f"Could not read {filename}: {e}")

    def import_file(self, resource: str, filename: str, stream: IO[bytes]) -> list[dict]:
        handler = self._registry.get(resource)
        df = self._read_frame(filename, stream)
        mapping = self._column_map(handler.schema, df.columns)

        payloads: list[dict] = []
        errors: list[str] = []
        for idx, row in enumerate(df.to_dict(orient="records"), start=2):
            payload = {mapping[h]: _clean_cell(v) for h, v in row.items() if h in mapping}
            if all(v is None for v in payload.values()):
                continue
            try:
                handler.schema.validate_create(payload)
            except ValidationError as e:
                errors.append(f"Row {idx}: {e}")
                continue
            payloads.append(payload)

        # Nothing is written unless every row is valid.
        if errors:
            raise ValidationError("; ".join(errors))

        created = [handler.create(p) for p in payloads]

        logger.info("Imported %s %s record(s) from %s", len(created), resource, filename)
        return created

    def export_frame(self, resource: str) -> pd.DataFrame:
        handler = self._registry.get(resource)
        columns = ["id", *handler.schema.field_names]
        return pd.DataFrame(handler.list_records(), columns=columns)

    def export_excel(self, resource: str) -> io.BytesIO:
        df = self.export_frame(resource)

        out = io.BytesIO()
        with pd.ExcelWriter(out, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name=resource[:31])
        out.seek(0)
        return out

    def export_csv(self, resource: str) -> str:
        handler = self._registry.get(resource)
        columns = ["id", *handler.schema.field_names]

        buf = io.StringIO()
        writer = csv.DictWriter(buf, fieldnames=columns)
        writer.writeheader()
        for r in handler.list_records():
            writer.writerow({c: ("" if r.get(c) is None else r.get(c)) for c in columns})
        return buf.getvalue()
