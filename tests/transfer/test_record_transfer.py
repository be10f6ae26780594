from __future__ import annotations

import io

import pytest

from conftest import InMemoryCollectionStore
from factory_ops.container import SCHEMAS
from factory_ops.core.exceptions import ValidationError
from factory_ops.records.registry import HandlerRegistry
from factory_ops.records.service import ResourceHandler
from factory_ops.transfer.service import RecordTransferService


@pytest.fixture
def transfer():
    registry = HandlerRegistry(ResourceHandler(s, InMemoryCollectionStore(s)) for s in SCHEMAS)
    return RecordTransferService(registry)


def test_headers_match_wire_or_column_names(transfer):
    data = b"tool_name,Tool ID,QUANTITY\nCaliper,MT-001,4\n"

    created = transfer.import_file("tool-stock", "tools.csv", io.BytesIO(data))

    assert created[0]["toolName"] == "Caliper"
    assert created[0]["toolId"] == "MT-001"
    assert created[0]["quantity"] == 4


def test_id_column_is_ignored_and_blank_rows_skipped(transfer):
    data = b"id,toolName,quantity\n77,Drill,1\n,,\n"

    created = transfer.import_file("stock-request", "requests.csv", io.BytesIO(data))

    assert len(created) == 1
    assert created[0]["id"] == 1


def test_unknown_column_rejected(transfer):
    with pytest.raises(ValidationError):
        transfer.import_file("stock-request", "r.csv", io.BytesIO(b"toolName,colour\nDrill,red\n"))


def test_excel_export_then_import_into_same_resource(transfer):
    transfer.import_file("stock-request", "r.csv", io.BytesIO(b"toolName,quantity\nDrill,2\nSaw,1\n"))

    xlsx = transfer.export_excel("stock-request")
    created = transfer.import_file("stock-request", "r.xlsx", xlsx)

    assert [r["toolName"] for r in created] == ["Drill", "Saw"]
    assert [r["id"] for r in created] == [3, 4]
