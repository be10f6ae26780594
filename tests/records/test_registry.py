from __future__ import annotations

import pytest

from conftest import InMemoryCollectionStore
from factory_ops.container import SCHEMAS
from factory_ops.core.exceptions import NotFoundError
from factory_ops.employees.model import EMPLOYEE_SCHEMA
from factory_ops.records.registry import HandlerRegistry
from factory_ops.records.service import ResourceHandler


def _registry(schemas=SCHEMAS):
    return HandlerRegistry(ResourceHandler(s, InMemoryCollectionStore(s)) for s in schemas)


def test_registry_exposes_every_resource():
    registry = _registry()

    assert registry.names() == [
        "employee",
        "attendance",
        "leave",
        "production",
        "raw-material",
        "tool-stock",
        "stock-request",
    ]
    assert "leave" in registry
    assert registry.get("tool-stock").schema.table == "tool_stocks"


def test_unknown_resource_is_not_found():
    with pytest.raises(NotFoundError):
        _registry().get("payroll")


def test_duplicate_resource_names_rejected():
    with pytest.raises(ValueError):
        _registry([EMPLOYEE_SCHEMA, EMPLOYEE_SCHEMA])


def test_resources_keep_separate_collections():
    registry = _registry()
    registry.get("employee").create({"name": "Asha", "email": "asha@example.com"})

    assert registry.get("attendance").list_records() == []
    assert len(registry.get("employee").list_records()) == 1
