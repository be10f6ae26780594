from __future__ import annotations

import pytest

from conftest import InMemoryCollectionStore
from factory_ops.core.exceptions import MethodNotAllowedError, NotFoundError, ValidationError
from factory_ops.employees.model import EMPLOYEE_SCHEMA
from factory_ops.materials.model import RAW_MATERIAL_SCHEMA
from factory_ops.production.model import PRODUCTION_SCHEMA
from factory_ops.records.service import ResourceHandler


def _handler(schema=EMPLOYEE_SCHEMA):
    store = InMemoryCollectionStore(schema)
    return ResourceHandler(schema, store), store


def _employee(**overrides):
    data = {"name": "Asha", "email": "asha@example.com", "department": "Production"}
    data.update(overrides)
    return data


def test_create_assigns_new_distinct_ids():
    handler, _ = _handler()

    a = handler.create(_employee())
    b = handler.create(_employee(name="Bala", email="bala@example.com"))

    assert a["id"] != b["id"]
    assert [r["id"] for r in handler.list_records()] == [a["id"], b["id"]]


def test_create_fills_defaults_and_keeps_submitted_fields():
    handler, _ = _handler()

    rec = handler.create(_employee(joinDate="2024-01-15"))

    assert rec["name"] == "Asha"
    assert rec["joinDate"] == "2024-01-15"
    assert rec["status"] == "Active"
    assert rec["phone"] is None


def test_list_returns_exactly_stored_records():
    handler, _ = _handler(RAW_MATERIAL_SCHEMA)
    created = [
        handler.create({"materialName": "Steel Rod", "quantity": 100, "status": "In Stock"}),
        handler.create({"materialName": "Aluminum Sheet", "quantity": 5, "status": "Low Stock"}),
    ]

    assert handler.list_records() == created


def test_update_changes_only_given_fields():
    handler, _ = _handler()
    rec = handler.create(_employee(position="Operator"))

    updated = handler.update(rec["id"], {"position": "Supervisor", "id": 12345})

    assert updated["id"] == rec["id"]
    assert updated["position"] == "Supervisor"
    assert updated["name"] == rec["name"]
    assert updated["email"] == rec["email"]


def test_update_missing_record_raises_not_found():
    handler, _ = _handler()

    with pytest.raises(NotFoundError):
        handler.update(999, {"name": "Nobody"})


def test_delete_removes_record_and_second_delete_is_not_found():
    handler, _ = _handler()
    rec = handler.create(_employee())

    removed = handler.delete(rec["id"])

    assert removed["id"] == rec["id"]
    assert handler.list_records() == []
    with pytest.raises(NotFoundError):
        handler.delete(rec["id"])


def test_each_operation_makes_one_store_call():
    handler, store = _handler()
    rec = handler.create(_employee())
    handler.list_records()
    handler.update(rec["id"], {"phone": "555"})
    handler.delete(rec["id"])

    assert store.calls == ["create", "list_all", "update", "delete"]


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"email": "x@example.com"}, "Missing required field(s): name"),
        ({"name": "X", "email": "x@example.com", "salary": 10}, "Unknown field(s) for employee: salary"),
        ({"name": "X", "email": "x@example.com", "status": "Retired"}, "status must be one of"),
        ({"name": "X", "email": "x@example.com", "joinDate": "15/01/2024"}, "joinDate must be a date"),
        (["not", "an", "object"], "Request body must be a JSON object"),
    ],
)
def test_create_rejects_invalid_payloads(payload, message):
    handler, store = _handler()

    with pytest.raises(ValidationError) as exc:
        handler.create(payload)

    assert message in str(exc.value)
    assert store.calls == []


def test_create_rejects_client_supplied_id():
    handler, _ = _handler()

    with pytest.raises(ValidationError):
        handler.create(_employee(id=7))


def test_update_cannot_blank_required_field():
    handler, _ = _handler()
    rec = handler.create(_employee())

    with pytest.raises(ValidationError):
        handler.update(rec["id"], {"name": "  "})


def test_quantities_must_be_non_negative_whole_numbers():
    handler, _ = _handler(PRODUCTION_SCHEMA)
    base = {"date": "2024-05-20", "shift": "Shift 1", "componentName": "Flange"}

    rec = handler.create({**base, "machinedQty": "12"})
    assert rec["machinedQty"] == 12
    assert rec["rejectedQty"] == 0

    with pytest.raises(ValidationError):
        handler.create({**base, "machinedQty": -1})
    with pytest.raises(ValidationError):
        handler.create({**base, "machinedQty": 1.5})


class TestDispatch:
    def test_get_lists_with_search_and_filters(self):
        handler, _ = _handler()
        handler.create(_employee())
        handler.create(_employee(name="Bala", email="bala@example.com", department="Maintenance"))
        handler.create(_employee(name="Chitra", email="chitra@example.com", status="Inactive"))

        everything = handler.dispatch("GET", query={})
        by_dept = handler.dispatch("GET", query={"department": "Production"})
        by_term = handler.dispatch("get", query={"q": "BALA"})
        all_status = handler.dispatch("GET", query={"status": "all"})

        assert everything.status == 200
        assert len(everything.body) == 3
        assert [r["name"] for r in by_dept.body] == ["Asha", "Chitra"]
        assert [r["name"] for r in by_term.body] == ["Bala"]
        assert len(all_status.body) == 3

    def test_post_returns_201(self):
        handler, _ = _handler()

        outcome = handler.dispatch("POST", body=_employee())

        assert outcome.status == 201
        assert outcome.body["id"] == 1

    def test_put_and_delete_read_id_from_query(self):
        handler, _ = _handler()
        handler.dispatch("POST", body=_employee())

        put = handler.dispatch("PUT", query={"id": "1"}, body={"phone": "555-0100"})
        delete = handler.dispatch("DELETE", query={"id": "1"})

        assert put.status == 200
        assert put.body["phone"] == "555-0100"
        assert delete.status == 200
        assert handler.list_records() == []

    @pytest.mark.parametrize("query", [{}, {"id": ""}, {"id": "abc"}, {"id": "0"}])
    def test_put_without_valid_id_is_validation_error(self, query):
        handler, _ = _handler()

        with pytest.raises(ValidationError):
            handler.dispatch("PUT", query=query, body={"name": "X"})

    @pytest.mark.parametrize("method", ["PATCH", "HEAD", "OPTIONS", "TRACE"])
    def test_unsupported_verbs_raise_method_not_allowed(self, method):
        handler, store = _handler()

        with pytest.raises(MethodNotAllowedError) as exc:
            handler.dispatch(method)

        assert str(exc.value) == f"Method {method} Not Allowed"
        assert store.calls == []


@pytest.mark.parametrize("payload", [{"status": None}, {"status": ""}])
def test_update_cannot_blank_status(payload):
    handler, _ = _handler()
    rec = handler.create(_employee())

    with pytest.raises(ValidationError, match="status cannot be empty"):
        handler.update(rec["id"], payload)

    assert handler.list_records()[0]["status"] == "Active"


def test_update_cannot_blank_defaulted_quantity():
    handler, _ = _handler(PRODUCTION_SCHEMA)
    rec = handler.create({"date": "2024-05-20", "shift": "Shift 1", "componentName": "Flange", "machinedQty": 5})

    with pytest.raises(ValidationError, match="machinedQty cannot be empty"):
        handler.update(rec["id"], {"machinedQty": None})


def test_update_may_clear_optional_field():
    handler, _ = _handler()
    rec = handler.create(_employee(phone="555-0100"))

    assert handler.update(rec["id"], {"phone": None})["phone"] is None


@pytest.mark.parametrize("payload", [{"salary": 1}, None, ["x"], {"status": None}])
def test_update_missing_record_is_not_found_whatever_the_payload(payload):
    handler, _ = _handler()

    with pytest.raises(NotFoundError):
        handler.update(999, payload)
