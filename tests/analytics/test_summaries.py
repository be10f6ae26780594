from __future__ import annotations

from factory_ops.analytics.breakdown import count_by, sum_by
from factory_ops.attendance.analytics import summarize_attendance
from factory_ops.employees.analytics import summarize_employees
from factory_ops.materials.analytics import summarize_materials
from factory_ops.tools.analytics import summarize_stock_requests, summarize_tool_stock


def test_count_by_keeps_known_values_first_with_percentages():
    records = [{"status": "Late"}, {"status": "Present"}, {"status": "Present"}, {"status": "Sick"}, {"status": None}]

    out = count_by(records, "status", known=["Present", "Absent", "Late"], with_percentage=True)

    assert [r["name"] for r in out] == ["Present", "Absent", "Late", "Sick"]
    assert out[0] == {"name": "Present", "count": 2, "percentage": 50.0}
    assert out[1]["percentage"] == 0.0


def test_sum_by_treats_missing_numbers_as_zero():
    out = sum_by([{"shift": "A", "qty": 3}, {"shift": "A", "qty": None}], "shift", ["qty"])

    assert out == [{"name": "A", "qty": 3}]


def test_employee_summary():
    summary = summarize_employees([
        {"department": "Production", "status": "Active"},
        {"department": "Production", "status": "Inactive"},
        {"department": "Tooling", "status": "Active"},
        {"department": None, "status": "Active"},
    ])

    assert summary["total"] == 4
    assert summary["active"] == 3
    assert summary["inactive"] == 1
    assert summary["departmentCount"] == 2
    production = next(d for d in summary["departments"] if d["name"] == "Production")
    assert production == {"name": "Production", "count": 2, "active": 1}


def test_attendance_trend_counts_absent_separately():
    summary = summarize_attendance([
        {"date": "2024-06-04", "status": "Absent"},
        {"date": "2024-06-03", "status": "Present"},
        {"date": "2024-06-03", "status": "Late"},
    ])

    assert summary["trend"] == [
        {"date": "2024-06-03", "present": 2, "absent": 0},
        {"date": "2024-06-04", "present": 0, "absent": 1},
    ]


def test_empty_collections_summarize_to_zero():
    assert summarize_materials([])["total"] == 0
    assert summarize_tool_stock([])["totalQuantity"] == 0
    assert all(s["count"] == 0 for s in summarize_stock_requests([])["statuses"])
