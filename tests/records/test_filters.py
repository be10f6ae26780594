from __future__ import annotations

from factory_ops.records.filters import filter_records, matches_filters, matches_search

RECORDS = [
    {"id": 1, "toolName": "Digital Caliper", "toolId": "MT-001", "category": "Measuring Tools", "status": "In Stock"},
    {"id": 2, "toolName": "Cordless Drill", "toolId": "PT-014", "category": "Power Tools", "status": "Out of Stock"},
    {"id": 3, "toolName": "Torque Wrench", "toolId": None, "category": "Hand Tools", "status": "In Stock"},
]


def test_search_is_case_insensitive_substring():
    assert matches_search(RECORDS[0], "caliper", ["toolName"])
    assert matches_search(RECORDS[1], "pt-0", ["toolName", "toolId"])
    assert not matches_search(RECORDS[2], "mt-", ["toolId"])


def test_blank_search_matches_everything():
    assert matches_search(RECORDS[2], "   ", ["toolName"])


def test_all_and_empty_filters_are_ignored():
    assert matches_filters(RECORDS[1], {"status": "all", "category": ""})


def test_filters_and_search_combine():
    out = filter_records(
        RECORDS,
        search="t",
        search_fields=("toolName",),
        filters={"status": "In Stock"},
    )

    assert [r["id"] for r in out] == [1, 3]
