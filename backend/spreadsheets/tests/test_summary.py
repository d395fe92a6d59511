import math

import pytest

from spreadsheets.summary import build_summary, is_numeric_cell

ROWS = [
    {"Month": "Jan", "Sales": 100, "Cost": 40.5, "Note": "ok"},
    {"Month": "Feb", "Sales": "bad", "Cost": None, "Note": "late"},
    {"Month": "Mar", "Sales": 300, "Cost": 10, "Note": None},
]
HEADERS = ["Month", "Sales", "Cost", "Note"]


def test_sales_example():
    summary = build_summary(["Month", "Sales"], ROWS)

    assert summary["totalRows"] == 3
    assert summary["columnNames"] == ["Month", "Sales"]
    assert summary["numericColumns"] == {
        "Sales": {"average": 200, "min": 100, "max": 300, "total": 600},
    }


def test_text_only_columns_are_omitted():
    summary = build_summary(HEADERS, ROWS)

    assert set(summary["numericColumns"]) == {"Sales", "Cost"}
    assert set(summary["numericColumns"]) <= set(summary["columnNames"])


def test_stat_bounds_hold_for_every_numeric_column():
    summary = build_summary(HEADERS, ROWS)

    for header, stats in summary["numericColumns"].items():
        count = sum(1 for row in ROWS if is_numeric_cell(row.get(header)))
        assert stats["min"] <= stats["average"] <= stats["max"]
        assert stats["total"] == pytest.approx(stats["average"] * count)


def test_total_rows_ignores_content():
    rows = [{"a": None}, {"a": "x"}, {"a": None}, {"a": "y"}]
    assert build_summary(["a"], rows)["totalRows"] == 4


def test_numeric_strings_and_booleans_do_not_count():
    rows = [{"v": "100"}, {"v": True}, {"v": False}, {"v": float("nan")}]
    assert build_summary(["v"], rows)["numericColumns"] == {}


def test_missing_keys_are_treated_as_empty():
    summary = build_summary(["a", "b"], [{"a": 1}, {"a": 3, "b": 2}])
    assert summary["numericColumns"]["b"] == {"average": 2, "min": 2, "max": 2, "total": 2}


def test_column_order_is_preserved():
    headers = ["z", "a", "m"]
    assert build_summary(headers, [{"z": 1, "a": 2, "m": 3}])["columnNames"] == headers


@pytest.mark.parametrize(
    "value, expected",
    [
        (1, True),
        (-2.5, True),
        (math.inf, True),
        (math.nan, False),
        (True, False),
        ("3", False),
        (None, False),
    ],
)
def test_is_numeric_cell(value, expected):
    assert is_numeric_cell(value) is expected
