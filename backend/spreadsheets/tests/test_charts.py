import pytest

from spreadsheets.charts import build_chart_series
from spreadsheets.exceptions import ValidationError

ROWS = [
    {"Month": "Jan", "Sales": 100, "Cost": 7},
    {"Month": "Feb", "Sales": "bad", "Cost": None},
    {"Month": "Mar", "Sales": 300, "Cost": 2.5},
]
HEADERS = ["Month", "Sales", "Cost"]


def test_default_uses_first_two_columns():
    series = build_chart_series(HEADERS, ROWS)

    assert series == {
        "type": "line",
        "labels": ["Jan", "Feb", "Mar"],
        "datasets": [{"label": "Sales", "data": [100, 0, 300]}],
    }


def test_single_column_has_no_series():
    assert build_chart_series(["Name"], [{"Name": "a"}, {"Name": "b"}]) is None


def test_explicit_mapping():
    series = build_chart_series(HEADERS, ROWS, x_axis="Cost", y_axis="Month")

    assert series["labels"] == [7, None, 2.5]
    # Month is all text, so every point is plotted as 0.
    assert series["datasets"] == [{"label": "Month", "data": [0, 0, 0]}]


def test_x_axis_only_gives_labels_without_datasets():
    series = build_chart_series(HEADERS, ROWS, x_axis="Month")

    assert series["labels"] == ["Jan", "Feb", "Mar"]
    assert series["datasets"] == []


def test_explicit_mapping_works_on_single_column_sheets():
    series = build_chart_series(["Name"], [{"Name": "a"}], x_axis="Name")
    assert series["labels"] == ["a"]


@pytest.mark.parametrize(
    "x_axis, y_axis",
    [
        ("Week", None),
        ("Week", "Sales"),
        ("", "Sales"),
        (None, "Sales"),
        ("Month", "Profit"),
    ],
)
def test_invalid_mapping(x_axis, y_axis):
    with pytest.raises(ValidationError):
        build_chart_series(HEADERS, ROWS, x_axis=x_axis, y_axis=y_axis)


@pytest.mark.parametrize("mapping", [{}, {"x_axis": "Sales", "y_axis": "Cost"}, {"x_axis": "Cost"}])
def test_dataset_lengths_match_labels(mapping):
    series = build_chart_series(HEADERS, ROWS, **mapping)
    for dataset in series["datasets"]:
        assert len(dataset["data"]) == len(series["labels"])
