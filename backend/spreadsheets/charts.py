"""
Chart-ready series for the frontends.

The payload mirrors what the charting library expects (``labels`` plus a
list of ``datasets``) so the web client can pass it straight through.
"""
from __future__ import annotations

import logging
from typing import Any

from .exceptions import ValidationError
from .summary import is_numeric_cell

logger = logging.getLogger(__name__)

DEFAULT_CHART_TYPE = "line"


def build_chart_series(
    headers: list[str],
    rows: list[dict[str, Any]],
    x_axis: str | None = None,
    y_axis: str | None = None,
) -> dict | None:
    """
    Return ``{"type", "labels", "datasets"}`` or ``None``.

    With an explicit mapping, ``x_axis`` is the label column and the optional
    ``y_axis`` becomes the single dataset. Without one, the first column is
    used for labels and the second for values; sheets with a single column
    get no chart at all.

    Non-numeric dataset cells are plotted as 0. The summary statistics skip
    those cells instead, so the chart and the numbers can disagree on
    purpose.
    """
    if x_axis or y_axis:
        if not x_axis or x_axis not in headers:
            raise ValidationError(f"X-axis column '{x_axis or ''}' is not in the uploaded file")
        if y_axis and y_axis not in headers:
            raise ValidationError(f"Y-axis column '{y_axis}' is not in the uploaded file")
        label_column, value_column = x_axis, y_axis or None
    elif len(headers) < 2:
        logger.debug("Only %d column(s); skipping chart series", len(headers))
        return None
    else:
        label_column, value_column = headers[0], headers[1]

    datasets = []
    if value_column:
        datasets.append(
            {
                "label": value_column,
                "data": [_chart_value(row.get(value_column)) for row in rows],
            }
        )

    return {
        "type": DEFAULT_CHART_TYPE,
        "labels": [row.get(label_column) for row in rows],
        "datasets": datasets,
    }


def _chart_value(value: Any) -> int | float:
    return value if is_numeric_cell(value) else 0
