"""Per-column statistics for a parsed sheet."""
from __future__ import annotations

import math
from typing import Any, Iterable


def is_numeric_cell(value: Any) -> bool:
    """
    True only for real numbers.

    Booleans are ints in Python but not numbers in a spreadsheet, and strings
    like "100" do not count either. NaN is treated as an empty cell.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def build_summary(headers: list[str], rows: Iterable[dict[str, Any]]) -> dict:
    """
    Build the ``DatasetSummary`` payload stored with each upload.

    Columns without a single numeric cell are left out of ``numericColumns``
    instead of getting an all-zero entry.
    """
    rows = list(rows)
    numeric_columns: dict[str, dict[str, float]] = {}

    for header in headers:
        values = [row.get(header) for row in rows]
        numbers = [value for value in values if is_numeric_cell(value)]
        if not numbers:
            continue

        total = sum(numbers)
        numeric_columns[header] = {
            "average": total / len(numbers),
            "min": min(numbers),
            "max": max(numbers),
            "total": total,
        }

    return {
        "totalRows": len(rows),
        "numericColumns": numeric_columns,
        "columnNames": list(headers),
    }
