"""Compare tables produced by different approaches.

Two approaches solving the same task rarely produce
byte identical tables: pandas and Arrow might pick
different integer widths or string types, and floating
point sums might be computed in a different order.

:func:`tables_equal` compares what matters for the tutorial,
column names, row order and values, with floats compared
using a relative tolerance.

>>> import pyarrow as pa
>>> tables_equal(pa.table({"x": [0.1 + 0.2]}), pa.table({"x": [0.3]}))
True
>>> tables_equal(pa.table({"x": [1]}), pa.table({"y": [1]}))
False
"""

import math
from typing import Any

import pyarrow as pa

DEFAULT_REL_TOL = 1e-9


def tables_equal(left: pa.Table, right: pa.Table, rel_tol: float = DEFAULT_REL_TOL) -> bool:
    """Check if two tables have the same columns and values."""
    return describe_difference(left, right, rel_tol) is None


def describe_difference(
    left: pa.Table, right: pa.Table, rel_tol: float = DEFAULT_REL_TOL
) -> str | None:
    """Describe the first difference between two tables, ``None`` if they are equal."""
    if left.column_names != right.column_names:
        return f"columns {left.column_names} != {right.column_names}"
    if left.num_rows != right.num_rows:
        return f"{left.num_rows} rows != {right.num_rows} rows"

    for name in left.column_names:
        lvalues = left.column(name).to_pylist()
        rvalues = right.column(name).to_pylist()
        for row, (lv, rv) in enumerate(zip(lvalues, rvalues)):
            if not values_equal(lv, rv, rel_tol):
                return f"column {name} row {row}: {lv!r} != {rv!r}"
    return None


def values_equal(left: Any, right: Any, rel_tol: float = DEFAULT_REL_TOL) -> bool:
    """Compare two python values, floats within a relative tolerance."""
    if left is None or right is None:
        return left is None and right is None
    if isinstance(left, float) or isinstance(right, float):
        return math.isclose(left, right, rel_tol=rel_tol)
    return left == right
