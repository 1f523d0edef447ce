"""Format tabular data into a text table for print.

the `tabulate` function takes a `pyarrow.Table` or `pyarrow.RecordBatch` and formats it into a text table.
It will truncate long strings, format floats to a fixed number of decimal places, and limit the number of rows to display.
The function is used by the commands to display lesson results and benchmark summaries.

Example:

    >>> import pyarrow as pa
    >>> data = {
    ...     "animal": ["Dog", "Cat", "Horse"],
    ...     "count": [2, 1, 1],
    ...     "weight": [30.0, 4.5, 500.0],
    ... }
    >>> table = pa.RecordBatch.from_pydict(data)
    >>> print(tabulate(table))
    animal | count | weight
    ------ | ----- | ------
    Dog    | 2     | 30.00
    Cat    | 1     | 4.50
    Horse  | 1     | 500.00
"""

from typing import Any

from pyarrow import RecordBatch, Table


def tabulate(data: RecordBatch | Table, max_rows: int = 20, precision: int = 2) -> str:
    """Format a RecordBatch or Table into a text table.

    :param max_rows: How many rows to show at most, the others are summarized.
    :param precision: Decimal places shown for floats.
    """
    cols = data.column_names
    rows = [
        [format_value(row[c], precision) for c in cols]
        for row in data.slice(0, max_rows).to_pylist()
    ]

    colsizes = compute_max_colsize(cols, rows)
    header = [maketablerow(cols, colsizes=colsizes)]
    separator = [maketablerow(["-"] * len(cols), colsizes=colsizes, fillvalue="-")]
    textrows = [maketablerow(row, colsizes=colsizes) for row in rows]

    table = "\n".join(header + separator + textrows)
    if data.num_rows > max_rows:
        table += f"\n... and {data.num_rows - max_rows} more rows"
    return table


def compute_max_colsize(cols: list[str], rows: list[list[str]]) -> list[int]:
    """Compute the maximum size of each column in a table."""
    return [
        max([len(row[colidx]) for row in rows] + [len(cols[colidx])])
        for colidx, _ in enumerate(cols)
    ]


def maketablerow(cols: list[str], colsizes: list[int], fillvalue: str = " ") -> str:
    """Make a table row with the given column sizes."""
    return " | ".join(
        [col.ljust(colsizes[idx], fillvalue) for idx, col in enumerate(cols)]
    ).rstrip()


def format_value(v: Any, precision: int = 2) -> str:
    """Format a value to be printed in the table.

    This function will format floats to ``precision`` decimal places,
    and truncate long strings.
    """
    if isinstance(v, float):
        return f"{v:.{precision}f}"
    elif isinstance(v, bool):
        return "true" if v else "false"

    v = str(v)
    if len(v) > 30:
        v = v[:27] + "..."
    return v
