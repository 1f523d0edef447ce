"""Lesson 1: Subsetting rows and columns.

The most frequent operation on a table is taking a piece of it:
some rows, some columns or both.

Rows are picked with a mask, a boolean array with one value
per row, which every approach builds with a comparison::

    plain     pc.equal(table["animal"], "Dog")
    pipeline  FunctionCallExpression(pc.equal, col("animal"), lit("Dog"))
    pandas    df["animal"] == "Dog"

The difference is when the mask is computed: immediately for
``plain`` and ``pandas``, only when the data is collected
for ``pipeline``.

>>> from wrangleground.sample import animals_table
>>> RowsWhereAnimal("Dog").run(animals_table(), "pandas").to_pydict()
{'animal': ['Dog', 'Dog'], 'weight': [30.0, 8.0], 'height': [60.0, 35.0], 'family': ['Canidae', 'Canidae']}
"""

import pyarrow as pa
import pyarrow.compute as pc

from ..compute import FunctionCallExpression, col, lit
from ..dataframe import Dataframe
from .base import Snippet, from_pandas


class RowsWhereAnimal(Snippet):
    """Keep only the rows of the given animal."""

    def __init__(self, animal: str = "Dog") -> None:
        self.animal = animal
        self.title = f"Rows where animal is {animal}"

    def with_plain(self, table: pa.Table) -> pa.Table:
        return table.filter(pc.equal(table["animal"], self.animal))

    def with_pipeline(self, table: pa.Table) -> pa.Table:
        return (
            Dataframe(table)
            .filter(FunctionCallExpression(pc.equal, col("animal"), lit(self.animal)))
            .to_arrow()
        )

    def with_pandas(self, table: pa.Table) -> pa.Table:
        df = table.to_pandas()
        return from_pandas(df.loc[df["animal"] == self.animal])


class SelectColumns(Snippet):
    """Keep only the given columns, in the given order."""

    def __init__(self, columns: list[str] | None = None) -> None:
        self.columns = ["animal", "weight"] if columns is None else columns
        self.title = f"Columns {', '.join(self.columns)}"

    def with_plain(self, table: pa.Table) -> pa.Table:
        return table.select(self.columns)

    def with_pipeline(self, table: pa.Table) -> pa.Table:
        return Dataframe(table).select(*self.columns).to_arrow()

    def with_pandas(self, table: pa.Table) -> pa.Table:
        return from_pandas(table.to_pandas()[self.columns])


class HeavierThan(Snippet):
    """Rows and columns at once: animal and weight of the animals above a weight."""

    def __init__(self, weight: float = 10.0) -> None:
        self.weight = weight
        self.title = f"Animals heavier than {weight}"

    def with_plain(self, table: pa.Table) -> pa.Table:
        heavy = table.filter(pc.greater(table["weight"], self.weight))
        return heavy.select(["animal", "weight"])

    def with_pipeline(self, table: pa.Table) -> pa.Table:
        return (
            Dataframe(table)
            .filter(FunctionCallExpression(pc.greater, col("weight"), lit(self.weight)))
            .select("animal", "weight")
            .to_arrow()
        )

    def with_pandas(self, table: pa.Table) -> pa.Table:
        df = table.to_pandas()
        return from_pandas(df.loc[df["weight"] > self.weight, ["animal", "weight"]])


class FirstRows(Snippet):
    """The first ``n`` rows of the table."""

    def __init__(self, n: int = 3) -> None:
        if n < 0:
            raise ValueError(f"n must not be negative, got {n}")
        self.n = n
        self.title = f"First {n} rows"

    def with_plain(self, table: pa.Table) -> pa.Table:
        return table.slice(0, self.n)

    def with_pipeline(self, table: pa.Table) -> pa.Table:
        return Dataframe(table).head(self.n).to_arrow()

    def with_pandas(self, table: pa.Table) -> pa.Table:
        return from_pandas(table.to_pandas().head(self.n))


SNIPPETS = (RowsWhereAnimal(), SelectColumns(), HeavierThan(), FirstRows())


def rows_where_animal(table: pa.Table, animal: str, approach: str = "plain") -> pa.Table:
    """Rows whose ``animal`` column equals ``animal``."""
    return RowsWhereAnimal(animal).run(table, approach)


def select_columns(table: pa.Table, columns: list[str], approach: str = "plain") -> pa.Table:
    """Only the ``columns`` of ``table``."""
    return SelectColumns(columns).run(table, approach)


def heavier_than(table: pa.Table, weight: float, approach: str = "plain") -> pa.Table:
    """Animal and weight of rows whose weight is strictly greater than ``weight``."""
    return HeavierThan(weight).run(table, approach)


def first_rows(table: pa.Table, n: int, approach: str = "plain") -> pa.Table:
    """The first ``n`` rows of ``table``."""
    return FirstRows(n).run(table, approach)
