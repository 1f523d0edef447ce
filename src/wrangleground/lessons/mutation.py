"""Lesson 2: Adding and modifying columns.

Mutating a column means computing new values for it out of
the other columns, either for every row (a new ``ratio`` column)
or only for the rows matching a condition (add 7 kg to the dogs).

Arrow tables are immutable, so the ``plain`` and ``pipeline``
approaches always build a new table sharing the untouched columns
with the original one. pandas allows to modify a frame in place
through ``.loc``, which is why the pandas snippets always work
on their own frame: the caller's data must never change.

>>> from wrangleground.sample import animals_table
>>> IncreaseWeight("Dog", 7).run(animals_table(), "plain").column("weight").to_pylist()
[37.0, 4.5, 15.0, 500.0, 190.0]
"""

import pyarrow as pa
import pyarrow.compute as pc

from ..compute import FunctionCallExpression, col, lit
from ..dataframe import Dataframe
from .base import Snippet, from_pandas


class AddRatio(Snippet):
    """Add a ``ratio`` column with the weight to height ratio of each animal."""

    title = "Weight to height ratio"

    def with_plain(self, table: pa.Table) -> pa.Table:
        return table.append_column("ratio", pc.divide(table["weight"], table["height"]))

    def with_pipeline(self, table: pa.Table) -> pa.Table:
        return (
            Dataframe(table)
            .mutate(ratio=FunctionCallExpression(pc.divide, col("weight"), col("height")))
            .to_arrow()
        )

    def with_pandas(self, table: pa.Table) -> pa.Table:
        df = table.to_pandas()
        return from_pandas(df.assign(ratio=df["weight"] / df["height"]))


class IncreaseWeight(Snippet):
    """Add ``amount`` to the weight of the rows of one animal only."""

    def __init__(self, animal: str = "Dog", amount: float = 7.0) -> None:
        self.animal = animal
        self.amount = amount
        self.title = f"Increase weight of {animal} by {amount}"

    def with_plain(self, table: pa.Table) -> pa.Table:
        weight = table["weight"]
        is_animal = pc.equal(table["animal"], self.animal)
        weight = pc.if_else(is_animal, pc.add(weight, self.amount), weight)
        return table.set_column(table.schema.get_field_index("weight"), "weight", weight)

    def with_pipeline(self, table: pa.Table) -> pa.Table:
        is_animal = FunctionCallExpression(pc.equal, col("animal"), lit(self.animal))
        increased = FunctionCallExpression(pc.add, col("weight"), lit(self.amount))
        return (
            Dataframe(table)
            .mutate(weight=FunctionCallExpression(pc.if_else, is_animal, increased, col("weight")))
            .to_arrow()
        )

    def with_pandas(self, table: pa.Table) -> pa.Table:
        df = table.to_pandas()
        df.loc[df["animal"] == self.animal, "weight"] += self.amount
        return from_pandas(df)


SNIPPETS = (AddRatio(), IncreaseWeight())


def add_ratio(table: pa.Table, approach: str = "plain") -> pa.Table:
    """``table`` with a new ``ratio = weight / height`` column."""
    return AddRatio().run(table, approach)


def increase_weight(
    table: pa.Table, animal: str, amount: float, approach: str = "plain"
) -> pa.Table:
    """``table`` where the weight of ``animal`` rows is increased by ``amount``."""
    return IncreaseWeight(animal, amount).run(table, approach)
