"""Lesson 4: Nested selection, the heaviest animal of each family.

Some questions can't be answered by an aggregation alone.
"Which is the heaviest animal of each family?" needs the whole
row of the heaviest animal, not just the maximum weight.

The trick is nesting two selections: an inner one computes the
*positions* of the wanted rows, an outer one takes those rows::

    inner: for each family, the position of its heaviest row  -> [0, 3, 4]
    outer: table.take([0, 3, 4])

pandas has a direct idiom for the inner selection (``idxmax``),
the pipeline approach sorts by weight and keeps the first row of
each group, the plain approach computes the positions by hand.
Ties are resolved in favour of the row that comes first.

>>> from wrangleground.sample import animals_table
>>> HeaviestPerFamily().run(animals_table(), "plain").column("animal").to_pylist()
['Dog', 'Horse', 'Lion']
"""

import pyarrow as pa
import pyarrow.compute as pc

from ..compute import FirstAggregation, FunctionCallExpression, col
from ..dataframe import Dataframe
from .base import Snippet, from_pandas


class HeaviestPerFamily(Snippet):
    """The full row of the heaviest animal of each family, sorted by family.

    Animals whose weight is missing can't be the heaviest of anything,
    so they are discarded first. Animals without a known family are
    grouped together under a null family, reported last.
    """

    title = "Heaviest animal of each family"

    def with_plain(self, table: pa.Table) -> pa.Table:
        table = table.filter(pc.is_valid(table["weight"]))
        # Sorting is stable, so among equal weights the first row wins.
        order = pc.sort_indices(table, sort_keys=[("weight", "descending")])
        families = pc.take(table["family"], order)

        first_of_family = []
        for family in pc.unique(families):
            if family.is_valid:
                in_family = pc.equal(families, family)
            else:
                in_family = pc.is_null(families)
            first_of_family.append(pc.index(in_family, True).as_py())

        positions = pc.take(order, pa.array(first_of_family, pa.int64()))
        return table.take(positions).sort_by("family")

    def with_pipeline(self, table: pa.Table) -> pa.Table:
        return (
            Dataframe(table)
            .filter(FunctionCallExpression(pc.is_valid, col("weight")))
            .sort("weight", descending=True)
            .group_by("family")
            .aggregate(
                animal=FirstAggregation("animal"),
                weight=FirstAggregation("weight"),
                height=FirstAggregation("height"),
            )
            .sort("family")
            .select("animal", "weight", "height", "family")
            .to_arrow()
        )

    def with_pandas(self, table: pa.Table) -> pa.Table:
        df = table.to_pandas().dropna(subset=["weight"])
        heaviest = df.groupby("family", dropna=False)["weight"].idxmax()
        return from_pandas(df.loc[heaviest])


SNIPPETS = (HeaviestPerFamily(),)


def heaviest_per_family(table: pa.Table, approach: str = "plain") -> pa.Table:
    """One row per family, the one with the highest weight."""
    return HeaviestPerFamily().run(table, approach)
