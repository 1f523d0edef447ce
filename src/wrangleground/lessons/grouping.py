"""Lesson 3: Grouped aggregation.

Grouping splits the rows by the values of one or more
columns and computes a summary for each group.
All approaches keep the groups in the order they
first appear in the table, animals without a known family
form a group of their own with a null family, which pandas
would drop unless asked with ``dropna=False``::

    family  | animals | mean_weight | mean_height
    ------- | ------- | ----------- | -----------
    Canidae | 2       | 19.00       | 47.50
    Felidae | 2       | 97.25       | 72.50
    Equidae | 1       | 500.00      | 160.00
"""

import pyarrow as pa

from ..compute import CountAggregation, MaxAggregation, MeanAggregation, MinAggregation
from ..dataframe import Dataframe
from .base import Snippet, from_pandas


class FamilySummary(Snippet):
    """How many animals, and their mean weight and height, for each family."""

    title = "Summary by family"

    def with_plain(self, table: pa.Table) -> pa.Table:
        grouped = table.group_by("family", use_threads=False).aggregate(
            [("animal", "count"), ("weight", "mean"), ("height", "mean")]
        )
        return pa.table(
            {
                "family": grouped["family"],
                "animals": grouped["animal_count"],
                "mean_weight": grouped["weight_mean"],
                "mean_height": grouped["height_mean"],
            }
        )

    def with_pipeline(self, table: pa.Table) -> pa.Table:
        return (
            Dataframe(table)
            .group_by("family")
            .aggregate(
                animals=CountAggregation("animal"),
                mean_weight=MeanAggregation("weight"),
                mean_height=MeanAggregation("height"),
            )
            .to_arrow()
        )

    def with_pandas(self, table: pa.Table) -> pa.Table:
        summary = (
            table.to_pandas()
            .groupby("family", sort=False, dropna=False)
            .agg(
                animals=("animal", "count"),
                mean_weight=("weight", "mean"),
                mean_height=("height", "mean"),
            )
        )
        return from_pandas(summary.reset_index())


class WeightRange(Snippet):
    """The lightest and heaviest weight of each family."""

    title = "Weight range by family"

    def with_plain(self, table: pa.Table) -> pa.Table:
        grouped = table.group_by("family", use_threads=False).aggregate(
            [("weight", "min"), ("weight", "max")]
        )
        return pa.table(
            {
                "family": grouped["family"],
                "lightest": grouped["weight_min"],
                "heaviest": grouped["weight_max"],
            }
        )

    def with_pipeline(self, table: pa.Table) -> pa.Table:
        return (
            Dataframe(table)
            .group_by("family")
            .aggregate(lightest=MinAggregation("weight"), heaviest=MaxAggregation("weight"))
            .to_arrow()
        )

    def with_pandas(self, table: pa.Table) -> pa.Table:
        weights = table.to_pandas().groupby("family", sort=False, dropna=False)["weight"]
        return from_pandas(
            weights.agg(lightest="min", heaviest="max").reset_index()
        )


SNIPPETS = (FamilySummary(), WeightRange())


def family_summary(table: pa.Table, approach: str = "plain") -> pa.Table:
    """Count, mean weight and mean height of each family."""
    return FamilySummary().run(table, approach)


def weight_range(table: pa.Table, approach: str = "plain") -> pa.Table:
    """Min and max weight of each family."""
    return WeightRange().run(table, approach)
