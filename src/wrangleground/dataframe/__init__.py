"""Dataframe library built on top of the wrangleground pipeline engine.

A dataframe library is a tool designed to handle and manipulate structured data,
typically in the form of tables (i.e., rows and columns).

In the tutorial the Dataframe is the ``pipeline`` approach:
the same tasks solved with plain :mod:`pyarrow.compute` calls
and with pandas are here written as a chain of verbs::

    Dataframe(table) \\
      .filter(...) \\
      .mutate(ratio=...) \\
      .group_by("animal") \\
      .aggregate(mean_ratio=MeanAggregation("ratio"))

Each verb only builds a node of the query plan,
nothing is computed until ``.collect()`` or ``.to_arrow()``.
"""

from ..compute import col, lit
from .dataframe import Dataframe, GroupedDataframe

__all__ = ("Dataframe", "GroupedDataframe", "col", "lit")
