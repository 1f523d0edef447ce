"""The Dataframe object itself."""
from typing import Self

import pandas
import pyarrow as pa

from ..compute import (
  AggregateNode,
  CSVDataSource,
  FilterNode,
  PaginateNode,
  ProjectNode,
  PyArrowTableDataSource,
  SortNode,
)
from ..compute.aggregate import Aggregation
from ..compute.base import QueryPlanNode
from ..compute.expressions import Expression


class Dataframe:
  """Data structure that handles data in rows and columns.

  The Dataframe object allows to represent in-memory data
  and perform transformations over it.

  The wrangleground dataframe object is lazy, which means that
  any transformation or analysis will be applied only when the
  ``.collect()`` method will be invoked and no data is kept
  in memory until that moment (unless it already was).

  >>> import pyarrow as pa
  >>> import pyarrow.compute as pc
  >>> from wrangleground.compute import col, lit, FunctionCallExpression, MeanAggregation
  >>> df = Dataframe(pa.table({"animal": ["Dog", "Cat", "Dog"], "weight": [30.0, 4.5, 8.0]}))
  >>> df.mutate(weight=FunctionCallExpression(pc.add, col("weight"), lit(7))) \\
  ...   .group_by("animal").aggregate(mean_weight=MeanAggregation("weight")) \\
  ...   .to_arrow().to_pydict()
  {'animal': ['Dog', 'Cat'], 'mean_weight': [26.0, 11.5]}
  """
  def __init__(self, node_or_table: QueryPlanNode | pa.Table) -> None:
    """
    :param node_or_table: A compute engine node expected to emit
                          the data for the dataframe or a `pyarrow.Table`.
    """
    if isinstance(node_or_table, pa.Table):
      node_or_table = PyArrowTableDataSource(node_or_table)

    if not isinstance(node_or_table, QueryPlanNode):
      raise ValueError("Invalid input, expected a QueryPlanNode or a PyArrow Table")

    self.node = node_or_table

  def __str__(self) -> str:
    return f"Dataframe({self.node})"

  @classmethod
  def open_csv(cls, filename: str, column_types: pa.Schema | None = None) -> Self:
    """Open a CSV file and create a Dataframe out of its data.

    :param filename: The path to a local CSV file.
    :param column_types: Types to read the columns as, instead of inferring them.
    """
    return cls(CSVDataSource(filename, column_types=column_types))

  def filter(self, expression: Expression) -> Self:
    """Apply a filter to the data and return a new Dataframe.

    The returned dataframe will only contain the data that
    matches the filter predicate.

    :param expression: The expression representing the predicate.
                       for example `animal == "Dog"`.
    """
    return self.__class__(FilterNode(expression, self.node))

  def select(self, *columns: str) -> Self:
    """Keep only the given columns, in the given order."""
    return self.__class__(ProjectNode(list(columns), None, self.node))

  def mutate(self, **expressions: Expression) -> Self:
    """Compute new columns or replace existing ones.

    Expressions are applied in the order they are provided,
    so an expression can reference a column computed by
    a previous one.
    """
    return self.__class__(ProjectNode(None, expressions, self.node))

  def sort(self, *keys: str, descending: bool | list[bool] = False) -> Self:
    """Sort the rows by one or more columns.

    :param descending: A single flag for all keys or one flag per key.
    """
    if isinstance(descending, bool):
      descending = [descending] * len(keys)
    return self.__class__(SortNode(list(keys), descending, self.node))

  def head(self, n: int = 5) -> Self:
    """Keep only the first ``n`` rows."""
    return self.__class__(PaginateNode(0, n, self.node))

  def group_by(self, *keys: str) -> "GroupedDataframe":
    """Group rows by the given columns.

    The returned object only supports ``.aggregate()``,
    which gives back a Dataframe with one row per group.
    """
    return GroupedDataframe(self, list(keys))

  def collect(self) -> Self:
    """Collect all data of the dataframe in memory.

    Returns a new Dataframe that has all data from the
    previous dataframe eagerly loaded in memory.
    """
    return self.__class__(self.to_arrow())

  def to_arrow(self) -> pa.Table:
    """Collect all the data and return a pyarrow.Table"""
    return pa.Table.from_batches(self.node.batches())

  def to_pandas(self) -> pandas.DataFrame:
    """Collect all the data and return a pandas.DataFrame"""
    return self.to_arrow().to_pandas()


class GroupedDataframe:
  """A Dataframe whose rows have been grouped by some keys."""
  def __init__(self, dataframe: Dataframe, keys: list[str]) -> None:
    self.dataframe = dataframe
    self.keys = keys

  def aggregate(self, **aggregations: Aggregation) -> Dataframe:
    """Compute the aggregations for each group.

    The resulting Dataframe has the grouping keys as
    the first columns followed by one column for each aggregation.
    """
    return self.dataframe.__class__(
      AggregateNode(self.keys, aggregations, self.dataframe.node)
    )
