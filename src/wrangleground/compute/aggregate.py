"""Query plan nodes that compute aggregations.

Frequently when analysing data is necessary
to compute statistics like the min, max, average, etc...
of the data for each group of rows.

The aggregate node is in charge of computing
those aggregations and projecting them as new
columns in a query pipeline.

For example, given the sample table::

    animal, weight, family
    Dog, 30.0, Canidae
    Cat, 4.5, Felidae
    Dog, 8.0, Canidae
    Horse, 500.0, Equidae
    Lion, 190.0, Felidae

We could group by family and compute the mean weight
to get::

    family, mean_weight
    Canidae, 19.0
    Felidae, 97.25
    Equidae, 500.0

The grouping itself is delegated to :meth:`pyarrow.Table.group_by`,
the node only maps the aggregations to Arrow hash aggregate
functions and gives the result columns the requested names.
Grouping runs single threaded, which makes Arrow emit the
groups in the order they first appear in the data.
"""

from typing import Any

import pyarrow as pa
import pyarrow.compute as pc

from .base import QueryPlanNode

__all__ = (
    "AggregateNode",
    "Aggregation",
    "CountAggregation",
    "FirstAggregation",
    "MaxAggregation",
    "MeanAggregation",
    "MedianAggregation",
    "MinAggregation",
    "StddevAggregation",
    "SumAggregation",
)


class AggregateNode(QueryPlanNode):
    """Group data and compute aggregations.

    >>> import pyarrow as pa
    >>> from wrangleground.compute import MeanAggregation, PyArrowTableDataSource
    >>> data = pa.record_batch({
    ...    'family': pa.array(['Canidae', 'Felidae', 'Canidae', 'Equidae', 'Felidae']),
    ...    'weight': pa.array([30.0, 4.5, 8.0, 500.0, 190.0]),
    ... })
    >>> aggregate = AggregateNode(["family"], {"mean_weight": MeanAggregation("weight")}, PyArrowTableDataSource(data))
    >>> next(aggregate.batches()).to_pydict()
    {'family': ['Canidae', 'Felidae', 'Equidae'], 'mean_weight': [19.0, 97.25, 500.0]}
    """

    def __init__(
        self,
        keys: list[str],
        aggregations: dict[str, "Aggregation"],
        child: QueryPlanNode,
    ) -> None:
        """
        :param keys: The columns to group by.
        :param aggregations: The aggregations to compute in the form of {"new_col_name": Aggregation}.
        :param child: The child node that will provide the data to aggregate.
        """
        self.keys = keys
        self.aggregations = aggregations
        self.child = child

    def __str__(self) -> str:
        return f"AggregateNode(keys={self.keys}, aggregations={self.aggregations}, {self.child})"

    def batches(self) -> QueryPlanNode.RecordBatchesGenerator:
        """Group the data of the child node and compute the aggregations.

        All the batches emitted by the child are loaded in memory,
        grouped together and a single batch with one row
        for each group is emitted.
        """
        table = pa.Table.from_batches(list(self.child.batches()))
        grouped = table.group_by(self.keys, use_threads=False).aggregate(
            [aggregation.as_arrow() for aggregation in self.aggregations.values()]
        )

        # Arrow names the results like "weight_mean", which might not be unique,
        # the aggregated columns are all the non key ones, in the requested order.
        key_indices = {grouped.schema.get_field_index(k) for k in self.keys}
        aggregated = [
            grouped.column(i) for i in range(grouped.num_columns) if i not in key_indices
        ]
        result_data: dict[str, pa.ChunkedArray] = {k: grouped.column(k) for k in self.keys}
        for name, column in zip(self.aggregations, aggregated):
            result_data[name] = column

        yield pa.record_batch(
            {name: column.combine_chunks() for name, column in result_data.items()}
        )


class Aggregation:
    """Base class for aggregations.

    Every aggregation names the Arrow hash aggregate
    function that computes it and, optionally,
    the options that function must receive.
    """

    function: str

    def __init__(self, column: str) -> None:
        self.column = column

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.column})"

    __repr__ = __str__

    def options(self) -> pc.FunctionOptions | None:
        return None

    def as_arrow(self) -> tuple[Any, ...]:
        """The aggregation as accepted by :meth:`pyarrow.TableGroupBy.aggregate`."""
        options = self.options()
        if options is None:
            return (self.column, self.function)
        return (self.column, self.function, options)


class SumAggregation(Aggregation):
    """Compute the sum of an aggregated column."""

    function = "sum"


class MinAggregation(Aggregation):
    """Compute the min of an aggregated column."""

    function = "min"


class MaxAggregation(Aggregation):
    """Compute the max of an aggregated column."""

    function = "max"


class CountAggregation(Aggregation):
    """Compute the count of the non null values of an aggregated column."""

    function = "count"


class MeanAggregation(Aggregation):
    """Compute the mean of an aggregated column."""

    function = "mean"


class MedianAggregation(Aggregation):
    """Compute the median of an aggregated column.

    Arrow only provides an approximate median for groups,
    based on a t-digest. For small groups like the repetitions
    of the benchmark it stays very close to the exact median.
    """

    function = "approximate_median"


class StddevAggregation(Aggregation):
    """Compute the standard deviation of an aggregated column.

    By default computes the sample standard deviation (``ddof=1``),
    groups with a single value get a null result.
    """

    function = "stddev"

    def __init__(self, column: str, ddof: int = 1) -> None:
        super().__init__(column)
        self.ddof = ddof

    def options(self) -> pc.FunctionOptions:
        return pc.VarianceOptions(ddof=self.ddof)


class FirstAggregation(Aggregation):
    """Pick the first value of each group, in the order rows were received.

    Used after sorting to pick the top row of each group.
    Nulls are not skipped, so that picking the first value of
    every column gives back the values of the same row.
    """

    function = "first"

    def options(self) -> pc.FunctionOptions:
        return pc.ScalarAggregateOptions(skip_nulls=False)
