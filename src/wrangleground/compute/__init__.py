"""The WrangleGround Pipeline Engine

The pipeline engine is what runs the ``pipeline`` approach
of the tutorial: every verb (filter, select, mutate, sort,
group and aggregate) becomes a node of a query plan and
the plan is executed only when its data is requested.

The engine is tightly bound to Apache Arrow,
thus the engine will expect to always deal with
:class:`pyarrow.RecordBatch` and emit a new RecordBatch
as the result of the node execution::

    (RecordBatch)-->Node1--(RecordBatch)-->Node2--(RecordBatch)-->...

The nodes never implement the data manipulation themselves,
they delegate it to :mod:`pyarrow.compute` and keep only
the knowledge of how verbs chain together.

Building a query plan requires to combine the nodes that we want
to be executed starting with a ``DataSource`` node as the
leaf node of a query:

>>> import pyarrow as pa
>>> import pyarrow.compute as pc
>>> from wrangleground.compute import col, lit, PyArrowTableDataSource
>>> from wrangleground.compute import FilterNode, FunctionCallExpression
>>> data = pa.table({
...    "animal": pa.array(["Dog", "Cat", "Dog", "Horse", "Lion"]),
...    "weight": pa.array([30.0, 4.5, 8.0, 500.0, 190.0])
... })
>>> # animals heavier than 10 kg
>>> query = FilterNode(
...     FunctionCallExpression(pc.greater, col("weight"), lit(10)),
...     child=PyArrowTableDataSource(data)
... )
>>> for batch in query.batches():
...     print(batch.to_pydict())
{'animal': ['Dog', 'Horse', 'Lion'], 'weight': [30.0, 500.0, 190.0]}
"""

from .aggregate import (
    AggregateNode,
    CountAggregation,
    FirstAggregation,
    MaxAggregation,
    MeanAggregation,
    MedianAggregation,
    MinAggregation,
    StddevAggregation,
    SumAggregation,
)
from .base import ColumnRef, Literal, col, lit
from .datasources import CSVDataSource, PyArrowTableDataSource
from .expressions import FunctionCallExpression
from .filtering import FilterNode
from .pagination import PaginateNode
from .selection import ProjectNode
from .sorting import SortNode

__all__ = (
    "CSVDataSource",
    "PyArrowTableDataSource",
    "FilterNode",
    "FunctionCallExpression",
    "col",
    "lit",
    "ColumnRef",
    "Literal",
    "PaginateNode",
    "SortNode",
    "ProjectNode",
    "AggregateNode",
    "CountAggregation",
    "FirstAggregation",
    "MaxAggregation",
    "MeanAggregation",
    "MedianAggregation",
    "MinAggregation",
    "StddevAggregation",
    "SumAggregation",
)
