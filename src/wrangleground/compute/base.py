"""Base classes and interfaces for the pipeline engine

This module defines the base components that are
necessary to represent a pipeline of table verbs
as a query plan and execute it.
"""

import abc
from typing import Any, Iterator

import pyarrow as pa


class QueryPlanNode(abc.ABC):
    """A node of a query execution plan.

    The pipeline approach of the tutorial chains
    verbs like ``filter -> mutate -> group_by``,
    each verb becomes a node of a tree and all
    previous steps are children of the last one.

    For example keeping only the dogs of the sample
    table and then computing their mean weight is::

        PyArrowTableDataSource -> FilterNode(animal == Dog) -> AggregateNode(mean weight)

    Each Node accepts :class:`pyarrow.RecordBatch`
    data as its input and emits a new
    :class:`pyarrow.RecordBatch` as its output.

    The base `QueryPlanNode` class does nothing
    and purely acts as the interface that all nodes
    must implement. Actual work will be done
    in the subclasses.

    For example a node that forwards data as is
    after logging how many rows went through it::

        class CountRowsNode(QueryPlanNode):
            def __init__(self, child):
                self.child = child

            def batches(self):
                for b in self.child.batches():
                    log.debug("%d rows", b.num_rows)
                    yield b

            def __str__(self):
                return f"CountRowsNode({self.child})"
    """

    RecordBatchesGenerator = Iterator[pa.RecordBatch]

    @abc.abstractmethod
    def batches(self) -> RecordBatchesGenerator:
        """Emits the batches for the next node.

        Usually this happens by consuming data from its
        child nodes, transforming it somehow, and yielding
        it back to the next consumer.
        """
        ...

    @abc.abstractmethod
    def __str__(self) -> str:
        """Human readable representation of the node."""
        ...


class Expression(abc.ABC):
    """Expression to apply to a RecordBatch.

    Expressions compute new data out of the columns
    of a :class:`pyarrow.RecordBatch`, like
    ``weight / height`` or ``animal == "Dog"``.

    Applying an expression always results in a new
    column, thus in a :class:`pyarrow.Array`.
    """

    @abc.abstractmethod
    def apply(self, batch: pa.RecordBatch) -> pa.Array:
        """Apply the expression to a RecordBatch."""
        ...

    @abc.abstractmethod
    def __str__(self) -> str:
        """Human readable representation of the expression."""
        ...

    def __repr__(self) -> str:
        return str(self)


class ColumnRef(Expression):
    """References a column in a record batch.

    When applied to a record batch returns the data
    of the referenced column.

    >>> batch = pa.record_batch({"weight": [30.0, 4.5]})
    >>> col("weight").apply(batch).to_pylist()
    [30.0, 4.5]
    """

    def __init__(self, name: str) -> None:
        """
        :param name: The name of the column being referenced.
        """
        self.name = name

    def apply(self, batch: pa.RecordBatch) -> pa.Array:
        """Get the data for the column."""
        return batch.column(self.name)

    def __str__(self) -> str:
        return f"ColumnRef({self.name})"


class Literal(Expression):
    """A constant value.

    Applying a literal returns the value wrapped
    in a :class:`pyarrow.Scalar`, compute functions
    broadcast scalars against arrays.

    >>> lit(7).apply(pa.record_batch({"weight": [1.0]}))
    <pyarrow.Int64Scalar: 7>
    """

    def __init__(self, value: Any) -> None:
        """
        :param value: The constant value.
        """
        self.value = value

    def apply(self, batch: pa.RecordBatch) -> pa.Scalar:
        return pa.scalar(self.value)

    def __str__(self) -> str:
        return f"Literal({self.value!r})"


col = ColumnRef
lit = Literal
