"""Query plan nodes that implement filtering of rows.

Subsetting a table by rows is the first thing the tutorial
teaches: keep only the rows that respect a predicate,
like all the dogs of the sample table.
"""

from .base import QueryPlanNode
from .expressions import Expression


class FilterNode(QueryPlanNode):
    """Keep the rows for which a predicate is true.

    The predicate is evaluated once per batch and produces a mask,
    the batch is then reduced to the rows where the mask is set.

    >>> import pyarrow as pa
    >>> import pyarrow.compute as pc
    >>> from wrangleground.compute import col, lit, FunctionCallExpression, PyArrowTableDataSource
    >>> data = pa.record_batch({"animal": ["Dog", "Cat", "Dog"], "weight": [30.0, 4.5, 8.0]})
    >>> predicate = FunctionCallExpression(pc.equal, col("animal"), lit("Dog"))
    >>> predicate.apply(data).to_pylist()
    [True, False, True]
    >>> next(FilterNode(predicate, PyArrowTableDataSource(data)).batches()).to_pydict()
    {'animal': ['Dog', 'Dog'], 'weight': [30.0, 8.0]}
    """

    def __init__(self, expression: Expression, child: QueryPlanNode) -> None:
        self.expression = expression
        self.child = child

    def __str__(self) -> str:
        return f"FilterNode(filter={self.expression}, child={self.child})"

    def batches(self) -> QueryPlanNode.RecordBatchesGenerator:
        """Filter each batch emitted by the child.

        Rows where the mask is null, like a comparison
        against a missing weight, are discarded too.
        """
        for batch in self.child.batches():
            mask = self.expression.apply(batch)
            yield batch.filter(mask)
