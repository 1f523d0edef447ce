"""Query plan nodes that implement projection of columns.

Subsetting a table by columns and mutating columns
are both projections: the first keeps only some columns,
the second computes columns out of expressions.

This module implements both in a single node,
so that ``select`` and ``mutate`` verbs share the same execution.
"""

import pyarrow as pa

from .base import QueryPlanNode
from .expressions import Expression


class ProjectNode(QueryPlanNode):
    """Project data by selecting specific columns and computing expressions.

    The projection expects a list of column names to select and a dictionary
    of column names and expressions to project new columns.

    When a projected name matches an existing column, the column is
    replaced in place and keeps its position. Otherwise the new
    column is appended at the end.

    >>> import pyarrow as pa
    >>> import pyarrow.compute as pc
    >>> from wrangleground.compute import col, lit, FunctionCallExpression, PyArrowTableDataSource
    >>> data = pa.record_batch({"weight": [30.0, 4.5], "height": [60.0, 25.0]})
    >>> node = ProjectNode(None, {"weight": FunctionCallExpression(pc.add, col("weight"), lit(7)),
    ...                          "ratio": FunctionCallExpression(pc.divide, col("weight"), col("height"))},
    ...                    PyArrowTableDataSource(data))
    >>> next(node.batches()).to_pydict()
    {'weight': [37.0, 11.5], 'height': [60.0, 25.0], 'ratio': [0.6166666666666667, 0.46]}
    """

    def __init__(
        self,
        select: list[str] | None,
        project: dict[str, Expression] | None,
        child: QueryPlanNode,
    ) -> None:
        """
        :param select: The list of column names to select.
                       ``None`` means select all columns.
                       ``[]`` means select only the projected columns.
        :param project: The dict {name: Expression} to project new columns.
                        Expressions are applied in order, so later ones
                        can reference columns projected by earlier ones.
        :param child: The node emitting the data to be projected.
        """
        self.select = select
        self.project = project or {}
        self.child = child

        if self.select is None:
            self.restrict_columns = None
        else:
            # in case select=[] it will only provide the project columns.
            self.restrict_columns = self.select + [
                name for name in self.project if name not in self.select
            ]

    def __str__(self) -> str:
        return f"ProjectNode(select={self.select}, project={self.project}, child={self.child})"

    def batches(self) -> QueryPlanNode.RecordBatchesGenerator:
        """Apply the projection to the child node.

        For each recordbatch yielded by the child node,
        sequentially apply the expressions to project new columns
        and then select the requested columns.
        """
        for batch in self.child.batches():
            for name, expr in self.project.items():
                batch = self._set_column(batch, name, expr.apply(batch))

            if self.restrict_columns is not None:
                batch = batch.select(self.restrict_columns)

            yield batch

    @staticmethod
    def _set_column(batch: pa.RecordBatch, name: str, values: pa.Array | pa.Scalar) -> pa.RecordBatch:
        if isinstance(values, pa.Scalar):
            values = pa.repeat(values, batch.num_rows)
        index = batch.schema.get_field_index(name)
        if index == -1:
            return batch.append_column(name, values)
        return batch.set_column(index, name, values)
