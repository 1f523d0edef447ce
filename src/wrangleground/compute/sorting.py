"""Query plan nodes that perform sorting of data.

Sorting is used by the tutorial to present results in a
stable order and, combined with grouping, to pick the top
row of each group (the heaviest animal of each family).
"""

import pyarrow as pa

from .base import QueryPlanNode


class SortNode(QueryPlanNode):
    """Sort data in-memory based on one or more columns.

    The node expects a list of columns and a list of
    sort directions. The data will be sorted based on
    the columns in the order they are provided.

    The sort is stable, rows that compare equal
    keep the order they had in the input.

    >>> import pyarrow as pa
    >>> from wrangleground.compute import PyArrowTableDataSource
    >>> data = pa.record_batch({"weight": [30.0, 4.5, 8.0]})
    >>> sort = SortNode(["weight"], [True], PyArrowTableDataSource(data))
    >>> next(sort.batches()).column(0).to_pylist()
    [30.0, 8.0, 4.5]
    """

    def __init__(
        self, keys: list[str], descending: list[bool], child: QueryPlanNode
    ) -> None:
        """
        :param keys: The columns to sort by in the order they should be sorted.
        :param descending: If each columns should be sorted in a descending order.
        :param child: The node emitting the data to be sorted.
        """
        if len(keys) != len(descending):
            raise ValueError("Keys and descending must have the same length")

        self.sorting = list(
            zip(keys, ("descending" if desc else "ascending" for desc in descending))
        )
        self.child = child

    def __str__(self) -> str:
        return f"SortNode(sorting={self.sorting}, {self.child})"

    def batches(self) -> QueryPlanNode.RecordBatchesGenerator:
        """Sort the data of the child node.

        Batches provided by child node are accumulated
        until they are all loaded in memory, than they
        are merged and sorted as an unique table.
        """
        batches = list(self.child.batches())
        if len(batches) == 1:
            yield batches[0].sort_by(self.sorting)
            return

        # converting to and from tables is a zero-copy operation
        # and tables can be concatenated at no cost
        # when promote_options is set to none as they are based on ChunkedArrays.
        table = pa.concat_tables(
            [pa.table(batch) for batch in batches], promote_options="none"
        )
        table = table.sort_by(self.sorting)
        yield from table.combine_chunks().to_batches()
