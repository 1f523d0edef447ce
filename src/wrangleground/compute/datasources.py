"""Query Plan nodes that load data

The datasource nodes are the leaves of every pipeline,
they fetch the data from some source, convert it into
record batches and forward it to the next node in the plan.

The lessons usually start from the in-memory sample table,
but the same pipelines can be run against a CSV file
with the same columns.
"""

from abc import abstractmethod

import pyarrow as pa
import pyarrow.csv

from .base import QueryPlanNode


class DataSourceNode(QueryPlanNode):
    """Base class for nodes that load data from a source."""

    @abstractmethod
    def poll_schema(self) -> pa.Schema:
        """Poll the schema of the data source without loading its content."""
        ...


class CSVDataSource(DataSourceNode):
    """Stream the rows of a local CSV file.

    Column types are inferred by Arrow, a column of round numbers
    like ``60,35,160`` becomes ``int64`` even if the sample table
    stores heights as ``float64``. Pass ``column_types`` to force them.

    The file is only opened when the batches are requested,
    so a missing file surfaces as :class:`FileNotFoundError`
    when the pipeline is collected.
    """

    def __init__(
        self,
        filename: str,
        block_size: int | None = None,
        column_types: pa.Schema | dict[str, pa.DataType] | None = None,
    ) -> None:
        """
        :param filename: The path of the local CSV file.
        :param block_size: Bytes read for each batch, smaller blocks
                           produce more batches.
        :param column_types: Types of some or all the columns,
                             the others are inferred.
        """
        self.filename = filename
        self.block_size = block_size
        self.column_types = column_types

    def __str__(self) -> str:
        return f"CSVDataSource({self.filename}, block_size={self.block_size})"

    def _open(self) -> pa.csv.CSVStreamingReader:
        return pa.csv.open_csv(
            self.filename,
            read_options=pa.csv.ReadOptions(block_size=self.block_size),
            convert_options=pa.csv.ConvertOptions(column_types=self.column_types),
        )

    def batches(self) -> QueryPlanNode.RecordBatchesGenerator:
        """Open CSV file and emit the batches."""
        with self._open() as reader:
            yield from reader

    def poll_schema(self) -> pa.Schema:
        """Poll the schema of the CSV file, reading only its first block."""
        with self._open() as reader:
            return reader.schema


class PyArrowTableDataSource(DataSourceNode):
    """Emit the data of an in-memory :class:`pyarrow.Table` or :class:`pyarrow.RecordBatch`.

    Every Dataframe built from a table starts with this node.
    """

    def __init__(self, table: pa.Table | pa.RecordBatch) -> None:
        self.table = table
        self.is_recordbatch = isinstance(table, pa.RecordBatch)

    def __str__(self) -> str:
        return f"PyArrowTableDataSource(columns={self.table.column_names}, rows={self.table.num_rows})"

    def batches(self) -> QueryPlanNode.RecordBatchesGenerator:
        """Emit the chunks of the table, one batch for each.

        An empty table has no chunks, in that case an empty
        batch is emitted so that downstream nodes still see the schema.
        """
        if self.is_recordbatch:
            yield self.table
            return

        batches = self.table.to_batches()
        if not batches:
            yield pa.RecordBatch.from_pylist([], schema=self.table.schema)
        yield from batches

    def poll_schema(self) -> pa.Schema:
        return self.table.schema
