import os
import tempfile

import pyarrow as pa
import pyarrow.csv as csv
import pytest

from wrangleground.compute.datasources import (
    CSVDataSource,
    PyArrowTableDataSource,
)

# Mock data for testing
MOCK_PYARROW_TABLE = pa.table(
    {"animal": ["Dog", "Cat", "Horse"], "weight": [30.0, 4.5, 500.0], "legs": [4, 4, 4]}
)

MOCK_CSV_FILE = tempfile.NamedTemporaryFile(delete=False, mode="w+", suffix=".csv")


def setup_module():
    csv.write_csv(MOCK_PYARROW_TABLE, MOCK_CSV_FILE.name)
    MOCK_CSV_FILE.close()


def teardown_module():
    os.unlink(MOCK_CSV_FILE.name)


@pytest.mark.parametrize(
    "data_source_class, init_args, expected_str",
    [
        (
            CSVDataSource,
            (MOCK_CSV_FILE.name, None),
            f"CSVDataSource({MOCK_CSV_FILE.name}, block_size=None)",
        ),
        (
            PyArrowTableDataSource,
            (MOCK_PYARROW_TABLE,),
            "PyArrowTableDataSource(columns=['animal', 'weight', 'legs'], rows=3)",
        ),
        (
            PyArrowTableDataSource,
            (MOCK_PYARROW_TABLE.to_batches()[0],),
            "PyArrowTableDataSource(columns=['animal', 'weight', 'legs'], rows=3)",
        ),
    ],
)
def test_init_and_str(data_source_class, init_args, expected_str):
    data_source = data_source_class(*init_args)
    assert str(data_source) == expected_str


@pytest.mark.parametrize(
    "data_source_class, init_args, expected_batches",
    [
        (CSVDataSource, (MOCK_CSV_FILE.name, None), MOCK_PYARROW_TABLE.to_batches()),
        (
            PyArrowTableDataSource,
            (MOCK_PYARROW_TABLE,),
            MOCK_PYARROW_TABLE.to_batches(),
        ),
        (
            PyArrowTableDataSource,
            (MOCK_PYARROW_TABLE.to_batches()[0],),
            MOCK_PYARROW_TABLE.to_batches(),
        ),
    ],
)
def test_batches(data_source_class, init_args, expected_batches):
    data_source = data_source_class(*init_args)
    batches = list(data_source.batches())
    assert len(batches) == len(expected_batches)
    for batch, expected_batch in zip(batches, expected_batches):
        assert batch.equals(expected_batch)


@pytest.mark.parametrize(
    "data_source",
    [
        CSVDataSource(MOCK_CSV_FILE.name),
        PyArrowTableDataSource(MOCK_PYARROW_TABLE),
    ],
)
def test_poll_schema(data_source):
    assert data_source.poll_schema() == MOCK_PYARROW_TABLE.schema


def test_empty_table_emits_empty_batch():
    empty = pa.Table.from_batches([], schema=MOCK_PYARROW_TABLE.schema)
    batches = list(PyArrowTableDataSource(empty).batches())
    assert len(batches) == 1
    assert batches[0].num_rows == 0
    assert batches[0].schema == MOCK_PYARROW_TABLE.schema


def test_csv_column_types(tmp_path):
    path = str(tmp_path / "heights.csv")
    csv.write_csv(pa.table({"animal": ["Dog", "Horse"], "height": [60.0, 160.0]}), path)

    assert CSVDataSource(path).poll_schema().field("height").type == pa.int64()

    source = CSVDataSource(path, column_types={"height": pa.float64()})
    assert source.poll_schema().field("height").type == pa.float64()
    assert next(source.batches()).column("height").to_pylist() == [60.0, 160.0]


def test_csv_missing_file(tmp_path):
    source = CSVDataSource(str(tmp_path / "missing.csv"))
    with pytest.raises(FileNotFoundError):
        list(source.batches())
