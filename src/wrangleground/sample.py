"""The data used through the tutorial.

All lessons work on the same tiny table of animals,
small enough to check every result by eye::

    animal | weight | height | family
    ------ | ------ | ------ | -------
    Dog    | 30.00  | 60.00  | Canidae
    Cat    | 4.50   | 25.00  | Felidae
    Dog    | 8.00   | 35.00  | Canidae
    Horse  | 500.00 | 160.00 | Equidae
    Lion   | 190.00 | 120.00 | Felidae

The ``family`` column is not typed by hand, it is derived
from the ``animal`` column through :data:`FAMILIES`.

The benchmark instead needs a table large enough for timings
to be meaningful, :func:`generate_benchmark_table` builds one
with random weights and heights for the same animals.
"""

import numpy as np
import pandas
import pyarrow as pa
import pyarrow.compute as pc
import pyarrow.csv

FAMILIES = {
    "Dog": "Canidae",
    "Cat": "Felidae",
    "Horse": "Equidae",
    "Lion": "Felidae",
}

ANIMALS = [
    ("Dog", 30.0, 60.0),
    ("Cat", 4.5, 25.0),
    ("Dog", 8.0, 35.0),
    ("Horse", 500.0, 160.0),
    ("Lion", 190.0, 120.0),
]

SCHEMA = pa.schema(
    [
        ("animal", pa.string()),
        ("weight", pa.float64()),
        ("height", pa.float64()),
        ("family", pa.string()),
    ]
)

WEIGHT_RANGE = (1.0, 500.0)
HEIGHT_RANGE = (10.0, 200.0)


def derive_family(animals: pa.Array | pa.ChunkedArray) -> pa.Array:
    """Map each animal to its family, unknown animals get a null family.

    >>> derive_family(pa.array(["Lion", "Dog", "Shark"])).to_pylist()
    ['Felidae', 'Canidae', None]
    """
    names = pa.array(list(FAMILIES.keys()))
    families = pa.array(list(FAMILIES.values()))
    return pc.take(families, pc.index_in(animals, value_set=names))


def animals_table() -> pa.Table:
    """A fresh copy of the sample table as a :class:`pyarrow.Table`.

    >>> animals_table().column("animal").to_pylist()
    ['Dog', 'Cat', 'Dog', 'Horse', 'Lion']
    """
    animal, weight, height = (list(c) for c in zip(*ANIMALS))
    animal = pa.array(animal, pa.string())
    return pa.Table.from_arrays(
        [animal, pa.array(weight, pa.float64()), pa.array(height, pa.float64()), derive_family(animal)],
        schema=SCHEMA,
    )


def animals_pandas() -> pandas.DataFrame:
    """A fresh copy of the sample table as a :class:`pandas.DataFrame`."""
    return animals_table().to_pandas()


def write_animals_csv(path: str, table: pa.Table | None = None) -> None:
    """Save the sample table, or any table with its columns, to a CSV file.

    The resulting file can be loaded back with
    :meth:`wrangleground.dataframe.Dataframe.open_csv`
    or given to the ``wrangleground-lesson --csv`` command.
    """
    pa.csv.write_csv(table if table is not None else animals_table(), path)


def generate_benchmark_table(n_rows: int, seed: int = 42) -> pa.Table:
    """Generate a random table for the benchmark.

    The table has the ``animal``, ``weight`` and ``height`` columns,
    animals are picked uniformly among the ones of the sample table.
    Heights are always strictly positive, so that the weight to height
    ratio is always defined.

    The same seed always generates the same table.

    >>> table = generate_benchmark_table(1000, seed=1)
    >>> table.column_names, table.num_rows
    (['animal', 'weight', 'height'], 1000)
    >>> generate_benchmark_table(5, seed=1).equals(generate_benchmark_table(5, seed=1))
    True
    """
    if n_rows < 0:
        raise ValueError(f"n_rows must not be negative, got {n_rows}")

    rng = np.random.default_rng(seed)
    return pa.table(
        {
            "animal": pa.array(rng.choice(list(FAMILIES.keys()), size=n_rows), pa.string()),
            "weight": rng.uniform(*WEIGHT_RANGE, size=n_rows),
            "height": rng.uniform(*HEIGHT_RANGE, size=n_rows),
        }
    )
