"""Benchmark the three approaches on the same task.

The task is the one the tutorial ends with::

    add 7 to the weight of the dogs,
    compute the weight to height ratio of every animal,
    compute the mean ratio of each animal.

Each approach implements it as a :class:`Method`.
Before timing anything the methods are run once and their
results compared, timing methods that compute different
things would be meaningless.

Each method is then run ``repetitions`` times on the same
generated table, measuring the wall-clock time of every run
and the memory of the process after the runs, and the
timings are summarized per method::

    method   | runs | mean   | median | stddev | relative | memory_mb
    -------- | ---- | ------ | ------ | ------ | -------- | ---------
    plain    | 10   | 0.0021 | 0.0020 | 0.0002 | 1.0000   | 112
    pipeline | 10   | 0.0025 | 0.0025 | 0.0001 | 1.1904   | 113
    pandas   | 10   | 0.0094 | 0.0093 | 0.0004 | 4.4761   | 121
"""

import abc
import dataclasses
import logging
import time
from typing import Any

import pandas
import psutil
import pyarrow as pa
import pyarrow.compute as pc

from .compute import (
    AggregateNode,
    CountAggregation,
    FunctionCallExpression,
    MaxAggregation,
    MeanAggregation,
    MedianAggregation,
    PyArrowTableDataSource,
    StddevAggregation,
    col,
    lit,
)
from .config import BenchmarkConfig
from .dataframe import Dataframe
from .errors import BenchmarkMismatch, UnknownMethod
from .sample import generate_benchmark_table
from .utils.compare import DEFAULT_REL_TOL, describe_difference

log = logging.getLogger(__name__)


class Method(abc.ABC):
    """One implementation of the benchmark task.

    Converting the input to the format the method works on
    is done by :meth:`prepare` and is not timed, converting
    the result back to Arrow is done by :meth:`to_arrow`
    and is not timed either. Only :meth:`run` is timed.
    """

    name: str

    def prepare(self, table: pa.Table) -> Any:
        """Convert the generated table to the input of :meth:`run`."""
        return table

    @abc.abstractmethod
    def run(self, data: Any, group: str, increment: float) -> Any:
        """Execute the task on the prepared data."""
        ...

    def to_arrow(self, result: Any) -> pa.Table:
        """Convert the result of :meth:`run` to a table with ``animal`` and ``mean_ratio``."""
        return result

    def __str__(self) -> str:
        return self.name


class PlainMethod(Method):
    """The task written with direct pyarrow.compute calls."""

    name = "plain"

    def run(self, data: pa.Table, group: str, increment: float) -> pa.Table:
        weight = data["weight"]
        weight = pc.if_else(pc.equal(data["animal"], group), pc.add(weight, increment), weight)
        ratios = pa.table({"animal": data["animal"], "ratio": pc.divide(weight, data["height"])})
        grouped = ratios.group_by("animal", use_threads=False).aggregate([("ratio", "mean")])
        return pa.table(
            {"animal": grouped["animal"], "mean_ratio": grouped["ratio_mean"]}
        ).sort_by("animal")


class PipelineMethod(Method):
    """The task written as a Dataframe pipeline."""

    name = "pipeline"

    def run(self, data: pa.Table, group: str, increment: float) -> pa.Table:
        is_group = FunctionCallExpression(pc.equal, col("animal"), lit(group))
        increased = FunctionCallExpression(pc.add, col("weight"), lit(increment))
        return (
            Dataframe(data)
            .mutate(
                weight=FunctionCallExpression(pc.if_else, is_group, increased, col("weight")),
                ratio=FunctionCallExpression(pc.divide, col("weight"), col("height")),
            )
            .group_by("animal")
            .aggregate(mean_ratio=MeanAggregation("ratio"))
            .sort("animal")
            .to_arrow()
        )


class PandasMethod(Method):
    """The task written with pandas.

    Modifying the weight in place through ``.loc`` would change
    the prepared frame and the following repetitions would see
    the weights already increased, so each run works on a copy.
    The copy is part of what is measured.
    """

    name = "pandas"

    def prepare(self, table: pa.Table) -> pandas.DataFrame:
        return table.to_pandas()

    def run(self, data: pandas.DataFrame, group: str, increment: float) -> pandas.Series:
        df = data.copy()
        df.loc[df["animal"] == group, "weight"] += increment
        df["ratio"] = df["weight"] / df["height"]
        return df.groupby("animal")["ratio"].mean()

    def to_arrow(self, result: pandas.Series) -> pa.Table:
        frame = result.rename("mean_ratio").reset_index()
        return pa.Table.from_pandas(frame, preserve_index=False)


METHODS: dict[str, Method] = {
    method.name: method for method in (PlainMethod(), PipelineMethod(), PandasMethod())
}


def get_methods(names: tuple[str, ...] | list[str]) -> list[Method]:
    """Look up the methods by name, keeping the given order."""
    try:
        return [METHODS[name] for name in names]
    except KeyError as e:
        raise UnknownMethod(
            f"Unknown method {e.args[0]!r}, expected one of {', '.join(METHODS)}"
        ) from None


def check_equivalence(
    table: pa.Table,
    methods: list[Method],
    group: str = "Dog",
    increment: float = 7.0,
    rel_tol: float = DEFAULT_REL_TOL,
) -> pa.Table:
    """Run every method once and make sure they all compute the same result.

    :returns: The result of the first method.
    :raises BenchmarkMismatch: If any method disagrees with the first one.
    """
    reference = None
    for method in methods:
        result = method.to_arrow(method.run(method.prepare(table), group, increment))
        if reference is None:
            reference_method, reference = method, result
            continue
        difference = describe_difference(reference, result, rel_tol)
        if difference is not None:
            raise BenchmarkMismatch(method.name, reference_method.name, difference)
        log.debug("%s agrees with %s", method, reference_method)
    return reference


def time_methods(
    table: pa.Table,
    methods: list[Method],
    repetitions: int,
    group: str = "Dog",
    increment: float = 7.0,
) -> pa.Table:
    """Time each method ``repetitions`` times.

    :returns: A table with one row per run and the
              ``method``, ``repetition``, ``seconds``, ``memory_mb`` columns.
    """
    proc = psutil.Process()
    timings: dict[str, list] = {"method": [], "repetition": [], "seconds": [], "memory_mb": []}
    for method in methods:
        data = method.prepare(table)
        for repetition in range(repetitions):
            start = time.perf_counter()
            method.run(data, group, increment)
            elapsed = time.perf_counter() - start
            log.debug("%s run %d: %.6fs", method, repetition, elapsed)

            timings["method"].append(method.name)
            timings["repetition"].append(repetition)
            timings["seconds"].append(elapsed)
            timings["memory_mb"].append(proc.memory_info().rss // (1024 * 1024))
    return pa.table(timings)


def summarize(timings: pa.Table) -> pa.Table:
    """Summarize the timings of each method.

    Methods are reported in the order they were timed with the number of runs,
    the mean, median and sample standard deviation of their run time in seconds,
    how much slower than the fastest method they are on average (``relative``)
    and the maximum memory of the process observed after their runs.

    >>> timings = pa.table({"method": ["a", "a", "a", "b", "b", "b"],
    ...                     "seconds": [1.0, 2.0, 3.0, 2.0, 4.0, 6.0],
    ...                     "memory_mb": [10, 10, 11, 12, 12, 12]})
    >>> summary = summarize(timings)
    >>> summary.column("mean").to_pylist(), summary.column("relative").to_pylist()
    ([2.0, 4.0], [1.0, 2.0])
    """
    node = AggregateNode(
        ["method"],
        {
            "runs": CountAggregation("seconds"),
            "mean": MeanAggregation("seconds"),
            "median": MedianAggregation("seconds"),
            "stddev": StddevAggregation("seconds"),
            "memory_mb": MaxAggregation("memory_mb"),
        },
        PyArrowTableDataSource(timings),
    )
    summary = pa.Table.from_batches(node.batches())
    relative = pc.divide(summary["mean"], pc.min(summary["mean"]))
    return summary.add_column(summary.schema.get_field_index("memory_mb"), "relative", relative)


@dataclasses.dataclass
class BenchmarkResult:
    """Outcome of :func:`run_benchmark`."""

    config: BenchmarkConfig
    #: The task result all methods agreed on.
    result: pa.Table
    #: One row for each timed run.
    timings: pa.Table
    #: One row for each method, see :func:`summarize`.
    summary: pa.Table


def run_benchmark(config: BenchmarkConfig, table: pa.Table | None = None) -> BenchmarkResult:
    """Generate the data, check the methods agree and time them.

    :param config: How to run the benchmark.
    :param table: Use this table instead of generating one,
                  it must have the ``animal``, ``weight`` and ``height`` columns.
    """
    methods = get_methods(config.methods)
    if table is None:
        log.info("Generating %d rows with seed %d", config.rows, config.seed)
        table = generate_benchmark_table(config.rows, config.seed)

    result = check_equivalence(table, methods, config.group, config.increment)
    log.info("All methods agree, timing %d repetitions each", config.repetitions)

    timings = time_methods(table, methods, config.repetitions, config.group, config.increment)
    return BenchmarkResult(config=config, result=result, timings=timings, summary=summarize(timings))
