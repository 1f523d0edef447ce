"""Base class for the snippets of the lessons.

Every snippet is a small data wrangling task solved three times,
once for each approach taught by the tutorial:

* ``plain`` calls :mod:`pyarrow.compute` functions directly on a table,
  building masks and new columns by hand.
* ``pipeline`` chains verbs on a :class:`wrangleground.dataframe.Dataframe`.
* ``pandas`` uses the idioms of :mod:`pandas`.

All three receive the same :class:`pyarrow.Table` and return
a :class:`pyarrow.Table`, so their results can be compared.
"""

import abc
import logging

import pandas
import pyarrow as pa

log = logging.getLogger(__name__)

APPROACHES = ("plain", "pipeline", "pandas")


class Snippet(abc.ABC):
    """A data wrangling task solved with every approach.

    A snippet that keeps the animals of the ``Canidae`` family
    would look like::

        class Canids(Snippet):
            title = "Only canids"

            def with_plain(self, table):
                return table.filter(pc.equal(table["family"], "Canidae"))

            def with_pipeline(self, table):
                return Dataframe(table).filter(
                    FunctionCallExpression(pc.equal, col("family"), lit("Canidae"))
                ).to_arrow()

            def with_pandas(self, table):
                df = table.to_pandas()
                return from_pandas(df.loc[df["family"] == "Canidae"])
    """

    title: str = ""

    def __str__(self) -> str:
        return self.title or self.__class__.__name__

    @abc.abstractmethod
    def with_plain(self, table: pa.Table) -> pa.Table:
        """Solve the task with plain pyarrow.compute calls."""
        ...

    @abc.abstractmethod
    def with_pipeline(self, table: pa.Table) -> pa.Table:
        """Solve the task with a Dataframe pipeline."""
        ...

    @abc.abstractmethod
    def with_pandas(self, table: pa.Table) -> pa.Table:
        """Solve the task with pandas."""
        ...

    def run(self, table: pa.Table, approach: str = "plain") -> pa.Table:
        """Solve the task with the given approach."""
        if approach not in APPROACHES:
            raise ValueError(f"Unknown approach {approach!r}, expected one of {APPROACHES}")
        log.debug("Running %s with %s approach", self, approach)
        return getattr(self, f"with_{approach}")(table)

    def run_all(self, table: pa.Table) -> dict[str, pa.Table]:
        """Solve the task with every approach, results are keyed by approach."""
        return {approach: self.run(table, approach) for approach in APPROACHES}


def from_pandas(df: pandas.DataFrame) -> pa.Table:
    """Convert a pandas result back to Arrow, discarding the index."""
    return pa.Table.from_pandas(df, preserve_index=False)
