"""The lessons of the tutorial.

Each lesson is a module with a few independent snippets,
each snippet is the same task solved with the three approaches
(``plain``, ``pipeline`` and ``pandas``, see :mod:`.base`).

* :mod:`.subsetting` picks rows and columns.
* :mod:`.mutation` adds and modifies columns.
* :mod:`.grouping` computes summaries by group.
* :mod:`.nesting` shows the nested selection trick.

Lessons can be run programmatically, every approach of every
snippet is executed and the results collected::

    >>> from wrangleground.sample import animals_table
    >>> results = run_lesson("subsetting", animals_table())
    >>> all(results_agree(by_approach) for by_approach in results.values())
    True

or from the shell with the ``wrangleground-lesson`` command.
"""

import logging

import pyarrow as pa

from ..errors import LessonNotFound
from ..utils.compare import tables_equal
from . import grouping, mutation, nesting, subsetting
from .base import APPROACHES, Snippet

log = logging.getLogger(__name__)

LESSONS = {
    "subsetting": subsetting,
    "mutation": mutation,
    "grouping": grouping,
    "nesting": nesting,
}

__all__ = (
    "APPROACHES",
    "LESSONS",
    "Snippet",
    "lesson_snippets",
    "results_agree",
    "run_lesson",
)


def lesson_snippets(name: str) -> tuple[Snippet, ...]:
    """The snippets of a lesson, in the order they are taught."""
    try:
        return LESSONS[name].SNIPPETS
    except KeyError:
        raise LessonNotFound(name) from None


def run_lesson(name: str, table: pa.Table) -> dict[str, dict[str, pa.Table]]:
    """Run every snippet of a lesson with every approach.

    :param name: One of the names in :data:`LESSONS`.
    :param table: The table the snippets work on,
                  usually :func:`wrangleground.sample.animals_table`.
    :returns: ``{snippet title: {approach: result}}``
    """
    results = {}
    for snippet in lesson_snippets(name):
        log.info("Lesson %s: %s", name, snippet)
        results[str(snippet)] = snippet.run_all(table)
    return results


def results_agree(results: dict[str, pa.Table]) -> bool:
    """Check that all approaches produced the same table."""
    tables = list(results.values())
    return all(tables_equal(tables[0], other) for other in tables[1:])
