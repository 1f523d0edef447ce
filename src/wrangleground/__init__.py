"""WrangleGround

A tutorial on wrangling tabular data, written as a Python package.

The tutorial solves the same data wrangling tasks in three ways
and compares them, both in how the code reads and in how fast it runs:

* ``plain``: calling :mod:`pyarrow.compute` functions directly on a table.
* ``pipeline``: chaining verbs on the lazy :class:`wrangleground.dataframe.Dataframe`,
  executed by the :mod:`wrangleground.compute` engine.
* ``pandas``: the idioms of :mod:`pandas`.

Every component is documented in literate programming style,
the primary ones are:

* The sample data, in :mod:`wrangleground.sample`.
* The lessons, in :mod:`wrangleground.lessons`, each one a set of small
  independent snippets: subsetting, mutation, grouping and nested selection.
* The benchmark, in :mod:`wrangleground.benchmark`, which times the three
  approaches on the same task over a large generated table.

Lessons and benchmark can be run from the shell
through the commands in :mod:`wrangleground.commands`.
"""

from . import compute, dataframe, lessons, sample

__all__ = ("compute", "dataframe", "lessons", "sample")
