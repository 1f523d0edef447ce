"""Shell commands exposing WrangleGround functionalities.

Lessons
=======

``wrangleground-lesson`` runs the snippets of a lesson with every approach
and prints their results::

    wrangleground-lesson subsetting

Without arguments all lessons are run. The ``--csv`` option runs them on
a CSV file with the same columns as the sample table instead.

Benchmark
=========

``wrangleground-bench`` times the three approaches on the benchmark task::

    wrangleground-bench --rows 100000 --repetitions 10

Options not provided on the command line are read from the
``WRANGLEGROUND_*`` environment variables, see :mod:`wrangleground.config`.
"""
