"""Helpers shared by the lessons, the benchmark and the commands.

* :mod:`.compare` checks that two approaches produced the same table.
* :mod:`.naming` names the functions called by pipeline expressions.
* :mod:`.tabulate` prints tables on the terminal.
"""

from . import compare, naming, tabulate

__all__ = ("compare", "naming", "tabulate")
