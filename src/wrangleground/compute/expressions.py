"""Expressions executed by pipeline nodes.

Filters will need a ``predicate``, so an expression that
returns ``true`` or ``false`` for each row that has to be
kept, like ``animal == "Dog"``.

Mutations will need an expression that computes the values
of the new column, like ``weight / height``.

Both are expressed as calls to :mod:`pyarrow.compute`
functions whose arguments are columns, literals or
other expressions.
"""

import pyarrow as pa

from .. import utils
from .base import Expression


def apply_expression_if_needed(batch: pa.RecordBatch, o: Expression | pa.Array) -> pa.Array:
    """Invoke Apply on expressions when needed

    If the provided object is an Expression,
    it will be applied to the target batch.

    Otherwise it will treat it as if it's
    already the result of an expression
    or a literal value.
    """
    if isinstance(o, Expression):
        o = o.apply(batch)
    return o


class FunctionCallExpression(Expression):
    """Call a compute function on its arguments.

    Given a compute function, and a set of arguments
    (other expressions, literals or data), execute
    the function on the provided arguments and return
    the resulting data.

    For example the weight to height ratio is::

        FunctionCallExpression(pyarrow.compute.divide, col("weight"), col("height"))

    >>> import pyarrow.compute as pc
    >>> from wrangleground.compute import col
    >>> batch = pa.record_batch({"weight": [30.0, 4.5], "height": [60.0, 25.0]})
    >>> FunctionCallExpression(pc.divide, col("weight"), col("height")).apply(batch).to_pylist()
    [0.5, 0.18]
    """

    def __init__(self, func: callable, *args: Expression) -> None:
        """
        :param func: The function accepting the arguments.
        :param *args: The arguments for the function.
        """
        self.func = func
        self.args = args

    def __str__(self) -> str:
        func_qualname = utils.naming.callable_name(self.func)
        return f"{func_qualname}({','.join(map(str, self.args))})"

    def apply(self, batch: pa.RecordBatch) -> pa.Array:
        """Invoke the function resolving all arguments on the recordbatch."""
        args = tuple(apply_expression_if_needed(batch, arg) for arg in self.args)
        return self.func(*args)
