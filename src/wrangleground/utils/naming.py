"""Readable names for the functions used in expressions.

Expressions print the function they call, so that a pipeline
can be compared by eye with its ``plain`` counterpart::

    pyarrow.compute.if_else(pyarrow.compute.equal(ColumnRef(animal),Literal('Dog')),...)
"""

import functools
from typing import Any


def callable_name(obj: Any) -> str:
    """Dotted name of a function, class or callable instance.

    Partials are named after the function they wrap,
    followed by the arguments they bind.

    >>> import pyarrow.compute as pc
    >>> callable_name(pc.add)
    'pyarrow.compute.add'
    >>> callable_name(functools.partial(pc.round, ndigits=2))
    'pyarrow.compute.round(ndigits=2)'
    >>> callable_name(lambda x: x)
    'wrangleground.utils.naming.<lambda>'
    """
    if isinstance(obj, functools.partial):
        bound = [repr(a) for a in obj.args] + [f"{k}={v!r}" for k, v in obj.keywords.items()]
        return f"{callable_name(obj.func)}({', '.join(bound)})"

    qualname = getattr(obj, "__qualname__", None)
    if qualname is None:
        # An instance implementing __call__
        qualname = type(obj).__qualname__
        module = type(obj).__module__
    else:
        module = getattr(obj, "__module__", None)
    return f"{module}.{qualname}" if module else qualname
