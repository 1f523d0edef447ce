"""Exceptions raised by WrangleGround.

All of them inherit from :class:`WrangleGroundError`, so that
commands can report any failure with a single ``except`` clause.
Where an error is also a bad value or a missing key,
it inherits from the matching builtin exception too.
"""


class WrangleGroundError(Exception):
    """Base class for all WrangleGround errors."""


class ConfigError(WrangleGroundError, ValueError):
    """A configuration value is missing or invalid."""


class UnknownMethod(WrangleGroundError, ValueError):
    """A benchmark method that is not registered was requested."""


class BenchmarkMismatch(WrangleGroundError):
    """The benchmark methods disagree on the result of the task.

    Timing methods that compute different things is meaningless,
    so the benchmark refuses to run when this happens.
    """

    def __init__(self, method: str, reference: str, detail: str) -> None:
        self.method = method
        self.reference = reference
        super().__init__(f"{method} disagrees with {reference}: {detail}")


class LessonNotFound(WrangleGroundError, KeyError):
    """A lesson that does not exist was requested."""

    def __str__(self) -> str:
        return f"No such lesson: {self.args[0]}"
