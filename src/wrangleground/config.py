"""Benchmark configuration.

The benchmark can be tuned from the command line or through
environment variables, any value not provided falls back to
the defaults of :class:`BenchmarkConfig`.

Values are resolved with the following precedence::

    command line > WRANGLEGROUND_* environment variables > defaults

>>> BenchmarkConfig.resolve(cli={"rows": 1000}, environ={"WRANGLEGROUND_ROWS": "5", "WRANGLEGROUND_SEED": "3"})
BenchmarkConfig(rows=1000, repetitions=10, seed=3, group='Dog', increment=7.0, methods=('plain', 'pipeline', 'pandas'))
"""

import dataclasses
import logging
import os
from typing import Any, Mapping

from .errors import ConfigError

log = logging.getLogger(__name__)

ENV_PREFIX = "WRANGLEGROUND_"
DEFAULT_METHODS = ("plain", "pipeline", "pandas")


@dataclasses.dataclass(frozen=True)
class BenchmarkConfig:
    """How the benchmark has to be run.

    :param rows: How many rows the generated table has.
    :param repetitions: How many times each method is timed.
    :param seed: Seed of the random generator, the same seed
                 always produces the same table.
    :param group: The animal whose weight is increased.
    :param increment: How much the weight of ``group`` is increased.
    :param methods: The methods to time, in the order they are reported.
    """

    rows: int = 100_000
    repetitions: int = 10
    seed: int = 42
    group: str = "Dog"
    increment: float = 7.0
    methods: tuple[str, ...] = DEFAULT_METHODS

    def __post_init__(self) -> None:
        if self.rows < 1:
            raise ConfigError(f"rows must be at least 1, got {self.rows}")
        if self.repetitions < 1:
            raise ConfigError(f"repetitions must be at least 1, got {self.repetitions}")
        if not self.methods:
            raise ConfigError("at least one method must be benchmarked")

    @classmethod
    def resolve(
        cls, cli: Mapping[str, Any] | None = None, environ: Mapping[str, str] | None = None
    ) -> "BenchmarkConfig":
        """Build the configuration merging command line, environment and defaults.

        :param cli: Values provided on the command line, ``None`` values are ignored.
        :param environ: The environment, defaults to :data:`os.environ`.
        """
        cli = {k: v for k, v in (cli or {}).items() if v is not None}
        environ = os.environ if environ is None else environ

        values: dict[str, Any] = {}
        for field in dataclasses.fields(cls):
            if field.name in cli:
                values[field.name] = _convert(field.name, cli[field.name])
                origin = "CLI"
            elif ENV_PREFIX + field.name.upper() in environ:
                values[field.name] = _convert(field.name, environ[ENV_PREFIX + field.name.upper()])
                origin = "ENV"
            else:
                continue
            log.debug("%s=%r from %s", field.name, values[field.name], origin)
        return cls(**values)


def _convert(name: str, value: Any) -> Any:
    """Convert a raw configuration value to the type of the field."""
    try:
        if name in ("rows", "repetitions", "seed"):
            return int(value)
        if name == "increment":
            return float(value)
        if name == "methods":
            if isinstance(value, str):
                value = value.split(",")
            return tuple(m.strip() for m in value if m.strip())
    except ValueError:
        raise ConfigError(f"Invalid value for {name}: {value!r}") from None
    return value
