import pytest

from wrangleground.config import DEFAULT_METHODS, BenchmarkConfig
from wrangleground.errors import ConfigError


def test_defaults():
    config = BenchmarkConfig.resolve(environ={})
    assert config == BenchmarkConfig()
    assert config.rows == 100_000
    assert config.repetitions == 10
    assert config.group == "Dog"
    assert config.increment == 7.0
    assert config.methods == DEFAULT_METHODS


def test_environment_overrides_defaults():
    config = BenchmarkConfig.resolve(
        environ={
            "WRANGLEGROUND_ROWS": "2000",
            "WRANGLEGROUND_INCREMENT": "1.5",
            "WRANGLEGROUND_GROUP": "Cat",
            "WRANGLEGROUND_METHODS": "pandas, plain",
            "UNRELATED": "x",
        }
    )
    assert config.rows == 2000
    assert config.increment == 1.5
    assert config.group == "Cat"
    assert config.methods == ("pandas", "plain")
    assert config.repetitions == 10


def test_cli_overrides_environment():
    config = BenchmarkConfig.resolve(
        cli={"rows": 10, "repetitions": None, "methods": ["pipeline"]},
        environ={"WRANGLEGROUND_ROWS": "2000", "WRANGLEGROUND_REPETITIONS": "3"},
    )
    assert config.rows == 10
    assert config.repetitions == 3
    assert config.methods == ("pipeline",)


def test_uses_os_environ(monkeypatch):
    monkeypatch.setenv("WRANGLEGROUND_SEED", "7")
    assert BenchmarkConfig.resolve().seed == 7


def test_invalid_number():
    with pytest.raises(ConfigError, match="rows"):
        BenchmarkConfig.resolve(environ={"WRANGLEGROUND_ROWS": "many"})


@pytest.mark.parametrize(
    "values", [{"rows": 0}, {"repetitions": 0}, {"methods": ()}]
)
def test_validation(values):
    with pytest.raises(ConfigError):
        BenchmarkConfig(**values)


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        BenchmarkConfig.resolve(environ={"WRANGLEGROUND_METHODS": " , "})
