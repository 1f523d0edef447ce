import pyarrow as pa
import pytest

from wrangleground.lessons import APPROACHES, results_agree
from wrangleground.lessons.grouping import FamilySummary, family_summary, weight_range
from wrangleground.sample import animals_table, derive_family, generate_benchmark_table


@pytest.fixture
def animals():
    return animals_table()


@pytest.mark.parametrize("approach", APPROACHES)
def test_family_summary(animals, approach):
    result = family_summary(animals, approach)
    assert result.column_names == ["family", "animals", "mean_weight", "mean_height"]
    assert result.column("family").to_pylist() == ["Canidae", "Felidae", "Equidae"]
    assert result.column("animals").to_pylist() == [2, 2, 1]
    assert result.column("mean_weight").to_pylist() == pytest.approx([19.0, 97.25, 500.0])
    assert result.column("mean_height").to_pylist() == pytest.approx([47.5, 72.5, 160.0])


@pytest.mark.parametrize("approach", APPROACHES)
def test_weight_range(animals, approach):
    result = weight_range(animals, approach)
    assert result.to_pydict() == {
        "family": ["Canidae", "Felidae", "Equidae"],
        "lightest": [8.0, 4.5, 500.0],
        "heaviest": [30.0, 190.0, 500.0],
    }


def test_family_summary_agrees_on_larger_data():
    table = generate_benchmark_table(2_000, seed=11)
    table = table.append_column("family", derive_family(table["animal"]))
    assert results_agree(FamilySummary().run_all(table))


def test_family_summary_single_family():
    table = pa.table(
        {"animal": ["Cat"], "weight": [4.5], "height": [25.0], "family": ["Felidae"]}
    )
    for approach in APPROACHES:
        assert family_summary(table, approach).to_pylist() == [
            {"family": "Felidae", "animals": 1, "mean_weight": 4.5, "mean_height": 25.0}
        ]


def _with_shark():
    animals = pa.array(["Dog", "Cat", "Dog", "Horse", "Shark"])
    return pa.table(
        {
            "animal": animals,
            "weight": [30.0, 4.5, 8.0, 500.0, 300.0],
            "height": [60.0, 25.0, 35.0, 160.0, 250.0],
            "family": derive_family(animals),
        }
    )


@pytest.mark.parametrize("approach", APPROACHES)
def test_family_summary_keeps_unknown_family(approach):
    result = family_summary(_with_shark(), approach)
    assert result.column("family").to_pylist() == ["Canidae", "Felidae", "Equidae", None]
    assert result.column("animals").to_pylist() == [2, 1, 1, 1]
    assert result.column("mean_weight").to_pylist() == pytest.approx([19.0, 4.5, 500.0, 300.0])


@pytest.mark.parametrize("approach", APPROACHES)
def test_weight_range_keeps_unknown_family(approach):
    result = weight_range(_with_shark(), approach)
    assert result.column("family").to_pylist() == ["Canidae", "Felidae", "Equidae", None]
    assert result.column("heaviest").to_pylist() == [30.0, 4.5, 500.0, 300.0]
