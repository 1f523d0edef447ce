import pyarrow as pa
import pytest

from wrangleground.commands import bench, lesson
from wrangleground.sample import animals_table, write_animals_csv


def test_lesson_command(capsys):
    assert lesson.main(["grouping"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("= grouping")
    assert "== Summary by family" in out
    assert "[pipeline]" in out
    assert "Canidae | 2" in out
    assert "approaches agree: NO" not in out
    assert out.count("approaches agree: yes") == 2


def test_lesson_command_all(capsys):
    assert lesson.main([]) == 0
    out = capsys.readouterr().out
    for name in ("subsetting", "mutation", "grouping", "nesting"):
        assert f"= {name}\n" in out


def test_lesson_command_unknown_lesson(capsys):
    assert lesson.main(["joins"]) == 1
    assert "No such lesson: joins" in capsys.readouterr().out


def test_lesson_command_csv(tmp_path, capsys):
    path = tmp_path / "animals.csv"
    table = animals_table().filter(pa.array([True, False, True, True, True]))
    write_animals_csv(str(path), table)

    assert lesson.main(["subsetting", "--csv", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Cat" not in out


def test_lesson_command_missing_csv(tmp_path, capsys):
    assert lesson.main(["--csv", str(tmp_path / "missing.csv")]) == 1
    assert "Unable to read" in capsys.readouterr().out


def test_bench_command(capsys):
    assert bench.main(["--rows", "200", "--repetitions", "2", "-m", "plain", "-m", "pandas"]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0] == "200 rows, 2 repetitions, +7 to Dog, seconds per run:"
    assert lines[1].startswith("method | runs | mean")
    assert lines[3].startswith("plain ")
    assert lines[4].startswith("pandas")


def test_bench_command_invalid_config(capsys):
    assert bench.main(["--rows", "0"]) == 1
    assert "Benchmark failed, rows must be at least 1" in capsys.readouterr().out


def test_bench_command_unknown_method():
    with pytest.raises(SystemExit):
        bench.main(["-m", "polars"])


def test_lesson_command_csv_with_missing_values(tmp_path, capsys):
    path = tmp_path / "animals.csv"
    path.write_text(
        "animal,weight,height,family\n"
        "Dog,30,60,Canidae\n"
        "Cat,4.5,25,Felidae\n"
        "Shark,,10,\n"
    )
    assert lesson.main(["--csv", str(path)]) == 0
    out = capsys.readouterr().out
    assert "approaches agree: NO" not in out
    assert "= nesting" in out


def test_lesson_command_reports_lesson_errors(capsys, monkeypatch):
    def broken(name, table):
        raise pa.ArrowInvalid("cannot compare")

    monkeypatch.setattr(lesson, "run_lesson", broken)
    assert lesson.main(["grouping"]) == 1
    assert "Lesson failed, cannot compare" in capsys.readouterr().out


def test_lesson_command_log_file(tmp_path):
    log_file = tmp_path / "lesson.log"
    assert lesson.main(["subsetting", "-v", "--log-file", str(log_file)]) == 0
    assert "Lesson subsetting: Rows where animal is Dog" in log_file.read_text()
