import io

import pytest

from dsakit.countmin import CountMinSketch, main, string_value


@pytest.mark.parametrize(
    "text, number",
    [("abc", 294), ("def", 303), ("ghi", 312)],
)
def test_string_value_matches_worked_example(text, number):
    assert string_value(text) == number


@pytest.mark.parametrize(
    "text, hashes",
    [
        ("abc", (0, 5, 0, 5)),
        ("def", (8, 2, 6, 0)),
        ("ghi", (6, 9, 2, 5)),
        ("xyz", (8, 2, 6, 0)),
    ],
)
def test_hashes_match_worked_example(text, hashes):
    assert CountMinSketch().hashes(text) == hashes


def test_tables_after_worked_example():
    sketch = CountMinSketch()
    for text in ("abc", "def", "ghi"):
        sketch.add(text)
    assert sketch.format_tables() == (
        "Hash Table 1\n1 0 0 0 0 0 1 0 1 0\n\n"
        "Hash Table 2\n0 0 1 0 0 1 0 0 0 1\n\n"
        "Hash Table 3\n1 0 1 0 0 0 1 0 0 0\n\n"
        "Hash Table 4\n1 0 0 0 0 2 0 0 0 0"
    )


def test_counts_match_worked_example():
    sketch = CountMinSketch()
    for text in ("abc", "def", "ghi"):
        sketch.add(text)
    assert [sketch.count(t) for t in ("abc", "def", "ghi", "xyz")] == [1, 1, 1, 1]


def test_fresh_sketch_counts_nothing():
    assert CountMinSketch().count("anything") == 0


@pytest.mark.parametrize("repeats", [1, 3, 7])
def test_count_never_underestimates(repeats):
    sketch = CountMinSketch()
    for _ in range(repeats):
        sketch.add("hello")
    sketch.add("world")
    assert sketch.count("hello") >= repeats


def test_add_increments_each_table_once():
    sketch = CountMinSketch()
    sketch.add("abc")
    assert [sum(table) for table in sketch.tables] == [1, 1, 1, 1]


def test_main_reports_count(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc 1 abc 0 abc 0\n"))
    assert main([]) == 0
    assert "The data has already been received 2 times" in capsys.readouterr().out