import io

import pytest

from dsakit.filters import (
    BloomFilter,
    CuckooCycleError,
    CuckooTable,
    bloom_hash1,
    bloom_hash2,
    bloom_hash3,
    main,
)

NAMES = ["alice", "bob", "carol", "dave", "x", "a much longer name"]


def test_hashes_of_empty_string_are_start_values():
    assert (bloom_hash1("", 10), bloom_hash2("", 10), bloom_hash3("", 10)) == (0, 1, 2)


@pytest.mark.parametrize("hash_function", [bloom_hash1, bloom_hash2, bloom_hash3])
@pytest.mark.parametrize("size", [3, 10, 97])
def test_hashes_stay_in_range(hash_function, size):
    assert all(0 <= hash_function(name, size) < size for name in NAMES)


def test_added_names_are_reported_present():
    bloom = BloomFilter()
    for name in NAMES:
        bloom.add(name)
    assert all(bloom.might_contain(name) for name in NAMES)


def test_second_add_reports_probably_present():
    bloom = BloomFilter()
    assert bloom.add("alice") is True
    assert bloom.add("alice") is False


def test_add_sets_at_most_three_bits():
    bloom = BloomFilter(size=50)
    bloom.add("alice")
    assert 1 <= sum(bloom.bits) <= 3


def test_empty_filter_contains_nothing():
    bloom = BloomFilter()
    assert not any(bloom.might_contain(name) for name in NAMES)


@pytest.mark.parametrize("kind", [BloomFilter, CuckooTable])
def test_size_must_be_positive(kind):
    with pytest.raises(ValueError):
        kind(size=0)


def test_cuckoo_keeps_every_value_without_collisions():
    table = CuckooTable()
    numbers = [5, 15, 25, 7, 33]
    for number in numbers:
        table.insert(number)
    stored = [value for value in table.first + table.second if value is not None]
    assert sorted(stored) == sorted(numbers)


def test_cuckoo_displaces_to_second_table():
    table = CuckooTable()
    table.insert(5)
    table.insert(15)
    assert table.first[5] == 15
    assert table.second[0] == 5


def test_cuckoo_cycle_raises():
    table = CuckooTable()
    table.insert(5)
    table.insert(105)
    with pytest.raises(CuckooCycleError):
        table.insert(205)


def test_cuckoo_rejects_negative():
    with pytest.raises(ValueError):
        CuckooTable().insert(-1)


def test_cuckoo_format_shows_empty_as_minus_one():
    table = CuckooTable(size=3)
    table.insert(4)
    assert table.format_tables() == (
        "Hashtable 1: -1 | 4 | -1 | \nHashtable 2: -1 | -1 | -1 | "
    )


def test_main_bloom_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 alice 1 alice 0 0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "alice is inserted !!" in out
    assert "The Name is Probably Present !!" in out
    assert "Exiting Program..." in out