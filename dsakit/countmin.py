"""Count-min sketch with four fixed linear hashes over ten-slot tables."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator

from dsakit.bst import _next_int, _next_token, _tokens

TABLE_SIZE = 10
_HASH_FACTORS = (2, 3, 4, 5)


def string_value(text: str) -> int:
    """Sum of the character codes of ``text``."""
    return sum(map(ord, text))


class CountMinSketch:
    """Approximate frequency counter; counts may be over, never under."""

    def __init__(self) -> None:
        self.tables: list[list[int]] = [[0] * TABLE_SIZE for _ in _HASH_FACTORS]

    def hashes(self, text: str) -> tuple[int, ...]:
        """Slot of ``text`` in each of the four tables."""
        value = string_value(text)
        return tuple((value * factor + factor) % TABLE_SIZE for factor in _HASH_FACTORS)

    def add(self, text: str) -> None:
        """Record one occurrence of ``text``."""
        for table, index in zip(self.tables, self.hashes(text)):
            table[index] += 1

    def count(self, text: str) -> int:
        """Estimated number of times ``text`` was added."""
        return min(table[index] for table, index in zip(self.tables, self.hashes(text)))

    def format_tables(self) -> str:
        """The four tables as text, one titled block each."""
        return "\n\n".join(
            f"Hash Table {number}\n" + " ".join(str(cell) for cell in table)
            for number, table in enumerate(self.tables, start=1)
        )


def _wants_more(tokens: Iterator[str]) -> bool:
    return _next_int(tokens) not in (None, 0)


def _read_described(tokens: Iterator[str], prompt: str) -> str:
    print(prompt, end="")
    text = _next_token(tokens)
    for char in text:
        print(f"\n{char} {ord(char)}", end="")
    return text


def _format_hashes(hashes: tuple[int, ...]) -> str:
    return "The hash values are: " + " ".join(
        f"h{number} => {value}" for number, value in enumerate(hashes, start=1)
    )


def main(argv=None) -> int:
    """Read strings to add, then strings to look up, from standard input."""
    argparse.ArgumentParser(description="Count-min sketch.").parse_args(argv)
    sketch = CountMinSketch()
    tokens = _tokens(sys.stdin)
    try:
        while True:
            text = _read_described(tokens, "\nEnter the data: ")
            print(f"\nThe number is : {string_value(text)}")
            print(sketch.format_tables())
            print(_format_hashes(sketch.hashes(text)))
            sketch.add(text)
            print(sketch.format_tables())
            print("\nDo you want to enter other data (0/1): ", end="")
            if not _wants_more(tokens):
                break
        while True:
            text = _read_described(tokens, "\nEnter the data for search: ")
            print(f"\nThe data is: {text}")
            print(_format_hashes(sketch.hashes(text)))
            print(sketch.format_tables())
            print(f"\nThe data has already been received {sketch.count(text)} times", end="")
            print("\nDo you want to search other data (0/1): ", end="")
            if not _wants_more(tokens):
                break
    except EOFError:
        pass
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())