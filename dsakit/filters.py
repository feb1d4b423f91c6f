"""A three-hash Bloom filter and a two-table cuckoo hash table."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator

MAX_DISPLACEMENTS = 5


def bloom_hash1(text: str, size: int) -> int:
    """Running sum of character codes, reduced modulo ``size``."""
    result = 0
    for char in text:
        result = (result + ord(char)) % size
    return result


def bloom_hash2(text: str, size: int) -> int:
    """Position-weighted sum of character codes, starting at 1."""
    result = 1
    for position, char in enumerate(text):
        result = (result + position * ord(char)) % size
    return result


def bloom_hash3(text: str, size: int) -> int:
    """Polynomial hash with multiplier 31, starting at 2."""
    result = 2
    for char in text:
        result = (result * 31 + ord(char)) % size
    return result


_BLOOM_HASHES = (bloom_hash1, bloom_hash2, bloom_hash3)


class BloomFilter:
    """Probabilistic set membership over a bit array."""

    def __init__(self, size: int = 10) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        self.bits = [0] * size

    def _positions(self, name: str) -> list[int]:
        return [hash_function(name, self.size) for hash_function in _BLOOM_HASHES]

    def might_contain(self, name: str) -> bool:
        """Whether ``name`` may have been added; False is certain."""
        return all(self.bits[position] for position in self._positions(name))

    def add(self, name: str) -> bool:
        """Add ``name``; return False when it was probably present already."""
        positions = self._positions(name)
        if all(self.bits[position] for position in positions):
            return False
        for position in positions:
            self.bits[position] = 1
        return True


class CuckooCycleError(RuntimeError):
    """Raised when an insertion displaces values too many times."""


class CuckooTable:
    """Cuckoo hashing of non-negative integers over two tables."""

    def __init__(self, size: int = 10) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        self.first: list[int | None] = [None] * size
        self.second: list[int | None] = [None] * size

    def insert(self, number: int) -> None:
        """Place ``number``, displacing occupants as needed.

        Raises CuckooCycleError after too many displacements; values moved
        before that point stay where they were put.
        """
        if number < 0:
            raise ValueError("only non-negative numbers can be stored")
        for _ in range(MAX_DISPLACEMENTS + 1):
            slot = number % self.size
            evicted = self.first[slot]
            self.first[slot] = number
            if evicted is None:
                return
            other = (evicted // self.size) % self.size
            if self.second[other] is None:
                self.second[other] = evicted
                return
            number = evicted
        raise CuckooCycleError("insertion failed: cuckoo cycle detected")

    def format_tables(self) -> str:
        """Both tables as text, empty slots shown as -1."""
        def row(table: list[int | None]) -> str:
            return "".join(f"{-1 if cell is None else cell} | " for cell in table)

        return f"Hashtable 1: {row(self.first)}\nHashtable 2: {row(self.second)}"


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_token(tokens: Iterator[str]) -> str:
    token = next(tokens, None)
    if token is None:
        raise EOFError
    return token


def _next_int(tokens: Iterator[str]) -> int | None:
    try:
        return int(_next_token(tokens))
    except ValueError:
        return None


def _run_bloom(tokens: Iterator[str]) -> None:
    bloom = BloomFilter()
    while True:
        print("\nEnter the name you want to insert: ", end="")
        name = _next_token(tokens)
        if bloom.add(name):
            print(f"{name} is inserted !!", end="")
        else:
            print("\nThe Name is Probably Present !!", end="")
        print("\nBloom Filter Bit Array: " + " ".join(map(str, bloom.bits)))
        print("\nDo you want to insert another name (1/0): ", end="")
        if _next_int(tokens) in (0, None):
            return


def _run_cuckoo(tokens: Iterator[str]) -> None:
    table = CuckooTable()
    while True:
        print("\nEnter a number to be inserted: ", end="")
        number = _next_int(tokens)
        if number is None:
            print("Invalid Input!!!", end="")
        else:
            try:
                table.insert(number)
            except CuckooCycleError:
                print("\nInsertion failed. Cuckoo cycle detected!")
            except ValueError as error:
                print(f"\n{error}")
            print("\n" + table.format_tables())
        print("\nDo you want to insert more numbers (1/0): ", end="")
        if _next_int(tokens) in (0, None):
            return


def main(argv=None) -> int:
    """Run the interactive Bloom and cuckoo filter menu on standard input."""
    argparse.ArgumentParser(description="Bloom and cuckoo filters.").parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        while True:
            print(
                "\nWhich Filter Do You Want To Choose\n(1) Bloom Filter"
                "\n(2) Cuckoo Filter\n(0) Exit\nEnter Your Choice-- > ",
                end="",
            )
            choice = _next_int(tokens)
            if choice == 1:
                _run_bloom(tokens)
            elif choice == 2:
                _run_cuckoo(tokens)
            elif choice == 0:
                print("Exiting Program...", end="")
                break
            else:
                print("Invalid Input!!!", end="")
    except EOFError:
        pass
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())