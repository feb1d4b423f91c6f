"""Heap sort in ascending order (max heap) and descending order (min heap)."""

from __future__ import annotations

import argparse
import operator
import sys
from collections.abc import Callable, Iterable, MutableSequence

from dsakit.bst import _format, _next_token, _tokens


def _sift_down(
    values: MutableSequence[int],
    size: int,
    index: int,
    before: Callable[[int, int], bool],
) -> None:
    while True:
        best = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and before(values[child], values[best]):
                best = child
        if best == index:
            return
        values[index], values[best] = values[best], values[index]
        index = best


def max_heapify(values: MutableSequence[int], size: int, index: int) -> None:
    """Restore the max-heap property below ``index`` in ``values[:size]``."""
    _sift_down(values, size, index, operator.gt)


def min_heapify(values: MutableSequence[int], size: int, index: int) -> None:
    """Restore the min-heap property below ``index`` in ``values[:size]``."""
    _sift_down(values, size, index, operator.lt)


def _heap_sort(values: Iterable[int], heapify) -> list[int]:
    result = list(values)
    size = len(result)
    for index in range(size // 2 - 1, -1, -1):
        heapify(result, size, index)
    for end in range(size - 1, -1, -1):
        result[0], result[end] = result[end], result[0]
        heapify(result, end, 0)
    return result


def max_heap_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted ascending, using a max heap."""
    return _heap_sort(values, max_heapify)


def min_heap_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted descending, using a min heap."""
    return _heap_sort(values, min_heapify)


def main(argv=None) -> int:
    """Read arrays from standard input and print them heap sorted both ways."""
    argparse.ArgumentParser(description="Heap sort program.").parse_args(argv)
    tokens = _tokens(sys.stdin)

    def read_int() -> int:
        return int(_next_token(tokens))

    rule = "\n -----------------------------------"
    print("\n Heap Sort Program", end="")
    try:
        while True:
            print(rule)
            print("\n Enter The Number of Elements: ", end="")
            count = read_int()
            print("\n Enter The Array Elements: ")
            values = [read_int() for _ in range(count)]
            print(rule)
            print("\n Array Before Sorting: ")
            print(_format(values))
            for title, sort in (("Max", max_heap_sort), ("Min", min_heap_sort)):
                print(f"\n Array After Sorting ({title} Heapify): ")
                values = sort(values)
                print(_format(values))
            print("\n Do you want to continue? (1/0): ", end="")
            if read_int() != 1:
                break
    except (EOFError, ValueError):
        pass
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())