"""Minimum spanning tree weight by Prim's algorithm on an adjacency matrix."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterator


class Graph:
    """Undirected weighted graph; a zero weight means no edge."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertex_count = vertex_count
        self.matrix: list[list[int]] = [[0] * vertex_count for _ in range(vertex_count)]

    def add_edge(self, v1: int, v2: int, weight: int) -> None:
        """Set the weight of the edge between ``v1`` and ``v2``."""
        for vertex in (v1, v2):
            if not 0 <= vertex < self.vertex_count:
                raise IndexError(f"vertex {vertex} out of range")
        self.matrix[v1][v2] = weight
        self.matrix[v2][v1] = weight

    def format_matrix(self) -> str:
        """The adjacency matrix, one row per line."""
        return "\n".join(" ".join(str(cell) for cell in row) for row in self.matrix)

    def prim_mst_weight(self) -> int:
        """Total weight of a minimum spanning tree grown from vertex 0.

        Raises ValueError when the graph is not connected.
        """
        if self.vertex_count == 0:
            return 0
        key: list[float] = [math.inf] * self.vertex_count
        selected = [False] * self.vertex_count
        key[0] = 0
        total = 0
        for _ in range(self.vertex_count):
            candidates = [
                (weight, vertex)
                for vertex, (weight, done) in enumerate(zip(key, selected))
                if not done and weight < math.inf
            ]
            if not candidates:
                raise ValueError("graph is not connected")
            weight, u = min(candidates)
            selected[u] = True
            total += weight
            for vertex, edge in enumerate(self.matrix[u]):
                if edge and not selected[vertex] and edge < key[vertex]:
                    key[vertex] = edge
        return int(total)


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> int:
    token = next(tokens, None)
    if token is None:
        raise EOFError
    return int(token)


def main(argv=None) -> int:
    """Read a graph from standard input and print its MST weight."""
    argparse.ArgumentParser(description="Prim minimum spanning tree.").parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("\nEnter total no. of vertices: ", end="")
        graph = Graph(_next_int(tokens))
        print("\nEnter total no. of edges: ", end="")
        edge_count = _next_int(tokens)
        for _ in range(edge_count):
            print("\nEnter vertex v1, v2, and weight of the edge: ", end="")
            graph.add_edge(_next_int(tokens), _next_int(tokens), _next_int(tokens))
    except (EOFError, ValueError, IndexError) as error:
        print(f"\nInvalid graph description: {error or 'input ended early'}")
        return 1
    print("\nAdjacency Matrix of the Graph: ")
    print(graph.format_matrix())
    try:
        weight = graph.prim_mst_weight()
    except ValueError as error:
        print(f"\n{error}")
        return 1
    print(f"\nTotal weight of the minimum spanning tree (MST): {weight}")
    return 0


if __name__ == "__main__":
    sys.exit(main())