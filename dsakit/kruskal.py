"""Minimum spanning tree by Kruskal's algorithm over a simple disjoint set."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge."""

    v1: int
    v2: int
    weight: int

    def __str__(self) -> str:
        return f"   {self.v1}     {self.v2}     {self.weight}"


class DisjointSet:
    """Parent-pointer forest over vertices ``0..vertex_count``."""

    def __init__(self, vertex_count: int) -> None:
        self.parent = list(range(vertex_count + 1))

    def find(self, vertex: int) -> int:
        """Root of the set that holds ``vertex``."""
        while vertex != self.parent[vertex]:
            vertex = self.parent[vertex]
        return vertex

    def union(self, v1: int, v2: int) -> None:
        """Merge the sets holding ``v1`` and ``v2``."""
        r1, r2 = self.find(v1), self.find(v2)
        if r1 == r2:
            return
        if v1 == r1:
            self.parent[v1] = v2
        elif v2 == r2:
            self.parent[v2] = v1
        else:
            self.parent[r1] = r2


def sort_edges(edges: Iterable[Edge]) -> list[Edge]:
    """Edges by ascending weight, keeping the given order among equal weights."""
    return sorted(edges, key=lambda edge: edge.weight)


def kruskal_mst(vertex_count: int, edges: Iterable[Edge]) -> tuple[list[Edge], int]:
    """Return the spanning tree's edges and their total weight."""
    sets = DisjointSet(vertex_count)
    tree: list[Edge] = []
    cost = 0
    for edge in sort_edges(edges):
        if sets.find(edge.v1) != sets.find(edge.v2):
            tree.append(edge)
            cost += edge.weight
            sets.union(edge.v1, edge.v2)
    return tree, cost


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> int:
    token = next(tokens, None)
    if token is None:
        raise EOFError
    return int(token)


def _print_edges(edges: Iterable[Edge]) -> None:
    for edge in edges:
        print(f"\n{edge}", end="")


def main(argv=None) -> int:
    """Read a graph from standard input and print its minimum spanning tree."""
    argparse.ArgumentParser(description="Kruskal minimum spanning tree.").parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("\n Enter the number of vertices : ", end="")
        vertex_count = _next_int(tokens)
        print("\n Enter the number of edges : ", end="")
        edge_count = _next_int(tokens)
        edges = []
        for _ in range(edge_count):
            print("\n Enter v1 :", end="")
            v1 = _next_int(tokens)
            print("\n Enter v2 :", end="")
            v2 = _next_int(tokens)
            print("\n Enter weight :", end="")
            edges.append(Edge(v1, v2, _next_int(tokens)))
    except (EOFError, ValueError):
        print("\n Incomplete graph description")
        return 1

    _print_edges(edges)
    print("\n Edges after sorting: ", end="")
    _print_edges(sort_edges(edges))
    print()
    try:
        tree, cost = kruskal_mst(vertex_count, edges)
    except IndexError:
        print("\n Vertex number out of range")
        return 1
    print("\n MST is : ", end="")
    _print_edges(tree)
    print(f"\n Total cost of MST is: {cost}")
    return 0


if __name__ == "__main__":
    sys.exit(main())