import io
import sys

import pytest

from dsakit.kruskal import DisjointSet, Edge, kruskal_mst, main, sort_edges

EXAMPLE = [
    Edge(1, 2, 28),
    Edge(2, 3, 16),
    Edge(3, 4, 12),
    Edge(4, 5, 22),
    Edge(5, 6, 25),
    Edge(6, 1, 10),
    Edge(2, 7, 14),
    Edge(7, 5, 24),
    Edge(7, 4, 18),
]


def test_worked_example():
    tree, cost = kruskal_mst(7, EXAMPLE)
    assert cost == 99
    assert tree == [
        Edge(6, 1, 10),
        Edge(3, 4, 12),
        Edge(2, 7, 14),
        Edge(2, 3, 16),
        Edge(4, 5, 22),
        Edge(5, 6, 25),
    ]


def test_tree_has_vertex_count_minus_one_edges():
    tree, cost = kruskal_mst(7, EXAMPLE)
    assert len(tree) == 6
    assert cost == sum(edge.weight for edge in tree)


def test_sort_edges_is_stable():
    edges = [Edge(1, 2, 5), Edge(2, 3, 1), Edge(3, 4, 5), Edge(4, 1, 1)]
    assert sort_edges(edges) == [edges[1], edges[3], edges[0], edges[2]]


def test_empty_graph():
    assert kruskal_mst(3, []) == ([], 0)


def test_disjoint_set_union_rules():
    sets = DisjointSet(4)
    assert sets.find(0) == 0
    sets.union(1, 2)
    assert sets.find(1) == 2
    sets.union(3, 1)
    assert sets.find(3) == sets.find(2)
    assert sets.find(4) == 4


def test_union_of_same_set_keeps_roots():
    sets = DisjointSet(3)
    sets.union(1, 2)
    sets.union(1, 2)
    sets.union(2, 1)
    assert sets.find(1) == sets.find(2)


def test_out_of_range_vertex():
    with pytest.raises(IndexError):
        kruskal_mst(2, [Edge(1, 5, 3)])


def test_edge_str():
    assert str(Edge(6, 1, 10)) == "   6     1     10"


def test_main_prints_total(monkeypatch, capsys):
    numbers = " ".join(f"{e.v1} {e.v2} {e.weight}" for e in EXAMPLE)
    monkeypatch.setattr(sys, "stdin", io.StringIO(f"7 9 {numbers}\n"))
    assert main([]) == 0
    assert "Total cost of MST is: 99" in capsys.readouterr().out


def test_main_incomplete_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("3 2 1 2"))
    assert main([]) == 1
    assert "Incomplete" in capsys.readouterr().out