import networkx as nx
import pytest

from dungeon_config import candidate_edge_count
from dungeon_errors import InterconnectivityExhaustedError
from dungeon_models import Edge
from graph_builder import (
    SpanningTreeResult,
    add_interconnections,
    build_spanning_tree,
    candidate_edges,
)
from random_source import LowerBoundRandom, SeededRandom


def test_edge_equality_is_symmetric():
    assert Edge(3, 7) == Edge(7, 3)
    assert hash(Edge(3, 7)) == hash(Edge(7, 3))
    assert Edge(7, 3).first == 3
    assert tuple(Edge(7, 3)) == (3, 7)


@pytest.mark.parametrize(
    "rows,columns,wrapping",
    [(6, 4, False), (5, 4, False), (3, 4, True), (6, 6, True), (10, 3, False)],
)
def test_candidate_count_matches_grid_formula(rows, columns, wrapping):
    edges = candidate_edges(rows, columns, wrapping)

    assert len(edges) == candidate_edge_count(rows, columns, wrapping)
    assert len(set(edges)) == len(edges)


def test_candidates_follow_scan_order():
    edges = candidate_edges(2, 3, wrapping=True)

    assert edges == [
        Edge(0, 1), Edge(0, 3),
        Edge(1, 2), Edge(1, 4),
        Edge(3, 4), Edge(4, 5),
        Edge(2, 5),
        Edge(0, 2), Edge(3, 5),
        Edge(0, 3), Edge(1, 4), Edge(2, 5),
    ]


def test_single_row_wrapping_keeps_self_loops():
    edges = candidate_edges(1, 4, wrapping=True)

    assert edges == [
        Edge(0, 1), Edge(1, 2), Edge(2, 3),
        Edge(0, 3),
        Edge(0, 0), Edge(1, 1), Edge(2, 2), Edge(3, 3),
    ]
    assert len(edges) == candidate_edge_count(1, 4, True)


def test_two_row_wrapping_repeats_vertical_pairs():
    edges = candidate_edges(2, 5, wrapping=True)

    assert len(edges) == candidate_edge_count(2, 5, True)
    assert edges[-5:] == [Edge(0, 5), Edge(1, 6), Edge(2, 7), Edge(3, 8), Edge(4, 9)]
    assert len(set(edges)) == len(edges) - 5


@pytest.mark.parametrize("rows,columns", [(1, 4), (1, 9), (2, 5), (2, 8)])
@pytest.mark.parametrize("seed", [0, 7, 31])
def test_degenerate_wrapping_tree_skips_loops_and_repeats(rows, columns, seed):
    cells = rows * columns
    result = build_spanning_tree(candidate_edges(rows, columns, True), cells, SeededRandom(seed))

    graph = nx.Graph()
    graph.add_nodes_from(range(cells))
    graph.add_edges_from(tuple(edge) for edge in result.tree_edges)

    assert len(result.tree_edges) == cells - 1
    assert all(edge.first != edge.second for edge in result.tree_edges)
    assert len(set(result.tree_edges)) == cells - 1
    assert nx.is_tree(graph)


@pytest.mark.parametrize("rows,columns", [(1, 8), (8, 1), (1, 10)])
def test_single_file_grid_draws_its_last_candidate(rows, columns):
    cells = rows * columns
    candidates = candidate_edges(rows, columns, False)

    result = build_spanning_tree(candidates, cells, LowerBoundRandom())

    assert result.tree_edges == candidates
    assert result.leftover_edges == []
    assert result.remaining_edges == []


def test_candidates_only_join_neighbours_without_wrapping():
    for edge in candidate_edges(5, 4, wrapping=False):
        row_a, col_a = divmod(edge.first, 4)
        row_b, col_b = divmod(edge.second, 4)
        assert abs(row_a - row_b) + abs(col_a - col_b) == 1


def test_lower_bound_tree_consumes_candidates_in_order():
    result = build_spanning_tree(candidate_edges(6, 4, False), 24, LowerBoundRandom())

    assert len(result.tree_edges) == 23
    assert result.leftover_edges == [
        Edge(4, 5), Edge(5, 6), Edge(8, 9), Edge(9, 10), Edge(12, 13),
        Edge(13, 14), Edge(16, 17), Edge(17, 18), Edge(20, 21), Edge(21, 22),
    ]
    assert result.remaining_edges == [Edge(3, 7), Edge(7, 11), Edge(11, 15), Edge(15, 19), Edge(19, 23)]


@pytest.mark.parametrize(
    "rows,columns,wrapping,seed",
    [(6, 4, False, 1), (5, 5, True, 2), (8, 3, True, 3), (12, 9, False, 4)],
)
def test_tree_spans_grid_without_cycles(rows, columns, wrapping, seed):
    cells = rows * columns
    result = build_spanning_tree(candidate_edges(rows, columns, wrapping), cells, SeededRandom(seed))

    graph = nx.Graph()
    graph.add_nodes_from(range(cells))
    graph.add_edges_from(tuple(edge) for edge in result.tree_edges)

    assert len(result.tree_edges) == cells - 1
    assert nx.is_tree(graph)


def test_same_seed_gives_same_edges():
    def build(seed):
        result = build_spanning_tree(candidate_edges(7, 7, True), 49, SeededRandom(seed))
        add_interconnections(result, 10, SeededRandom(seed + 1))
        return result.accepted_edges

    assert build(11) == build(11)
    assert build(11) != build(12)


def test_interconnections_prefer_leftover_edges():
    result = build_spanning_tree(candidate_edges(6, 4, False), 24, LowerBoundRandom())

    added = add_interconnections(result, 4, LowerBoundRandom())

    assert added == [Edge(4, 5), Edge(5, 6), Edge(8, 9), Edge(9, 10)]
    assert result.extra_edges == added
    assert len(result.accepted_edges) == 27


def test_interconnections_fall_back_to_undrawn_edges():
    result = SpanningTreeResult(
        tree_edges=[Edge(0, 1)],
        leftover_edges=[Edge(2, 3)],
        remaining_edges=[Edge(1, 2), Edge(0, 3)],
    )

    added = add_interconnections(result, 3, LowerBoundRandom())

    assert added == [Edge(2, 3), Edge(1, 2), Edge(0, 3)]
    assert result.leftover_edges == []
    assert result.remaining_edges == []


def test_interconnections_refuse_to_run_dry():
    result = SpanningTreeResult(tree_edges=[Edge(0, 1)], leftover_edges=[Edge(1, 2)], remaining_edges=[])

    with pytest.raises(InterconnectivityExhaustedError):
        add_interconnections(result, 2, LowerBoundRandom())


def test_max_interconnectivity_uses_every_candidate():
    rows, columns = 5, 4
    candidates = candidate_edges(rows, columns, False)
    result = build_spanning_tree(candidates, rows * columns, SeededRandom(5))

    add_interconnections(result, len(candidates) - (rows * columns - 1), SeededRandom(6))

    assert sorted(result.accepted_edges) == sorted(candidates)
