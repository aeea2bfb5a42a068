"""
Unit tests for SimpleTraversalEngine (BFS and DFS) on both backends.
"""

import math

import pytest

from adjacency_list_graph import AdjacencyListGraph
from graph_errors import UnknownVertexError
from vertex import Color


@pytest.mark.parametrize("directed", [False, True])
def test_bfs_hop_counts(city_graph, route_edges, directed):
    g = city_graph(route_edges, directed)

    order = g.bfs("New York City")

    assert order == ["New York City", "Los Angeles", "Chicago", "Denver", "Miami"]
    hops = {v.value: v.distance for v in g.vertices}
    assert hops == {
        "New York City": 0,
        "Los Angeles": 1,
        "Chicago": 1,
        "Denver": 2,
        "Miami": 3,
    }
    assert g.parent_of("Denver") == "Los Angeles"
    assert all(v.color is Color.DONE for v in g.vertices)


@pytest.mark.parametrize("directed, hops", [(False, 1), (True, 3)])
def test_bfs_on_cyclic_graph(city_graph, cyclic_edges, directed, hops):
    g = city_graph(cyclic_edges, directed)

    g.bfs("New York City")

    assert g.get_vertex("Miami").distance == hops


def test_bfs_leaves_unreachable_vertices_at_infinity(city_graph, route_edges):
    g = city_graph(route_edges, directed=True)

    g.bfs("Denver")

    for name in ("New York City", "Los Angeles", "Chicago"):
        v = g.get_vertex(name)
        assert v.distance == math.inf
        assert v.parent is None
        assert v.color is Color.UNVISITED
    assert g.get_vertex("Miami").distance == 1


def test_bfs_unknown_source_raises(make_graph):
    g = make_graph()
    g.add_vertex("New York City")

    with pytest.raises(UnknownVertexError):
        g.bfs("Los Angeles")


@pytest.mark.parametrize("directed, finish", [(False, 8), (True, 6)])
def test_dfs_timestamps(city_graph, route_edges, directed, finish):
    g = city_graph(route_edges, directed)

    g.dfs("New York City")

    denver = g.get_vertex("Denver")
    assert denver.discovery_time == 3
    assert denver.finishing_time == finish


@pytest.mark.parametrize("directed, finish", [(False, 8), (True, 6)])
def test_dfs_timestamps_on_cyclic_graph(city_graph, cyclic_edges, directed, finish):
    g = city_graph(cyclic_edges, directed)

    g.dfs("New York City")

    denver = g.get_vertex("Denver")
    assert denver.discovery_time == 3
    assert denver.finishing_time == finish


@pytest.mark.parametrize("directed", [False, True])
def test_dfs_discovery_is_preorder_and_finish_follows_discovery(city_graph, cyclic_edges, directed):
    g = city_graph(cyclic_edges, directed)

    order = g.dfs("New York City")

    times = [g.get_vertex(name).discovery_time for name in order]
    assert times == sorted(times)
    assert len(set(times)) == len(times)
    for v in g.vertices:
        assert v.finishing_time > v.discovery_time
        assert v.color is Color.DONE
    assert g.get_vertex("New York City").finishing_time == 2 * len(g)


def test_dfs_full_undirected_clock(city_graph, route_edges):
    g = city_graph(route_edges)

    g.dfs("New York City")

    stamps = {v.value: (v.discovery_time, v.finishing_time) for v in g.vertices}
    assert stamps == {
        "New York City": (1, 10),
        "Los Angeles": (2, 9),
        "Denver": (3, 8),
        "Chicago": (4, 5),
        "Miami": (6, 7),
    }
    assert g.path_to("Chicago") == ["New York City", "Los Angeles", "Denver", "Chicago"]


def test_dfs_unreached_vertices_keep_previous_timestamps(city_graph, route_edges):
    g = city_graph(route_edges, directed=True)
    g.dfs("New York City")
    before = g.get_vertex("Chicago").discovery_time

    g.dfs("Denver")

    assert g.get_vertex("Chicago").discovery_time == before
    assert g.get_vertex("Denver").discovery_time == 1
    assert g.get_vertex("Miami").finishing_time == 3


def test_dfs_unknown_source_raises(make_graph):
    g = make_graph()
    g.add_vertex("New York City")

    with pytest.raises(UnknownVertexError):
        g.dfs("Los Angeles")


def test_dfs_handles_paths_deeper_than_recursion_limit():
    g = AdjacencyListGraph(directed=True)
    n = 5000
    for i in range(n):
        g.add_vertex(i)
    for i in range(n - 1):
        g.add_edge(i, i + 1, 1)

    order = g.dfs(0)

    assert order == list(range(n))
    assert g.get_vertex(n - 1).finishing_time == n + 1
    assert g.get_vertex(0).finishing_time == 2 * n
