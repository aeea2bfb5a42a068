"""
Shared fixtures for routegraph tests.

Most behaviour is identical across storage backends, so the graph factory
is parametrised over both of them.
"""

from typing import Callable, Iterable, Tuple

import pytest

from adjacency_list_graph import AdjacencyListGraph
from adjacency_matrix_graph import AdjacencyMatrixGraph
from graph import Graph

CITIES = ("New York City", "Los Angeles", "Chicago", "Denver", "Miami")

Edge = Tuple[str, str, int]


@pytest.fixture(params=[AdjacencyListGraph, AdjacencyMatrixGraph], ids=["list", "matrix"])
def backend(request) -> type:
    return request.param


@pytest.fixture
def make_graph(backend) -> Callable[..., Graph]:
    """Factory for an empty graph of the parametrised backend."""

    def _make(directed: bool = False) -> Graph:
        return backend(directed)

    return _make


@pytest.fixture
def city_graph(make_graph) -> Callable[..., Graph]:
    """Factory for the five-city graph populated with the given edges."""

    def _build(edges: Iterable[Edge], directed: bool = False) -> Graph:
        g = make_graph(directed)
        for city in CITIES:
            g.add_vertex(city)
        for src, dst, w in edges:
            g.add_edge(src, dst, w)
        return g

    return _build


@pytest.fixture
def route_edges() -> list[Edge]:
    """NYC-LA(4), NYC-Chicago(2), LA-Denver(1), Chicago-Denver(5), Denver-Miami(3)."""
    return [
        ("New York City", "Los Angeles", 4),
        ("New York City", "Chicago", 2),
        ("Los Angeles", "Denver", 1),
        ("Chicago", "Denver", 5),
        ("Denver", "Miami", 3),
    ]


@pytest.fixture
def cyclic_edges(route_edges) -> list[Edge]:
    """route_edges closed into a cycle by Miami -> NYC (3)."""
    return [*route_edges, ("Miami", "New York City", 3)]
