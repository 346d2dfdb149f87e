"""Pytest fixtures for radial layout tests."""

import pytest

from radial_tree.graph import Graph


@pytest.fixture
def small_tree() -> Graph:
    """Root 0 with children 1, 2, 3; vertex 3 has child 4."""
    return Graph.from_edges(5, [(0, 1), (0, 2), (0, 3), (3, 4)])


@pytest.fixture
def fan_graph() -> Graph:
    """Root 0 with children 1, 2, 3; vertex 3 has children 4 and 5."""
    return Graph.from_edges(6, [(0, 1), (0, 2), (0, 3), (3, 4), (3, 5)])


@pytest.fixture
def cycle_graph() -> Graph:
    """Cycle 0 -> 1 -> 2 -> 0, an extra leaf 3 and an unreachable source 4."""
    return Graph.from_edges(5, [(0, 1), (1, 2), (2, 0), (0, 3), (4, 0)])


@pytest.fixture
def disconnected_graph() -> Graph:
    """Component {0, 1, 2} holds the root; {3, 4} is unreachable."""
    return Graph.from_edges(5, [(0, 1), (0, 2), (3, 4)])


@pytest.fixture
def diamond_graph() -> Graph:
    """Diamond: 0 -> 1, 0 -> 2, 1 -> 3, 2 -> 3."""
    return Graph.from_edges(4, [(0, 1), (0, 2), (1, 3), (2, 3)])


@pytest.fixture
def labelled_graph() -> Graph:
    """Small labelled graph with a hub."""
    graph = Graph()
    hub = graph.add_vertex("hub")
    for name in ("a", "b", "c"):
        graph.add_edge(hub, graph.add_vertex(name))
    graph.add_edge(1, graph.add_vertex("d"))
    graph.add_vertex("lonely")
    return graph
