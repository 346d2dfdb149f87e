"""Adjacency construction and root selection."""

from ..graph import Graph


def build_adjacency(graph: Graph) -> list[list[int]]:
    """Build per-vertex out-neighbour lists.

    Insertion order is preserved and duplicate edges are kept.

    Args:
        graph: Input graph.

    Returns:
        List indexed by vertex holding that vertex's out-neighbours.

    Raises:
        ValueError: If an edge endpoint is not in ``[0, n)``.
    """
    adjacency: list[list[int]] = [[] for _ in range(graph.n)]
    for src, trg in graph.edges:
        if not (0 <= src < graph.n and 0 <= trg < graph.n):
            raise ValueError(
                f"Edge ({src}, {trg}) out of range for graph with {graph.n} vertices"
            )
        adjacency[src].append(trg)
    return adjacency


def select_root(adjacency: list[list[int]]) -> int:
    """Pick the vertex with the greatest out-degree.

    Ties go to the lowest index (first maximum in a left-to-right scan).

    Raises:
        ValueError: If the graph has no vertices.
    """
    if not adjacency:
        raise ValueError("Cannot select a root in a graph with no vertices")

    root = 0
    max_degree = 0
    for vertex, children in enumerate(adjacency):
        if len(children) > max_degree:
            root = vertex
            max_degree = len(children)
    return root
