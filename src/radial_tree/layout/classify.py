"""Edge classification against the tree derived by the radial sweep."""

from enum import Enum

from ..graph import Graph


class EdgeType(Enum):
    """Classification of input edges relative to the derived tree."""

    TREE = "tree"  # Edge the sweep used to claim a child
    NON_TREE = "non_tree"  # Source reached, target claimed elsewhere (or repeat)
    UNREACHED = "unreached"  # Source never reached from the root


def classify_edges(
    graph: Graph,
    tree: list[tuple[int, int]],
    root: int,
) -> dict[EdgeType, list[tuple[int, int]]]:
    """Classify all edges of ``graph``.

    Args:
        graph: Input graph.
        tree: (parent, child) pairs from ``tree_edges``.
        root: Root vertex of the sweep.

    Returns:
        Dictionary mapping EdgeType to list of (src, trg) tuples in input order.
    """
    classified: dict[EdgeType, list[tuple[int, int]]] = {
        EdgeType.TREE: [],
        EdgeType.NON_TREE: [],
        EdgeType.UNREACHED: [],
    }

    pending = set(tree)
    reached = {root} | {child for _, child in tree}

    for edge in graph.edges:
        src, _ = edge
        if src not in reached:
            classified[EdgeType.UNREACHED].append(edge)
        elif edge in pending:
            # Only the first copy of a repeated edge is the tree edge
            pending.discard(edge)
            classified[EdgeType.TREE].append(edge)
        else:
            classified[EdgeType.NON_TREE].append(edge)

    return classified
