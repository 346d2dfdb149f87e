"""Radial tree placement around a selected root."""

import math
from collections.abc import Iterator
from typing import NamedTuple

from ..graph import Graph
from .angle import vector_to_angle
from .root import build_adjacency, select_root


class Placement(NamedTuple):
    """A child claimed by its parent during the sweep."""

    parent: int
    child: int
    x: float
    y: float
    angle: float


def _check_radius(radius: float) -> None:
    if not math.isfinite(radius) or radius < 0:
        raise ValueError(f"Radius must be a finite non-negative number, got {radius!r}")


def _claim_children(
    parent: int,
    px: float,
    py: float,
    adjacency: list[list[int]],
    unplaced: set[int],
    radius: float,
) -> list[Placement]:
    """Claim the still-unplaced out-neighbours of ``parent`` and position them.

    Every child is removed from ``unplaced`` before any of them is expanded.
    The root (at the origin) spreads its children over the full circle; any
    other parent fans them over the half circle facing away from where it
    came from.
    """
    children: list[int] = []
    for child in adjacency[parent]:
        # A repeated edge must not claim (and overwrite) the same child twice
        if child in unplaced and child not in children:
            children.append(child)

    if not children:
        return []

    if px == 0.0 and py == 0.0:
        step = 2.0 * math.pi / len(children)
    else:
        step = math.pi / (len(children) + 1)

    initial = vector_to_angle(px, py) - math.pi / 2.0

    for child in children:
        unplaced.discard(child)

    placements = []
    for k, child in enumerate(children, start=1):
        angle = initial + k * step
        x = px + radius * math.cos(angle)
        y = py + radius * math.sin(angle)
        placements.append(Placement(parent, child, x, y, angle))
    return placements


def iter_placements(
    graph: Graph,
    radius: float,
    adjacency: list[list[int]] | None = None,
    root: int | None = None,
) -> Iterator[Placement]:
    """Yield every placement of the radial sweep in depth-first pre-order.

    A child's whole subtree is yielded before its next sibling, exactly as a
    recursive sweep would, but an explicit stack is used so deep trees do
    not hit the interpreter's recursion limit.

    Args:
        graph: Input graph.
        radius: Distance between each parent and its children.
        adjacency: Precomputed adjacency from ``build_adjacency``.
        root: Root vertex. Defaults to ``select_root(adjacency)``.

    Yields:
        One Placement per vertex reached from the root.

    Raises:
        ValueError: If the graph is empty or the radius is invalid.
    """
    _check_radius(radius)
    if adjacency is None:
        adjacency = build_adjacency(graph)
    if root is None:
        root = select_root(adjacency)

    unplaced = set(range(graph.n))
    unplaced.discard(root)

    stack = _claim_children(root, 0.0, 0.0, adjacency, unplaced, radius)
    stack.reverse()

    while stack:
        placement = stack.pop()
        yield placement

        children = _claim_children(
            placement.child, placement.x, placement.y, adjacency, unplaced, radius
        )
        stack.extend(reversed(children))


def build_tree(graph: Graph, radius: float) -> list[tuple[float, float]]:
    """Compute a radial layout for ``graph``.

    The root is the vertex with the greatest out-degree and stays at the
    origin. Vertices not reachable from the root also stay at the origin.
    A parent claims each child once, so a repeated edge neither widens the
    angular step nor moves an already placed child.

    Args:
        graph: Input graph with at least one vertex.
        radius: Distance between each parent and its children.

    Returns:
        ``(x, y)`` for every vertex, indexed by vertex id.
    """
    locations = [(0.0, 0.0)] * graph.n
    for placement in iter_placements(graph, radius):
        locations[placement.child] = (placement.x, placement.y)
    return locations


def tree_edges(graph: Graph, root: int | None = None) -> list[tuple[int, int]]:
    """Return the (parent, child) pairs the sweep from ``root`` used, in sweep order."""
    return [(p.parent, p.child) for p in iter_placements(graph, 1.0, root=root)]
