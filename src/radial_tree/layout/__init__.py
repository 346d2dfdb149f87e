"""Radial tree layout: root selection, angular placement and rendering."""

from .angle import vector_to_angle
from .classify import EdgeType, classify_edges
from .render import render_graph
from .root import build_adjacency, select_root
from .tree import Placement, build_tree, iter_placements, tree_edges

__all__ = [
    "build_adjacency",
    "select_root",
    "vector_to_angle",
    "Placement",
    "build_tree",
    "iter_placements",
    "tree_edges",
    "EdgeType",
    "classify_edges",
    "render_graph",
]
