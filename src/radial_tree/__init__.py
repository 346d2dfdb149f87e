"""Radial tree layout for arbitrary directed graphs."""

from .graph import Graph, load_graph
from .layout import build_tree, select_root

__all__ = ["Graph", "load_graph", "build_tree", "select_root"]
