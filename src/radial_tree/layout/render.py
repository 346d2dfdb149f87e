"""Pyvis rendering of a computed radial layout."""

from pathlib import Path

from ..graph import Graph
from .classify import EdgeType

# Edge styles by type
EDGE_STYLES = {
    EdgeType.TREE: {"color": "#888888", "width": 1.0},
    EdgeType.NON_TREE: {"color": "rgba(255,0,0,0.3)", "width": 0.5},
    EdgeType.UNREACHED: {"color": "rgba(128,128,128,0.3)", "width": 0.5},
}

ROOT_COLOR = "#87CEEB"  # light blue
NODE_COLOR = "#e9ecef"  # light gray
UNREACHED_COLOR = "#d0d0d0"


def render_graph(
    graph: Graph,
    locations: list[tuple[float, float]],
    root: int,
    classified_edges: dict[EdgeType, list[tuple[int, int]]],
    output_path: Path,
    scale: float = 1.0,
) -> None:
    """Render the layout as an interactive HTML page with pyvis.

    Node positions are fixed (physics disabled). Layout y grows upwards while
    the canvas y grows downwards, so y is flipped.

    Args:
        graph: The laid out graph.
        locations: ``(x, y)`` per vertex from ``build_tree``.
        root: Root vertex of the layout.
        classified_edges: Edges classified by type.
        output_path: Path to write the HTML file.
        scale: Multiplier from layout units to canvas pixels.
    """
    from pyvis.network import Network

    reached = {root} | {child for _, child in classified_edges[EdgeType.TREE]}

    net = Network(
        height="100vh",
        width="100%",
        bgcolor="#ffffff",
        directed=True,
    )
    net.toggle_physics(False)

    for vertex, (x, y) in enumerate(locations):
        label = graph.labels[vertex]
        if vertex == root:
            color = ROOT_COLOR
            title = f"{label}\n(root)"
        elif vertex in reached:
            color = NODE_COLOR
            title = f"{label}\n({x:.2f}, {y:.2f})"
        else:
            color = UNREACHED_COLOR
            title = f"{label}\n(unreached)"

        net.add_node(
            vertex,
            label=label,
            title=title,
            x=x * scale,
            y=-y * scale,
            fixed=True,
            color=color,
            shape="box",
            font={"size": 12 if vertex == root else 10},
        )

    for edge_type, edge_list in classified_edges.items():
        style = EDGE_STYLES[edge_type]
        for src, trg in edge_list:
            net.add_edge(src, trg, color=style["color"], width=style["width"])

    net.set_options("""
    {
        "physics": {"enabled": false},
        "interaction": {
            "navigationButtons": true,
            "zoomView": true,
            "dragView": true,
            "hover": true,
            "selectConnectedEdges": true,
            "tooltipDelay": 100
        },
        "edges": {
            "arrows": {"to": {"enabled": true, "scaleFactor": 0.3}},
            "smooth": false,
            "selectionWidth": 1.5,
            "hoverWidth": 1.5
        },
        "nodes": {
            "borderWidth": 1,
            "borderWidthSelected": 3
        }
    }
    """)

    net.save_graph(str(output_path))
