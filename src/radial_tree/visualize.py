"""Generate layout outputs."""

import csv
import json
from pathlib import Path

from .graph import Graph
from .layout import classify_edges, render_graph, tree_edges


def _tree_depth(tree: list[tuple[int, int]], root: int) -> int:
    """Number of levels below the root in the derived tree."""
    depth = {root: 0}
    # Tree edges arrive in pre-order, so a parent is always seen before its child
    for parent, child in tree:
        depth[child] = depth[parent] + 1
    return max(depth.values())


def _unreached(graph: Graph, tree: list[tuple[int, int]], root: int) -> list[int]:
    reached = {root} | {child for _, child in tree}
    return [v for v in range(graph.n) if v not in reached]


def generate_json(
    graph: Graph,
    locations: list[tuple[float, float]],
    root: int,
    output_file: Path,
    radius: float | None = None,
    tree: list[tuple[int, int]] | None = None,
) -> None:
    """Write the layout as JSON.

    Args:
        graph: The laid out graph.
        locations: ``(x, y)`` per vertex.
        root: Root vertex.
        output_file: Path to write the JSON file.
        radius: Radius used for the layout, recorded when given.
        tree: Tree edges from ``tree_edges``. Computed from ``root`` when omitted.
    """
    if tree is None:
        tree = tree_edges(graph, root=root)
    layout: dict = {"root": root, "n": graph.n}
    if radius is not None:
        layout["radius"] = radius
    layout["positions"] = [
        {"id": i, "label": graph.labels[i], "x": x, "y": y}
        for i, (x, y) in enumerate(locations)
    ]
    layout["tree_edges"] = [list(edge) for edge in tree]
    layout["unreached"] = _unreached(graph, tree, root)

    with open(output_file, "w") as f:
        json.dump(layout, f, indent=2)


def generate_csv(
    graph: Graph,
    locations: list[tuple[float, float]],
    output_file: Path,
) -> None:
    """Write one ``id,label,x,y`` row per vertex."""
    with open(output_file, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=["id", "label", "x", "y"])
        writer.writeheader()
        for i, (x, y) in enumerate(locations):
            writer.writerow({"id": i, "label": graph.labels[i], "x": x, "y": y})


def generate_html(
    graph: Graph,
    locations: list[tuple[float, float]],
    root: int,
    output_file: Path,
    scale: float = 1.0,
    tree: list[tuple[int, int]] | None = None,
) -> None:
    """Generate an interactive HTML view of the layout using pyvis.

    Args:
        graph: The laid out graph.
        locations: ``(x, y)`` per vertex.
        root: Root vertex.
        output_file: Path to write the HTML file.
        scale: Multiplier from layout units to canvas pixels.
        tree: Tree edges from ``tree_edges``. Computed from ``root`` when omitted.
    """
    if tree is None:
        tree = tree_edges(graph, root=root)
    classified = classify_edges(graph, tree, root)
    render_graph(
        graph=graph,
        locations=locations,
        root=root,
        classified_edges=classified,
        output_path=output_file,
        scale=scale,
    )


def generate_summary(
    graph: Graph,
    locations: list[tuple[float, float]],
    root: int,
    output_file: Path,
    tree: list[tuple[int, int]] | None = None,
) -> None:
    """Generate human-readable summary file.

    Args:
        graph: The laid out graph.
        locations: ``(x, y)`` per vertex.
        root: Root vertex.
        output_file: Path to write the summary file.
        tree: Tree edges from ``tree_edges``. Computed from ``root`` when omitted.
    """
    if tree is None:
        tree = tree_edges(graph, root=root)
    unreached = _unreached(graph, tree, root)

    with open(output_file, "w") as f:
        f.write("=" * 60 + "\n")
        f.write("Radial Tree Layout Summary\n")
        f.write("=" * 60 + "\n\n")

        f.write(f"Vertices: {graph.n}\n")
        f.write(f"Edges: {len(graph.edges)}\n")
        f.write(f"Root: {graph.labels[root]} (out-degree {graph.out_degree(root)})\n")
        f.write(f"Tree edges: {len(tree)}\n")
        f.write(f"Tree depth: {_tree_depth(tree, root)}\n\n")

        if unreached:
            f.write(f"Unreached vertices ({len(unreached)}, left at origin):\n")
            f.write("-" * 40 + "\n")
            for v in unreached[:20]:
                f.write(f"  {graph.labels[v]}\n")
            if len(unreached) > 20:
                f.write(f"  ... and {len(unreached) - 20} more\n")
            f.write("\n")

        xs = [x for x, _ in locations]
        ys = [y for _, y in locations]
        f.write(f"Bounding box: x [{min(xs):.3f}, {max(xs):.3f}], y [{min(ys):.3f}, {max(ys):.3f}]\n")
