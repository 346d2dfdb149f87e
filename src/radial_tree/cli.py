"""CLI for radial-tree."""

import argparse
import sys
from pathlib import Path

from .graph import Graph, load_graph
from .layout import build_adjacency, iter_placements, select_root, tree_edges
from .visualize import generate_csv, generate_html, generate_json, generate_summary

DEFAULT_RADIUS = 10.0
DEFAULT_OUTPUT = Path("results")
DEFAULT_FORMATS = ["json", "csv", "html"]
DEFAULT_SCALE = 10.0
FORMATS = ("json", "csv", "html")


def load_config(config_path: Path) -> dict:
    """Load configuration from YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Dictionary of configuration values.
    """
    try:
        import yaml

        with open(config_path) as f:
            return yaml.safe_load(f) or {}
    except ImportError as err:
        raise ImportError("PyYAML required for config files: pip install pyyaml") from err


def parse_formats(value: str | list[str]) -> list[str]:
    """Split a comma separated format list and validate each entry."""
    if isinstance(value, str):
        value = value.split(",")
    formats = [v.strip().lower() for v in value if v.strip()]
    unknown = [f for f in formats if f not in FORMATS]
    if unknown:
        raise ValueError(f"Unknown output format(s): {', '.join(unknown)}")
    return formats


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add common arguments shared between subcommands."""
    parser.add_argument("graph", type=Path, help="Graph file (.json, .graphml, .gml or edge list)")
    parser.add_argument("--config", type=Path, help="Path to YAML config file")


def resolve_layout_args(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Fill unset layout arguments from the config file, then defaults."""
    config = load_config(args.config) if args.config else {}
    if not isinstance(config, dict):
        parser.error(f"Config file {args.config} must contain a mapping")

    known = {"radius", "output", "format", "scale"}
    for key in sorted(set(config) - known):
        print(f"Warning: ignoring unknown config key '{key}'", file=sys.stderr)

    if args.radius is None:
        args.radius = float(config.get("radius", DEFAULT_RADIUS))
    if args.output is None:
        args.output = Path(config.get("output", DEFAULT_OUTPUT))
    if args.scale is None:
        args.scale = float(config.get("scale", DEFAULT_SCALE))
    try:
        args.format = parse_formats(args.format or config.get("format", DEFAULT_FORMATS))
    except ValueError as err:
        parser.error(str(err))

    if args.radius < 0:
        parser.error("--radius must be non-negative")
    if args.scale <= 0:
        parser.error("--scale must be positive")

    args.output = args.output.resolve()


def read_graph(path: Path) -> Graph | None:
    """Load the input graph, reporting problems instead of raising."""
    try:
        graph = load_graph(path)
    except (OSError, ValueError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return None

    if graph.n == 0:
        print(f"Error: {path} contains no vertices", file=sys.stderr)
        return None

    print(f"Loaded {graph.n} vertices and {len(graph.edges)} edges from {path}")
    return graph


def cmd_layout(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    """Run the layout subcommand."""
    resolve_layout_args(args, parser)

    graph = read_graph(args.graph)
    if graph is None:
        return 1

    adjacency = build_adjacency(graph)
    root = select_root(adjacency)
    try:
        placements = list(iter_placements(graph, args.radius, adjacency=adjacency, root=root))
    except ValueError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    print(f"Root: {graph.labels[root]} (out-degree {graph.out_degree(root)})")

    locations = [(0.0, 0.0)] * graph.n
    for p in placements:
        locations[p.child] = (p.x, p.y)
    tree = [(p.parent, p.child) for p in placements]

    placed = len(tree) + 1
    if placed < graph.n:
        print(
            f"Warning: {graph.n - placed} vertices are not reachable from the root "
            "and stay at the origin",
            file=sys.stderr,
        )

    args.output.mkdir(parents=True, exist_ok=True)

    if "json" in args.format:
        generate_json(graph, locations, root, args.output / "layout.json", radius=args.radius, tree=tree)
        print("Wrote layout.json")
    if "csv" in args.format:
        generate_csv(graph, locations, args.output / "layout.csv")
        print("Wrote layout.csv")
    if "html" in args.format:
        generate_html(graph, locations, root, args.output / "layout.html", scale=args.scale, tree=tree)
        print("Wrote layout.html")

    generate_summary(graph, locations, root, args.output / "summary.txt", tree=tree)
    print("Wrote summary.txt")
    print(f"\nAll outputs written to {args.output}/")
    return 0


def cmd_root(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    """Print the selected root and how much of the graph it reaches."""
    graph = read_graph(args.graph)
    if graph is None:
        return 1

    root = select_root(build_adjacency(graph))
    placed = len(tree_edges(graph, root=root)) + 1
    print(f"Root: {graph.labels[root]} (vertex {root})")
    print(f"Out-degree: {graph.out_degree(root)}")
    print(f"Reached: {placed}/{graph.n} vertices")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for radial-tree CLI."""
    parser = argparse.ArgumentParser(description="Compute radial tree layouts of graphs")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    layout_parser = subparsers.add_parser(
        "layout",
        help="Compute the layout and write JSON/CSV/HTML outputs",
    )
    add_common_args(layout_parser)
    layout_parser.add_argument(
        "--radius",
        type=float,
        help=f"Distance between a parent and its children (default: {DEFAULT_RADIUS})",
    )
    layout_parser.add_argument(
        "--output",
        type=Path,
        help=f"Output directory (default: {DEFAULT_OUTPUT})",
    )
    layout_parser.add_argument(
        "--format",
        type=str,
        help="Comma separated outputs to write: json, csv, html (default: all)",
    )
    layout_parser.add_argument(
        "--scale",
        type=float,
        help=f"Pixels per layout unit in the HTML view (default: {DEFAULT_SCALE})",
    )

    root_parser = subparsers.add_parser(
        "root",
        help="Show which vertex would be used as the layout root",
    )
    add_common_args(root_parser)

    args = parser.parse_args(argv)

    if args.command == "layout":
        return cmd_layout(args, layout_parser)
    elif args.command == "root":
        if args.config:
            print("Warning: --config has no effect for 'root'", file=sys.stderr)
        return cmd_root(args, root_parser)
    # No subcommand provided - show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
