"""Graph value consumed by the layout, plus builders and file loaders."""

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from xml.etree.ElementTree import ParseError

import networkx as nx


@dataclass
class Graph:
    """Directed graph with contiguous vertex indices ``0..n``."""

    n: int = 0
    edges: list[tuple[int, int]] = field(default_factory=list)  # Ordered, duplicates kept
    labels: list[str] = field(default_factory=list)  # One per vertex

    def __post_init__(self) -> None:
        if self.n < 0:
            raise ValueError(f"Vertex count must be non-negative, got {self.n}")
        if not self.labels:
            self.labels = [str(i) for i in range(self.n)]
        elif len(self.labels) != self.n:
            raise ValueError(f"Expected {self.n} labels, got {len(self.labels)}")

    def add_vertex(self, label: str | None = None) -> int:
        """Append a vertex and return its index."""
        index = self.n
        self.n += 1
        self.labels.append(label if label is not None else str(index))
        return index

    def add_edge(self, src: int, trg: int) -> None:
        """Append a directed edge ``src -> trg``.

        Raises:
            IndexError: If either endpoint is not a vertex of the graph.
        """
        for vertex in (src, trg):
            if not 0 <= vertex < self.n:
                raise IndexError(f"Vertex {vertex} out of range for graph with {self.n} vertices")
        self.edges.append((src, trg))

    def out_degree(self, vertex: int) -> int:
        return sum(1 for src, _ in self.edges if src == vertex)

    @classmethod
    def from_edges(
        cls,
        n: int,
        edges: list[tuple[int, int]],
        labels: list[str] | None = None,
    ) -> "Graph":
        """Build a graph from a vertex count and an edge list."""
        graph = cls(n=n, labels=list(labels) if labels else [])
        for src, trg in edges:
            graph.add_edge(int(src), int(trg))
        return graph

    @classmethod
    def from_networkx(cls, G: nx.Graph) -> "Graph":
        """Convert a networkx graph.

        Vertices are numbered in ``G.nodes`` order and edges keep ``G.edges``
        order. Undirected graphs contribute one edge per stored pair.
        """
        index = {node: i for i, node in enumerate(G.nodes)}
        graph = cls(n=len(index), labels=[str(node) for node in G.nodes])
        for u, v in G.edges():
            graph.add_edge(index[u], index[v])
        return graph

    def to_networkx(self) -> nx.MultiDiGraph:
        """Convert to a MultiDiGraph so duplicate edges survive."""
        G = nx.MultiDiGraph()
        for i, label in enumerate(self.labels):
            G.add_node(i, label=label)
        G.add_edges_from(self.edges)
        return G


def _load_json(path: Path) -> Graph:
    """Load ``{"n", "edges", "labels"?}`` or ``{"nodes", "edges"}`` JSON."""
    with open(path) as f:
        data = json.load(f)

    if not isinstance(data, dict) or "edges" not in data:
        raise ValueError(f"{path}: expected an object with an 'edges' key")

    if "n" in data:
        try:
            return Graph.from_edges(data["n"], [tuple(e) for e in data["edges"]], data.get("labels"))
        except (TypeError, IndexError) as err:
            raise ValueError(f"{path}: invalid edge list: {err}") from err

    if "nodes" not in data:
        raise ValueError(f"{path}: expected either 'n' or 'nodes'")

    nodes = [str(node) for node in data["nodes"]]
    index = {node: i for i, node in enumerate(nodes)}
    graph = Graph(n=len(nodes), labels=nodes)
    for entry in data["edges"]:
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise ValueError(f"{path}: edge {entry!r} must have exactly two endpoints")
        src, trg = (str(v) for v in entry)
        if src not in index or trg not in index:
            raise ValueError(f"{path}: edge {entry!r} references an unknown node")
        graph.add_edge(index[src], index[trg])
    return graph


def parse_edge_list(text: str, source: str = "<string>") -> Graph:
    """Parse a whitespace separated edge list.

    Each non-blank line holds ``src trg``; ``#`` starts a comment. Vertices
    are numbered in order of first appearance and labelled with their token.
    """
    graph = Graph()
    index: dict[str, int] = {}

    for lineno, line in enumerate(text.splitlines(), start=1):
        line = re.sub(r"#.*$", "", line).strip()
        if not line:
            continue
        parts = line.split()
        if len(parts) != 2:
            raise ValueError(f"{source}:{lineno}: expected 'src trg', got {line!r}")

        ends = []
        for token in parts:
            if token not in index:
                index[token] = graph.add_vertex(token)
            ends.append(index[token])
        graph.add_edge(ends[0], ends[1])

    return graph


def load_graph(path: Path) -> Graph:
    """Load a graph from JSON, GraphML, GML or a plain edge list.

    Args:
        path: File to read. The format is chosen by suffix.

    Returns:
        The loaded Graph.

    Raises:
        ValueError: If the file content is malformed.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        return _load_json(path)
    if suffix in (".graphml", ".gml"):
        reader = nx.read_graphml if suffix == ".graphml" else nx.read_gml
        try:
            G = reader(path)
        except (nx.NetworkXError, ParseError) as err:
            raise ValueError(f"{path}: {err}") from err
        return Graph.from_networkx(G)

    with open(path) as f:
        return parse_edge_list(f.read(), source=str(path))
