"""Tests for graph construction and loading."""

import json

import networkx as nx
import pytest

from radial_tree.graph import Graph, load_graph, parse_edge_list


class TestGraph:
    """Tests for the Graph dataclass."""

    def test_add_vertex_returns_index(self):
        """Vertices are numbered in insertion order."""
        graph = Graph()

        assert graph.add_vertex() == 0
        assert graph.add_vertex("b") == 1
        assert graph.n == 2
        assert graph.labels == ["0", "b"]

    def test_default_labels(self):
        """Labels default to vertex indices."""
        assert Graph(n=3).labels == ["0", "1", "2"]

    def test_label_count_mismatch(self):
        """Label list must match the vertex count."""
        with pytest.raises(ValueError, match="labels"):
            Graph(n=2, labels=["a"])

    def test_negative_vertex_count(self):
        """Vertex count cannot be negative."""
        with pytest.raises(ValueError):
            Graph(n=-1)

    def test_add_edge_unknown_vertex(self):
        """Edges must connect existing vertices."""
        graph = Graph(n=2)

        with pytest.raises(IndexError):
            graph.add_edge(0, 2)

    def test_out_degree(self, labelled_graph):
        """Out-degree counts outgoing edges."""
        assert labelled_graph.out_degree(0) == 3
        assert labelled_graph.out_degree(1) == 1
        assert labelled_graph.out_degree(5) == 0

    def test_from_networkx(self):
        """Node and edge order follow the networkx graph."""
        G = nx.DiGraph()
        G.add_edges_from([("x", "y"), ("x", "z"), ("z", "y")])
        graph = Graph.from_networkx(G)

        assert graph.labels == ["x", "y", "z"]
        assert graph.edges == [(0, 1), (0, 2), (2, 1)]

    def test_to_networkx_keeps_duplicates(self):
        """Converting to networkx keeps repeated edges."""
        graph = Graph.from_edges(2, [(0, 1), (0, 1)], labels=["a", "b"])
        G = graph.to_networkx()

        assert G.number_of_edges() == 2
        assert G.nodes[0]["label"] == "a"


class TestParseEdgeList:
    """Tests for parse_edge_list function."""

    def test_first_appearance_order(self):
        """Vertices are numbered by first appearance."""
        graph = parse_edge_list("b a\na c\n")

        assert graph.labels == ["b", "a", "c"]
        assert graph.edges == [(0, 1), (1, 2)]

    def test_comments_and_blank_lines(self):
        """Comments and blank lines are skipped."""
        graph = parse_edge_list("# header\n\na b  # trailing\n")

        assert graph.n == 2
        assert graph.edges == [(0, 1)]

    def test_malformed_line(self):
        """Lines without exactly two tokens are rejected with their location."""
        with pytest.raises(ValueError, match="edges.txt:2"):
            parse_edge_list("a b\na b c\n", source="edges.txt")


class TestLoadGraph:
    """Tests for load_graph function."""

    def test_json_indexed(self, tmp_path):
        """JSON with a vertex count and index pairs."""
        path = tmp_path / "g.json"
        path.write_text(json.dumps({"n": 3, "edges": [[0, 1], [0, 2]]}))
        graph = load_graph(path)

        assert graph.n == 3
        assert graph.edges == [(0, 1), (0, 2)]

    def test_json_named(self, tmp_path):
        """JSON with named nodes."""
        path = tmp_path / "g.json"
        path.write_text(json.dumps({"nodes": ["a", "b"], "edges": [["b", "a"]]}))
        graph = load_graph(path)

        assert graph.labels == ["a", "b"]
        assert graph.edges == [(1, 0)]

    def test_json_out_of_range(self, tmp_path):
        """Out of range indices are reported as ValueError."""
        path = tmp_path / "g.json"
        path.write_text(json.dumps({"n": 2, "edges": [[0, 5]]}))

        with pytest.raises(ValueError, match="invalid edge list"):
            load_graph(path)

    def test_json_unknown_node(self, tmp_path):
        """Named edges must reference listed nodes."""
        path = tmp_path / "g.json"
        path.write_text(json.dumps({"nodes": ["a"], "edges": [["a", "b"]]}))

        with pytest.raises(ValueError, match="unknown node"):
            load_graph(path)

    def test_json_named_malformed_entry(self, tmp_path):
        """Named edges that are not pairs are reported as ValueError."""
        path = tmp_path / "g.json"
        path.write_text(json.dumps({"nodes": ["a", "b"], "edges": [5]}))

        with pytest.raises(ValueError, match="two endpoints"):
            load_graph(path)

    def test_json_missing_edges(self, tmp_path):
        """JSON without edges is rejected."""
        path = tmp_path / "g.json"
        path.write_text(json.dumps({"n": 2}))

        with pytest.raises(ValueError, match="edges"):
            load_graph(path)

    def test_graphml(self, tmp_path):
        """GraphML files are read through networkx."""
        G = nx.DiGraph()
        G.add_edges_from([("r", "s"), ("r", "t")])
        path = tmp_path / "g.graphml"
        nx.write_graphml(G, path)
        graph = load_graph(path)

        assert graph.n == 3
        assert set(graph.labels) == {"r", "s", "t"}
        assert len(graph.edges) == 2

    def test_malformed_graphml(self, tmp_path):
        """Broken GraphML XML is reported as ValueError."""
        path = tmp_path / "g.graphml"
        path.write_text("<graphml><graph")

        with pytest.raises(ValueError, match="g.graphml"):
            load_graph(path)

    def test_edge_list_file(self, tmp_path):
        """Other suffixes are read as edge lists."""
        path = tmp_path / "g.txt"
        path.write_text("hub a\nhub b\n")
        graph = load_graph(path)

        assert graph.labels == ["hub", "a", "b"]
        assert graph.out_degree(0) == 2

    def test_missing_file(self, tmp_path):
        """Missing files raise OSError."""
        with pytest.raises(OSError):
            load_graph(tmp_path / "missing.txt")
