"""
Lightweight labelled graphs defined in text.

Used to exercise the pathfinding engine independently of maze semantics.

Text format, one edge per line (``weight`` is optional and defaults to 1):
    A -> B 2      directed edge from A to B
    A -- C 6      two directed edges, A -> C and C -> A
Blank lines and lines starting with ``#`` are ignored.
"""

import math
from typing import Dict, List, Tuple

from .common import Edge, Vertex
from .constants import TextGraphDefaults


class SimpleVertex(Vertex):
    """Labelled vertex."""

    def __init__(self, label: str):
        self.label = label
        self._outgoing: List["SimpleEdge"] = []

    def outgoing_edges(self) -> List["SimpleEdge"]:
        return list(self._outgoing)

    def __repr__(self) -> str:
        return f"SimpleVertex({self.label!r})"


class SimpleEdge(Edge):
    def __init__(self, src: SimpleVertex, dst: SimpleVertex, weight: float):
        self._src = src
        self._dst = dst
        self._weight = weight

    @property
    def src(self) -> SimpleVertex:
        return self._src

    @property
    def dst(self) -> SimpleVertex:
        return self._dst

    @property
    def weight(self) -> float:
        return self._weight

    def __repr__(self) -> str:
        return f"SimpleEdge({self._src.label} -> {self._dst.label}, {self._weight})"


class SimpleGraph:
    """Graph of labelled vertices, at most one edge per ordered vertex pair."""

    def __init__(self):
        self._vertices: Dict[str, SimpleVertex] = {}
        self._edges: Dict[Tuple[str, str], SimpleEdge] = {}

    @classmethod
    def from_text(cls, text: str) -> "SimpleGraph":
        """
        Parse a graph from its text description.

        Raises:
            ValueError: If a line is malformed, repeats an edge, or gives a
                negative or non-numeric weight
        """
        graph = cls()
        for line_number, raw in enumerate(text.splitlines(), start=1):
            line = raw.strip()
            if not line or line.startswith(TextGraphDefaults.COMMENT_PREFIX):
                continue

            parts = line.split()
            if len(parts) not in (3, 4):
                raise ValueError(f"line {line_number}: expected 'A -> B [weight]', got {raw!r}")
            src, arrow, dst = parts[:3]

            weight = TextGraphDefaults.DEFAULT_WEIGHT
            if len(parts) == 4:
                try:
                    weight = float(parts[3])
                except ValueError:
                    raise ValueError(
                        f"line {line_number}: weight {parts[3]!r} is not a number"
                    ) from None

            try:
                if arrow == TextGraphDefaults.DIRECTED_ARROW:
                    graph.add_edge(src, dst, weight)
                elif arrow == TextGraphDefaults.UNDIRECTED_ARROW:
                    graph.add_edge(src, dst, weight)
                    graph.add_edge(dst, src, weight)
                else:
                    raise ValueError(f"unknown arrow {arrow!r}")
            except ValueError as e:
                raise ValueError(f"line {line_number}: {e}") from None
        return graph

    def add_vertex(self, label: str) -> SimpleVertex:
        """Return the vertex labelled ``label``, creating it if needed."""
        vertex = self._vertices.get(label)
        if vertex is None:
            vertex = SimpleVertex(label)
            self._vertices[label] = vertex
        return vertex

    def add_edge(self, src: str, dst: str, weight: float) -> SimpleEdge:
        """
        Add a directed edge between two labelled vertices.

        Raises:
            ValueError: If the weight is negative or not finite, or the edge
                already exists
        """
        if not math.isfinite(weight) or weight < 0:
            raise ValueError(f"weight of {src} -> {dst} must be finite and non-negative")
        if (src, dst) in self._edges:
            raise ValueError(f"duplicate edge {src} -> {dst}")

        u = self.add_vertex(src)
        v = self.add_vertex(dst)
        edge = SimpleEdge(u, v, weight)
        u._outgoing.append(edge)
        self._edges[(src, dst)] = edge
        return edge

    def get_vertex(self, label: str) -> SimpleVertex:
        """Raises KeyError if there is no vertex labelled ``label``."""
        return self._vertices[label]

    def get_edge(self, src, dst) -> SimpleEdge:
        """
        Edge from ``src`` to ``dst``, given as vertices or labels.

        Raises:
            KeyError: If there is no such edge
        """
        src_label = src.label if isinstance(src, SimpleVertex) else src
        dst_label = dst.label if isinstance(dst, SimpleVertex) else dst
        return self._edges[(src_label, dst_label)]

    def vertices(self) -> List[SimpleVertex]:
        return list(self._vertices.values())

    def edges(self) -> List[SimpleEdge]:
        return list(self._edges.values())
