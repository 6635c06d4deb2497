"""In-memory graph model and its DOT serialization."""

from __future__ import annotations

import io
import logging
from codecs import IncrementalEncoder
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field, replace

from dotgraph.errors import DotWriteError
from dotgraph.quoting import quote
from dotgraph.shapes import DEFAULT_SHAPE, NodeShape
from dotgraph.sink import DEFAULT_ENCODING, ByteSink, emit, new_encoder

logger = logging.getLogger(__name__)

INDENT = "  "


@dataclass(slots=True)
class GraphProperties:
    is_directed: bool = False


@dataclass(slots=True, repr=False)
class Node:
    _id: str
    label: str | None = field(default=None, kw_only=True)
    shape: NodeShape = field(default=DEFAULT_SHAPE, kw_only=True)

    @property
    def id(self) -> str:
        return self._id

    def with_label(self, label: str) -> Node:
        """Return a copy of this node carrying ``label``."""
        return replace(self, label=label)

    def with_shape(self, shape: NodeShape) -> Node:
        """Return a copy of this node drawn as ``shape``."""
        return replace(self, shape=shape)

    def set_label(self, label: str) -> Node:
        """Overwrite the label in place and return ``self`` for chaining."""
        self.label = label
        return self

    def write(self, sink: ByteSink, encoder: IncrementalEncoder | None = None) -> None:
        attrs: list[str] = []
        if self.label is not None:
            attrs.append(f"label={quote(self.label)}")
        if self.shape != DEFAULT_SHAPE:
            attrs.append(f"shape={self.shape}")
        emit(
            sink,
            f"{INDENT}{quote(self._id)}[{', '.join(attrs)}];\n",
            encoder or new_encoder(),
        )

    def __repr__(self) -> str:
        return f"Node(id={self._id!r}, label={self.label!r}, shape={self.shape!r})"


@dataclass(slots=True, frozen=True)
class Edge:
    from_node_id: str
    to_node_id: str

    def write(
        self,
        sink: ByteSink,
        is_directed: bool,
        encoder: IncrementalEncoder | None = None,
    ) -> None:
        connector = "->" if is_directed else "--"
        emit(
            sink,
            f"{INDENT}{quote(self.from_node_id)} {connector} {quote(self.to_node_id)};\n",
            encoder or new_encoder(),
        )


class Graph:
    """A named graph whose nodes and edges are written out in insertion order.

    Edges refer to nodes by id only. Nothing checks that those ids were
    added as nodes, and duplicate node ids are written as many times as
    they were added; DOT declares a node the first time it is mentioned.
    """

    def __init__(self, name: str):
        self.name = name
        self._properties = GraphProperties()
        self._nodes: list[Node] = []
        self._edges: list[Edge] = []

    @property
    def properties(self) -> GraphProperties:
        return replace(self._properties)

    @property
    def nodes(self) -> tuple[Node, ...]:
        return tuple(self._nodes)

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    def add_node(self, node: Node) -> None:
        """Append ``node``. The graph owns it from here on."""
        self._nodes.append(node)

    def add_edge(self, edge: Edge) -> None:
        self._edges.append(edge)

    @contextmanager
    def edit_properties(self) -> Iterator[GraphProperties]:
        """Edit graph-level properties inside a ``with`` block.

        The block works on a copy that is stored back when it exits
        normally and dropped if it raises. Do not keep the yielded object
        after the block ends.
        """
        draft = replace(self._properties)
        yield draft
        self._properties = replace(draft)

    def write_dot(self, sink: ByteSink, *, encoding: str = DEFAULT_ENCODING) -> None:
        """Write the graph as DOT text to ``sink``.

        Raises :class:`DotWriteError` as soon as the sink fails; whatever
        was written before the failure is left in the sink.
        """
        is_directed = self._properties.is_directed
        graph_type = "digraph" if is_directed else "graph"
        encoder = new_encoder(encoding)
        try:
            emit(sink, f"{graph_type} {quote(self.name)} {{\n", encoder)
            for node in self._nodes:
                node.write(sink, encoder)
            for edge in self._edges:
                edge.write(sink, is_directed, encoder)
            emit(sink, "}\n", encoder, final=True)
        except DotWriteError as exc:
            logger.debug("Failed to write graph %r: %s", self.name, exc)
            raise
        logger.debug(
            "Wrote graph %r with %d nodes and %d edges",
            self.name,
            len(self._nodes),
            len(self._edges),
        )

    def to_dot(self, *, encoding: str = DEFAULT_ENCODING) -> str:
        buffer = io.BytesIO()
        self.write_dot(buffer, encoding=encoding)
        return buffer.getvalue().decode(encoding)

    def __repr__(self) -> str:
        return (
            f"Graph(name={self.name!r}, properties={self._properties!r}, "
            f"nodes={self._nodes!r}, edges={self._edges!r})"
        )
