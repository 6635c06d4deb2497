from dotgraph.errors import DotGraphError, DotWriteError
from dotgraph.files import save_dot
from dotgraph.model import Edge, Graph, GraphProperties, Node
from dotgraph.quoting import quote
from dotgraph.shapes import DEFAULT_SHAPE, NodeShape

__all__ = [
    "DEFAULT_SHAPE",
    "DotGraphError",
    "DotWriteError",
    "Edge",
    "Graph",
    "GraphProperties",
    "Node",
    "NodeShape",
    "quote",
    "save_dot",
]
