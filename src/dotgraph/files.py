from pathlib import Path

from dotgraph.model import Graph
from dotgraph.sink import DEFAULT_ENCODING


def save_dot(path: str | Path, graph: Graph, *, encoding: str = DEFAULT_ENCODING) -> Path:
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("wb") as handle:
        graph.write_dot(handle, encoding=encoding)
    return output_path
