"""Byte sinks accepted by the DOT writer."""

from __future__ import annotations

import codecs
from typing import Protocol

from dotgraph.errors import DotWriteError

DEFAULT_ENCODING = "utf-8"


class ByteSink(Protocol):
    def write(self, data: bytes, /) -> object: ...


def new_encoder(encoding: str = DEFAULT_ENCODING) -> codecs.IncrementalEncoder:
    """Return an encoder to share across every line of one document.

    Codecs that open with a byte-order mark (``utf-16``, ``utf-8-sig``)
    emit it once per encoder, not once per line.
    """
    return codecs.getincrementalencoder(encoding)()


def emit(
    sink: ByteSink, text: str, encoder: codecs.IncrementalEncoder, final: bool = False
) -> None:
    data = encoder.encode(text, final)
    try:
        sink.write(data)
    except (OSError, ValueError) as exc:
        # Closed file objects raise ValueError rather than OSError.
        raise DotWriteError(f"Failed to write to sink: {exc}", cause=exc) from exc
