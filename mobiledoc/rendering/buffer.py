"""Buffered text writer wrapped around a caller's sink for one render."""

from __future__ import annotations

import io
import logging
from typing import IO, Any, List

LOGGER = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 4096


def _is_text_sink(sink: Any) -> bool:
    if isinstance(sink, io.TextIOBase):
        return True
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
        return False
    # Duck-typed sinks: text when they advertise an encoding (like sys.stdout)
    return getattr(sink, "encoding", None) is not None


class BufferedTextWriter:
    """Collects text and spills it to the underlying sink in chunks.

    Text sinks get ``str``; any other sink gets bytes in ``encoding``. Once a
    chunk is spilled it stays in the sink even if the render later fails.
    """

    def __init__(
        self,
        sink: IO[Any],
        *,
        encoding: str = "utf-8",
        buffer_size: int = DEFAULT_BUFFER_SIZE,
    ):
        self._sink = sink
        self._text = _is_text_sink(sink)
        self.encoding = encoding
        self.buffer_size = max(1, int(buffer_size))
        self._chunks: List[str] = []
        self._pending = 0

    def write(self, text: str) -> int:
        if not isinstance(text, str):
            raise TypeError(f"write() argument must be str, not {type(text).__name__}")
        if not text:
            return 0
        self._chunks.append(text)
        self._pending += len(text)
        if self._pending >= self.buffer_size:
            self._spill()
        return len(text)

    @property
    def buffered(self) -> int:
        """Number of characters written but not yet handed to the sink."""
        return self._pending

    def _spill(self) -> None:
        if not self._chunks:
            return
        data = "".join(self._chunks)
        self._chunks = []
        self._pending = 0
        LOGGER.debug("mobiledoc.buffer.spill chars=%d", len(data))
        if self._text:
            self._sink.write(data)
        else:
            self._sink.write(data.encode(self.encoding))

    def flush(self) -> None:
        """Hand all buffered text to the sink and flush the sink if it can."""
        self._spill()
        flush = getattr(self._sink, "flush", None)
        if callable(flush):
            flush()
