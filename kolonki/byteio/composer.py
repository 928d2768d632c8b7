# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import List, Protocol, TextIO

from pytermor import SeqIndex as seq

from .chunk import Chunk
from .column import AbstractColumn
from .config import RenderConfig
from .const import COLUMN_SEPARATOR
from .tracker import Utf8SpanState, CLOSED, observe_chunk
from ..console import ConsoleDebugBuffer


class ByteStream(Protocol):
    def read(self, max_bytes: int) -> bytes: ...
    def seek(self, offset: int) -> int: ...


class LineComposer:
    """
    Reads a stream line by line and prints every configured column for each
    line. Any object with ``read(n)`` and ``seek(offset)`` returning the new
    position will do as a stream: binary file objects, :class:`io.BytesIO`
    and :class:`.Reader` all fit.
    """
    def __init__(self, config: RenderConfig, columns: List[AbstractColumn]):
        self._config = config
        self._columns = columns
        self._debug_buffer = ConsoleDebugBuffer('compose', seq.GREEN)

    def dump(self, stream: ByteStream, sink: TextIO) -> int:
        """
        Print the stream and return the amount of bytes read. The stream
        output is followed by an empty line, even if reading fails midway.
        """
        span_state = CLOSED
        offset = start_offset = 0
        try:
            if self._config.skip:
                offset = start_offset = stream.seek(self._config.skip)
            while True:
                max_read = self._config.line_length
                if self._config.length:
                    max_read = min(max_read, self._config.length - (offset - start_offset))
                    if max_read <= 0:
                        self._debug_buffer.write(2, 'Length limit reached', offset=offset)
                        break

                data = stream.read(max_read)
                if not data:
                    self._debug_buffer.write(2, 'Encountered EOF', offset=offset)
                    break

                chunk = Chunk(data, offset)
                sink.write(self.compose_line(chunk, span_state))
                if self._config.highlight_spans:
                    span_state = observe_chunk(span_state, chunk)
                offset += len(data)
        finally:
            sink.write('\n')
        return offset - start_offset

    def compose_line(self, chunk: Chunk, span_state: Utf8SpanState = CLOSED) -> str:
        return ''.join(col.render(chunk, span_state) + COLUMN_SEPARATOR for col in self._columns) + '\n'
