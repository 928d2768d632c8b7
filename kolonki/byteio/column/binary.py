# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from pytermor import SeqIndex as seq

from . import AbstractColumn
from ..chunk import Chunk
from ..config import RenderConfig
from ..const import ColumnPart
from ..tracker import Utf8SpanState, CLOSED, observe, is_open
from ... import sgr


class BytesColumn(AbstractColumn):
    """
    Hex digits of every byte of the chunk (or of its left/right half).

    Output width doesn't depend on the chunk length: a short final chunk is
    padded with three spaces per missing byte, plus one space in place of the
    half-line separator if the chunk ended before reaching it.

       40  72 69 20 61 73 20 68 c3  ab 20 68 61 64 20 73 70
       60  c3 af 72 69 6f 6e 2e 20  7f 0a 0a
                                             ^~~~~~~~~~~~~~~~
    """
    BYTE_WIDTH = 3
    HALF_SEPARATOR = ' '

    def __init__(self, config: RenderConfig, part: ColumnPart = ColumnPart.FULL):
        super().__init__(config)
        self._part = part
        self._start, self._end = part.bounds(config.line_length)

        self._reset = str(seq.RESET)
        self._span_keep = str(seq.COLOR_OFF)
        self._span_opening = sgr.SPAN_OPENING

    @property
    def part(self) -> ColumnPart:
        return self._part

    @property
    def width(self) -> int:
        width = (self._end - self._start) * self.BYTE_WIDTH
        if self._part is ColumnPart.FULL:
            width += len(self.HALF_SEPARATOR)
        return width

    def render(self, chunk: Chunk, span_state: Utf8SpanState = CLOSED) -> str:
        half = self._config.half_length
        highlight = self._config.highlight_spans
        result = ''

        for idx, b in enumerate(chunk.data):
            offset = chunk.offset + idx
            if highlight:
                # bytes before the part are observed too, so that both halves
                # see the same state as the full column does
                span_state = observe(span_state, offset, b)
            if not self._start <= idx < self._end:
                continue

            if self._part is ColumnPart.FULL and idx == half:
                result += self.HALF_SEPARATOR
            result += self._format_byte(b, offset, span_state)

        if self._config.color:
            result += self._reset

        printed = min(max(len(chunk.data), self._start), self._end) - self._start
        result += ' ' * ((self._end - self._start - printed) * self.BYTE_WIDTH)
        if self._part is ColumnPart.FULL and len(chunk.data) <= half:
            result += self.HALF_SEPARATOR
        return result

    def _format_byte(self, b: int, offset: int, span_state: Utf8SpanState) -> str:
        if not self._config.color:
            return f'{b:02x} '

        if self._config.highlight_spans and span_state.is_multibyte:
            opening = self._span_opening
        else:
            opening = sgr.FG_INDEXED[self._config.style_table[b]]

        if self._config.highlight_spans and is_open(span_state, offset):
            closing = self._span_keep  # keep the background up to the next byte
        else:
            closing = self._reset
        return f'{opening}{b:02x}{closing} '
