# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import List

from pytermor import SeqIndex as seq

from . import AbstractColumn
from ..chunk import Chunk
from ..config import RenderConfig
from ..const import ColumnPart
from ..glyph import resolve, CONTINUATION_GLYPH
from ..tracker import Utf8SpanState, CLOSED
from ..utf8 import decode_multibyte, CONTINUATION
from ... import sgr


class AsciiColumn(AbstractColumn):
    BOUNDARY = '|'
    BOUNDARY_COLOR = '│'

    def __init__(self, config: RenderConfig, part: ColumnPart = ColumnPart.FULL):
        super().__init__(config)
        self._part = part
        self._start, self._end = part.bounds(config.line_length)
        self._boundary = self.BOUNDARY_COLOR if config.color else self.BOUNDARY
        self._reset = str(seq.RESET)

    @property
    def part(self) -> ColumnPart:
        return self._part

    @property
    def width(self) -> int:
        return self._end - self._start + 2 * len(self._boundary)

    def render(self, chunk: Chunk, span_state: Utf8SpanState = CLOSED) -> str:
        data = chunk.data[self._start:self._end]
        glyphs = self._get_glyphs(data)

        if self._config.color:
            styles = self._config.style_table
            glyphs = [f'{sgr.FG_INDEXED[styles[b]]}{g}{self._reset}' for b, g in zip(data, glyphs)]

        padding = ' ' * (self._end - self._start - len(data))
        return self._boundary + ''.join(glyphs) + padding + self._boundary

    def _get_glyphs(self, data: bytes) -> List[str]:
        table = self._config.glyph_table
        control_mode = self._config.control_mode
        if table is None or not table.decode_utf8:
            return [resolve(b, control_mode, table) for b in data]

        result = []
        for b, decoded in zip(data, decode_multibyte(data, printable_only=True)):
            if decoded is None:
                result.append(resolve(b, control_mode, table))
            elif decoded == CONTINUATION:
                result.append(CONTINUATION_GLYPH)
            else:
                result.append(decoded)
        return result
