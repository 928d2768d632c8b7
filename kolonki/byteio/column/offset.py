# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from pytermor import SeqIndex as seq, enclose

from . import AbstractColumn
from ..chunk import Chunk
from ..tracker import Utf8SpanState, CLOSED


class OffsetColumn(AbstractColumn):
    def render(self, chunk: Chunk, span_state: Utf8SpanState = CLOSED) -> str:
        if self._config.color:
            return enclose(seq.WHITE, f'{chunk.offset:4x}')
        return f'{chunk.offset:08x}'
