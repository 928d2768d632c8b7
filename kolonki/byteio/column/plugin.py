# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from . import AbstractColumn
from ..chunk import Chunk
from ..config import RenderConfig
from ..plugin import ColumnProvider
from ..tracker import Utf8SpanState, CLOSED


class PluginColumn(AbstractColumn):
    def __init__(self, config: RenderConfig, name: str, provider: ColumnProvider):
        super().__init__(config)
        self._name = name
        self._provider = provider

    @property
    def name(self) -> str:
        return self._name

    def render(self, chunk: Chunk, span_state: Utf8SpanState = CLOSED) -> str:
        return self._provider(chunk.data, len(chunk.data), chunk.offset)
