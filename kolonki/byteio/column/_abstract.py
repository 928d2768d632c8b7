# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import abc

from ..chunk import Chunk
from ..config import RenderConfig
from ..tracker import Utf8SpanState, CLOSED


class AbstractColumn(metaclass=abc.ABCMeta):
    def __init__(self, config: RenderConfig):
        self._config = config

    @abc.abstractmethod
    def render(self, chunk: Chunk, span_state: Utf8SpanState = CLOSED) -> str:
        """
        Produce column text for one line. ``span_state`` is the UTF-8 span
        state as it was before the first byte of the chunk.
        """
        raise NotImplementedError

    @property
    def config(self) -> RenderConfig:
        return self._config
