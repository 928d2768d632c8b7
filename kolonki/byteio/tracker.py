# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
"""
Tracking of the multi-byte UTF-8 sequence the dump is currently passing
through. The state is only used to highlight bytes that belong to the same
code point; continuation bytes are not validated here.

State should be fed offsets of one stream in increasing order and be reset
to :data:`CLOSED` when another stream begins.
"""
from __future__ import annotations

from typing import NamedTuple

from .chunk import Chunk
from .utf8 import sequence_length


class Utf8SpanState(NamedTuple):
    anchor_offset: int|None = None
    remaining_length: int = 0

    @property
    def is_anchored(self) -> bool:
        return self.anchor_offset is not None

    @property
    def is_multibyte(self) -> bool:
        """ True if the tracked sequence consists of more than one byte. """
        return self.is_anchored and self.remaining_length > 0


CLOSED = Utf8SpanState()


def observe(state: Utf8SpanState, offset: int, byte: int) -> Utf8SpanState:
    """
    Open a new span at ``offset`` if there is no span yet or if ``offset``
    is past the end of the tracked one; otherwise return the state unchanged.
    Bytes that cannot start a sequence open a single-byte span.
    """
    if not state.is_anchored or state.anchor_offset + state.remaining_length < offset:
        return Utf8SpanState(offset, max(sequence_length(byte) - 1, 0))
    return state


def is_open(state: Utf8SpanState, offset: int) -> bool:
    if not state.is_anchored:
        return False
    return state.anchor_offset + state.remaining_length > offset


def observe_chunk(state: Utf8SpanState, chunk: Chunk) -> Utf8SpanState:
    for idx, b in enumerate(chunk.data):
        state = observe(state, chunk.offset + idx, b)
    return state
