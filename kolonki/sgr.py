# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
"""
Precomputed opening sequences of byte cells. Everything else is taken from
:class:`pytermor.SeqIndex` as is.
"""
from __future__ import annotations

from typing import List

from pytermor import SeqIndex, make_color_256

SPAN_COLOR = 15

# one assembled opening sequence per style id, looked up per rendered byte
FG_INDEXED: List[str] = [str(make_color_256(idx)) for idx in range(0x100)]

# bytes belonging to a multi-byte UTF-8 sequence
SPAN_OPENING: str = str(SeqIndex.BG_GRAY + make_color_256(SPAN_COLOR))
