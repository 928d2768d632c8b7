# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import NamedTuple


class Chunk(NamedTuple):
    """ Bytes read for one output line and their absolute stream offset. """
    data: bytes
    offset: int
