# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from enum import Enum
from typing import Dict

MAX_LINE_LENGTH = 128
DEFAULT_LINE_LENGTH = 16
DEFAULT_COLUMNS = 'offset,bytes,ascii'
COLUMN_SEPARATOR = 4 * ' '

COLORS_ENV_VAR = 'KOLONKI_COLORS'
DEFAULT_STYLE_CONFIG = 'printable=15;blackspace=1;nul=8;whitespace=8;128-255=3;1-8=6;11-31=6'

RANGE_ALIASES: Dict[str, str] = {
    'printable': '0x20-0x7E',
    'unprintable': '0x0-0x1F,0x7F',
    'whitespace': '0x8-0xD,0x20',
    'blackspace': '0x08,0x7F',
    'nul': '0x0',
    'del': '0x7F',
}


class ColumnKind(Enum):
    OFFSET = 'offset'
    BYTES = 'bytes'
    BYTES_LEFT = 'bytes-left'
    BYTES_RIGHT = 'bytes-right'
    ASCII = 'ascii'
    ASCII_LEFT = 'ascii-left'
    ASCII_RIGHT = 'ascii-right'
    PLUGIN = 'plugin'


class ColumnPart(Enum):
    FULL = 'full'
    LEFT = 'left'
    RIGHT = 'right'

    def bounds(self, line_length: int) -> tuple[int, int]:
        """ Chunk indexes [start; end) covered by this part of the line. """
        half = line_length // 2
        if self is ColumnPart.LEFT:
            return 0, half
        if self is ColumnPart.RIGHT:
            return half, line_length
        return 0, line_length


class GlyphTableType(Enum):
    NONE = 'none'
    DEFAULT = 'default'
    CP437 = 'cp437'
    CLASSIC = 'classic'


class ActionMode(Enum):
    ALWAYS = 'always'
    AUTO = 'auto'
    NEVER = 'never'

    @property
    def is_always(self) -> bool: return self is ActionMode.ALWAYS
    @property
    def is_auto(self) -> bool: return self is ActionMode.AUTO
    @property
    def is_never(self) -> bool: return self is ActionMode.NEVER
