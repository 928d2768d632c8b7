# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from .const import ColumnKind, ColumnPart, GlyphTableType, ActionMode, MAX_LINE_LENGTH, DEFAULT_LINE_LENGTH, \
    DEFAULT_COLUMNS, COLUMN_SEPARATOR, COLORS_ENV_VAR, DEFAULT_STYLE_CONFIG, RANGE_ALIASES
from .chunk import Chunk
from .utf8 import sequence_length, decode, encode, decode_multibyte
from .range import ByteSet, parse_int, parse_range
from .style import StyleTable, StyleTableBuilder, build_style_table
from .tracker import Utf8SpanState, CLOSED, observe, is_open, observe_chunk
from .glyph import GlyphTable, get_glyph_table, resolve
from .column_spec import ColumnDescriptor, ColumnSpec, parse_column_spec
from .config import RenderConfig

from .plugin import ProviderRegistry
from .column import ColumnFactory
from .reader import Reader
from .composer import LineComposer
