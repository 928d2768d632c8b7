# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from dataclasses import dataclass

from .column_spec import ColumnSpec, parse_column_spec
from .const import MAX_LINE_LENGTH, DEFAULT_LINE_LENGTH
from .glyph import GlyphTable, DEFAULT_TABLE
from .style import StyleTable


@dataclass(frozen=True)
class RenderConfig:
    """
    Everything the dump loop needs to know. Built once before the first
    stream is opened and shared by all column renderers.
    """
    columns: ColumnSpec = parse_column_spec()
    style_table: StyleTable = StyleTable()
    glyph_table: GlyphTable|None = DEFAULT_TABLE
    control_mode: bool = False
    utf8_highlight: bool = False
    line_length: int = DEFAULT_LINE_LENGTH
    color: bool = False
    skip: int = 0
    length: int = 0  # no limit

    def __post_init__(self):
        if not 1 <= self.line_length <= MAX_LINE_LENGTH:
            raise ValueError(f'Line length should be in range [1; {MAX_LINE_LENGTH}], got {self.line_length}')
        if not self.columns:
            raise ValueError('At least one column is required')
        if self.skip < 0 or self.length < 0:
            raise ValueError('Offset and length cannot be negative')

    @property
    def half_length(self) -> int:
        return self.line_length // 2

    @property
    def highlight_spans(self) -> bool:
        return self.color and self.utf8_highlight
