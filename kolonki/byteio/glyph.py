# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import Dict, List, Mapping

from .const import GlyphTableType

PLACEHOLDER = '.'
CONTINUATION_GLYPH = ' '

PRINTABLE_CHARCODES = range(0x20, 0x7f)

CONTROL_PICTURES: Dict[int, str] = {
    **{b: chr(0x2400 + b) for b in range(0x00, 0x20)},  # ␀ ␁ ... ␟
    0x7f: '\u2421',  # ␡
}


class GlyphTable:
    """
    Byte -> display string mapping for text columns. Entries may be longer
    than one byte when encoded, but each is expected to occupy one cell.

    :param decode_utf8: render valid multi-byte UTF-8 sequences as
                        the characters they encode instead of per-byte glyphs.
    """
    def __init__(self, table_type: GlyphTableType, glyphs: Mapping[int, str], decode_utf8: bool = False):
        self._table_type = table_type
        self._glyphs: Dict[int, str] = dict(glyphs)
        self._decode_utf8 = decode_utf8

    @property
    def table_type(self) -> GlyphTableType:
        return self._table_type

    @property
    def decode_utf8(self) -> bool:
        return self._decode_utf8

    def get(self, byte: int) -> str|None:
        return self._glyphs.get(byte)

    def __contains__(self, byte: int) -> bool:
        return byte in self._glyphs

    def __len__(self) -> int:
        return len(self._glyphs)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}[{self._table_type.value}]'


def _printable_map() -> Dict[int, str]:
    return {b: chr(b) for b in PRINTABLE_CHARCODES}


def _make_default_table() -> GlyphTable:
    glyphs = {b: '·' for b in range(0x00, 0x100)}
    glyphs.update(_printable_map())
    glyphs.update({b: '_' for b in range(0x09, 0x0e)})
    glyphs.update({0x00: '0', 0x08: '«', 0x7f: '«'})
    return GlyphTable(GlyphTableType.DEFAULT, glyphs, decode_utf8=True)


def _make_cp437_table() -> GlyphTable:
    lower: List[str] = list('⋄☺☻♥♦♣♠•◘○◙♂♀♪♫☼►◄↕‼¶§▬↨↑↓→←∟↔▲▼')
    upper: str = bytes(range(0x80, 0x100)).decode('cp437')

    glyphs = {b: g for b, g in enumerate(lower)}
    glyphs.update(_printable_map())
    glyphs.update({0x7f: '⌂'})
    glyphs.update({b: g for b, g in zip(range(0x80, 0x100), upper)})
    return GlyphTable(GlyphTableType.CP437, glyphs)


def _make_classic_table() -> GlyphTable:
    glyphs = {b: PLACEHOLDER for b in range(0x00, 0x100)}
    glyphs.update(_printable_map())
    return GlyphTable(GlyphTableType.CLASSIC, glyphs)


DEFAULT_TABLE = _make_default_table()
CP437_TABLE = _make_cp437_table()
CLASSIC_TABLE = _make_classic_table()

GLYPH_TABLES: Dict[GlyphTableType, GlyphTable|None] = {
    GlyphTableType.NONE: None,
    GlyphTableType.DEFAULT: DEFAULT_TABLE,
    GlyphTableType.CP437: CP437_TABLE,
    GlyphTableType.CLASSIC: CLASSIC_TABLE,
}


def get_glyph_table(table_type: GlyphTableType) -> GlyphTable|None:
    return GLYPH_TABLES[table_type]


def resolve(byte: int, control_mode: bool, table: GlyphTable|None) -> str:
    """
    Determine how the byte should be displayed in a text column:

      1. control picture (e.g. ␀ for 0x00), if ``control_mode`` is enabled
         and the byte is a C0 control char or DEL;
      2. table entry, if there is a table and it has one;
      3. the byte itself if it's printable, a period otherwise.
    """
    if control_mode and byte in CONTROL_PICTURES:
        return CONTROL_PICTURES[byte]

    if table is not None and byte in table:
        return table.get(byte)

    if byte in PRINTABLE_CHARCODES:
        return chr(byte)
    return PLACEHOLDER
