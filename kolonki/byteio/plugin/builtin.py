# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
"""
Column providers shipped with the app. A provider receives the chunk bytes,
their count and the absolute offset of the first byte, and returns the text
of the column; the output is placed into the line as is.
"""
from __future__ import annotations

from typing import Callable, Dict

from ..glyph import PRINTABLE_CHARCODES
from ..utf8 import decode_multibyte

ColumnProvider = Callable[[bytes, int, int], str]

REPLACEMENT_CHAR = '�'


def display_utf8(data: bytes, length: int, offset: int) -> str:
    """ Chunk decoded as UTF-8 text; undecodable bytes become U+FFFD. """
    result = ''
    for b, decoded in zip(data[:length], decode_multibyte(data[:length], printable_only=True)):
        if decoded is not None:
            result += decoded
        elif b in PRINTABLE_CHARCODES:
            result += chr(b)
        else:
            result += REPLACEMENT_CHAR
    return result


def display_dec(data: bytes, length: int, offset: int) -> str:
    """ Decimal byte values. """
    return ' '.join(f'{b:3d}' for b in data[:length])


BUILTIN_PROVIDERS: Dict[str, ColumnProvider] = {
    'utf8': display_utf8,
    'dec': display_dec,
}
