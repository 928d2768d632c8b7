# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
"""
Minimal UTF-8 toolset: lead byte classification, strict decoding and
relaxed encoding of single code points.
"""
from __future__ import annotations

from typing import List, Tuple

from ..common import InvalidSequence

UNICODE_MAX = 0x10FFFF
CONTINUATION = ''

_SEQUENCE_LENGTH: Tuple[int, ...] = tuple(
    1 if b <= 0x7f else
    2 if 0xc2 <= b <= 0xdf else
    3 if 0xe0 <= b <= 0xef else
    4 if 0xf0 <= b <= 0xf4 else
    0  # continuation bytes, overlong leads 0xc0-0xc1, leads beyond U+10FFFF
    for b in range(0x100)
)
_LEAD_MASK: Tuple[int, ...] = (0x00, 0x7f, 0x1f, 0x0f, 0x07)
_MIN_CODEPOINT: Tuple[int, ...] = (0x00, 0x00, 0x80, 0x800, 0x10000)
_LEAD_MARK: Tuple[int, ...] = (0x00, 0x00, 0xc0, 0xe0, 0xf0)


def sequence_length(lead_byte: int) -> int:
    """
    Return the length of the sequence starting with ``lead_byte``: 1 to 4,
    or 0 if the byte cannot start a valid sequence.
    """
    return _SEQUENCE_LENGTH[lead_byte]


def decode(data: bytes) -> int:
    """
    Decode the sequence at the beginning of ``data`` and return its code point.
    Bytes following the sequence are ignored.

    :raises InvalidSequence: on invalid lead or continuation bytes, insufficient
        input, overlong forms, surrogates, noncharacters and values beyond
        U+10FFFF.
    """
    if not data:
        raise InvalidSequence('Empty input')

    length = sequence_length(data[0])
    if length == 0:
        raise InvalidSequence(f'Byte 0x{data[0]:02x} cannot start a sequence')
    if length > len(data):
        raise InvalidSequence(f'Expected {length} bytes, got {len(data)}')

    result = data[0] & _LEAD_MASK[length]
    for b in data[1:length]:
        if b & 0xc0 != 0x80:
            raise InvalidSequence(f'Byte 0x{b:02x} is not a continuation byte')
        result = (result << 6) | (b & 0x3f)

    if result < _MIN_CODEPOINT[length]:
        raise InvalidSequence(f'Overlong encoding of U+{result:04X}')
    if result > UNICODE_MAX:
        raise InvalidSequence(f'Value 0x{result:X} is beyond U+{UNICODE_MAX:X}')
    if 0xd800 <= result <= 0xdfff:
        raise InvalidSequence(f'Surrogate U+{result:04X}')
    if 0xfdd0 <= result <= 0xfdef or (result & 0xfffe) == 0xfffe:
        raise InvalidSequence(f'Noncharacter U+{result:04X}')
    return result


def encode(codepoint: int) -> bytes:
    """
    Encode ``codepoint`` into its shortest form. Surrogates are encoded
    as well, even though the result is not valid UTF-8, so that invalid
    input can be reproduced on purpose.

    :raises InvalidSequence: if the value is negative or beyond U+10FFFF.
    """
    if codepoint < 0 or codepoint > UNICODE_MAX:
        raise InvalidSequence(f'Cannot encode 0x{codepoint:X}')
    if codepoint < 0x80:
        return bytes((codepoint,))

    if codepoint < 0x800:
        length = 2
    elif codepoint < 0x10000:
        length = 3
    else:
        length = 4

    out = bytearray(length)
    for i in range(length - 1, 0, -1):
        out[i] = (codepoint & 0x3f) | 0x80
        codepoint >>= 6
    out[0] = codepoint | _LEAD_MARK[length]
    return bytes(out)


def decode_multibyte(data: bytes, printable_only: bool = False) -> List[str|None]:
    """
    Split ``data`` into per-byte cells. Each valid multi-byte sequence that
    fits entirely into ``data`` yields the decoded character at its lead
    byte position and ``CONTINUATION`` at the positions of the following
    bytes. All other positions (ASCII and undecodable bytes) are *None*.

    :param printable_only: treat sequences encoding non-printable characters
                           (e.g. C1 controls) as undecodable.
    """
    cells: List[str|None] = [None] * len(data)
    i = 0
    while i < len(data):
        length = sequence_length(data[i])
        char = _decode_char(data[i:i + length]) if length > 1 else None

        if char is None or (printable_only and not char.isprintable()):
            i += 1
            continue

        cells[i] = char
        for j in range(i + 1, i + length):
            cells[j] = CONTINUATION
        i += length
    return cells


def _decode_char(data: bytes) -> str|None:
    try:
        return chr(decode(data))
    except InvalidSequence:
        return None
