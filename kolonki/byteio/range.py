# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
"""
Byte range expressions: comma-separated list of integers and inclusive
``lo-hi`` intervals, e.g. ``"5,8-10"`` or ``"0x20-0x7E"``, or one of the
aliases defined in :data:`RANGE_ALIASES`.

>>> sorted(parse_range('0x41-0x43,0b1'))
[1, 65, 66, 67]
"""
from __future__ import annotations

from string import digits, hexdigits
from typing import FrozenSet, Set

from .const import RANGE_ALIASES
from ..common import InvalidRange

ByteSet = FrozenSet[int]

BYTE_MAX = 0xff

_BASE_PREFIXES = {'0x': 16, '0o': 8, '0b': 2}
_BASE_DIGITS = {
    16: frozenset(hexdigits),
    10: frozenset(digits),
    8: frozenset('01234567'),
    2: frozenset('01'),
}


def parse_int(literal: str) -> int:
    """
    Parse non-negative integer literal. Decimal by default, ``0x``, ``0o``
    and ``0b`` prefixes switch the base. Leading zero does *not* mean
    octal: ``"0300"`` is three hundred.

    :raises ValueError: if the literal is empty or contains invalid digits.
    """
    s = literal.strip()
    base = _BASE_PREFIXES.get(s[:2].lower(), 10)
    if base != 10:
        s = s[2:]

    if not s or not set(s) <= _BASE_DIGITS[base]:
        raise ValueError(f'Invalid integer literal: {literal!r}')
    return int(s, base)


def parse_range(expr: str) -> ByteSet:
    """
    Expand range expression into a set of byte values.

    :raises InvalidRange: if an item is neither an integer nor a ``lo-hi``
        pair nor an alias, if a value exceeds 255 or if ``lo > hi``.
    """
    result: Set[int] = set()

    for item in RANGE_ALIASES.get(expr.strip(), expr).split(','):
        item = item.strip()
        if item in RANGE_ALIASES:
            result.update(parse_range(RANGE_ALIASES[item]))
            continue

        lo_str, sep, hi_str = item.partition('-')
        try:
            lo = parse_int(lo_str)
            hi = parse_int(hi_str) if sep else lo
        except ValueError as e:
            raise InvalidRange(expr) from e

        if hi > BYTE_MAX:
            raise InvalidRange(expr, f'exceeds {BYTE_MAX}')
        if lo > hi:
            raise InvalidRange(expr, f'has lower bound above upper one ({item})')
        result.update(range(lo, hi + 1))

    return frozenset(result)
