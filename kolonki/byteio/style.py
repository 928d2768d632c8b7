# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

from .range import ByteSet, parse_int, parse_range
from ..common import MalformedStatement, StyleOutOfRange

STYLE_MAX = 0xff


class StyleTable:
    """
    Immutable mapping of every byte value to the style id (256-color palette
    index) it is displayed with. Bytes without explicit style have style 0.
    """
    SIZE = 0x100

    def __init__(self, styles: Iterable[int] = None):
        if styles is None:
            styles = [0] * self.SIZE
        self._styles: Tuple[int, ...] = tuple(styles)

        if len(self._styles) != self.SIZE:
            raise ValueError(f'Style table should have exactly {self.SIZE} entries, got {len(self._styles)}')
        if any(not 0 <= s <= STYLE_MAX for s in self._styles):
            raise ValueError('Style ids should be in range [0; 255]')

    def __getitem__(self, byte: int) -> int:
        return self._styles[byte]

    def __iter__(self) -> Iterator[int]:
        return iter(self._styles)

    def __len__(self) -> int:
        return self.SIZE

    def __eq__(self, other: StyleTable) -> bool:
        if not isinstance(other, StyleTable):
            return False
        return self._styles == other._styles

    def __hash__(self) -> int:
        return hash(self._styles)

    def __repr__(self) -> str:
        styled = sum(1 for s in self._styles if s)
        return f'{self.__class__.__name__}[{styled} styled]'


class StyleTableBuilder:
    """
    Accumulates configuration strings of ``;``-separated ``<range>=<style>``
    statements. Later statements override earlier ones, including statements
    of previously applied strings:

    >>> StyleTableBuilder().apply('0x41=5;0x41=9').build()[0x41]
    9
    """
    def __init__(self, base: StyleTable = None):
        self._styles: List[int] = list(base or StyleTable())

    def apply(self, config: str) -> StyleTableBuilder:
        """
        Parse every statement of ``config`` and then assign the styles. If
        any statement is invalid, nothing from this string is applied.
        """
        assignments = [self._parse_statement(statement)
                       for statement in config.split(';')
                       if statement.strip()]

        for byte_set, style in assignments:
            for b in byte_set:
                self._styles[b] = style
        return self

    def build(self) -> StyleTable:
        return StyleTable(self._styles)

    def _parse_statement(self, statement: str) -> tuple[ByteSet, int]:
        lhs, sep, rhs = statement.partition('=')
        if not sep:
            raise MalformedStatement(statement)

        byte_set = parse_range(lhs)
        try:
            style = parse_int(rhs)
        except ValueError as e:
            raise MalformedStatement(statement, f'has invalid style id: {rhs!r}') from e

        if style > STYLE_MAX:
            raise StyleOutOfRange(style)
        return byte_set, style


def build_style_table(*configs: str) -> StyleTable:
    builder = StyleTableBuilder()
    for config in configs:
        builder.apply(config)
    return builder.build()
