# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from argparse import Namespace
from typing import Any, List

from .byteio.const import ActionMode, GlyphTableType, DEFAULT_COLUMNS, DEFAULT_LINE_LENGTH, MAX_LINE_LENGTH
from .common import ArgumentError


class Settings(Namespace):
    def __init__(self, **kwargs: Any):
        self.color: str = ActionMode.AUTO.value
        self.control: bool = False
        self.debug: int = 0
        self.filenames: List[str] = []
        self.format: str = DEFAULT_COLUMNS
        self.length: int = 0  # no limit
        self.line_length: int = DEFAULT_LINE_LENGTH
        self.pager: str = ActionMode.AUTO.value
        self.skip: int = 0
        self.table: str = GlyphTableType.DEFAULT.value
        self.utf8: bool = False
        self.version: bool = False
        super().__init__(**kwargs)

    @property
    def color_mode(self) -> ActionMode:
        return self._resolve_prefixed(ActionMode, self.color, 'color mode')

    @property
    def pager_mode(self) -> ActionMode:
        return self._resolve_prefixed(ActionMode, self.pager, 'pager mode')

    @property
    def table_type(self) -> GlyphTableType:
        return self._resolve_prefixed(GlyphTableType, self.table, 'table')

    @property
    def line_length_exceeded(self) -> bool:
        return self.line_length > MAX_LINE_LENGTH

    @property
    def effective_line_length(self) -> int:
        if self.line_length < 1:
            raise ArgumentError(f'Line length should be positive, got {self.line_length}')
        return min(self.line_length, MAX_LINE_LENGTH)

    @property
    def effective_filenames(self) -> List[str]:
        return self.filenames or ['-']

    @staticmethod
    def _resolve_prefixed(enum_cls, value: str, title: str):
        """
        Match value by the first two letters, so that 'cp' means 'cp437'
        and 'al' means 'always'.
        """
        prefix = value.strip().lower()[:2]
        for member in enum_cls:
            if len(prefix) == 2 and member.value.startswith(prefix):
                return member
        choices = ', '.join(m.value for m in enum_cls)
        raise ArgumentError(f"Invalid {title} '{value}', expected one of: {choices}")


class SettingsManager:
    app_settings: Settings = Settings()

    @staticmethod
    def init():
        SettingsManager.app_settings = Settings()
