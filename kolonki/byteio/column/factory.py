# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import List

from . import AbstractColumn, OffsetColumn, BytesColumn, AsciiColumn, PluginColumn
from ..column_spec import ColumnDescriptor
from ..config import RenderConfig
from ..const import ColumnKind, ColumnPart
from ..plugin import ProviderRegistry


class ColumnFactory:
    _PARTS = {
        ColumnKind.BYTES: ColumnPart.FULL,
        ColumnKind.BYTES_LEFT: ColumnPart.LEFT,
        ColumnKind.BYTES_RIGHT: ColumnPart.RIGHT,
        ColumnKind.ASCII: ColumnPart.FULL,
        ColumnKind.ASCII_LEFT: ColumnPart.LEFT,
        ColumnKind.ASCII_RIGHT: ColumnPart.RIGHT,
    }

    def __init__(self, config: RenderConfig, registry: ProviderRegistry = None):
        self._config = config
        self._registry = registry or ProviderRegistry()

    def create_all(self) -> List[AbstractColumn]:
        return [self.create(descriptor) for descriptor in self._config.columns]

    def create(self, descriptor: ColumnDescriptor) -> AbstractColumn:
        kind = descriptor.kind
        if kind is ColumnKind.OFFSET:
            return OffsetColumn(self._config)
        if kind in (ColumnKind.BYTES, ColumnKind.BYTES_LEFT, ColumnKind.BYTES_RIGHT):
            return BytesColumn(self._config, self._PARTS[kind])
        if kind in (ColumnKind.ASCII, ColumnKind.ASCII_LEFT, ColumnKind.ASCII_RIGHT):
            return AsciiColumn(self._config, self._PARTS[kind])
        if kind is ColumnKind.PLUGIN:
            return PluginColumn(self._config, descriptor.name, self._registry.resolve(descriptor.name))
        raise ValueError(f'Unknown column kind: {kind}')
