# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import importlib
from typing import Dict

from pytermor import SeqIndex as seq, enclose

from .builtin import ColumnProvider, BUILTIN_PROVIDERS
from ...common import UnknownColumn
from ...console import ConsoleDebugBuffer


class ProviderRegistry:
    """
    Resolves plugin column names into providers. Name part after the first
    dash is ignored, so both 'utf8' and 'utf8-text' refer to the 'utf8'
    provider. Lookup order:

      1. providers registered with :meth:`register`;
      2. builtin providers;
      3. importable Python module with the same name that defines
         a callable ``display(data, length, offset)``.
    """
    PROVIDER_ATTR = 'display'

    def __init__(self):
        self._providers: Dict[str, ColumnProvider] = dict(BUILTIN_PROVIDERS)
        self._debug_buffer = ConsoleDebugBuffer('plugins', seq.CYAN)

    def register(self, name: str, provider: ColumnProvider):
        if not callable(provider):
            raise TypeError(f'Column provider should be callable, got {provider!r}')
        self._providers[name] = provider

    def resolve(self, column_name: str) -> ColumnProvider:
        name = self.get_provider_name(column_name)
        if name in self._providers:
            return self._providers[name]

        try:
            module = importlib.import_module(name)
        except (ImportError, ValueError) as e:
            raise UnknownColumn(column_name) from e

        provider = getattr(module, self.PROVIDER_ATTR, None)
        if not callable(provider):
            raise UnknownColumn(column_name, f"plugin module '{name}' has no '{self.PROVIDER_ATTR}' function")

        self._debug_buffer.write(2, f'Loaded plugin {enclose(seq.BOLD, name)}: {module!r}')
        self._providers[name] = provider
        return provider

    @staticmethod
    def get_provider_name(column_name: str) -> str:
        return column_name.split('-', 1)[0]
