# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from .builtin import ColumnProvider, BUILTIN_PROVIDERS, display_utf8, display_dec
from .registry import ProviderRegistry
