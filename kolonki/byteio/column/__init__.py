# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from ._abstract import AbstractColumn
from .offset import OffsetColumn
from .binary import BytesColumn
from .text import AsciiColumn
from .plugin import PluginColumn

from .factory import ColumnFactory
