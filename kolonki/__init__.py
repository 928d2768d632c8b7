# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from .common import KolonkiError, ArgumentError, ConfigError, InvalidRange, MalformedStatement, StyleOutOfRange, \
    UnknownColumn, InvalidSequence, StreamUnavailable, is_color_allowed
from .version import __version__

from . import byteio
from .arghelp import AppArgumentParser
from .app import App
