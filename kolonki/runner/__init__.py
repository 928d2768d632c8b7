# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from ._abstract import AbstractRunner

from .dump import DumpRunner
from .version import VersionRunner

from .factory import RunnerFactory
