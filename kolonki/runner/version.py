# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import sys
from importlib.metadata import version, PackageNotFoundError

from . import AbstractRunner
from ..console import Console
from ..version import __version__


class VersionRunner(AbstractRunner):
    def run(self):
        try:
            pytermor_version = version('pytermor')
        except PackageNotFoundError:
            pytermor_version = 'n/a'

        Console.print("es7s/kolonki".ljust(16) + __version__, file=sys.stdout)
        Console.print("pytermor".ljust(16) + pytermor_version, file=sys.stdout)
