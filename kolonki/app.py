# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys

from . import AppArgumentParser
from .console import Console
from .runner import RunnerFactory
from .settings import SettingsManager


# noinspection PyMethodMayBeStatic
class App:
    def run(self, args=None):
        try:
            self._parse_args(args)  # help processing is handled by argparse
            (RunnerFactory.create()).run()
        except KeyboardInterrupt:
            self._exit(130)
        except Exception as e:
            Console.on_exception(e)
            self._exit(1)
        self._exit(0)

    def _parse_args(self, args=None):
        SettingsManager.init()
        AppArgumentParser().parse_args(args, namespace=SettingsManager.app_settings)

    def _exit(self, code: int):
        sys.exit(code)


def main():
    App().run()
