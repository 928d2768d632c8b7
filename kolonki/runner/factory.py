# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from . import AbstractRunner, VersionRunner, DumpRunner
from ..settings import SettingsManager


class RunnerFactory:
    @staticmethod
    def create() -> AbstractRunner:
        if SettingsManager.app_settings.version:
            return VersionRunner()
        return DumpRunner()
