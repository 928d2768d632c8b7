# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import os
import sys
from typing import IO, Mapping


class KolonkiError(Exception):
    pass


class ArgumentError(KolonkiError):
    USAGE_MSG = "Run the app with '--help' argument to see the usage"


class ConfigError(KolonkiError):
    """
    Configuration-time failure. Raised before any rendering begins and
    aborts the whole run.
    """


class InvalidRange(ConfigError):
    def __init__(self, expr: str, reason: str = 'is not a valid range'):
        self.expr = expr
        super().__init__(f"Couldn't parse config: '{expr}' {reason}")


class MalformedStatement(ConfigError):
    def __init__(self, statement: str, reason: str = 'is malformed'):
        self.statement = statement
        super().__init__(f"Couldn't parse config: '{statement}' {reason}")


class StyleOutOfRange(ConfigError):
    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Couldn't parse config: '{value}' is out of range (only 255 colors!)")


class UnknownColumn(ConfigError):
    def __init__(self, name: str, reason: str = 'is neither a builtin column nor a plugin'):
        self.name = name
        super().__init__(f"Column '{name}' {reason}")


class InvalidSequence(KolonkiError):
    pass


class StreamUnavailable(KolonkiError):
    def __init__(self, filename: str, reason: str):
        self.filename = filename
        super().__init__(f'"{filename}": {reason}')


def is_color_allowed(io: IO = None, environ: Mapping[str, str] = None) -> bool:
    """
    Decide whether automatic mode should emit SGR sequences:

      - output is not a terminal -> no colors;
      - ``NO_COLOR`` environment variable is defined -> no colors;
      - ``TERM`` is empty or set to "dumb" -> no colors.
    """
    io = io or sys.stdout
    environ = os.environ if environ is None else environ

    if not io.isatty():
        return False
    if 'NO_COLOR' in environ:
        return False
    return environ.get('TERM', 'dumb') not in ('', 'dumb')
