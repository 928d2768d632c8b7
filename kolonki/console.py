# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
import traceback
from abc import ABCMeta, abstractmethod
from typing import Any, List

from pytermor import SeqIndex as seq, SequenceSGR, enclose

from .common import ArgumentError
from .settings import SettingsManager


# noinspection PyMethodMayBeStatic
class AbstractConsoleBuffer(metaclass=ABCMeta):
    @abstractmethod
    def flush(self): raise NotImplementedError


class ConsoleDebugBuffer(AbstractConsoleBuffer):
    def __init__(self, key_prefix: str = None, prefix_offset_color: SequenceSGR = seq.GRAY):
        self._buf = ''

        self._default_prefix = Console.format_prefix(key_prefix, seq.GRAY) if key_prefix else None
        self._prefix_color = prefix_offset_color

        Console.register_buffer(self)

    def write(self, level: int, s: str, offset: int = None, end='\n', no_default_prefix=False, flush=True):
        if SettingsManager.app_settings.debug < level:
            return

        prefix = ''
        if isinstance(offset, int):
            prefix = Console.format_prefix_with_offset(offset, self._prefix_color)
        elif self._default_prefix is not None:
            if not no_default_prefix:
                prefix = self._default_prefix

        self._buf += f'{prefix}{s}{end}'
        if flush:
            self.flush()

    def flush(self):
        if not self._buf:
            return

        Console.debug(self._buf, end='')
        self._buf = ''


class Console:
    """
    Diagnostics output. Everything printed here goes to stderr, so it never
    mixes with the dump itself, which could be piped or sent to a pager.
    """
    MAIN_PREFIX_LEN = 8

    buffers: List[AbstractConsoleBuffer] = list()

    @staticmethod
    def register_buffer(buffer: AbstractConsoleBuffer):
        Console.buffers.append(buffer)

    @staticmethod
    def flush_buffers():
        for buffer in Console.buffers:
            buffer.flush()

    @staticmethod
    def on_exception(e: Exception):
        Console.flush_buffers()

        if isinstance(e, ArgumentError):
            Console.error(f'{e.__class__.__name__}: {e!s}')
            Console.info(e.USAGE_MSG)

        elif SettingsManager.app_settings.debug > 0:
            tb_lines = [line.rstrip('\n')
                        for line
                        in traceback.format_exception(e.__class__, e, e.__traceback__)]
            error = tb_lines.pop(-1)
            Console.print(enclose(seq.RED, '\n'.join(tb_lines)))
            Console.error(error)

        else:
            Console.error(f'{e.__class__.__name__}: {e!s}')
            Console.info("Run the app with '" + enclose(seq.BOLD, '--debug') + "' argument to see the details")

    @staticmethod
    def debug(s: str = '', end='\n'):
        Console.print(s, end=end)

    @staticmethod
    def info(s: str = '', end='\n'):
        Console.print(s, end=end)

    @staticmethod
    def warn(s: str = '', end='\n'):
        Console.print(enclose(seq.HI_YELLOW, f'WARNING: {s}'), end=end)

    @staticmethod
    def error(s: str = '', end='\n'):
        Console.print(enclose(seq.HI_RED, enclose(seq.BOLD, 'ERROR: ') + s), end=end)

    @staticmethod
    def get_separator() -> str:
        return enclose(seq.CYAN, '│')

    @staticmethod
    def format_prefix(label: str, color: SequenceSGR) -> str:
        label = f'{label!s:>{Console.MAIN_PREFIX_LEN}.{Console.MAIN_PREFIX_LEN}s}'
        return enclose(color, label) + Console.get_separator()

    @staticmethod
    def format_prefix_with_offset(offset: int, color: SequenceSGR = seq.GREEN) -> str:
        return Console.format_prefix(f'0x{offset:06x}', color)

    @staticmethod
    def print(s: str, end='\n', file=None):
        print(s, end=end, file=file or sys.stderr)

    @staticmethod
    def printd(v: Any, max_input_len: int = 5) -> str:
        if isinstance(v, bytes):
            result = 'len ' + enclose(seq.BOLD, len(v))
            if SettingsManager.app_settings.debug < 3:
                return result

            hexed = ' '.join(f'{b:02x}' for b in v[:max_input_len])
            if len(v) > max_input_len:
                hexed += ' ..'
            return f'{result} {enclose(seq.GRAY, f"[{hexed}]")}'

        return f'{v!s}'
