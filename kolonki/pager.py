# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import subprocess
import sys
from typing import List, TextIO

from pytermor import SeqIndex as seq, enclose

from .byteio import ActionMode
from .console import Console, ConsoleDebugBuffer


class Pager:
    """
    Sends the output through less(1), kinda like ``git log`` does. In auto
    mode the pager is used only if stdout is a terminal, and less quits
    immediately if the output fits into one screen (``-F``).
    """
    COMMAND_ALWAYS: List[str] = ['less', '-R']
    COMMAND_AUTO: List[str] = ['less', '-F', '-R']

    def __init__(self, mode: ActionMode, stdout: TextIO = None):
        self._mode = mode
        self._stdout = stdout or sys.stdout
        self._process: subprocess.Popen|None = None
        self._debug_buffer = ConsoleDebugBuffer('pager', seq.CYAN)

    @property
    def command(self) -> List[str]|None:
        if self._mode.is_always:
            return self.COMMAND_ALWAYS
        if self._mode.is_auto and self._stdout.isatty():
            return self.COMMAND_AUTO
        return None

    def open(self) -> TextIO:
        command = self.command
        if command is None:
            return self._stdout

        try:
            self._process = subprocess.Popen(command, stdin=subprocess.PIPE, encoding='utf-8', errors='replace')
        except OSError:
            Console.warn("Couldn't execute pager (use '-P never' to disable)")
            return self._stdout

        self._debug_buffer.write(1, f'Started pager: {enclose(seq.BOLD, " ".join(command))}')
        return self._process.stdin

    def close(self):
        if self._process is None:
            return

        try:
            self._process.stdin.close()
        except BrokenPipeError:
            pass
        code = self._process.wait()
        self._process = None

        if code != 0:
            Console.warn('less exited with an error, possibly because it couldn\'t be found.')
            Console.info('hint: use `-P never` to disable using less(1).')
