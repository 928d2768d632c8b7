# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
from typing import IO

from pytermor import SeqIndex as seq, enclose

from ..common import StreamUnavailable
from ..console import ConsoleDebugBuffer, Console


class Reader:
    """
    Input stream of one file (or stdin). Seeking works on pipes as well:
    if the stream is not seekable, the bytes before the requested offset are
    read and discarded.
    """
    SKIP_CHUNK_SIZE: int = 4096

    def __init__(self, filename: str|None):
        self._filename = filename
        self._io: IO|None = None
        self._offset = 0
        self._debug_buffer = ConsoleDebugBuffer('reader', seq.YELLOW)

    @property
    def reading_stdin(self) -> bool:
        return not self._filename or self._filename == '-'

    @property
    def name(self) -> str:
        return '<stdin>' if self.reading_stdin else self._filename

    @property
    def offset(self) -> int:
        return self._offset

    def open(self) -> Reader:
        if self.reading_stdin:
            self._io = sys.stdin.buffer
            self._debug_buffer.write(1, 'Reading from stdin')
            return self

        try:
            self._io = open(self._filename, 'rb')
        except OSError as e:
            raise StreamUnavailable(self.name, e.strerror or str(e)) from e
        self._debug_buffer.write(1, f'Opened file: {enclose(seq.BOLD, self._filename)}')
        return self

    def read(self, max_bytes: int) -> bytes:
        data = self._io.read(max_bytes)
        self._debug_buffer.write(3, f'Read {Console.printd(data)}', offset=self._offset)
        self._offset += len(data)
        return data

    def seek(self, offset: int) -> int:
        """
        Move to ``offset`` and return the position actually reached, which
        can be less than requested if the stream ended earlier.
        """
        try:
            if self._io.seekable():
                self._offset = self._io.seek(offset)
            else:
                self._skip(offset)
        except OSError as e:
            raise StreamUnavailable(self.name, f"Couldn't seek to offset {offset}: {e.strerror or e}") from e

        self._debug_buffer.write(2, f'Requested offset: {enclose(seq.BOLD, offset)}', offset=self._offset)
        return self._offset

    def _skip(self, offset: int):
        while self._offset < offset:
            data = self._io.read(min(self.SKIP_CHUNK_SIZE, offset - self._offset))
            if not data:
                self._debug_buffer.write(1, 'Encountered EOF while skipping', offset=self._offset)
                break
            self._offset += len(data)

    def close(self):
        if self._io and not self.reading_stdin and not self._io.closed:
            self._io.close()

    def __enter__(self) -> Reader:
        if self._io is None:
            self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
