# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import os
import sys
from typing import Mapping, TextIO

from . import AbstractRunner
from ..byteio import RenderConfig, StyleTable, ColumnFactory, LineComposer, Reader, ProviderRegistry, \
    build_style_table, get_glyph_table, parse_column_spec, COLORS_ENV_VAR, DEFAULT_STYLE_CONFIG, MAX_LINE_LENGTH
from ..common import ArgumentError, StreamUnavailable, is_color_allowed
from ..console import Console, ConsoleDebugBuffer
from ..pager import Pager
from ..settings import Settings, SettingsManager


class DumpRunner(AbstractRunner):
    def __init__(self, stdout: TextIO = None, environ: Mapping[str, str] = None, registry: ProviderRegistry = None):
        self._stdout = stdout or sys.stdout
        self._environ = os.environ if environ is None else environ
        self._registry = registry or ProviderRegistry()
        self._debug_buffer = ConsoleDebugBuffer('runner')

    def run(self):
        settings = SettingsManager.app_settings
        config = self.make_config(settings)  # configuration errors abort the run here
        composer = LineComposer(config, ColumnFactory(config, self._registry).create_all())

        pager = Pager(settings.pager_mode, self._stdout)
        sink = pager.open()
        try:
            for filename in settings.effective_filenames:
                self._dump_file(composer, filename, sink)
            sink.flush()
        except BrokenPipeError:
            self._debug_buffer.write(1, 'Output stream was closed')
        finally:
            pager.close()

    def make_config(self, settings: Settings) -> RenderConfig:
        if settings.line_length_exceeded:
            Console.warn(f'{settings.line_length} are much too many bytes for you, sorry '
                         f'(using {MAX_LINE_LENGTH})')
        if settings.skip < 0 or settings.length < 0:
            raise ArgumentError('Offset and length cannot be negative')

        color = self._decide_color(settings)
        style_table = StyleTable()
        if color:
            style_table = build_style_table(DEFAULT_STYLE_CONFIG, self._environ.get(COLORS_ENV_VAR, ''))

        return RenderConfig(
            columns=parse_column_spec(settings.format),
            style_table=style_table,
            glyph_table=get_glyph_table(settings.table_type),
            control_mode=settings.control,
            utf8_highlight=settings.utf8,
            line_length=settings.effective_line_length,
            color=color,
            skip=settings.skip,
            length=settings.length,
        )

    def _decide_color(self, settings: Settings) -> bool:
        mode = settings.color_mode
        if mode.is_auto:
            return is_color_allowed(self._stdout, self._environ)
        return mode.is_always

    def _dump_file(self, composer: LineComposer, filename: str, sink: TextIO):
        reader = Reader(filename)
        try:
            reader.open()
        except StreamUnavailable as e:
            Console.warn(str(e))
            sink.write('\n')
            return

        with reader:
            try:
                total = composer.dump(reader, sink)
            except StreamUnavailable as e:
                Console.warn(str(e))
                return
        self._debug_buffer.write(1, f'Done with {reader.name}: {total} byte(s)')
