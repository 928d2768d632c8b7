# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import re
import unittest

from pytermor import SeqIndex

from kolonki import UnknownColumn
from kolonki import sgr
from kolonki.byteio.chunk import Chunk
from kolonki.byteio.column import BytesColumn, AsciiColumn, OffsetColumn, PluginColumn, ColumnFactory
from kolonki.byteio.column_spec import parse_column_spec
from kolonki.byteio.config import RenderConfig
from kolonki.byteio.const import ColumnKind, ColumnPart
from kolonki.byteio.glyph import CP437_TABLE, CLASSIC_TABLE
from kolonki.byteio.plugin import display_dec
from kolonki.byteio.style import build_style_table
from kolonki.byteio.tracker import Utf8SpanState
from kolonki.settings import SettingsManager

SGR_REGEX = re.compile(r'\x1b\[[0-9;]*m')


def strip_sgr(s: str) -> str:
    return SGR_REGEX.sub('', s)


class ColumnSpecTestCase(unittest.TestCase):
    def test_default(self):
        kinds = [d.kind for d in parse_column_spec()]
        self.assertEqual(kinds, [ColumnKind.OFFSET, ColumnKind.BYTES, ColumnKind.ASCII])

    def test_plugins_and_empty_items(self):
        spec = parse_column_spec('bytes-left, ,utf8-text,,ascii-right')
        self.assertEqual([d.kind for d in spec], [ColumnKind.BYTES_LEFT, ColumnKind.PLUGIN, ColumnKind.ASCII_RIGHT])
        self.assertEqual(spec[1].name, 'utf8-text')

    def test_empty_spec(self):
        for spec in ['', ',', ' , ']:
            with self.subTest(spec=spec), self.assertRaises(UnknownColumn):
                parse_column_spec(spec)

    def test_reserved_name(self):
        with self.assertRaises(UnknownColumn):
            parse_column_spec('offset,plugin')


class OffsetColumnTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()

    def test_plain(self):
        column = OffsetColumn(RenderConfig())
        self.assertEqual(column.render(Chunk(b'A', 0)), '00000000')
        self.assertEqual(column.render(Chunk(b'A', 0x1f0)), '000001f0')

    def test_color(self):
        column = OffsetColumn(RenderConfig(color=True))
        self.assertEqual(column.render(Chunk(b'A', 0x10)), f'{SeqIndex.WHITE}  10{SeqIndex.COLOR_OFF}')


class BytesColumnTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()

    def test_short_chunk(self):
        column = BytesColumn(RenderConfig())
        self.assertEqual(column.render(Chunk(b'A\xc3\xa9', 0)), '41 c3 a9 ' + ' ' * 39 + ' ')

    def test_full_chunk(self):
        column = BytesColumn(RenderConfig())
        self.assertEqual(column.render(Chunk(bytes(range(16)), 0)),
                         '00 01 02 03 04 05 06 07  08 09 0a 0b 0c 0d 0e 0f ')

    def test_halves(self):
        config = RenderConfig()
        chunk = Chunk(bytes(range(16)), 0)
        self.assertEqual(BytesColumn(config, ColumnPart.LEFT).render(chunk), '00 01 02 03 04 05 06 07 ')
        self.assertEqual(BytesColumn(config, ColumnPart.RIGHT).render(chunk), '08 09 0a 0b 0c 0d 0e 0f ')

    def test_right_half_of_short_chunk(self):
        config = RenderConfig()
        self.assertEqual(BytesColumn(config, ColumnPart.RIGHT).render(Chunk(b'abc', 0)), ' ' * 24)
        self.assertEqual(BytesColumn(config, ColumnPart.RIGHT).render(Chunk(b'abcdefghij', 0)), '69 6a ' + ' ' * 18)

    def test_width_does_not_depend_on_chunk_length(self):
        for line_length in [1, 2, 7, 16, 33]:
            for color in [False, True]:
                config = RenderConfig(line_length=line_length, color=color, utf8_highlight=color)
                expected = {
                    ColumnPart.FULL: 3 * line_length + 1,
                    ColumnPart.LEFT: 3 * (line_length // 2),
                    ColumnPart.RIGHT: 3 * (line_length - line_length // 2),
                }
                for part, width in expected.items():
                    column = BytesColumn(config, part)
                    self.assertEqual(column.width, width)
                    for length in range(1, line_length + 1):
                        with self.subTest(line_length=line_length, color=color, part=part, length=length):
                            rendered = column.render(Chunk(bytes(range(0xc0, 0xc0 + length)), 0))
                            self.assertEqual(len(strip_sgr(rendered)), width)

    def test_color(self):
        config = RenderConfig(color=True, style_table=build_style_table('0x41=5'))
        rendered = BytesColumn(config).render(Chunk(b'AB', 0))
        self.assertEqual(rendered, f'{sgr.FG_INDEXED[5]}41{SeqIndex.RESET} '
                                   f'{sgr.FG_INDEXED[0]}42{SeqIndex.RESET} '
                                   f'{SeqIndex.RESET}' + ' ' * 42 + ' ')

    def test_highlighted_sequence(self):
        config = RenderConfig(color=True, utf8_highlight=True, style_table=build_style_table('printable=15'))
        span = sgr.SPAN_OPENING
        rendered = BytesColumn(config).render(Chunk(b'\xc3\xa9A', 0))
        self.assertTrue(rendered.startswith(f'{span}c3{SeqIndex.COLOR_OFF} '
                                            f'{span}a9{SeqIndex.RESET} '
                                            f'{sgr.FG_INDEXED[15]}41{SeqIndex.RESET} '))

    def test_highlight_requires_color(self):
        config = RenderConfig(color=False, utf8_highlight=True)
        self.assertEqual(BytesColumn(config).render(Chunk(b'\xc3\xa9', 0)), 'c3 a9 ' + ' ' * 43)

    def test_sequence_continued_from_previous_line(self):
        config = RenderConfig(color=True, utf8_highlight=True)
        span = sgr.SPAN_OPENING
        rendered = BytesColumn(config).render(Chunk(b'\x82\xac', 2), Utf8SpanState(1, 2))
        self.assertTrue(rendered.startswith(f'{span}82{SeqIndex.COLOR_OFF} {span}ac{SeqIndex.RESET} '))

    def test_halves_share_span_state(self):
        config = RenderConfig(line_length=4, color=True, utf8_highlight=True)
        span = sgr.SPAN_OPENING
        chunk = Chunk(b'A\xe2\x82\xac', 0)
        rendered = BytesColumn(config, ColumnPart.RIGHT).render(chunk)
        self.assertEqual(rendered, f'{span}82{SeqIndex.COLOR_OFF} {span}ac{SeqIndex.RESET} {SeqIndex.RESET}')


class AsciiColumnTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()

    def test_plain(self):
        column = AsciiColumn(RenderConfig())
        self.assertEqual(column.render(Chunk(b'A\xc3\xa9', 0)), '|Aé ' + ' ' * 13 + '|')

    def test_default_table_glyphs(self):
        column = AsciiColumn(RenderConfig())
        self.assertEqual(column.render(Chunk(b'\x00\x01\x08\x09\x7f\xff', 0)), '|0·«_«·' + ' ' * 10 + '|')

    def test_invalid_sequence_falls_back_to_glyphs(self):
        column = AsciiColumn(RenderConfig(line_length=4))
        self.assertEqual(column.render(Chunk(b'\xc3A\xe2\x82', 0)), '|·A··|')

    def test_non_printable_character_falls_back_to_glyphs(self):
        column = AsciiColumn(RenderConfig(line_length=2))
        self.assertEqual(column.render(Chunk(b'\xc2\x85', 0)), '|··|')

    def test_control_mode(self):
        column = AsciiColumn(RenderConfig(line_length=4, control_mode=True))
        self.assertEqual(column.render(Chunk(b'\x00\x0a\x7fA', 0)), '|␀␊␡A|')

    def test_other_tables(self):
        config = RenderConfig(line_length=4, glyph_table=CP437_TABLE)
        self.assertEqual(AsciiColumn(config).render(Chunk(b'\x01\xc3\xa9A', 0)), '|☺├⌐A|')

        for table in [CLASSIC_TABLE, None]:
            config = RenderConfig(line_length=4, glyph_table=table)
            self.assertEqual(AsciiColumn(config).render(Chunk(b'\x01\xc3\xa9A', 0)), '|...A|')

    def test_halves(self):
        config = RenderConfig()
        chunk = Chunk(b'ABCDEFGHIJ', 0)
        self.assertEqual(AsciiColumn(config, ColumnPart.LEFT).render(chunk), '|ABCDEFGH|')
        self.assertEqual(AsciiColumn(config, ColumnPart.RIGHT).render(chunk), '|IJ      |')
        self.assertEqual(AsciiColumn(config, ColumnPart.RIGHT).render(Chunk(b'ABC', 0)), '|        |')

    def test_width_does_not_depend_on_chunk_length(self):
        for color in [False, True]:
            config = RenderConfig(line_length=7, color=color)
            for part in ColumnPart:
                column = AsciiColumn(config, part)
                for length in range(1, 8):
                    with self.subTest(color=color, part=part, length=length):
                        rendered = column.render(Chunk(b'\xe2\x82\xacabcd'[:length], 0))
                        self.assertEqual(len(strip_sgr(rendered)), column.width)

    def test_color(self):
        config = RenderConfig(line_length=2, color=True, style_table=build_style_table('0x41=3'))
        rendered = AsciiColumn(config).render(Chunk(b'A', 0))
        self.assertEqual(rendered, f'│{sgr.FG_INDEXED[3]}A{SeqIndex.RESET} │')


class PluginColumnTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()

    def test_output_is_verbatim(self):
        column = PluginColumn(RenderConfig(), 'dec', display_dec)
        self.assertEqual(column.render(Chunk(b'\x00\xff', 0x20)), '  0 255')

    def test_provider_arguments(self):
        calls = []
        column = PluginColumn(RenderConfig(), 'spy', lambda *args: calls.append(args) or 'x')
        self.assertEqual(column.render(Chunk(b'abc', 0x30)), 'x')
        self.assertEqual(calls, [(b'abc', 3, 0x30)])


class ColumnFactoryTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()

    def test_create_all(self):
        config = RenderConfig(columns=parse_column_spec('offset,bytes-right,ascii-left,dec-values'))
        columns = ColumnFactory(config).create_all()

        self.assertEqual([type(c) for c in columns], [OffsetColumn, BytesColumn, AsciiColumn, PluginColumn])
        self.assertIs(columns[1].part, ColumnPart.RIGHT)
        self.assertIs(columns[2].part, ColumnPart.LEFT)
        self.assertEqual(columns[3].name, 'dec-values')

    def test_unknown_plugin(self):
        config = RenderConfig(columns=parse_column_spec('offset,nonexistent_kolonki_plugin'))
        with self.assertRaises(UnknownColumn):
            ColumnFactory(config).create_all()


if __name__ == '__main__':
    unittest.main()
