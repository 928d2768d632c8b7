# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import re
from argparse import HelpFormatter, Action, ArgumentParser, ArgumentTypeError, SUPPRESS
from typing import Optional, Iterable, List

from pytermor import SeqIndex as seq, enclose

from .byteio import parse_int, DEFAULT_COLUMNS, DEFAULT_LINE_LENGTH, MAX_LINE_LENGTH, COLORS_ENV_VAR, \
    DEFAULT_STYLE_CONFIG


def non_negative_int(value: str) -> int:
    """ Integer option value; 0x, 0o and 0b prefixes are supported. """
    try:
        return parse_int(value)
    except ValueError:
        raise ArgumentTypeError(f'invalid non-negative integer: {value!r}')


class CustomHelpFormatter(HelpFormatter):
    INDENT_INCREMENT = 2
    INDENT = ' ' * INDENT_INCREMENT

    @staticmethod
    def format_header(title: str) -> str:
        return enclose(seq.BOLD, title.upper())

    def __init__(self, prog):
        super().__init__(prog, max_help_position=30, indent_increment=self.INDENT_INCREMENT)

    def start_section(self, heading: Optional[str]):
        super().start_section(self.format_header(heading))

    def add_usage(self, usage: Optional[str], actions: Iterable[Action], groups: Iterable,
                  prefix: Optional[str] = ...):
        super().add_text(self.format_header('usage'))

        usage = usage.replace("\n", f"\n{self.INDENT}")
        super().add_usage(usage, actions, groups, prefix=self.INDENT)

    def add_examples(self, examples: List[str]):
        self.start_section('example' + ('s' if len(examples) > 1 else ''))
        self._add_item(self._format_text, ['\n'.join(examples)])
        self.end_section()

    def _format_action_invocation(self, action):
        # print the argument only once, after the long option
        if not action.option_strings or action.nargs == 0:
            return super()._format_action_invocation(action)

        default = self._get_default_metavar_for_optional(action)
        args_string = self._format_args(action, default)
        return ', '.join(f'{option_string} {args_string}' if len(option_string) > 2 else option_string
                         for option_string in action.option_strings)

    def _fill_text(self, text, width, indent):
        return ''.join(indent + line for line in text.splitlines(keepends=True))


class CustomArgumentParser(ArgumentParser):
    def __init__(self, examples: List[str] = None, epilog: List[str] = None, usage: List[str] = None, **kwargs):
        self.examples = examples
        kwargs.update({
            'epilog': '\n'.join(epilog or []),
            'usage': '\n'.join(usage or []),
        })
        super().__init__(**kwargs)

    def format_help(self) -> str:
        formatter = self._get_formatter()
        if self.epilog:
            formatter.add_text(' ')
            formatter.add_text(self.epilog)
        if self.examples and isinstance(formatter, CustomHelpFormatter):
            formatter.add_examples(self.examples)

        ending_formatted = formatter.format_help()
        epilog, self.epilog = self.epilog, None
        result = super().format_help() + ending_formatted
        self.epilog = epilog

        # remove ':' from headers ('<_b>header:<_f>'):
        result = re.sub(r'(\033\[[0-9;]*m)?\s*:\s*(\n|\033|$)', r'\1\2', result)
        return result


class AppArgumentParser(CustomArgumentParser):
    def __init__(self):
        fmt_u = lambda s: enclose(seq.UNDERLINED, s)
        fmt_default = lambda s: enclose(seq.YELLOW, s)

        super().__init__(
            description='Column-aligned colorized hex dumper',
            usage=[
                '%(prog)s [-cu] [-n <length>] [-s <offset>] [-l <bytes>] [-t <table>]',
                '        [-f <columns>] [-C <when>] [-P <when>] [<file>]...',
                '%(prog)s --version',
                '%(prog)s --help',
            ],
            epilog=[
                'Arguments are processed in the same way that cat(1) does: any arguments are treated as files'
                ' and read, a lone "-" (or no arguments at all) causes the app to read from standard input.',
                '',
                'Columns that are not builtin are looked up as plugins: first among builtin ones (utf8, dec),'
                ' then as Python modules exposing "display(data, length, offset)" function. Text after the'
                ' first dash is ignored, e.g. "foo-bar" will load module "foo".',
                '',
                f'Byte colors are configured with {enclose(seq.BOLD, COLORS_ENV_VAR)} environment variable, which is applied'
                f' on top of the default palette: "{DEFAULT_STYLE_CONFIG}". Statements are separated by ";",'
                ' left side is a byte range (e.g. "0x20-0x7e,0") or an alias (printable, unprintable, whitespace,'
                ' blackspace, nul, del), right side is a color index of 256-color palette.',
                '',
                '(c) 2022 A. Shavykin <0.delameter@gmail.com>',
            ],
            examples=[
                'Dump a file with control pictures and UTF-8 sequences highlighted',
                ''.ljust(4) + f"{fmt_u('%(prog)s')} -cu file.bin",
                '',
                'Print 64 bytes starting from offset 0x100, 8 bytes per line',
                ''.ljust(4) + f"{fmt_u('%(prog)s')} -s {fmt_u('0x100')} -n {fmt_u(64)} -l {fmt_u(8)} file.bin",
                '',
                'Reorder columns and add decoded text column',
                ''.ljust(4) + f"{fmt_u('%(prog)s')} -f {fmt_u('ascii,bytes,utf8')} file.txt",
                '\n'
            ],
            add_help=False,
            formatter_class=lambda prog: CustomHelpFormatter(prog),
            prog='kolonki'
        )

        self.add_argument('filenames', metavar='<file>', nargs='*', help='file(s) to read from; if empty or "-", read stdin instead')

        modes_group = self.add_argument_group('operating mode')
        modes_group.add_argument('-V', '--version', action='store_true', default=False, help='show app version and exit')
        modes_group.add_argument('-h', '--help', action='help', default=SUPPRESS, help='show this help message and exit')

        layout_group = self.add_argument_group('layout options')
        layout_group.add_argument('-f', '--format', metavar='<columns>', default=DEFAULT_COLUMNS, help='comma-separated list of columns: offset, bytes, bytes-left, bytes-right, ascii, ascii-left, ascii-right, or plugin names '+fmt_default('[default: %(default)s]'))
        layout_group.add_argument('-l', '--line-length', metavar='<bytes>', type=non_negative_int, default=DEFAULT_LINE_LENGTH, help=f'number of bytes displayed on a line, at most {MAX_LINE_LENGTH} '+fmt_default('[default: %(default)s]'))
        layout_group.add_argument('-t', '--table', metavar='<table>', default='default', help='glyph table for text columns: default, cp437, classic or none '+fmt_default('[default: %(default)s]'))
        layout_group.add_argument('-c', '--control', action='store_true', default=False, help='use Unicode control pictures for control chars, e.g. ␀ for NUL')
        layout_group.add_argument('-u', '--utf8', action='store_true', default=False, help='highlight sets of bytes belonging to the same UTF-8 encoded character')

        input_group = self.add_argument_group('input options')
        input_group.add_argument('-s', '--skip', metavar='<offset>', type=non_negative_int, default=0, help='number of bytes to skip from the start of the input '+fmt_default('[default: %(default)s]'))
        input_group.add_argument('-n', '--length', metavar='<num>', type=non_negative_int, default=0, help='maximum number of bytes to read from each input '+fmt_default('[default: no limit]'))

        output_group = self.add_argument_group('output options')
        output_group.add_argument('-C', '--color', metavar='<when>', default='auto', help='when to use colors: auto, always, never '+fmt_default('[default: %(default)s]'))
        output_group.add_argument('-P', '--pager', metavar='<when>', default='auto', help='when to run the output through less(1): auto, always, never '+fmt_default('[default: %(default)s]'))
        output_group.add_argument('-d', '--debug', action='count', default=0, help='print debug messages to stderr; can be used from 1 to 3 times, each level increases verbosity (-d|dd|ddd)')
