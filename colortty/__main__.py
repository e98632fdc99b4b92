"""colortty — Convert terminal colour schemes to Alacritty's colors: YAML.

Usage: colortty convert <source> [-i FORMAT] [--json]

Source formats live in colortty/formats/, one module per format.
Each format module's docstring is its documentation.
Run `colortty help <format>` for full module docs.

The source format is taken from -i/--input-format, else from the filename
extension (.itermcolors, .minttyrc), else from COLORTTY_INPUT_FORMAT.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, colortty looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import sys

from colortty import registry
from colortty.convert import convert, detect_format
from colortty.core.env import Settings, load_settings
from colortty.core.errors import ColorError


def _build_parser() -> argparse.ArgumentParser:
    names = sorted(fmt.value for fmt in registry.all_formats())

    epilog = (
        'Examples:\n'
        '  colortty convert Dracula.itermcolors\n'
        '  colortty convert Dracula.minttyrc --json\n'
        '  cat theme.txt | colortty convert - -i mintty\n'
        '  colortty help iterm\n'
        '\n'
        'Config (set in .env or environment):\n'
        '  COLORTTY_INPUT_FORMAT=iterm|mintty  default when the filename does not tell\n'
    )
    parser = argparse.ArgumentParser(
        prog='colortty',
        description="Convert terminal colour schemes to Alacritty's colors: YAML.",
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    p = sub.add_parser('convert', help='Convert a colour scheme file to Alacritty YAML')
    p.add_argument('source', help='Colour scheme file, or - for stdin')
    p.add_argument(
        '-i',
        '--input-format',
        choices=names,
        default=None,
        help='Source format (default: detect from filename, then COLORTTY_INPUT_FORMAT)',
    )
    p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of YAML')

    help_parser = sub.add_parser('help', help='Print full docs for a source format')
    help_parser.add_argument('format', nargs='?', help='Format name')

    return parser


def _print_help(name: str | None) -> None:
    """Print full module docstring for a source format."""
    formats = {fmt.value: source_format for fmt, source_format in registry.all_formats().items()}

    if name is None:
        print('Available formats:\n')
        for fmt_name, source_format in sorted(formats.items()):
            print(f'  {fmt_name:<8} {source_format.format.extension:<13} {source_format.help}')
        print('\nRun: colortty help <format> for full docs.')
        return

    if name not in formats:
        print(f'Unknown format: {name}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(formats))}', file=sys.stderr)
        sys.exit(1)

    doc = (registry.module(formats[name].format).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {name!r})')
        return
    print(doc)


def _read_source(source: str) -> bytes:
    if source == '-':
        return sys.stdin.buffer.read()
    with open(source, 'rb') as f:
        return f.read()


def _convert(args: argparse.Namespace, settings: Settings) -> None:
    try:
        fmt = detect_format(
            path=None if args.source == '-' else args.source,
            name=args.input_format,
            default=settings.input_format,
        )
    except ValueError as exc:
        print(f'colortty: error: {exc}', file=sys.stderr)
        sys.exit(1)

    try:
        content = _read_source(args.source)
    except OSError as exc:
        print(f'colortty: error: cannot read {args.source}: {exc.strerror or exc}', file=sys.stderr)
        sys.exit(1)

    try:
        output = convert(content, fmt, output='json' if args.json else 'yaml')
    except ColorError as exc:
        print(f'colortty: error: {args.source}: {exc}', file=sys.stderr)
        sys.exit(1)

    # YAML already ends in a newline
    print(output, end='' if output.endswith('\n') else '\n')


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Settings before anything else; OS env vars win over .env
    try:
        settings = load_settings(env_file=args.env_file)
    except OSError as exc:
        print(f'colortty: error: {exc}', file=sys.stderr)
        sys.exit(1)
    if settings.dotenv_path:
        print(f'colortty: using {settings.dotenv_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.format)
        return

    _convert(args, settings)


if __name__ == '__main__':
    main()
