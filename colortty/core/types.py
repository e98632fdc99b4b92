"""Shared types for colortty: Color, ColorScheme, ColorSchemeFormat, SourceFormat."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, fields
from enum import Enum

from colortty.core.palette import Color

# Order of the eight ANSI colours in both the normal and bright sections
ANSI_NAMES = ('black', 'red', 'green', 'yellow', 'blue', 'magenta', 'cyan', 'white')

SLOTS = ('background', 'foreground') + ANSI_NAMES + tuple(f'bright_{name}' for name in ANSI_NAMES)


@dataclass
class ColorScheme:
    """Terminal colour scheme: foreground, background and 16 ANSI colours.

    Every slot starts as black. Parsers fill slots with set(); writers only read.
    """

    foreground: Color = Color()
    background: Color = Color()

    black: Color = Color()
    red: Color = Color()
    green: Color = Color()
    yellow: Color = Color()
    blue: Color = Color()
    magenta: Color = Color()
    cyan: Color = Color()
    white: Color = Color()

    bright_black: Color = Color()
    bright_red: Color = Color()
    bright_green: Color = Color()
    bright_yellow: Color = Color()
    bright_blue: Color = Color()
    bright_magenta: Color = Color()
    bright_cyan: Color = Color()
    bright_white: Color = Color()

    def set(self, slot: str, color: Color) -> None:
        """Assign a colour to a named slot."""
        if slot not in SLOTS:
            raise KeyError(f'Unknown colour slot: {slot}')
        setattr(self, slot, color)

    def items(self) -> list[tuple[str, Color]]:
        """(slot, colour) pairs in declaration order."""
        return [(f.name, getattr(self, f.name)) for f in fields(self)]


class ColorSchemeFormat(Enum):
    """Source formats colortty can read."""

    ITERM = 'iterm'
    MINTTY = 'mintty'

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self]

    @classmethod
    def from_name(cls, s: str) -> ColorSchemeFormat | None:
        """Exact, case-sensitive lookup by format name."""
        for fmt in cls:
            if fmt.value == s:
                return fmt
        return None

    @classmethod
    def from_filename(cls, s: str) -> ColorSchemeFormat | None:
        """Detect the format from the extension marker anywhere in a filename."""
        for fmt in cls:
            if fmt.extension in s:
                return fmt
        return None


_EXTENSIONS = {
    ColorSchemeFormat.ITERM: '.itermcolors',
    ColorSchemeFormat.MINTTY: '.minttyrc',
}


class SourceFormat:
    """A self-registering source format parser.

    Usage in a format module:

        source_format = SourceFormat(ColorSchemeFormat.MINTTY, help='mintty .minttyrc files')

        @source_format.parser
        def parse(content):
            ...
    """

    def __init__(self, format: ColorSchemeFormat, help: str = ''):
        self.format = format
        self.help = help
        self._parse_fn: Callable | None = None

    @property
    def name(self) -> str:
        return self.format.value

    def parser(self, fn: Callable) -> Callable:
        """Decorator to register the parse function."""
        self._parse_fn = fn
        return fn

    def parse(self, content: str | bytes) -> ColorScheme:
        """Parse raw source text into a ColorScheme."""
        if self._parse_fn is None:
            raise RuntimeError(f'Source format {self.name} has no parse function')
        return self._parse_fn(content)
