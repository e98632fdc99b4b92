"""The Color triple and its value parsing: 'R,G,B' strings and 0.0-1.0 component reals."""

from __future__ import annotations

import re
from dataclasses import dataclass

import numpy as np

from colortty.core.errors import InvalidFormatError, ParseIntError

# Unsigned decimal, optional leading '+'
_CHANNEL_RE = re.compile(r'\+?[0-9]+')

_F32_MAX_CHANNEL = np.float32(255.0)


@dataclass(frozen=True)
class Color:
    """An 8-bit sRGB triple."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def __post_init__(self) -> None:
        for name in ('red', 'green', 'blue'):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f'{name} channel out of range 0..255: {value}')

    @classmethod
    def from_string(cls, s: str) -> Color:
        """Parse 'R,G,B' (decimal, 0-255 each)."""
        return parse_rgb(s)

    def to_hex(self) -> str:
        return f'0x{self.red:02x}{self.green:02x}{self.blue:02x}'


def parse_rgb(s: str) -> Color:
    """Parse 'R,G,B' into a Color.

    Raises InvalidFormatError unless there are exactly three fields, and
    ParseIntError for the first field that is not an integer in 0..255.
    """
    rgb = s.split(',')
    if len(rgb) != 3:
        raise InvalidFormatError(f'expected 3 comma-separated channels, got {len(rgb)}: {s!r}')
    red, green, blue = (_parse_channel(field) for field in rgb)
    return Color(red=red, green=green, blue=blue)


def _parse_channel(field: str) -> int:
    if not _CHANNEL_RE.fullmatch(field):
        error = ValueError('invalid digit found in string')
        raise ParseIntError(field, error) from error
    value = int(field)
    if value > 255:
        error = ValueError('number too large to fit in target type')
        raise ParseIntError(field, error) from error
    return value


def channel_from_real(value: float) -> int:
    """Scale a 0.0-1.0 component to an 8-bit channel.

    Single precision, truncated toward zero, saturating at 0 and 255.
    Raises OverflowError for an int too large to convert to a float.
    """
    scaled = np.float32(value) * _F32_MAX_CHANNEL
    if np.isnan(scaled):
        return 0
    return int(np.clip(scaled, 0, 255))
