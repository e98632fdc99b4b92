"""iTerm2 colour presets (.itermcolors).

An Apple property list whose root dict maps colour names to colour dicts:

    <key>Ansi 4 Color</key>
    <dict>
        <key>Blue Component</key>
        <real>0.98235297203063965</real>
        <key>Green Component</key>
        <real>0.66470587253570557</real>
        <key>Red Component</key>
        <real>0.79411762952804565</real>
    </dict>

Components are scaled by 255 in single precision and truncated, so the
value above renders as 0xcaa9fa. Ansi 0-7 are the normal colours, Ansi 8-15
the bright ones; Background Color and Foreground Color fill the primary
section. Other entries (Cursor Color, Selection Color, ...) are skipped, as
are Alpha Component and Color Space inside a colour dict.

Both XML and binary plists are accepted.

Example:
    colortty convert Dracula.itermcolors
"""

import plistlib
import re
from typing import Any

from colortty.core.errors import InvalidFormatError, ParseFloatError
from colortty.core.palette import Color, channel_from_real
from colortty.core.types import ANSI_NAMES, ColorScheme, ColorSchemeFormat, SourceFormat

source_format = SourceFormat(
    ColorSchemeFormat.ITERM,
    help='iTerm2 property list presets (.itermcolors).',
)

SLOT_NAMES: dict[str, str] = {
    'Background Color': 'background',
    'Foreground Color': 'foreground',
}
for _i, _name in enumerate(ANSI_NAMES):
    SLOT_NAMES[f'Ansi {_i} Color'] = _name
    SLOT_NAMES[f'Ansi {_i + 8} Color'] = f'bright_{_name}'

COMPONENT_NAMES = {
    'Red Component': 'red',
    'Green Component': 'green',
    'Blue Component': 'blue',
}

# Messages from float()/int() on a bad <real> or <integer> body
_NUMBER_ERROR_RE = re.compile(
    r"(?:could not convert string to float|invalid literal for int\(\) with base \d+): "
    r"(?P<quote>['\"])(?P<token>.*)(?P=quote)$"
)


def _load_plist(content: str | bytes) -> Any:
    data = content.encode('utf-8') if isinstance(content, str) else content
    try:
        return plistlib.loads(data)
    except ValueError as exc:
        match = _NUMBER_ERROR_RE.match(str(exc))
        if match:
            raise ParseFloatError(match.group('token'), exc) from exc
        raise InvalidFormatError(f'Malformed property list: {exc}') from exc
    except Exception as exc:
        raise InvalidFormatError(f'Failed to parse property list: {exc}') from exc


def _component(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParseFloatError(value, ValueError('component is not a number'))
    try:
        return channel_from_real(value)
    except OverflowError as exc:
        raise ParseFloatError(value, exc) from exc


def _parse_color(color_name: str, entry: Any) -> Color:
    if not isinstance(entry, dict):
        raise InvalidFormatError(f'{color_name} is not a dict')
    channels = {}
    for key, value in entry.items():
        channel = COMPONENT_NAMES.get(key)
        if channel is not None:
            channels[channel] = _component(value)
    return Color(**channels)


@source_format.parser
def parse(content: str | bytes) -> ColorScheme:
    root = _load_plist(content)
    if not isinstance(root, dict):
        raise InvalidFormatError('Property list root is not a dict')

    scheme = ColorScheme()
    for color_name, entry in root.items():
        slot = SLOT_NAMES.get(color_name)
        if slot is None:
            continue
        scheme.set(slot, _parse_color(color_name, entry))
    return scheme
