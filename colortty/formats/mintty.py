"""mintty colour schemes (.minttyrc).

One `Name=Value` assignment per line, value as decimal `R,G,B`:

    ForegroundColour=248,248,242
    BackgroundColour=40,42,54
    Black=0,0,0
    BoldBlack=40,42,53

Recognised names: ForegroundColour, BackgroundColour, the eight ANSI colour
names (Black ... White) and their Bold* bright variants. Any other name is an
error, so pass a file holding only the colour lines.

Example:
    colortty convert Dracula.minttyrc
"""

from colortty.core.errors import InvalidFormatError
from colortty.core.palette import parse_rgb
from colortty.core.types import ANSI_NAMES, ColorScheme, ColorSchemeFormat, SourceFormat

source_format = SourceFormat(
    ColorSchemeFormat.MINTTY,
    help='mintty Name=R,G,B lines (.minttyrc).',
)

SLOT_NAMES: dict[str, str] = {
    'ForegroundColour': 'foreground',
    'BackgroundColour': 'background',
}
for _name in ANSI_NAMES:
    SLOT_NAMES[_name.capitalize()] = _name
    SLOT_NAMES[f'Bold{_name.capitalize()}'] = f'bright_{_name}'


@source_format.parser
def parse(content: str | bytes) -> ColorScheme:
    if isinstance(content, bytes):
        try:
            content = content.decode('utf-8')
        except UnicodeDecodeError as exc:
            raise InvalidFormatError(f'Not UTF-8 text: {exc}') from exc

    scheme = ColorScheme()
    for line in content.splitlines():
        if not line.strip():
            continue
        components = line.split('=')
        if len(components) != 2:
            raise InvalidFormatError(f'Invalid line: {line!r}')
        name, value = components[0].strip(), components[1].strip()
        slot = SLOT_NAMES.get(name)
        if slot is None:
            raise InvalidFormatError(f'Invalid color name: {name!r}')
        scheme.set(slot, parse_rgb(value))
    return scheme
