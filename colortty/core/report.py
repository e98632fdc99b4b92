"""Output writers — Alacritty YAML and JSON for a ColorScheme."""

import json
from typing import Any

from colortty.core.types import ANSI_NAMES, ColorScheme

_SECTIONS = (
    ('Normal colors', 'normal', ''),
    ('Bright colors', 'bright', 'bright_'),
)


def format_yaml(scheme: ColorScheme) -> str:
    """Format a scheme as an Alacritty `colors:` block.

    The layout is fixed (comments, blank lines, column alignment) so output
    can be diffed against reference files.
    """
    lines = [
        'colors:',
        '  # Default colors',
        '  primary:',
        f"    background: '{scheme.background.to_hex()}'",
        f"    foreground: '{scheme.foreground.to_hex()}'",
    ]
    for comment, section, prefix in _SECTIONS:
        lines.append('')
        lines.append(f'  # {comment}')
        lines.append(f'  {section}:')
        for name in ANSI_NAMES:
            color = getattr(scheme, prefix + name)
            lines.append(f"    {name + ':':<8} '{color.to_hex()}'")
    return '\n'.join(lines) + '\n'


def format_json(scheme: ColorScheme) -> str:
    """Format a scheme as JSON with the same grouping as the YAML output."""
    obj: dict[str, Any] = {
        'primary': {
            'background': scheme.background.to_hex(),
            'foreground': scheme.foreground.to_hex(),
        },
    }
    for _comment, section, prefix in _SECTIONS:
        obj[section] = {name: getattr(scheme, prefix + name).to_hex() for name in ANSI_NAMES}
    return json.dumps(obj, indent=2)
