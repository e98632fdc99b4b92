"""End-to-end conversion: pick a source format, parse, render."""

from colortty import registry
from colortty.core.report import format_json, format_yaml
from colortty.core.types import ColorScheme, ColorSchemeFormat

_WRITERS = {
    'yaml': format_yaml,
    'json': format_json,
}


def detect_format(
    path: str | None = None,
    name: str | None = None,
    default: str | None = None,
) -> ColorSchemeFormat:
    """Resolve the source format: explicit name, then filename, then default.

    Raises ValueError when nothing matches.
    """
    if name is not None:
        fmt = ColorSchemeFormat.from_name(name)
        if fmt is None:
            raise ValueError(f'Unknown input format: {name!r}. Available: {_format_names()}')
        return fmt

    if path:
        fmt = ColorSchemeFormat.from_filename(path)
        if fmt is not None:
            return fmt

    if default is not None:
        fmt = ColorSchemeFormat.from_name(default)
        if fmt is None:
            raise ValueError(f'Unknown default input format: {default!r}. Available: {_format_names()}')
        return fmt

    raise ValueError(f'Cannot detect input format of {path or "<stdin>"}; pass --input-format ({_format_names()})')


def _format_names() -> str:
    return ', '.join(fmt.value for fmt in ColorSchemeFormat)


def parse_scheme(content: str | bytes, fmt: ColorSchemeFormat) -> ColorScheme:
    return registry.get(fmt).parse(content)


def convert(content: str | bytes, fmt: ColorSchemeFormat, output: str = 'yaml') -> str:
    """Parse `content` as `fmt` and render it as YAML or JSON."""
    writer = _WRITERS.get(output)
    if writer is None:
        raise ValueError(f'Unknown output format: {output!r}. Available: {", ".join(_WRITERS)}')
    return writer(parse_scheme(content, fmt))
