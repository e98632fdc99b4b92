"""Lookup from ColorSchemeFormat to its parser module in colortty/formats/.

Each format module defines a module-level `source_format` (SourceFormat)
for exactly the format it is mapped to here. Modules are imported on first
use and cached.
"""

import importlib
from types import ModuleType

from colortty.core.types import ColorSchemeFormat, SourceFormat

FORMAT_MODULES: dict[ColorSchemeFormat, str] = {
    ColorSchemeFormat.ITERM: 'colortty.formats.iterm',
    ColorSchemeFormat.MINTTY: 'colortty.formats.mintty',
}

_registry: dict[ColorSchemeFormat, SourceFormat] = {}


def module(fmt: ColorSchemeFormat) -> ModuleType:
    """Import the module implementing a source format."""
    if fmt not in FORMAT_MODULES:
        raise KeyError(f'No parser module for format: {fmt.value}')
    return importlib.import_module(FORMAT_MODULES[fmt])


def get(fmt: ColorSchemeFormat) -> SourceFormat:
    """Get the parser for a source format."""
    if fmt in _registry:
        return _registry[fmt]

    mod = module(fmt)
    source_format = getattr(mod, 'source_format', None)
    if not isinstance(source_format, SourceFormat) or source_format.format is not fmt:
        raise RuntimeError(f'{mod.__name__} does not define a source_format for {fmt.value}')
    _registry[fmt] = source_format
    return source_format


def all_formats() -> dict[ColorSchemeFormat, SourceFormat]:
    """Parsers for every ColorSchemeFormat, in enum order."""
    return {fmt: get(fmt) for fmt in ColorSchemeFormat}
