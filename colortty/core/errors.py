"""Errors raised while parsing colour scheme sources."""


class ColorError(ValueError):
    """Base class for every colour scheme parse failure."""


class InvalidFormatError(ColorError):
    """Structural problem: wrong field count, unknown key, bad tree shape."""


class ParseIntError(ColorError):
    """A colour channel field is not an integer in 0..255."""

    def __init__(self, field: str, error: ValueError):
        super().__init__(f'invalid colour channel {field!r}: {error}')
        self.field = field
        self.error = error


class ParseFloatError(ColorError):
    """A colour component value is not a number."""

    def __init__(self, value: object, error: ValueError):
        super().__init__(f'invalid colour component {value!r}: {error}')
        self.value = value
        self.error = error
