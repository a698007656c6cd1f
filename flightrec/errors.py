"""Errors raised while decoding recorder lines.

Every failure a decoder can hit is reported as a subclass of ParseError, so
callers processing a whole file can catch one type and decide per line
whether to skip, abort or collect. ParseError derives from ValueError because
every failure is a malformed value in the input text.
"""

__all__ = [
    "BadExtensionError",
    "MissingExtensionError",
    "NonAsciiError",
    "OutOfRangeError",
    "ParseError",
    "RecordSyntaxError",
]


class ParseError(ValueError):
    """Base class for all decoding failures."""


class RecordSyntaxError(ParseError):
    """The line is structurally malformed.

    Raised for a line shorter than its record kind's mandatory fields, a
    numeric field that is not decimal digits, or an unexpected letter where a
    fixed delimiter (hemisphere, fix validity) is required.
    """


class OutOfRangeError(ParseError):
    """A numeric field is outside its declared domain."""


class NonAsciiError(ParseError):
    """A range that is sliced by column offset holds a non-ASCII character.

    Column offsets in the format count single-byte characters. A wider
    character would shift every following field, so the range is rejected
    before any slicing happens.
    """


class BadExtensionError(ParseError):
    """An extension range ends before it starts or covers mandatory fields."""


class MissingExtensionError(ParseError):
    """An extension range lies beyond the end of the record."""
