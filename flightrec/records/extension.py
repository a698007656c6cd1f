"""Extension declarations and extension column extraction.

I and J records declare extra columns that B and K records carry after their
mandatory fields. Each declaration is a 7-character block:

    I 03 3638FXA 3941ENL 4246TAS
    | |  |  | |
    | |  |  | +-- mnemonic naming the data in the columns
    | |  |  +-- end column (inclusive)
    | |  +-- start column
    | +-- number of declarations that follow
    +-- record kind

Columns are 1-indexed over the whole physical line, kind letter included.
For a B record (35 mandatory characters) the first extension column is 36.

Extraction Arithmetic:
    A record with base length L stores everything after its mandatory fields
    as extension_string. Column c of the line is extension_string[c - L - 1],
    so the range (start, end) maps to extension_string[start - L - 1 : end - L].

        K record, L = 7:   K095214FooTheBar
                           1      8  11 14
        (8, 10)  -> extension_string[0:3] -> "Foo"
        (11, 13) -> extension_string[3:6] -> "The"
        (14, 16) -> extension_string[6:9] -> "Bar"
"""

from dataclasses import dataclass
from typing import Protocol

from flightrec.errors import (
    BadExtensionError,
    MissingExtensionError,
    RecordSyntaxError,
)
from flightrec.fields import parse_unsigned_field, require_ascii, require_length

__all__ = [
    "Extendable",
    "Extension",
    "ExtensionRange",
    "ExtensionSet",
    "decode_extension",
    "decode_extension_range",
    "decode_extension_set",
    "encode_extension",
    "encode_extension_range",
    "encode_extension_set",
    "get_extension",
]

EXTENSION_RANGE_LENGTH = 4
EXTENSION_LENGTH = 7
MNEMONIC_LENGTH = 3

# Kind letter plus the 2-digit declaration count
_EXTENSION_SET_HEADER_LENGTH = 3


@dataclass(frozen=True)
class ExtensionRange:
    """An inclusive, 1-indexed column range over a whole line.

    Raises BadExtensionError on construction if end < start, so an inverted
    range can never exist.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise BadExtensionError(
                f"extension range ends before it starts: {self.start}-{self.end}"
            )

    def __len__(self) -> int:
        return self.end - self.start + 1


@dataclass(frozen=True)
class Extension:
    """A declared extension: a column range and the 3-letter mnemonic for it."""

    range: ExtensionRange
    mnemonic: str


@dataclass(frozen=True)
class ExtensionSet:
    """The declarations carried by one I or J record.

    Attributes:
        count: Number of declarations stated on the line.
        extensions: The declarations in line order. Always count long.
    """

    count: int
    extensions: tuple[Extension, ...]

    def __post_init__(self) -> None:
        if self.count != len(self.extensions):
            raise RecordSyntaxError(
                f"declared {self.count} extensions, got {len(self.extensions)}"
            )

    def find(self, mnemonic: str) -> Extension | None:
        """Return the first declaration with the given mnemonic, if any."""
        for extension in self.extensions:
            if extension.mnemonic == mnemonic:
                return extension
        return None


class Extendable(Protocol):
    """A record whose free-text tail can hold declared extension columns."""

    @property
    def base_length(self) -> int: ...

    @property
    def extension_string(self) -> str: ...


def decode_extension_range(text: str) -> ExtensionRange:
    """Decode a 4-character SSEE column range.

    Raises:
        NonAsciiError: The text holds a non-ASCII character.
        RecordSyntaxError: Wrong width or non-digit columns.
        BadExtensionError: The end column is before the start column.
    """
    require_ascii(text, "extension range")
    if len(text) != EXTENSION_RANGE_LENGTH:
        raise RecordSyntaxError(f"extension range must be 4 characters: {text!r}")

    start = parse_unsigned_field(text[0:2], "extension start column")
    end = parse_unsigned_field(text[2:4], "extension end column")
    return ExtensionRange(start=start, end=end)


def encode_extension_range(extension_range: ExtensionRange) -> str:
    return f"{extension_range.start:02}{extension_range.end:02}"


def decode_extension(text: str) -> Extension:
    """Decode a 7-character SSEEMMM extension declaration."""
    require_ascii(text, "extension")
    if len(text) != EXTENSION_LENGTH:
        raise RecordSyntaxError(f"extension must be 7 characters: {text!r}")

    return Extension(
        range=decode_extension_range(text[:EXTENSION_RANGE_LENGTH]),
        mnemonic=text[EXTENSION_RANGE_LENGTH:],
    )


def encode_extension(extension: Extension) -> str:
    return encode_extension_range(extension.range) + extension.mnemonic


def decode_extension_set(line: str, expected_count: int) -> ExtensionSet:
    """Decode the declarations that follow the count field of an I/J line.

    Args:
        line: The whole I or J line, kind letter and count included.
        expected_count: The count already read from the line. The rest of
            the line must hold exactly this many 7-character declarations.

    Raises:
        RecordSyntaxError: The remainder is not expected_count * 7 characters.
        NonAsciiError: The remainder holds a non-ASCII character.
        BadExtensionError: A declaration has an inverted range.
    """
    require_length(line, _EXTENSION_SET_HEADER_LENGTH, "extension set")
    body = line[_EXTENSION_SET_HEADER_LENGTH:]
    require_ascii(body, "extension set")

    if len(body) != expected_count * EXTENSION_LENGTH:
        raise RecordSyntaxError(
            f"expected {expected_count} extensions "
            f"({expected_count * EXTENSION_LENGTH} characters), "
            f"got {len(body)} characters"
        )

    extensions = tuple(
        decode_extension(body[offset : offset + EXTENSION_LENGTH])
        for offset in range(0, len(body), EXTENSION_LENGTH)
    )
    return ExtensionSet(count=expected_count, extensions=extensions)


def encode_extension_set(extension_set: ExtensionSet) -> str:
    """Encode the count and declarations, without the kind letter."""
    return f"{extension_set.count:02}" + "".join(
        encode_extension(extension) for extension in extension_set.extensions
    )


def get_extension(
    record: Extendable,
    extension: ExtensionRange | Extension,
) -> str:
    """Extract the text of an extension column range from a record.

    Args:
        record: Any record exposing base_length and extension_string
            (BRecord, KRecord).
        extension: The column range to extract, or a declaration whose
            range is used.

    Returns:
        The characters of the record's tail covered by the range.

    Raises:
        BadExtensionError: The range starts inside the mandatory fields.
        NonAsciiError: The tail holds a non-ASCII character, so columns
            cannot be mapped to characters.
        MissingExtensionError: The record's tail ends before the range does.

    Example:
        >>> record = decode_line("K095214FooTheBar")
        >>> get_extension(record, ExtensionRange(11, 13))
        'The'
    """
    extension_range = extension.range if isinstance(extension, Extension) else extension
    base_length = record.base_length

    if extension_range.start <= base_length:
        raise BadExtensionError(
            f"extension column {extension_range.start} lies inside the "
            f"{base_length} mandatory columns"
        )

    tail = record.extension_string
    require_ascii(tail, "extension string")

    start = extension_range.start - base_length - 1
    end = extension_range.end - base_length

    if start >= len(tail) or end > len(tail):
        raise MissingExtensionError(
            f"columns {extension_range.start}-{extension_range.end} are beyond "
            f"the end of the record ({base_length + len(tail)} columns)"
        )

    return tail[start:end]
