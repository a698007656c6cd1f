"""I and J record (extension declaration) decoders.

Both kinds share one layout; I declares B record columns, J declares K
record columns:

    I033638FXA3941ENL4246TAS
     | |      |      |
     | +------+------+-- declarations, 7 characters each
     +-- declaration count (2 digits)
"""

from flightrec.fields import (
    parse_unsigned_field,
    require_ascii,
    require_kind,
    require_length,
)
from flightrec.records.extension import ExtensionSet, decode_extension_set
from flightrec.records.types import IRecord, JRecord

__all__ = ["decode_i_record", "decode_j_record"]

_BASE_LENGTH = 3


def _decode_declarations(line: str, kind: str) -> ExtensionSet:
    require_kind(line, kind)
    require_length(line, _BASE_LENGTH, f"{kind} record")
    require_ascii(line[:_BASE_LENGTH], f"{kind} record")

    count = parse_unsigned_field(line[1:_BASE_LENGTH], "extension count")
    return decode_extension_set(line, count)


def decode_i_record(line: str) -> IRecord:
    """Decode an I line.

    Raises:
        RecordSyntaxError: Shorter than 3 characters, a non-digit count, or
            a declaration list whose length does not match the count.
        NonAsciiError: Any non-ASCII character in the declarations.
        BadExtensionError: A declaration ends before it starts.
    """
    return IRecord(extensions=_decode_declarations(line, "I"))


def decode_j_record(line: str) -> JRecord:
    """Decode a J line. Same rules as decode_i_record."""
    return JRecord(extensions=_decode_declarations(line, "J"))
