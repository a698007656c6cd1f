"""C record (task) decoders.

C lines come in two layouts sharing the same letter:

Declaration:
    C230718092044000000000204Foo task
     |     |     |     |   | |
     |     |     |     |   | +-- task name (optional)
     |     |     |     |   +-- turnpoint count (2 digits)
     |     |     |     +-- task id (4 digits)
     |     |     +-- intended flight date DDMMYY (000000 if unknown)
     |     +-- declaration time HHMMSS
     +-- declaration date DDMMYY

Turnpoint:
    C5156040N00038120WLBZ-Leighton Buzzard NE
     |       |        |
     |       |        +-- turnpoint name (optional)
     |       +-- longitude
     +-- latitude

Column 9 tells them apart: the latitude hemisphere (N/S) in a turnpoint, a
digit of the declaration time in a declaration.
"""

from flightrec.fields import (
    decode_date,
    decode_position,
    decode_time,
    parse_unsigned_field,
    require_ascii,
    require_kind,
    require_length,
)
from flightrec.records.types import CDeclarationRecord, CTurnpointRecord

__all__ = ["decode_c_declaration", "decode_c_turnpoint", "is_c_turnpoint"]

_DECLARATION_LENGTH = 25
_TURNPOINT_LENGTH = 18

# 0-indexed position of the latitude hemisphere in a turnpoint line
_HEMISPHERE_INDEX = 8


def is_c_turnpoint(line: str) -> bool:
    """Return True if a C line uses the turnpoint layout.

    The caller must have checked that the first 9 characters exist and are
    ASCII.
    """
    return line[_HEMISPHERE_INDEX] in ("N", "S")


def decode_c_declaration(line: str) -> CDeclarationRecord:
    """Decode a task declaration C line.

    Raises:
        RecordSyntaxError: Shorter than 25 characters or non-digit fields.
        NonAsciiError: The mandatory columns hold a non-ASCII character.
        OutOfRangeError: A date or time out of range.
    """
    require_kind(line, "C")
    require_length(line, _DECLARATION_LENGTH, "C declaration record")
    require_ascii(line[:_DECLARATION_LENGTH], "C declaration record")

    return CDeclarationRecord(
        date=decode_date(line[1:7]),
        time=decode_time(line[7:13]),
        flight_date=decode_date(line[13:19]),
        task_id=parse_unsigned_field(line[19:23], "task id"),
        turnpoint_count=parse_unsigned_field(line[23:25], "turnpoint count"),
        name=line[_DECLARATION_LENGTH:] or None,
    )


def decode_c_turnpoint(line: str) -> CTurnpointRecord:
    """Decode a task turnpoint C line."""
    require_kind(line, "C")
    require_length(line, _TURNPOINT_LENGTH, "C turnpoint record")
    require_ascii(line[:_TURNPOINT_LENGTH], "C turnpoint record")

    return CTurnpointRecord(
        position=decode_position(line[1:_TURNPOINT_LENGTH]),
        name=line[_TURNPOINT_LENGTH:] or None,
    )
