"""B record (fix) decoder.

B Record Format:
    B0941145152265N00032642WA00115-0116FooExtension
     |     |       |        ||    |    |
     |     |       |        ||    |    +-- extension columns (36 onward)
     |     |       |        ||    +-- GNSS altitude (5 chars, signed)
     |     |       |        |+-- pressure altitude (5 chars, signed)
     |     |       |        +-- fix valid (A = 3D fix, V = nav warning)
     |     |       +-- longitude DDDMMmmmE/W
     |     +-- latitude DDMMmmmN/S
     +-- UTC time HHMMSS

The 35 mandatory columns are fixed. What the extension columns hold is
declared by the file's I record and read with get_extension().
"""

from flightrec.errors import RecordSyntaxError
from flightrec.fields import (
    decode_altitude,
    decode_position,
    decode_time,
    require_ascii,
    require_kind,
    require_length,
)
from flightrec.records.types import BRecord
from flightrec.types import FixValid

__all__ = ["decode_b_record"]

_FIX_VALID_BY_LETTER = {flag.value: flag for flag in FixValid}


def _decode_fix_valid(letter: str) -> FixValid:
    flag = _FIX_VALID_BY_LETTER.get(letter)
    if flag is None:
        raise RecordSyntaxError(f"bad fix validity flag {letter!r}")
    return flag


def decode_b_record(line: str) -> BRecord:
    """Decode a B (fix) line.

    Only the 35 mandatory columns are checked for ASCII. The extension
    string is kept as is and checked when an extension is extracted.

    Raises:
        RecordSyntaxError: Shorter than 35 characters, non-digit numbers
            or a bad hemisphere / fix validity letter.
        NonAsciiError: The mandatory columns hold a non-ASCII character.
        OutOfRangeError: Time or coordinate out of range.
    """
    base_length = BRecord.base_length
    require_kind(line, "B")
    require_length(line, base_length, "B record")
    require_ascii(line[:base_length], "B record")

    return BRecord(
        timestamp=decode_time(line[1:7]),
        position=decode_position(line[7:24]),
        fix_valid=_decode_fix_valid(line[24]),
        pressure_altitude=decode_altitude(line[25:30]),
        gps_altitude=decode_altitude(line[30:35]),
        extension_string=line[base_length:],
    )
