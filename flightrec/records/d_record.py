"""D record (differential GPS) decoder.

    D20331
    ||
    |+-- station id (4 chars)
    +-- qualifier: 1 = GPS, 2 = DGPS
"""

from flightrec.errors import RecordSyntaxError
from flightrec.fields import require_ascii, require_kind
from flightrec.records.types import (
    DRecord,
    GpsQualifier,
    GpsQualifierCode,
    UnrecognizedGpsQualifier,
)

__all__ = ["decode_d_record"]

_RECORD_LENGTH = 6

_QUALIFIER_BY_CODE = {qualifier.code: qualifier for qualifier in GpsQualifier}


def _decode_qualifier(code: str) -> GpsQualifierCode:
    qualifier = _QUALIFIER_BY_CODE.get(code)
    if qualifier is None:
        return UnrecognizedGpsQualifier(code)
    return qualifier


def decode_d_record(line: str) -> DRecord:
    """Decode a D line, which has no free-text tail and is exactly 6 long."""
    require_kind(line, "D")
    require_ascii(line, "D record")
    if len(line) != _RECORD_LENGTH:
        raise RecordSyntaxError(
            f"D record must be {_RECORD_LENGTH} characters, got {len(line)}: {line!r}"
        )

    return DRecord(qualifier=_decode_qualifier(line[1]), station_id=line[2:6])
