"""F record (satellite constellation) decoder.

    F095212AABBCCDDEE
     |     |
     |     +-- satellite ids, 2 characters each
     +-- UTC time HHMMSS
"""

from flightrec.errors import RecordSyntaxError
from flightrec.fields import decode_time, require_ascii, require_kind, require_length
from flightrec.records.types import FRecord

__all__ = ["decode_f_record"]

_BASE_LENGTH = 7
_SATELLITE_ID_LENGTH = 2


def _split_satellites(text: str) -> tuple[str, ...]:
    """Split the satellite list into 2-character ids.

    Example:
        >>> _split_satellites("0412")
        ('04', '12')
    """
    if not text:
        raise RecordSyntaxError("empty satellite list")
    if len(text) % _SATELLITE_ID_LENGTH != 0:
        raise RecordSyntaxError(f"odd-length satellite list: {text!r}")
    return tuple(
        text[offset : offset + _SATELLITE_ID_LENGTH]
        for offset in range(0, len(text), _SATELLITE_ID_LENGTH)
    )


def decode_f_record(line: str) -> FRecord:
    """Decode an F line.

    The satellite list is sliced in pairs, so the whole line must be ASCII.
    At least one satellite id must follow the time.

    Raises:
        RecordSyntaxError: Shorter than 7 characters, or an empty or odd-length
            list.
        NonAsciiError: Any non-ASCII character on the line.
    """
    require_kind(line, "F")
    require_length(line, _BASE_LENGTH, "F record")
    require_ascii(line, "F record")

    return FRecord(
        time=decode_time(line[1:_BASE_LENGTH]),
        satellites=_split_satellites(line[_BASE_LENGTH:]),
    )
