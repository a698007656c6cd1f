"""E record (event) decoder.

    E120515PEVText
     |     |  |
     |     |  +-- free text (optional)
     |     +-- event mnemonic (3 chars)
     +-- UTC time HHMMSS

An official event is tied to a B record with the same time; that pairing is
not checked here.
"""

from flightrec.fields import decode_time, require_ascii, require_kind, require_length
from flightrec.records.types import ERecord

__all__ = ["decode_e_record"]

_BASE_LENGTH = 10


def decode_e_record(line: str) -> ERecord:
    require_kind(line, "E")
    require_length(line, _BASE_LENGTH, "E record")
    require_ascii(line[:_BASE_LENGTH], "E record")

    return ERecord(
        time=decode_time(line[1:7]),
        mnemonic=line[7:_BASE_LENGTH],
        text=line[_BASE_LENGTH:] or None,
    )
