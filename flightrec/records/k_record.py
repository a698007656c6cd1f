"""K record (extension data) decoder.

    K095214FooTheBar
     |     |
     |     +-- extension columns (8 onward), declared by the J record
     +-- UTC time HHMMSS
"""

from flightrec.fields import decode_time, require_ascii, require_kind, require_length
from flightrec.records.types import KRecord

__all__ = ["decode_k_record"]


def decode_k_record(line: str) -> KRecord:
    base_length = KRecord.base_length
    require_kind(line, "K")
    require_length(line, base_length, "K record")
    require_ascii(line[:base_length], "K record")

    return KRecord(
        time=decode_time(line[1:base_length]),
        extension_string=line[base_length:],
    )
