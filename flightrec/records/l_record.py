"""L record (log / comment) decoder."""

from flightrec.fields import require_kind
from flightrec.records.types import LRecord

__all__ = ["decode_l_record"]


def decode_l_record(line: str) -> LRecord:
    require_kind(line, "L")
    return LRecord(log_string=line[1:])
