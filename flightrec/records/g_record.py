"""G record (security) decoder. The content is vendor specific and opaque."""

from flightrec.fields import require_kind
from flightrec.records.types import GRecord

__all__ = ["decode_g_record"]


def decode_g_record(line: str) -> GRecord:
    require_kind(line, "G")
    return GRecord(data=line[1:])
