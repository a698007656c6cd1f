"""Line dispatcher and canonical formatter.

decode_line() is the single entry point: it looks at the first character of
a line and hands the line to the decoder for that record kind.

Dispatch Table:
    A  recorder id          G  security
    B  fix                  H  header
    C  task (2 layouts)     I  B record extension declarations
    D  differential GPS     J  K record extension declarations
    E  event                K  extension data
    F  satellites           L  log / comment

Any other first character gives an UnrecognizedRecord holding the line.
That is a normal result, not an error: files in the wild carry vendor
specific kinds.

Error Policy:
    decode_line() raises a ParseError subclass for a malformed line and
    never anything else. parse_line() is the lenient variant returning None,
    and iter_records() yields errors next to records so the caller decides
    whether to skip, stop or collect.
"""

import logging
from collections.abc import Callable, Iterable, Iterator

from flightrec.errors import ParseError, RecordSyntaxError
from flightrec.fields import require_ascii, require_length
from flightrec.records.a_record import decode_a_record
from flightrec.records.b_record import decode_b_record
from flightrec.records.c_record import (
    decode_c_declaration,
    decode_c_turnpoint,
    is_c_turnpoint,
)
from flightrec.records.d_record import decode_d_record
from flightrec.records.e_record import decode_e_record
from flightrec.records.f_record import decode_f_record
from flightrec.records.g_record import decode_g_record
from flightrec.records.h_record import decode_h_record
from flightrec.records.i_record import decode_i_record, decode_j_record
from flightrec.records.k_record import decode_k_record
from flightrec.records.l_record import decode_l_record
from flightrec.records.types import Record, UnrecognizedRecord

__all__ = ["decode_line", "format_record", "iter_records", "parse_line"]

logger = logging.getLogger(__name__)

_LINE_TERMINATORS = ("\r\n", "\n", "\r")

# Column 9 must exist before a C line can be routed
_C_LOOKAHEAD_LENGTH = 9


def _decode_c_record(line: str) -> Record:
    """Route a C line to the turnpoint or declaration decoder."""
    require_length(line, _C_LOOKAHEAD_LENGTH, "C record")
    require_ascii(line[:_C_LOOKAHEAD_LENGTH], "C record")

    if is_c_turnpoint(line):
        return decode_c_turnpoint(line)
    return decode_c_declaration(line)


_DECODERS: dict[str, Callable[[str], Record]] = {
    "A": decode_a_record,
    "B": decode_b_record,
    "C": _decode_c_record,
    "D": decode_d_record,
    "E": decode_e_record,
    "F": decode_f_record,
    "G": decode_g_record,
    "H": decode_h_record,
    "I": decode_i_record,
    "J": decode_j_record,
    "K": decode_k_record,
    "L": decode_l_record,
}


def decode_line(line: str) -> Record:
    """Decode one line of a recorder file into a typed record.

    The line is decoded as given. A trailing "\\r" or "\\n" is part of the
    record text, so callers splitting a file remove terminators first (or
    use iter_records, which does).

    Args:
        line: One line of text, without its line terminator.

    Returns:
        The record for the line's kind, or UnrecognizedRecord if the first
        character is not a known kind letter.

    Raises:
        RecordSyntaxError: Empty line, or a line too short / malformed for
            its kind.
        OutOfRangeError, NonAsciiError, BadExtensionError: Propagated from
            the kind decoder.

    Example:
        >>> decode_line("HFGIDGLIDERID:D-KOOL").data
        'D-KOOL'
        >>> decode_line("C5156040N00038120WLBZ-Leighton Buzzard NE").name
        'LBZ-Leighton Buzzard NE'
    """
    if not line:
        raise RecordSyntaxError("empty line")

    decoder = _DECODERS.get(line[0])
    if decoder is None:
        logger.debug("Unrecognized record kind %r", line[0])
        return UnrecognizedRecord(line)

    return decoder(line)


def parse_line(line: str) -> Record | None:
    """Decode a line, returning None instead of raising on malformed input.

    Convenient when bad lines are simply skipped. The reason for a failure
    is logged at debug level.

    Example:
        >>> parse_line("B0941") is None
        True
    """
    try:
        return decode_line(line)
    except ParseError as error:
        logger.debug("Skipping malformed line %r: %s", line, error)
        return None


def _strip_terminator(line: str) -> str:
    """Remove one trailing "\\r\\n", "\\n" or "\\r"."""
    for terminator in _LINE_TERMINATORS:
        if line.endswith(terminator):
            return line[: -len(terminator)]
    return line


def iter_records(
    lines: Iterable[str],
) -> Iterator[tuple[int, Record | ParseError]]:
    """Decode lines in order, pairing each result with its 1-based line number.

    Each line loses one trailing terminator before decoding, so lines read
    from a text file can be passed straight in. A malformed line yields its
    ParseError in place of a record. Blank lines are skipped.

    Example:
        >>> for number, result in iter_records(["AXXXABC", "", "B1"]):
        ...     print(number, type(result).__name__)
        1 ARecord
        3 RecordSyntaxError
    """
    for number, line in enumerate(lines, start=1):
        line = _strip_terminator(line)
        if not line:
            continue
        try:
            yield number, decode_line(line)
        except ParseError as error:
            logger.debug("Line %d: %s", number, error)
            yield number, error


def format_record(record: Record) -> str:
    """Render a record back to its canonical line, without a terminator."""
    return record.format()
