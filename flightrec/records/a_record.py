"""A record decoder.

The A record identifies the flight recorder and is the first line of every
file. Recorders have used three layouts behind the same leading letter:

    AC00069             single-char code "C", 5-digit serial "00069"
    AFIL01460FLIGHT:1   triple-char code "FIL", 5-digit serial "01460",
                        id extension "FLIGHT:1"
    ACAMWatFoo          triple-char code "CAM", 3-char id "Wat",
                        id extension "Foo" (current layout)

Layout Detection:
    The layouts are told apart by where a 5-digit serial appears, checked in
    this order:
    1. Columns 3-7 are digits     -> single-char code
    2. Columns 5-9 are digits     -> triple-char code with 5-digit serial
    3. Anything else              -> current layout

    A current-layout line whose id and extension happen to start with five
    digits ("ACAM12345") is read as the legacy triple-char layout. The order
    is fixed; it is what legacy files need. ARecord.format() refuses
    to write a line that this order would read back as another layout.
"""

from flightrec.fields import require_ascii, require_kind, require_length
from flightrec.manufacturer import (
    decode_single_char_manufacturer,
    decode_triple_char_manufacturer,
)
from flightrec.records.types import ALayout, ARecord, detect_a_layout

__all__ = ["decode_a_record"]

_BASE_LENGTH = 7


def decode_a_record(line: str) -> ARecord:
    """Decode an A (recorder identification) line.

    Args:
        line: The whole line, starting with "A".

    Returns:
        ARecord with the manufacturer, id, optional id extension and the
        detected layout.

    Raises:
        RecordSyntaxError: Shorter than 7 characters.
        NonAsciiError: The code or id holds a non-ASCII character.

    Example:
        >>> decode_a_record("AFIL01460FLIGHT:1").unique_id
        '01460'
    """
    require_kind(line, "A")
    require_length(line, _BASE_LENGTH, "A record")
    require_ascii(line[:_BASE_LENGTH], "A record")

    layout = detect_a_layout(line)

    if layout is ALayout.SINGLE_CHAR_SERIAL:
        manufacturer = decode_single_char_manufacturer(line[1])
        unique_id = line[2:7]
        tail = line[7:]
    elif layout is ALayout.TRIPLE_CHAR_SERIAL:
        manufacturer = decode_triple_char_manufacturer(line[1:4])
        unique_id = line[4:9]
        tail = line[9:]
    else:
        manufacturer = decode_triple_char_manufacturer(line[1:4])
        unique_id = line[4:7]
        tail = line[7:]

    return ARecord(
        manufacturer=manufacturer,
        unique_id=unique_id,
        id_extension=tail or None,
        layout=layout,
    )
