"""Fixed-width field codecs.

Every record kind is laid out as a run of fixed-width fields, so decoding is
a matter of slicing the line at known columns and decoding each slice. This
module holds the guards that make those slices safe and the codecs for the
primitive field types shared across record kinds.

Field Layouts:
    Time        HHMMSS        "094114"     09:41:14
    Date        DDMMYY        "230718"     23 July 18
    Latitude    DDMMmmmH      "5152265N"   51 deg 52.265 min North
    Longitude   DDDMMmmmH     "00032642W"  0 deg 32.642 min West
    Altitude    5 chars       "00115"      115 m, "-0116" is -116 m

Decoding is strict about digits: Python's int() accepts "+1", " 1", "1_0"
and non-ASCII digits, none of which would format back to the same text.
Numeric fields are matched against ASCII 0-9 before conversion.
"""

import re

from flightrec.errors import NonAsciiError, OutOfRangeError, RecordSyntaxError
from flightrec.types import (
    MAXIMUM_DAY,
    MAXIMUM_MINUTE_THOUSANDTHS,
    MAXIMUM_MONTH,
    MAXIMUM_YEAR,
    Axis,
    Compass,
    Coordinate,
    Date,
    Position,
    Time,
)

__all__ = [
    "decode_altitude",
    "decode_coordinate",
    "decode_date",
    "decode_latitude",
    "decode_longitude",
    "decode_position",
    "decode_time",
    "encode_altitude",
    "encode_coordinate",
    "encode_date",
    "encode_position",
    "encode_time",
    "is_digits",
    "parse_unsigned_field",
    "require_ascii",
    "require_kind",
    "require_length",
]

TIME_LENGTH = 6
DATE_LENGTH = 6
LATITUDE_LENGTH = 8
LONGITUDE_LENGTH = 9
POSITION_LENGTH = LATITUDE_LENGTH + LONGITUDE_LENGTH
ALTITUDE_LENGTH = 5

_UNSIGNED = re.compile(r"[0-9]+")
_SIGNED = re.compile(r"-?[0-9]+")

_DEGREE_DIGITS = {Axis.LATITUDE: 2, Axis.LONGITUDE: 3}
_HEMISPHERES = {
    Axis.LATITUDE: (Compass.NORTH, Compass.SOUTH),
    Axis.LONGITUDE: (Compass.EAST, Compass.WEST),
}
_MINUTE_DIGITS = 5

_MINIMUM_ALTITUDE = -9999
_MAXIMUM_ALTITUDE = 99999


def require_ascii(text: str, what: str) -> None:
    """Raise NonAsciiError unless every character of text is single-byte.

    Must be called on a range before slicing it by column offset.
    """
    if not text.isascii():
        raise NonAsciiError(f"{what} contains non-ASCII characters: {text!r}")


def require_length(text: str, minimum: int, what: str) -> None:
    """Raise RecordSyntaxError if text is shorter than minimum characters."""
    if len(text) < minimum:
        raise RecordSyntaxError(
            f"{what} needs at least {minimum} characters, got {len(text)}: {text!r}"
        )


def require_kind(line: str, kind: str) -> None:
    """Raise RecordSyntaxError unless line starts with the kind letter."""
    if not line.startswith(kind):
        raise RecordSyntaxError(f"expected a {kind} record, got {line[:1]!r}")


def is_digits(text: str) -> bool:
    """Return True if text is a non-empty run of ASCII decimal digits."""
    return _UNSIGNED.fullmatch(text) is not None


def parse_unsigned_field(text: str, what: str) -> int:
    """Parse a run of ASCII digits, raising RecordSyntaxError otherwise.

    Example:
        >>> parse_unsigned_field("0204", "task id")
        204
    """
    if not is_digits(text):
        raise RecordSyntaxError(f"{what} is not a decimal number: {text!r}")
    return int(text)


def _parse_signed_field(text: str, what: str) -> int:
    if _SIGNED.fullmatch(text) is None:
        raise RecordSyntaxError(f"{what} is not a decimal number: {text!r}")
    value = int(text)
    # "-0000" has no distinct integer value to format back from
    if value == 0 and text.startswith("-"):
        raise RecordSyntaxError(f"{what} is a negative zero: {text!r}")
    return value


def _check_window(field: str, length: int, what: str) -> None:
    require_ascii(field, what)
    if len(field) != length:
        raise RecordSyntaxError(
            f"{what} must be {length} characters, got {len(field)}: {field!r}"
        )


def _split_pairs(field: str, what: str) -> tuple[int, int, int]:
    """Split a 6-character field into three 2-digit numbers."""
    _check_window(field, 6, what)
    return (
        parse_unsigned_field(field[0:2], what),
        parse_unsigned_field(field[2:4], what),
        parse_unsigned_field(field[4:6], what),
    )


def _check_date(day: int, month: int, year: int) -> None:
    if not (
        0 <= day <= MAXIMUM_DAY
        and 0 <= month <= MAXIMUM_MONTH
        and 0 <= year <= MAXIMUM_YEAR
    ):
        raise OutOfRangeError(f"date {day:02}/{month:02}/{year:02} out of range")


def _check_coordinate(degrees: int, minute_thousandths: int, axis: Axis) -> None:
    if not (
        0 <= degrees <= axis.maximum_degrees
        and 0 <= minute_thousandths <= MAXIMUM_MINUTE_THOUSANDTHS
    ):
        raise OutOfRangeError(
            f"{axis.value} out of range: {degrees} deg {minute_thousandths} "
            f"minute-thousandths"
        )


def decode_time(field: str) -> Time:
    """Decode an HHMMSS time field.

    Args:
        field: Exactly 6 characters, e.g. "094114".

    Returns:
        The decoded Time. Hour 24 and minute/second 60 are accepted.

    Raises:
        NonAsciiError: The field holds a non-ASCII character.
        RecordSyntaxError: Wrong width or a non-digit sub-field.
        OutOfRangeError: hour > 24, minute > 60 or second > 60.
    """
    hours, minutes, seconds = _split_pairs(field, "time")
    return Time.from_hms(hours, minutes, seconds)


def encode_time(time: Time) -> str:
    """Encode a time as HHMMSS, raising OutOfRangeError outside the bounds."""
    Time.from_hms(time.hours, time.minutes, time.seconds)
    return f"{time.hours:02}{time.minutes:02}{time.seconds:02}"


def decode_date(field: str) -> Date:
    """Decode a DDMMYY date field.

    Day and month are only bounded above (31 and 12); 000000 is a valid
    placeholder in task declarations.

    Raises:
        NonAsciiError: The field holds a non-ASCII character.
        RecordSyntaxError: Wrong width or a non-digit sub-field.
        OutOfRangeError: day > 31 or month > 12.
    """
    day, month, year = _split_pairs(field, "date")
    _check_date(day, month, year)
    return Date(day=day, month=month, year=year)


def encode_date(date: Date) -> str:
    """Encode a date as DDMMYY, raising OutOfRangeError outside the bounds."""
    _check_date(date.day, date.month, date.year)
    return f"{date.day:02}{date.month:02}{date.year:02}"


def decode_coordinate(field: str, axis: Axis) -> Coordinate:
    """Decode a latitude (8 chars) or longitude (9 chars) field.

    The field is degrees (2 digits for latitude, 3 for longitude), then
    minute-thousandths (5 digits), then one hemisphere letter.

    Args:
        field: Raw coordinate text, e.g. "5152265N" or "00032642W".
        axis: Which axis the field encodes. Selects the degree width,
            the degree bound and the allowed hemisphere letters.

    Raises:
        NonAsciiError: The field holds a non-ASCII character.
        RecordSyntaxError: Wrong width, non-digit degrees/minutes, or a
            hemisphere letter that does not belong to the axis.
        OutOfRangeError: Degrees above 90/180 or minutes above 60000.

    Example:
        >>> decode_coordinate("5152265N", Axis.LATITUDE)
        Coordinate(degrees=51, minute_thousandths=52265, sign=<Compass.NORTH: 'N'>)
    """
    degree_digits = _DEGREE_DIGITS[axis]
    length = degree_digits + _MINUTE_DIGITS + 1
    _check_window(field, length, axis.value)

    degrees = parse_unsigned_field(field[:degree_digits], axis.value)
    minute_thousandths = parse_unsigned_field(
        field[degree_digits : length - 1], axis.value
    )

    letter = field[length - 1]
    signs = {sign.value: sign for sign in _HEMISPHERES[axis]}
    if letter not in signs:
        raise RecordSyntaxError(f"bad {axis.value} hemisphere {letter!r}")

    _check_coordinate(degrees, minute_thousandths, axis)

    return Coordinate(
        degrees=degrees,
        minute_thousandths=minute_thousandths,
        sign=signs[letter],
    )


def decode_latitude(field: str) -> Coordinate:
    return decode_coordinate(field, Axis.LATITUDE)


def decode_longitude(field: str) -> Coordinate:
    return decode_coordinate(field, Axis.LONGITUDE)


def encode_coordinate(coordinate: Coordinate) -> str:
    """Encode a coordinate back to its fixed-width form.

    Raises:
        OutOfRangeError: Degrees or minutes outside the bounds decoding
            accepts, which would not fit the field width.

    Example:
        >>> encode_coordinate(Coordinate(0, 32642, Compass.WEST))
        '00032642W'
    """
    axis = coordinate.axis
    _check_coordinate(coordinate.degrees, coordinate.minute_thousandths, axis)
    width = _DEGREE_DIGITS[axis]
    return (
        f"{coordinate.degrees:0{width}}"
        f"{coordinate.minute_thousandths:0{_MINUTE_DIGITS}}"
        f"{coordinate.sign.value}"
    )


def decode_position(field: str) -> Position:
    """Decode a 17-character latitude+longitude field."""
    _check_window(field, POSITION_LENGTH, "position")
    return Position(
        latitude=decode_latitude(field[:LATITUDE_LENGTH]),
        longitude=decode_longitude(field[LATITUDE_LENGTH:]),
    )


def encode_position(position: Position) -> str:
    return encode_coordinate(position.latitude) + encode_coordinate(position.longitude)


def decode_altitude(field: str) -> int:
    """Decode a 5-character signed altitude in metres ("00115", "-0116")."""
    _check_window(field, ALTITUDE_LENGTH, "altitude")
    return _parse_signed_field(field, "altitude")


def encode_altitude(altitude: int) -> str:
    """Encode an altitude in 5 characters, -9999 to 99999 metres."""
    if not _MINIMUM_ALTITUDE <= altitude <= _MAXIMUM_ALTITUDE:
        raise OutOfRangeError(f"altitude {altitude} does not fit 5 characters")
    return f"{altitude:0{ALTITUDE_LENGTH}}"
