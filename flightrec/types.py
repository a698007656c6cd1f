"""Primitive value types shared by the record decoders.

This module defines the small immutable values that fixed-width fields decode
into: times, dates, coordinates and the fix validity flag.

Design Decisions:
    1. Raw integers, not floats: coordinates keep the degrees and
       minute-thousandths exactly as written in the line. Converting to
       decimal degrees loses the exact text, which would break the
       byte-for-byte round trip. Use Coordinate.to_decimal_degrees() when
       a float is needed.

    2. Lax time bounds: hours go up to 24 and minutes/seconds up to 60.
       Recorders write 240000 and 60-second leap values in the wild, so these
       boundary values are accepted instead of being clamped to 23/59.

    3. Zero day/month on decode: task declarations use 000000 as "no flight
       date", so decoding accepts day and month 0. The from_dmy() helper is
       stricter and only builds calendar dates.

    4. Unchecked construction: the dataclasses themselves accept any ints.
       The bounds below are enforced by the field codecs, on decode and
       again on encode, so a value that would not fit its column is refused
       when it is formatted.
"""

import enum
from dataclasses import dataclass

from flightrec.errors import OutOfRangeError

__all__ = [
    "Axis",
    "Compass",
    "Coordinate",
    "Date",
    "FixValid",
    "Position",
    "Time",
]

_MAXIMUM_HOURS = 24
_MAXIMUM_MINUTES = 60
_MAXIMUM_SECONDS = 60

MAXIMUM_DAY = 31
MAXIMUM_MONTH = 12
MAXIMUM_YEAR = 99

_MAXIMUM_LATITUDE_DEGREES = 90
_MAXIMUM_LONGITUDE_DEGREES = 180
MAXIMUM_MINUTE_THOUSANDTHS = 60000


@dataclass(frozen=True)
class Time:
    """A UTC time of day with second precision.

    The format mandates UTC everywhere, so no timezone is carried.

    Attributes:
        hours: 0 to 24.
        minutes: 0 to 60.
        seconds: 0 to 60.

    Example:
        >>> Time.from_hms(9, 41, 14).seconds_since_midnight()
        34874
    """

    hours: int
    minutes: int
    seconds: int

    @classmethod
    def from_hms(cls, hours: int, minutes: int, seconds: int) -> "Time":
        """Build a Time, raising OutOfRangeError outside the accepted bounds."""
        if not (
            0 <= hours <= _MAXIMUM_HOURS
            and 0 <= minutes <= _MAXIMUM_MINUTES
            and 0 <= seconds <= _MAXIMUM_SECONDS
        ):
            raise OutOfRangeError(
                f"time {hours:02}:{minutes:02}:{seconds:02} out of range"
            )
        return cls(hours=hours, minutes=minutes, seconds=seconds)

    def seconds_since_midnight(self) -> int:
        return (self.hours * 60 + self.minutes) * 60 + self.seconds


@dataclass(frozen=True)
class Date:
    """A calendar day with a two-digit year.

    No century is inferred; year 18 stays 18.

    Attributes:
        day: 0 to 31 (0 only in "no date" placeholders).
        month: 0 to 12 (0 only in "no date" placeholders).
        year: Least significant two digits of the year, 0 to 99.
    """

    day: int
    month: int
    year: int

    @classmethod
    def from_dmy(cls, day: int, month: int, year: int) -> "Date":
        """Build a calendar Date, raising OutOfRangeError for impossible values."""
        if not (
            1 <= day <= MAXIMUM_DAY
            and 1 <= month <= MAXIMUM_MONTH
            and 0 <= year <= MAXIMUM_YEAR
        ):
            raise OutOfRangeError(f"date {day:02}/{month:02}/{year:02} out of range")
        return cls(day=day, month=month, year=year)


class Axis(enum.Enum):
    """Which half of a position a coordinate belongs to."""

    LATITUDE = "latitude"
    LONGITUDE = "longitude"

    @property
    def maximum_degrees(self) -> int:
        if self is Axis.LATITUDE:
            return _MAXIMUM_LATITUDE_DEGREES
        return _MAXIMUM_LONGITUDE_DEGREES


class Compass(enum.Enum):
    """Hemisphere letter of a coordinate."""

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    @property
    def axis(self) -> Axis:
        if self in (Compass.NORTH, Compass.SOUTH):
            return Axis.LATITUDE
        return Axis.LONGITUDE

    @property
    def is_negative(self) -> bool:
        return self in (Compass.SOUTH, Compass.WEST)


@dataclass(frozen=True)
class Coordinate:
    """A latitude or longitude in the degrees and minutes form used on the line.

    Attributes:
        degrees: 0 to 90 for latitude, 0 to 180 for longitude.
        minute_thousandths: Minutes multiplied by 1000, 0 to 60000.
            "5152265N" is 51 degrees, 52.265 minutes.
        sign: Hemisphere. NORTH/SOUTH for latitude, EAST/WEST for longitude.

    Example:
        >>> Coordinate(51, 52265, Compass.SOUTH).to_decimal_degrees()
        -51.87108333333333
    """

    degrees: int
    minute_thousandths: int
    sign: Compass

    @property
    def axis(self) -> Axis:
        return self.sign.axis

    def to_decimal_degrees(self) -> float:
        """Convert to signed decimal degrees (positive North/East)."""
        value = self.degrees + self.minute_thousandths / 60_000
        if self.sign.is_negative:
            return -value
        return value


@dataclass(frozen=True)
class Position:
    """A latitude and longitude pair."""

    latitude: Coordinate
    longitude: Coordinate


class FixValid(enum.Enum):
    """Fix validity flag of a B record.

    VALID means a 3D fix; NAV_WARNING means a 2D fix or no GNSS data.
    """

    VALID = "A"
    NAV_WARNING = "V"
