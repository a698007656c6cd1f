"""Record value types.

One frozen dataclass per record kind. Each carries the decoded fields of one
line and a format() method returning the canonical text of that line, so that
for every well-formed line ``decode_line(line).format() == line``.

Design Decisions:
    1. Optional tails (str | None): None means the line ended right after the
       mandatory fields. Decoding never produces an empty-string tail for
       these, and formatting renders None as nothing.

    2. Extension tails (str): B and K records always have an
       extension_string, empty when no extension columns were written.
       Together with base_length this is all get_extension() needs.

    3. Fallback variants: unknown qualifier and data source bytes decode to
       Unrecognized* values carrying the raw character instead of failing,
       because the byte does not change the layout of the line.

    4. Closed union: Record lists every variant. Code that handles records
       should cover all of them; UnrecognizedRecord holds lines whose kind
       letter is unknown.
"""

import enum
from dataclasses import dataclass
from typing import ClassVar

from flightrec.errors import RecordSyntaxError
from flightrec.fields import (
    encode_altitude,
    encode_date,
    encode_position,
    encode_time,
    is_digits,
)
from flightrec.manufacturer import (
    ManufacturerCode,
    encode_single_char_manufacturer,
    encode_triple_char_manufacturer,
)
from flightrec.records.extension import ExtensionSet, encode_extension_set
from flightrec.types import Date, FixValid, Position, Time

__all__ = [
    "ALayout",
    "ARecord",
    "BRecord",
    "CDeclarationRecord",
    "CTurnpointRecord",
    "DRecord",
    "DataSource",
    "DataSourceCode",
    "ERecord",
    "FRecord",
    "GRecord",
    "GpsQualifier",
    "GpsQualifierCode",
    "HRecord",
    "IRecord",
    "JRecord",
    "KRecord",
    "LRecord",
    "Record",
    "UnrecognizedDataSource",
    "UnrecognizedGpsQualifier",
    "UnrecognizedRecord",
    "detect_a_layout",
]

_SERIAL_LENGTH = 5
_CURRENT_ID_LENGTH = 3


def _optional(text: str | None) -> str:
    return "" if text is None else text


class ALayout(enum.Enum):
    """Which of the A record layouts a line was written in.

    SINGLE_CHAR_SERIAL: "AC00069"      1-char code, 5-digit serial
    TRIPLE_CHAR_SERIAL: "AFIL01460..." 3-char code, 5-digit serial
    CURRENT:            "ACAMWat..."   3-char code, 3-char id
    """

    SINGLE_CHAR_SERIAL = "single_char_serial"
    TRIPLE_CHAR_SERIAL = "triple_char_serial"
    CURRENT = "current"

    @property
    def unique_id_length(self) -> int:
        if self is ALayout.CURRENT:
            return _CURRENT_ID_LENGTH
        return _SERIAL_LENGTH


def detect_a_layout(line: str) -> ALayout:
    """Pick the A record layout from where a 5-digit serial appears.

    Checked in order: columns 3-7 digits, then columns 5-9 digits, then the
    current layout. Assumes line is at least 7 characters long.
    """
    if is_digits(line[2 : 2 + _SERIAL_LENGTH]):
        return ALayout.SINGLE_CHAR_SERIAL

    legacy_serial = line[4 : 4 + _SERIAL_LENGTH]
    if len(legacy_serial) == _SERIAL_LENGTH and is_digits(legacy_serial):
        return ALayout.TRIPLE_CHAR_SERIAL

    return ALayout.CURRENT


@dataclass(frozen=True)
class ARecord:
    """Flight recorder identification, the first line of a file.

    Attributes:
        manufacturer: Vendor of the recorder, or an unknown-code fallback.
        unique_id: Recorder serial/id. 5 digits in the legacy layouts,
            3 characters in the current one.
        id_extension: Free text after the id, None if absent.
        layout: Layout the line was written in; selects the code width on
            formatting.
    """

    kind: ClassVar[str] = "A"

    manufacturer: ManufacturerCode
    unique_id: str
    id_extension: str | None = None
    layout: ALayout = ALayout.CURRENT

    def format(self) -> str:
        """Render the line, refusing any that would read back differently.

        Raises:
            RecordSyntaxError: The manufacturer has no code of the width the
                layout needs, the id has the wrong length for the layout, or
                the line would be detected as another layout (a current id
                followed by text starting with digits, e.g. "123" + "45678").
        """
        if self.layout is ALayout.SINGLE_CHAR_SERIAL:
            code = encode_single_char_manufacturer(self.manufacturer)
        else:
            code = encode_triple_char_manufacturer(self.manufacturer)
        if code is None:
            raise RecordSyntaxError(
                f"{self.manufacturer!r} has no code for the {self.layout.value} layout"
            )
        if len(self.unique_id) != self.layout.unique_id_length:
            raise RecordSyntaxError(
                f"{self.layout.value} layout needs a "
                f"{self.layout.unique_id_length}-character id: {self.unique_id!r}"
            )

        line = f"A{code}{self.unique_id}{_optional(self.id_extension)}"
        detected = detect_a_layout(line)
        if detected is not self.layout:
            raise RecordSyntaxError(
                f"{line!r} would be read back as the {detected.value} layout, "
                f"not {self.layout.value}"
            )
        return line


@dataclass(frozen=True)
class BRecord:
    """A fix: one timestamped position and altitude sample.

    Attributes:
        timestamp: UTC time of the fix.
        position: Latitude and longitude.
        fix_valid: VALID for a 3D fix, NAV_WARNING otherwise.
        pressure_altitude: Barometric altitude in metres (ISA).
        gps_altitude: GNSS altitude in metres above the ellipsoid.
        extension_string: Everything after column 35, addressed through
            the I record's extension declarations.

    Example:
        "B0941145152265N00032642WA00115-0116"
         |     |                |||    |
         |     |                |||    +-- GNSS altitude (-116 m)
         |     |                ||+-- pressure altitude (115 m)
         |     |                |+-- fix valid (A/V)
         |     +----------------+-- position
         +-- time 09:41:14
    """

    kind: ClassVar[str] = "B"
    base_length: ClassVar[int] = 35

    timestamp: Time
    position: Position
    fix_valid: FixValid
    pressure_altitude: int
    gps_altitude: int
    extension_string: str = ""

    def format(self) -> str:
        return (
            f"B{encode_time(self.timestamp)}"
            f"{encode_position(self.position)}"
            f"{self.fix_valid.value}"
            f"{encode_altitude(self.pressure_altitude)}"
            f"{encode_altitude(self.gps_altitude)}"
            f"{self.extension_string}"
        )


@dataclass(frozen=True)
class CDeclarationRecord:
    """Task declaration header, followed in a file by its turnpoint lines.

    A conforming file lists turnpoint_count + 4 turnpoints after this line
    (takeoff, start, the turnpoints, finish, landing); that is not checked.
    """

    kind: ClassVar[str] = "C"

    date: Date
    time: Time
    flight_date: Date
    task_id: int
    turnpoint_count: int
    name: str | None = None

    def format(self) -> str:
        return (
            f"C{encode_date(self.date)}{encode_time(self.time)}"
            f"{encode_date(self.flight_date)}"
            f"{self.task_id:04}{self.turnpoint_count:02}"
            f"{_optional(self.name)}"
        )


@dataclass(frozen=True)
class CTurnpointRecord:
    """A single task point: position and optional name."""

    kind: ClassVar[str] = "C"

    position: Position
    name: str | None = None

    def format(self) -> str:
        return f"C{encode_position(self.position)}{_optional(self.name)}"


class GpsQualifier(enum.Enum):
    GPS = "1"
    DGPS = "2"

    @property
    def code(self) -> str:
        return self.value


@dataclass(frozen=True)
class UnrecognizedGpsQualifier:
    code: str


GpsQualifierCode = GpsQualifier | UnrecognizedGpsQualifier


@dataclass(frozen=True)
class DRecord:
    """Differential GPS record: "D2" + 4-character station id."""

    kind: ClassVar[str] = "D"

    qualifier: GpsQualifierCode
    station_id: str

    def format(self) -> str:
        return f"D{self.qualifier.code}{self.station_id}"


@dataclass(frozen=True)
class ERecord:
    """An event (pilot press, turnpoint confirmation) logged during flight."""

    kind: ClassVar[str] = "E"

    time: Time
    mnemonic: str
    text: str | None = None

    def format(self) -> str:
        return f"E{encode_time(self.time)}{self.mnemonic}{_optional(self.text)}"


@dataclass(frozen=True)
class FRecord:
    """Satellite constellation in use from the given time.

    Attributes:
        time: UTC time the constellation changed.
        satellites: 2-character satellite ids in line order, at least one.
    """

    kind: ClassVar[str] = "F"

    time: Time
    satellites: tuple[str, ...]

    def format(self) -> str:
        return f"F{encode_time(self.time)}{''.join(self.satellites)}"


@dataclass(frozen=True)
class GRecord:
    """Security record. The content is vendor specific and kept opaque."""

    kind: ClassVar[str] = "G"

    data: str

    def format(self) -> str:
        return f"G{self.data}"


class DataSource(enum.Enum):
    """Who wrote an H record."""

    FVU = "F"
    OFFICIAL_OBSERVER = "O"
    PILOT = "P"

    @property
    def code(self) -> str:
        return self.value


@dataclass(frozen=True)
class UnrecognizedDataSource:
    code: str


DataSourceCode = DataSource | UnrecognizedDataSource


@dataclass(frozen=True)
class HRecord:
    """A header line such as "HFGIDGLIDERID:D-KOOL".

    Attributes:
        data_source: F (recorder), O (observer), P (pilot) or a fallback.
        mnemonic: 3-character header code ("GID", "DTE", "FTY", ...).
        friendly_name: Text before the first colon, None if the line has no
            colon. An immediate colon gives "".
        data: Text after the first colon, or the whole remainder if there
            is no colon.
    """

    kind: ClassVar[str] = "H"

    data_source: DataSourceCode
    mnemonic: str
    friendly_name: str | None
    data: str

    def format(self) -> str:
        source = self.data_source.code
        # Unlike the other optional tails, the colon goes with the name
        if self.friendly_name is None:
            return f"H{source}{self.mnemonic}{self.data}"
        return f"H{source}{self.mnemonic}{self.friendly_name}:{self.data}"


@dataclass(frozen=True)
class IRecord:
    """Declares the extension columns appended to every B record."""

    kind: ClassVar[str] = "I"

    extensions: ExtensionSet

    def format(self) -> str:
        return f"I{encode_extension_set(self.extensions)}"


@dataclass(frozen=True)
class JRecord:
    """Declares the extension columns of every K record."""

    kind: ClassVar[str] = "J"

    extensions: ExtensionSet

    def format(self) -> str:
        return f"J{encode_extension_set(self.extensions)}"


@dataclass(frozen=True)
class KRecord:
    """Extension data sampled less often than fixes.

    Holds only a time by default; the J record declares what the
    extension_string carries.
    """

    kind: ClassVar[str] = "K"
    base_length: ClassVar[int] = 7

    time: Time
    extension_string: str = ""

    def format(self) -> str:
        return f"K{encode_time(self.time)}{self.extension_string}"


@dataclass(frozen=True)
class LRecord:
    """Free-text log or comment line."""

    kind: ClassVar[str] = "L"

    log_string: str

    def format(self) -> str:
        return f"L{self.log_string}"


@dataclass(frozen=True)
class UnrecognizedRecord:
    """A line whose kind letter is not part of the format, kept verbatim."""

    line: str

    @property
    def kind(self) -> str:
        return self.line[:1]

    def format(self) -> str:
        return self.line


Record = (
    ARecord
    | BRecord
    | CDeclarationRecord
    | CTurnpointRecord
    | DRecord
    | ERecord
    | FRecord
    | GRecord
    | HRecord
    | IRecord
    | JRecord
    | KRecord
    | LRecord
    | UnrecognizedRecord
)
