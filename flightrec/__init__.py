"""Decoder and encoder for the line records of IGC flight recorder files."""

from flightrec.errors import (
    BadExtensionError,
    MissingExtensionError,
    NonAsciiError,
    OutOfRangeError,
    ParseError,
    RecordSyntaxError,
)
from flightrec.fields import (
    decode_altitude,
    decode_coordinate,
    decode_date,
    decode_latitude,
    decode_longitude,
    decode_position,
    decode_time,
    encode_altitude,
    encode_coordinate,
    encode_date,
    encode_position,
    encode_time,
)
from flightrec.manufacturer import (
    Manufacturer,
    UnknownSingleManufacturer,
    UnknownTripleManufacturer,
)
from flightrec.parser import decode_line, format_record, iter_records, parse_line
from flightrec.records import (
    ALayout,
    ARecord,
    BRecord,
    CDeclarationRecord,
    CTurnpointRecord,
    DataSource,
    DRecord,
    ERecord,
    Extendable,
    Extension,
    ExtensionRange,
    ExtensionSet,
    FRecord,
    GpsQualifier,
    GRecord,
    HRecord,
    IRecord,
    JRecord,
    KRecord,
    LRecord,
    Record,
    UnrecognizedDataSource,
    UnrecognizedGpsQualifier,
    UnrecognizedRecord,
    get_extension,
)
from flightrec.types import Axis, Compass, Coordinate, Date, FixValid, Position, Time

__all__ = [
    "ALayout",
    "ARecord",
    "Axis",
    "BRecord",
    "BadExtensionError",
    "CDeclarationRecord",
    "CTurnpointRecord",
    "Compass",
    "Coordinate",
    "DRecord",
    "DataSource",
    "Date",
    "ERecord",
    "Extendable",
    "Extension",
    "ExtensionRange",
    "ExtensionSet",
    "FRecord",
    "FixValid",
    "GRecord",
    "GpsQualifier",
    "HRecord",
    "IRecord",
    "JRecord",
    "KRecord",
    "LRecord",
    "Manufacturer",
    "MissingExtensionError",
    "NonAsciiError",
    "OutOfRangeError",
    "ParseError",
    "Position",
    "Record",
    "RecordSyntaxError",
    "Time",
    "UnknownSingleManufacturer",
    "UnknownTripleManufacturer",
    "UnrecognizedDataSource",
    "UnrecognizedGpsQualifier",
    "UnrecognizedRecord",
    "decode_altitude",
    "decode_coordinate",
    "decode_date",
    "decode_latitude",
    "decode_longitude",
    "decode_position",
    "decode_time",
    "decode_line",
    "encode_altitude",
    "encode_coordinate",
    "encode_date",
    "encode_position",
    "encode_time",
    "format_record",
    "get_extension",
    "iter_records",
    "parse_line",
]
