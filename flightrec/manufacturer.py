"""Recorder manufacturer code tables.

A records open every file with the code of the vendor that built the
recorder. Old recorders wrote a single-character code, current ones write a
three-character code:

    Vendor                        Single  Triple
    Aircotec                      I       ACT
    Cambridge Aero Instruments    C       CAM
    Filser                        F       FIL
    LX Navigation                 L       LXN
    ...                           ...     ...

Some vendors only have a three-character code. Codes that are not in the
tables decode to UnknownSingleManufacturer / UnknownTripleManufacturer, which
carry the raw text so the line can be formatted back unchanged.
"""

import enum
from dataclasses import dataclass

__all__ = [
    "Manufacturer",
    "ManufacturerCode",
    "UnknownSingleManufacturer",
    "UnknownTripleManufacturer",
    "decode_single_char_manufacturer",
    "decode_triple_char_manufacturer",
    "encode_single_char_manufacturer",
    "encode_triple_char_manufacturer",
]


class Manufacturer(enum.Enum):
    """Known recorder vendors.

    Each value is a (single-character code, three-character code) pair.
    The single-character code is None for vendors that never had one.
    """

    AIRCOTEC = ("I", "ACT")
    CAMBRIDGE_AERO_INSTRUMENTS = ("C", "CAM")
    CLEAR_NAV_INSTRUMENTS = (None, "CNI")
    DATA_SWAN = ("D", "DSX")
    EW_AVIONICS = ("E", "EWA")
    FILSER = ("F", "FIL")
    FLARM = ("G", "FLA")
    FLYTECH = ("n", "FLY")
    GARRECHT = ("A", "GCS")
    IMI_GLIDING_EQUIPMENT = ("M", "IMI")
    LOGSTREAM = (None, "LGS")
    LX_NAVIGATION = ("L", "LXN")
    LXNAV = ("V", "LXV")
    NAVITER = (None, "NAV")
    NEW_TECHNOLOGIES = ("N", "NTE")
    NIELSEN_KELLERMAN = ("K", "NKL")
    PESCHGES = ("P", "PES")
    PRESS_FINISH_ELECTRONICS = (None, "PFE")
    PRINT_TECHNIK = ("R", "PRT")
    SCHEFFEL = ("H", "SCH")
    STREAMLINE_DATA_INSTRUMENTS = ("S", "SDI")
    TRIADIS_ENGINEERING = ("T", "TRI")
    ZANDER = ("Z", "ZAN")

    @property
    def single_char_code(self) -> str | None:
        return self.value[0]

    @property
    def triple_char_code(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class UnknownSingleManufacturer:
    """A single-character manufacturer code missing from the table."""

    code: str


@dataclass(frozen=True)
class UnknownTripleManufacturer:
    """A three-character manufacturer code missing from the table."""

    code: str


ManufacturerCode = Manufacturer | UnknownSingleManufacturer | UnknownTripleManufacturer

_BY_SINGLE_CHAR: dict[str, Manufacturer] = {
    vendor.single_char_code: vendor
    for vendor in Manufacturer
    if vendor.single_char_code is not None
}
_BY_TRIPLE_CHAR: dict[str, Manufacturer] = {
    vendor.triple_char_code: vendor for vendor in Manufacturer
}


def decode_single_char_manufacturer(code: str) -> ManufacturerCode:
    """Look up a legacy single-character code.

    Example:
        >>> decode_single_char_manufacturer("C")
        <Manufacturer.CAMBRIDGE_AERO_INSTRUMENTS: ('C', 'CAM')>
        >>> decode_single_char_manufacturer("X")
        UnknownSingleManufacturer(code='X')
    """
    vendor = _BY_SINGLE_CHAR.get(code)
    if vendor is None:
        return UnknownSingleManufacturer(code)
    return vendor


def decode_triple_char_manufacturer(code: str) -> ManufacturerCode:
    """Look up a three-character code."""
    vendor = _BY_TRIPLE_CHAR.get(code)
    if vendor is None:
        return UnknownTripleManufacturer(code)
    return vendor


def encode_single_char_manufacturer(manufacturer: ManufacturerCode) -> str | None:
    """Return the single-character code, or None if the vendor has none."""
    if isinstance(manufacturer, UnknownSingleManufacturer):
        return manufacturer.code
    if isinstance(manufacturer, UnknownTripleManufacturer):
        return None
    return manufacturer.single_char_code


def encode_triple_char_manufacturer(manufacturer: ManufacturerCode) -> str | None:
    """Return the three-character code, or None for an unknown single code."""
    if isinstance(manufacturer, UnknownTripleManufacturer):
        return manufacturer.code
    if isinstance(manufacturer, UnknownSingleManufacturer):
        return None
    return manufacturer.triple_char_code
