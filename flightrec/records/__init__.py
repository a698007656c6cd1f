"""Record types and per-kind decoders."""

from flightrec.records.a_record import decode_a_record
from flightrec.records.b_record import decode_b_record
from flightrec.records.c_record import decode_c_declaration, decode_c_turnpoint
from flightrec.records.d_record import decode_d_record
from flightrec.records.e_record import decode_e_record
from flightrec.records.extension import (
    Extendable,
    Extension,
    ExtensionRange,
    ExtensionSet,
    decode_extension,
    decode_extension_range,
    decode_extension_set,
    encode_extension,
    encode_extension_range,
    encode_extension_set,
    get_extension,
)
from flightrec.records.f_record import decode_f_record
from flightrec.records.g_record import decode_g_record
from flightrec.records.h_record import decode_h_record
from flightrec.records.i_record import decode_i_record, decode_j_record
from flightrec.records.k_record import decode_k_record
from flightrec.records.l_record import decode_l_record
from flightrec.records.types import (
    ALayout,
    ARecord,
    BRecord,
    CDeclarationRecord,
    CTurnpointRecord,
    DataSource,
    DRecord,
    ERecord,
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
    detect_a_layout,
)

__all__ = [
    "ALayout",
    "ARecord",
    "BRecord",
    "CDeclarationRecord",
    "CTurnpointRecord",
    "DRecord",
    "DataSource",
    "ERecord",
    "Extendable",
    "Extension",
    "ExtensionRange",
    "ExtensionSet",
    "FRecord",
    "GRecord",
    "GpsQualifier",
    "HRecord",
    "IRecord",
    "JRecord",
    "KRecord",
    "LRecord",
    "Record",
    "UnrecognizedDataSource",
    "UnrecognizedGpsQualifier",
    "UnrecognizedRecord",
    "decode_a_record",
    "detect_a_layout",
    "decode_b_record",
    "decode_c_declaration",
    "decode_c_turnpoint",
    "decode_d_record",
    "decode_e_record",
    "decode_extension",
    "decode_extension_range",
    "decode_extension_set",
    "decode_f_record",
    "decode_g_record",
    "decode_h_record",
    "decode_i_record",
    "decode_j_record",
    "decode_k_record",
    "decode_l_record",
    "encode_extension",
    "encode_extension_range",
    "encode_extension_set",
    "get_extension",
]
