"""H record (header) decoder.

H Record Format:
    HFGIDGLIDERID:D-KOOL
    ||  |        |
    ||  |        +-- data
    ||  +-- friendly name, up to the first colon (optional)
    |+-- mnemonic (3 chars)
    +-- data source: F = recorder, O = official observer, P = pilot

Older files often leave out the friendly name ("HFDTE230718"). In that case
there is no colon and everything after the mnemonic is data. Only the first
colon splits; later ones belong to the data ("HFFTYFRTYPE:LXNAV,LX8000F:x").
"""

from flightrec.fields import require_ascii, require_kind, require_length
from flightrec.records.types import (
    DataSource,
    DataSourceCode,
    HRecord,
    UnrecognizedDataSource,
)

__all__ = ["decode_h_record"]

_BASE_LENGTH = 5

_DATA_SOURCE_BY_CODE = {source.code: source for source in DataSource}


def _decode_data_source(code: str) -> DataSourceCode:
    source = _DATA_SOURCE_BY_CODE.get(code)
    if source is None:
        return UnrecognizedDataSource(code)
    return source


def _split_name_and_data(text: str) -> tuple[str | None, str]:
    """Split the remainder on its first colon.

    Example:
        >>> _split_name_and_data("GLIDERID:D-KOOL")
        ('GLIDERID', 'D-KOOL')
        >>> _split_name_and_data("230718")
        (None, '230718')
        >>> _split_name_and_data(":a")
        ('', 'a')
    """
    name, colon, data = text.partition(":")
    if not colon:
        return None, text
    return name, data


def decode_h_record(line: str) -> HRecord:
    """Decode an H line.

    Raises:
        RecordSyntaxError: Shorter than 5 characters.
        NonAsciiError: The data source or mnemonic is not ASCII.

    Example:
        >>> record = decode_h_record("HFFTYFRTYPE:LXNAV,LX8000F")
        >>> record.data_source, record.mnemonic
        (<DataSource.FVU: 'F'>, 'FTY')
        >>> record.friendly_name, record.data
        ('FRTYPE', 'LXNAV,LX8000F')
    """
    require_kind(line, "H")
    require_length(line, _BASE_LENGTH, "H record")
    require_ascii(line[:_BASE_LENGTH], "H record")

    friendly_name, data = _split_name_and_data(line[_BASE_LENGTH:])

    return HRecord(
        data_source=_decode_data_source(line[1]),
        mnemonic=line[2:_BASE_LENGTH],
        friendly_name=friendly_name,
        data=data,
    )
