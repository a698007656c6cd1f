"""Tests for extension declarations and extension column extraction."""

import pytest

from flightrec import (
    BadExtensionError,
    Compass,
    Coordinate,
    Extension,
    ExtensionRange,
    ExtensionSet,
    FixValid,
    KRecord,
    MissingExtensionError,
    NonAsciiError,
    Position,
    RecordSyntaxError,
    Time,
    get_extension,
)
from flightrec.records import (
    BRecord,
    decode_extension,
    decode_extension_range,
    decode_extension_set,
    encode_extension,
    encode_extension_range,
    encode_extension_set,
)


def _k_record(extension_string: str) -> KRecord:
    return KRecord(time=Time(hours=9, minutes=52, seconds=14), extension_string=extension_string)


def _b_record(extension_string: str) -> BRecord:
    return BRecord(
        timestamp=Time(hours=9, minutes=41, seconds=14),
        position=Position(
            latitude=Coordinate(51, 52265, Compass.NORTH),
            longitude=Coordinate(0, 32642, Compass.WEST),
        ),
        fix_valid=FixValid.VALID,
        pressure_altitude=115,
        gps_altitude=116,
        extension_string=extension_string,
    )


class TestExtensionRange:
    """Tests for the 4-character column range."""

    def test_decode(self):
        assert decode_extension_range("3638") == ExtensionRange(start=36, end=38)

    def test_single_column(self):
        assert len(decode_extension_range("3636")) == 1

    def test_encode(self):
        assert encode_extension_range(ExtensionRange(start=8, end=10)) == "0810"

    def test_end_before_start(self):
        with pytest.raises(BadExtensionError):
            decode_extension_range("3836")

    def test_end_before_start_on_construction(self):
        with pytest.raises(BadExtensionError):
            ExtensionRange(start=10, end=9)

    def test_non_digit(self):
        with pytest.raises(RecordSyntaxError):
            decode_extension_range("36AB")

    def test_wrong_width(self):
        with pytest.raises(RecordSyntaxError):
            decode_extension_range("363")


class TestExtension:
    """Tests for a single 7-character declaration."""

    def test_decode(self):
        assert decode_extension("3638FXA") == Extension(
            range=ExtensionRange(start=36, end=38), mnemonic="FXA"
        )

    def test_encode(self):
        extension = Extension(range=ExtensionRange(start=42, end=46), mnemonic="TAS")
        assert encode_extension(extension) == "4246TAS"

    def test_non_ascii_mnemonic(self):
        with pytest.raises(NonAsciiError):
            decode_extension("3638FXé")


class TestDecodeExtensionSet:
    """Tests for the repeated declaration block of I/J lines."""

    def test_three_extensions(self):
        result = decode_extension_set("I033638FXA3941ENL4246TAS", 3)
        assert result.count == 3
        assert [(e.range.start, e.range.end, e.mnemonic) for e in result.extensions] == [
            (36, 38, "FXA"),
            (39, 41, "ENL"),
            (42, 46, "TAS"),
        ]

    def test_empty_set(self):
        assert decode_extension_set("I00", 0) == ExtensionSet(count=0, extensions=())

    def test_too_few_characters(self):
        with pytest.raises(RecordSyntaxError):
            decode_extension_set("I033638FXA3941ENL", 3)

    def test_too_many_characters(self):
        with pytest.raises(RecordSyntaxError):
            decode_extension_set("I013638FXA3941ENL", 1)

    def test_partial_declaration(self):
        with pytest.raises(RecordSyntaxError):
            decode_extension_set("I013638FX", 1)

    def test_bad_chunk_aborts(self):
        with pytest.raises(BadExtensionError):
            decode_extension_set("I023638FXA4139ENL", 2)

    def test_multi_byte_character(self):
        with pytest.raises(NonAsciiError):
            decode_extension_set("I013638F\U0001f300", 1)

    def test_encode(self):
        extension_set = decode_extension_set("J010812WDI", 1)
        assert encode_extension_set(extension_set) == "010812WDI"

    def test_count_must_match_entries(self):
        with pytest.raises(RecordSyntaxError):
            ExtensionSet(count=2, extensions=())

    def test_find_by_mnemonic(self):
        extension_set = decode_extension_set("I033638FXA3941ENL4246TAS", 3)
        assert extension_set.find("ENL").range == ExtensionRange(start=39, end=41)
        assert extension_set.find("XYZ") is None


class TestGetExtension:
    """Exhaustive tests of the column to tail index arithmetic."""

    def test_k_record_consecutive_ranges(self):
        record = _k_record("FooTheBar")
        assert get_extension(record, ExtensionRange(8, 10)) == "Foo"
        assert get_extension(record, ExtensionRange(11, 13)) == "The"
        assert get_extension(record, ExtensionRange(14, 16)) == "Bar"

    def test_k_record_first_and_last_columns(self):
        record = _k_record("FooTheBar")
        assert get_extension(record, ExtensionRange(8, 8)) == "F"
        assert get_extension(record, ExtensionRange(16, 16)) == "r"
        assert get_extension(record, ExtensionRange(8, 16)) == "FooTheBar"

    def test_accepts_a_declaration(self):
        extension = Extension(range=ExtensionRange(11, 13), mnemonic="TWO")
        assert get_extension(_k_record("FooTheBar"), extension) == "The"

    def test_b_record_range(self):
        record = _b_record("0123456789")
        assert get_extension(record, ExtensionRange(36, 40)) == "01234"
        assert get_extension(record, ExtensionRange(45, 45)) == "9"

    def test_b_record_declared_set(self):
        record = _b_record("123456789AB")
        declarations = decode_extension_set("I033638FXA3941ENL4246TAS", 3)
        values = [get_extension(record, e) for e in declarations.extensions]
        assert values == ["123", "456", "789AB"]

    def test_range_inside_mandatory_fields(self):
        record = _b_record("0123456789")
        for start in (1, 24, 34, 35):
            with pytest.raises(BadExtensionError):
                get_extension(record, ExtensionRange(start, 40))

    def test_range_starting_on_last_mandatory_column_of_k(self):
        with pytest.raises(BadExtensionError):
            get_extension(_k_record("FooTheBar"), ExtensionRange(7, 9))

    def test_start_beyond_tail(self):
        with pytest.raises(MissingExtensionError):
            get_extension(_k_record("FooTheBar"), ExtensionRange(17, 18))

    def test_start_just_past_tail(self):
        with pytest.raises(MissingExtensionError):
            get_extension(_b_record("0123456789"), ExtensionRange(46, 47))

    def test_end_beyond_tail(self):
        with pytest.raises(MissingExtensionError):
            get_extension(_k_record("FooTheBar"), ExtensionRange(14, 17))

    def test_empty_tail(self):
        with pytest.raises(MissingExtensionError):
            get_extension(_b_record(""), ExtensionRange(36, 38))

    def test_non_ascii_tail(self):
        with pytest.raises(NonAsciiError):
            get_extension(_k_record("Fé"), ExtensionRange(8, 8))
