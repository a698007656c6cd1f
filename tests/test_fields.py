"""Tests for the primitive field codecs."""

import pytest

from flightrec import (
    Axis,
    Compass,
    Coordinate,
    Date,
    NonAsciiError,
    OutOfRangeError,
    Position,
    RecordSyntaxError,
    Time,
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


class TestDecodeTime:
    """Tests for decode_time and encode_time."""

    def test_valid_time(self):
        assert decode_time("012345") == Time(hours=1, minutes=23, seconds=45)
        assert decode_time("152136") == Time(hours=15, minutes=21, seconds=36)

    def test_encode_zero_pads(self):
        assert encode_time(Time(hours=1, minutes=2, seconds=3)) == "010203"

    def test_midnight_sentinel_and_leap_values_are_accepted(self):
        # 24 and 60 are upper bounds written by real recorders, not errors
        assert decode_time("240000") == Time(hours=24, minutes=0, seconds=0)
        assert decode_time("246060") == Time(hours=24, minutes=60, seconds=60)

    def test_hour_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            decode_time("250000")

    def test_minute_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            decode_time("006100")

    def test_second_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            decode_time("000061")

    def test_non_digit(self):
        with pytest.raises(RecordSyntaxError):
            decode_time("12a456")

    def test_sign_is_not_a_digit(self):
        with pytest.raises(RecordSyntaxError):
            decode_time("+12345")

    def test_wrong_width(self):
        with pytest.raises(RecordSyntaxError):
            decode_time("12345")

    def test_multi_byte_character(self):
        with pytest.raises(NonAsciiError):
            decode_time("\U0001f300aa")

    def test_non_ascii_digits(self):
        with pytest.raises(NonAsciiError):
            decode_time("١٢٣٤٥٦")

    def test_seconds_since_midnight(self):
        assert Time(hours=0, minutes=0, seconds=0).seconds_since_midnight() == 0
        assert Time(hours=1, minutes=2, seconds=3).seconds_since_midnight() == 3723

    def test_from_hms_rejects_out_of_range(self):
        assert Time.from_hms(24, 60, 60) == Time(hours=24, minutes=60, seconds=60)
        with pytest.raises(OutOfRangeError):
            Time.from_hms(25, 0, 0)

    def test_every_time_round_trips(self):
        for hours in range(25):
            for minutes in range(0, 61, 7):
                text = f"{hours:02}{minutes:02}{minutes:02}"
                assert encode_time(decode_time(text)) == text

    def test_encode_rejects_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            encode_time(Time(hours=100, minutes=0, seconds=0))
        with pytest.raises(OutOfRangeError):
            encode_time(Time(hours=12, minutes=-1, seconds=0))


class TestDecodeDate:
    """Tests for decode_date and encode_date."""

    def test_valid_date(self):
        assert decode_date("010118") == Date(day=1, month=1, year=18)
        assert decode_date("120757") == Date(day=12, month=7, year=57)

    def test_no_date_placeholder(self):
        assert decode_date("000000") == Date(day=0, month=0, year=0)

    def test_encode(self):
        assert encode_date(Date(day=5, month=10, year=18)) == "051018"

    def test_day_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            decode_date("320118")

    def test_month_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            decode_date("011318")

    def test_multi_byte_character(self):
        with pytest.raises(NonAsciiError):
            decode_date("\U0001f300aa")

    def test_from_dmy_requires_calendar_values(self):
        assert Date.from_dmy(31, 12, 99) == Date(day=31, month=12, year=99)
        with pytest.raises(OutOfRangeError):
            Date.from_dmy(0, 1, 18)
        with pytest.raises(OutOfRangeError):
            Date.from_dmy(1, 1, 100)

    def test_encode_rejects_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            encode_date(Date(day=32, month=1, year=18))
        with pytest.raises(OutOfRangeError):
            encode_date(Date(day=1, month=1, year=2018))

    def test_encode_keeps_placeholder(self):
        assert encode_date(Date(day=0, month=0, year=0)) == "000000"


class TestDecodeCoordinate:
    """Tests for latitude, longitude and position codecs."""

    def test_latitude(self):
        assert decode_latitude("5152265N") == Coordinate(51, 52265, Compass.NORTH)
        assert decode_latitude("5152265S") == Coordinate(51, 52265, Compass.SOUTH)

    def test_longitude(self):
        assert decode_longitude("05152265E") == Coordinate(51, 52265, Compass.EAST)
        assert decode_longitude("00032642W") == Coordinate(0, 32642, Compass.WEST)

    def test_axis_argument(self):
        assert decode_coordinate("00032642W", Axis.LONGITUDE).axis is Axis.LONGITUDE

    def test_encode(self):
        assert encode_coordinate(Coordinate(51, 23355, Compass.NORTH)) == "5123355N"
        assert encode_coordinate(Coordinate(51, 23355, Compass.WEST)) == "05123355W"

    def test_boundaries_accepted(self):
        assert decode_latitude("9000000S").degrees == 90
        assert decode_latitude("0060000N").minute_thousandths == 60000
        assert decode_longitude("18000000E").degrees == 180

    def test_latitude_degrees_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            decode_latitude("9100000N")

    def test_longitude_degrees_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            decode_longitude("18100000E")

    def test_minutes_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            decode_latitude("5160001N")

    def test_encode_rejects_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            encode_coordinate(Coordinate(100, 0, Compass.NORTH))
        with pytest.raises(OutOfRangeError):
            encode_coordinate(Coordinate(0, 60001, Compass.WEST))

    def test_hemisphere_from_wrong_axis(self):
        with pytest.raises(RecordSyntaxError):
            decode_latitude("5152265E")
        with pytest.raises(RecordSyntaxError):
            decode_longitude("05152265N")

    def test_lowercase_hemisphere(self):
        with pytest.raises(RecordSyntaxError):
            decode_latitude("5152265n")

    def test_wrong_width(self):
        with pytest.raises(RecordSyntaxError):
            decode_latitude("05152265N")

    def test_decimal_degrees(self):
        south = Coordinate(51, 52265, Compass.SOUTH)
        assert south.to_decimal_degrees() == pytest.approx(-51.87108333333333)
        east = decode_longitude("05152265E")
        assert east.to_decimal_degrees() == pytest.approx(51.871083, rel=1e-6)

    def test_position(self):
        position = decode_position("5152265N05152265W")
        assert position == Position(
            latitude=Coordinate(51, 52265, Compass.NORTH),
            longitude=Coordinate(51, 52265, Compass.WEST),
        )
        assert encode_position(position) == "5152265N05152265W"


class TestDecodeAltitude:
    """Tests for the signed 5-character altitude field."""

    def test_positive(self):
        assert decode_altitude("00115") == 115

    def test_negative(self):
        assert decode_altitude("-0116") == -116
        assert encode_altitude(-116) == "-0116"

    def test_encode_zero_pads(self):
        assert encode_altitude(115) == "00115"
        assert encode_altitude(-1) == "-0001"

    def test_explicit_plus_rejected(self):
        with pytest.raises(RecordSyntaxError):
            decode_altitude("+0115")

    def test_padding_space_rejected(self):
        with pytest.raises(RecordSyntaxError):
            decode_altitude(" 0115")

    def test_negative_zero_rejected(self):
        with pytest.raises(RecordSyntaxError):
            decode_altitude("-0000")

    def test_encode_limits(self):
        assert encode_altitude(99999) == "99999"
        assert encode_altitude(-9999) == "-9999"

    def test_encode_rejects_values_wider_than_the_field(self):
        with pytest.raises(OutOfRangeError):
            encode_altitude(100000)
        with pytest.raises(OutOfRangeError):
            encode_altitude(-10000)
