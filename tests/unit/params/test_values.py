"""Unit tests for the value mini-language parsers and formatters."""

import math

import pytest

from camparams.params import values as codec
from camparams.params.types import DRIVER_DEFAULT_AREA, Area, FpsRange, Size


class TestScalars:
    """Integer and float formatting/parsing."""

    def test_format_int_plain_decimal(self):
        assert codec.format_int(0) == "0"
        assert codec.format_int(42) == "42"
        assert codec.format_int(-7) == "-7"

    def test_format_int_rejects_floats(self):
        with pytest.raises(TypeError):
            codec.format_int(1.5)

    def test_parse_int_decimal_only(self):
        assert codec.parse_int("12") == 12
        assert codec.parse_int("-12") == -12
        assert codec.parse_int("+12") is None
        assert codec.parse_int("0x10") is None
        assert codec.parse_int(" 12") is None
        assert codec.parse_int("12\n") is None
        assert codec.parse_int("abc") is None
        assert codec.parse_int("") is None
        assert codec.parse_int(None) is None

    def test_parse_int_unsigned(self):
        assert codec.parse_int("5", signed=False) == 5
        assert codec.parse_int("-5", signed=False) is None

    def test_format_float_shortest_float32(self):
        assert codec.format_float(0.5) == "0.5"
        assert codec.format_float(0.1) == "0.1"
        assert codec.format_float(5.0) == "5"
        assert codec.format_float(-2.5) == "-2.5"
        assert codec.format_float(4.31) == "4.31"
        assert codec.format_float(1.0 / 3.0) == "0.33333334"

    def test_format_float_round_trips_float32(self):
        for value in (0.1, 54.8, 42.5, 0.333333333, -33.462809, 121.564448):
            text = codec.format_float(value)
            assert "," not in text
            assert codec.parse_float(text) == pytest.approx(value, rel=1e-6)

    def test_parse_int_beyond_digit_limit(self):
        assert codec.parse_int("9" * 5000) is None
        assert codec.parse_int("-" + "9" * 5000) is None
        assert codec.parse_int_list("1," + "9" * 5000) == []

    def test_format_float_rejects_float32_overflow(self):
        with pytest.raises(ValueError, match="32-bit"):
            codec.format_float(1e39)
        with pytest.raises(ValueError):
            codec.format_float(-1e39)

    def test_format_float_extremes(self):
        assert codec.format_float(codec.FLOAT32_MAX).startswith("34028235")
        assert codec.format_float(float("inf")) == "inf"
        assert codec.format_float(float("-inf")) == "-inf"

    def test_parse_float(self):
        assert codec.parse_float("4.31") == pytest.approx(4.31)
        assert codec.parse_float("-5") == -5.0
        assert codec.parse_float(".5") == 0.5
        assert codec.parse_float("1e3") == 1000.0
        assert math.isinf(codec.parse_float("Infinity"))
        assert codec.parse_float("abc") is None
        assert codec.parse_float("1,5") is None
        assert codec.parse_float(None) is None


class TestScalarLists:

    def test_parse_int_list(self):
        assert codec.parse_int_list("24,15,10") == [24, 15, 10]
        assert codec.parse_int_list("") == []
        assert codec.parse_int_list(None) == []

    def test_parse_int_list_rejects_bad_element(self):
        assert codec.parse_int_list("24,,10") == []
        assert codec.parse_int_list("24,fast,10") == []

    def test_parse_string_list(self):
        assert codec.parse_string_list("yuv420sp,yuv422i-yuyv") == ["yuv420sp", "yuv422i-yuyv"]
        assert codec.parse_string_list("frame-rate-auto, frame-rate-fixed") == [
            "frame-rate-auto",
            "frame-rate-fixed",
        ]
        assert codec.parse_string_list("") == []

    def test_format_list(self):
        assert codec.format_list([24, 15, 10]) == "24,15,10"
        assert codec.format_list([]) == ""


class TestSizes:

    def test_parse_size(self):
        assert codec.parse_size("640x480") == Size(640, 480)
        assert codec.parse_size("  640x480 ") == Size(640, 480)
        assert codec.parse_size("0x0") == Size(0, 0)

    @pytest.mark.parametrize("text", ["640X480", "640x", "x480", "-1x-1", "640 x 480", "640x480x3", "", "abc"])
    def test_parse_size_rejects(self, text):
        assert codec.parse_size(text) is None

    def test_format_size(self):
        assert codec.format_size(Size(1920, 1080)) == "1920x1080"
        assert codec.format_size(Size(-1, -1)) == "-1x-1"

    def test_size_round_trip(self):
        for size in (Size(0, 0), Size(1, 1), Size(4208, 3120), Size(176, 144)):
            assert codec.parse_size(codec.format_size(size)) == size

    def test_parse_size_list_preserves_order(self):
        assert codec.parse_size_list("800x600,480x320") == [Size(800, 600), Size(480, 320)]
        assert codec.parse_size_list("512x384,320x240,0x0") == [Size(512, 384), Size(320, 240), Size(0, 0)]

    def test_parse_size_list_empty(self):
        assert codec.parse_size_list("") == []
        assert codec.parse_size_list(None) == []

    def test_parse_size_list_bad_entry_rejects_list(self):
        assert codec.parse_size_list("800x600,bogus") == []
        assert codec.parse_size_list("800x600,") == []

    def test_format_size_list(self):
        assert codec.format_size_list([Size(800, 600), Size(480, 320)]) == "800x600,480x320"

    def test_huge_dimensions_rejected(self):
        huge = "9" * 5000
        assert codec.parse_size(f"{huge}x480") is None
        assert codec.parse_size(f"640x{huge}") is None
        assert codec.parse_size_list(f"640x480,{huge}x480") == []
        assert codec.parse_point(f"-{huge}x45") is None

    def test_points_are_signed(self):
        assert codec.parse_point("-120x45") == (-120, 45)
        assert codec.parse_point("10x20") == (10, 20)
        assert codec.parse_point("10,20") is None
        assert codec.format_point(-120, 45) == "-120x45"


class TestRanges:

    def test_parse_range(self):
        assert codec.parse_range("10500,26623") == FpsRange(10500, 26623)
        assert codec.parse_range(" 30000,30000 ") == FpsRange(30000, 30000)

    @pytest.mark.parametrize("text", ["10500", "10500,", ",26623", "-1,5", "1,2,3", "(1,2)", "a,b"])
    def test_parse_range_rejects(self, text):
        assert codec.parse_range(text) is None

    def test_huge_range_rejected(self):
        huge = "9" * 5000
        assert codec.parse_range(f"15000,{huge}") is None
        assert codec.parse_range_list(f"(15000,30000),({huge},30000)") == []

    def test_format_range(self):
        assert codec.format_range(FpsRange(15000, 30000)) == "15000,30000"

    def test_parse_range_list(self):
        ranges = codec.parse_range_list("(10500,26623),(15000,26623),(30000,30000)")
        assert ranges == [FpsRange(10500, 26623), FpsRange(15000, 26623), FpsRange(30000, 30000)]
        assert ranges[2].is_fixed

    def test_parse_range_list_empty(self):
        assert codec.parse_range_list("") == []
        assert codec.parse_range_list(None) == []

    @pytest.mark.parametrize(
        "text",
        [
            "(10500,26623),(15000)",
            "(10500,26623),",
            "(10500,26623)(15000,26623)",
            "10500,26623",
            "(10500,26623",
            "((1,2))",
        ],
    )
    def test_parse_range_list_malformed_rejects_whole_list(self, text):
        assert codec.parse_range_list(text) == []

    def test_range_list_round_trip(self):
        ranges = [FpsRange(7000, 30000), FpsRange(30000, 30000)]
        text = codec.format_range_list(ranges)
        assert text == "(7000,30000),(30000,30000)"
        assert codec.parse_range_list(text) == ranges


class TestAreas:

    def test_parse_area_list(self):
        areas = codec.parse_area_list("(-10,-10,0,0,300),(0,0,10,10,700)")
        assert areas == [Area(-10, -10, 0, 0, 300), Area(0, 0, 10, 10, 700)]

    def test_parse_driver_default_area(self):
        assert codec.parse_area_list("(0,0,0,0,0)") == [DRIVER_DEFAULT_AREA]
        assert DRIVER_DEFAULT_AREA.is_driver_default

    def test_bounds_are_inclusive(self):
        areas = codec.parse_area_list("(-1000,-1000,1000,1000,1000),(0,0,1,1,1)")
        assert areas == [Area(-1000, -1000, 1000, 1000, 1000), Area(0, 0, 1, 1, 1)]

    @pytest.mark.parametrize(
        "text",
        [
            "(-1001,0,10,10,1)",
            "(0,0,10,1001,1)",
            "(0,0,10,10,0)",
            "(0,0,10,10,1001)",
            "(0,0,10,10)",
            "(0,0,10,10,1,1)",
            "(0,0,10,10,+1)",
            "(0,0,10,10,w)",
        ],
    )
    def test_invalid_area_rejected(self, text):
        assert codec.parse_area_list(text) == []

    def test_huge_area_field_rejected(self):
        assert codec.parse_area_list("(0,0,10,10," + "9" * 5000 + ")") == []

    def test_one_bad_area_rejects_whole_list(self):
        assert codec.parse_area_list("(-10,-10,0,0,300),(0,0,10,10,0)") == []
        assert codec.parse_area_list("(-10,-10,0,0,300),garbage") == []

    def test_area_list_round_trip(self):
        areas = [Area(-10, -10, 0, 0, 300), Area(0, 0, 10, 10, 700), Area(-1000, 500, 1000, 999, 1)]
        text = codec.format_area_list(areas)
        assert text == "(-10,-10,0,0,300),(0,0,10,10,700),(-1000,500,1000,999,1)"
        parsed = codec.parse_area_list(text)
        assert parsed == areas
        assert all(area.is_valid for area in parsed)

    def test_area_center(self):
        assert Area(-10, -10, 0, 0, 300).center == (-5, -5)
        assert Area(0, 0, 10, 20, 1).center == (5, 10)
