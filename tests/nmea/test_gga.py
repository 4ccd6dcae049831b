"""Tests for GGA sentence validation."""

import pytest

from gps_utils import ChecksumError, FormatError, parse_gngga

GGA_VALID = "$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F"


class TestParseGGA:
    """Tests for parse_gngga function."""

    def test_valid_gga(self):
        assert parse_gngga(GGA_VALID) is True

    def test_ublox_gga_with_station_id(self):
        sentence = "$GNGGA,075956.00,3734.25906,N,12201.18133,W,2,12,0.83,16.6,M,-29.7,M,,0000*40"
        assert parse_gngga(sentence) is True

    def test_trailing_whitespace(self):
        assert parse_gngga(GGA_VALID + "   \n") is True

    def test_invalid_checksum(self):
        with pytest.raises(ChecksumError):
            parse_gngga(GGA_VALID[:-2] + "FF")

    def test_too_few_fields(self):
        sentence = "$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M*7F"
        with pytest.raises(FormatError) as excinfo:
            parse_gngga(sentence)
        assert excinfo.value.fields_found == 13
        assert excinfo.value.fields_expected == 15

    def test_wrong_sentence_type(self):
        sentence = "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A"
        assert parse_gngga(sentence) is False
