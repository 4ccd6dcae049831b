"""Tests for NMEA checksum validation."""

import logging
from unittest.mock import MagicMock

import pytest

from gps_utils.nmea import ChecksumError, calculate_checksum, validate_checksum, verify_checksum

GGA_VALID = "$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F"
RMC_VALID = "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A"


class TestCalculateChecksum:
    """Tests for calculate_checksum function."""

    def test_empty_content(self):
        assert calculate_checksum("") == 0

    def test_gga_content(self):
        content = GGA_VALID[1 : GGA_VALID.index("*")]
        assert calculate_checksum(content) == 0x7F

    def test_repeated_character_cancels(self):
        assert calculate_checksum("GG") == 0


class TestValidateChecksum:
    """Tests for validate_checksum function."""

    def test_valid_gga_checksum(self):
        assert validate_checksum(GGA_VALID) is True

    def test_valid_rmc_checksum(self):
        assert validate_checksum(RMC_VALID) is True

    def test_valid_checksum_with_newline(self):
        assert validate_checksum(GGA_VALID + "\r\n") is True

    def test_lowercase_hex_digits(self):
        assert validate_checksum(RMC_VALID[:-2] + "6a") is True

    def test_invalid_checksum(self):
        sentence = GGA_VALID[:-2] + "FF"
        assert validate_checksum(sentence) is False

    def test_missing_asterisk(self):
        sentence = GGA_VALID.replace("*", "")
        assert validate_checksum(sentence) is False

    def test_empty_string(self):
        assert validate_checksum("") is False

    def test_non_hex_checksum(self):
        assert validate_checksum(GGA_VALID[:-2] + "ZZ") is False

    def test_empty_checksum(self):
        assert validate_checksum(GGA_VALID[:-2]) is False

    def test_hash_start_character(self):
        assert validate_checksum("#" + GGA_VALID[1:]) is True

    def test_longer_checksum_with_same_value(self):
        assert validate_checksum(GGA_VALID[:-2] + "007F") is True

    def test_single_bit_flip_is_rejected(self):
        end = GGA_VALID.index("*")
        for index in range(1, end):
            flipped = chr(ord(GGA_VALID[index]) ^ 0x01)
            sentence = GGA_VALID[:index] + flipped + GGA_VALID[index + 1 :]
            assert validate_checksum(sentence) is False, f"index {index}"

    def test_empty_body_matches_zero(self):
        assert validate_checksum("$*00") is True
        assert validate_checksum("$*01") is False

    def test_failure_is_logged_to_injected_logger(self):
        log = MagicMock(spec=logging.Logger)
        assert validate_checksum(GGA_VALID[:-2] + "FF", log) is False
        log.warning.assert_called_once()

    def test_failure_is_logged_by_default(self, caplog):
        with caplog.at_level(logging.WARNING, logger="gps_utils"):
            validate_checksum(GGA_VALID[:-2] + "FF")
        assert "CRC error" in caplog.text


class TestVerifyChecksum:
    """Tests for verify_checksum function."""

    def test_valid_sentence_passes(self):
        verify_checksum(GGA_VALID)

    def test_mismatch_message_names_both_values(self):
        with pytest.raises(ChecksumError, match="expected ff derived 7f"):
            verify_checksum(GGA_VALID[:-2] + "FF")

    def test_missing_asterisk_message(self):
        with pytest.raises(ChecksumError, match=r"character\[\*\] not found"):
            verify_checksum(GGA_VALID.replace("*", ""))
