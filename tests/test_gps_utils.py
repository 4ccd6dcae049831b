"""Tests for the top-level decoding API."""

import pytest

from gps_utils import (
    ChecksumError,
    DecodeError,
    DecodeOutcome,
    FormatError,
    GBSData,
    GSTData,
    NumericConversionError,
    RMCData,
    parse_gngbs,
    parse_gngga,
    parse_gngst,
    parse_gprmc,
)

SENTENCES = [
    "$GPRMC,172312.00,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*4D",
    "$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F",
    "$GNGBS,235458.00,1.4,1.3,3.1,03,,-21.4,3.8,1,0*44",
    "$GNGST,082356.00,1.8,,,,1.7,1.3,2.2*60",
]

DECODERS = (parse_gprmc, parse_gngga, parse_gngbs, parse_gngst)


def _decode(sentence: str):
    """Offer a sentence to each decoder until one claims it."""
    for decoder in DECODERS:
        result = decoder(sentence)
        if result:
            return result
    return None


class TestDecodeOutcome:
    """Tests for the error taxonomy."""

    @pytest.mark.parametrize(
        ("error_type", "outcome"),
        [
            (ChecksumError, DecodeOutcome.CHECKSUM_FAILURE),
            (FormatError, DecodeOutcome.FORMAT_ERROR),
            (NumericConversionError, DecodeOutcome.NUMERIC_CONVERSION_ERROR),
        ],
    )
    def test_error_outcomes(self, error_type, outcome):
        assert error_type.outcome is outcome
        assert issubclass(error_type, DecodeError)
        assert issubclass(error_type, ValueError)

    def test_format_error_attributes(self):
        error = FormatError("too short", fields_found=3, fields_expected=9)
        assert str(error) == "too short"
        assert (error.fields_found, error.fields_expected) == (3, 9)


class TestDispatch:
    """Sentences of every type routed through the decoders in turn."""

    def test_each_sentence_claimed_by_its_decoder(self):
        results = [_decode(sentence) for sentence in SENTENCES]
        assert isinstance(results[0], RMCData)
        assert results[1] is True
        assert isinstance(results[2], GBSData)
        assert isinstance(results[3], GSTData)

    def test_unsupported_sentence_is_not_claimed(self):
        assert _decode("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B") is None

    def test_checksum_failure_stops_dispatch(self):
        with pytest.raises(ChecksumError):
            _decode(SENTENCES[2][:-2] + "00")
