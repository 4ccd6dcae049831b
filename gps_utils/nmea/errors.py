"""Decode outcomes and the exceptions raised by the sentence decoders.

A decoder call ends in one of four ways. Success returns the decoded data,
a sentence of another type returns ``None`` (``False`` for GGA), and the
remaining outcomes are raised as a ``DecodeError`` subclass. Every error
carries its own diagnostic message, so nothing is staged in shared state.
"""

from enum import Enum


class DecodeOutcome(Enum):
    """Why a decoder did not produce data."""

    CHECKSUM_FAILURE = "checksum_failure"
    WRONG_SENTENCE_TYPE = "wrong_sentence_type"
    FORMAT_ERROR = "format_error"
    NUMERIC_CONVERSION_ERROR = "numeric_conversion_error"


class DecodeError(ValueError):
    """Base class for sentences that could not be decoded."""

    outcome: DecodeOutcome


class ChecksumError(DecodeError):
    """Raised when the sentence checksum is missing or does not match."""

    outcome = DecodeOutcome.CHECKSUM_FAILURE


class FormatError(DecodeError):
    """Raised when a sentence has fewer fields than its type requires.

    Attributes:
        fields_found: Number of comma-separated fields in the sentence.
        fields_expected: Minimum number of fields for the sentence type.
    """

    outcome = DecodeOutcome.FORMAT_ERROR

    def __init__(self, message: str, fields_found: int, fields_expected: int) -> None:
        super().__init__(message)
        self.fields_found = fields_found
        self.fields_expected = fields_expected


class NumericConversionError(DecodeError):
    """Raised when a numeric field cannot be converted."""

    outcome = DecodeOutcome.NUMERIC_CONVERSION_ERROR
