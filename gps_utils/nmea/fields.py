"""NMEA field parsing utilities.

This module provides utilities for splitting NMEA sentences into fields and
parsing individual fields. NMEA fields are comma-separated and may be empty
(consecutive commas indicate missing data), so splitting always preserves
empty fields.

Two conversion policies coexist here:
    - Coordinates without a decimal point (including empty fields) decode to
      0.0, which is how receivers report "no position yet".
    - Every other malformed numeric text raises NumericConversionError.
"""

import string
from enum import Enum

from gps_utils.nmea.errors import NumericConversionError

# Hemisphere indicators that make a coordinate negative
_NEGATIVE_HEMISPHERES = ("S", "W")

_DIGITS = frozenset(string.digits)


class SplitMode(Enum):
    """How ``split_fields`` interprets its delimiter argument."""

    # Split at any single character of the delimiter string
    CHARACTER_SET = "character_set"
    # Split at each occurrence of the whole delimiter string
    LITERAL = "literal"


def split_fields(
    text: str,
    delimiters: str,
    mode: SplitMode = SplitMode.CHARACTER_SET,
) -> list[str]:
    """Split a string into fields, keeping empty fields.

    Scanning runs left to right without overlap. A string with D delimiter
    occurrences always yields D + 1 fields: a leading delimiter produces an
    empty first field, adjacent delimiters produce an empty field between
    them, and a trailing delimiter produces an empty last field. No
    whitespace is trimmed.

    Args:
        text: String to split
        delimiters: Set of delimiter characters (CHARACTER_SET mode) or the
            delimiter string itself (LITERAL mode)
        mode: Delimiter interpretation

    Returns:
        List of fields, never empty

    Raises:
        ValueError: If the LITERAL delimiter is empty.

    Example:
        >>> split_fields("$GNGST,,1.8*60", ",")
        ['$GNGST', '', '1.8*60']
        >>> split_fields("a;b,c", ",;")
        ['a', 'b', 'c']
        >>> split_fields("a::b", "::", SplitMode.LITERAL)
        ['a', 'b']
    """
    if mode is SplitMode.LITERAL:
        if not delimiters:
            raise ValueError("literal delimiter must not be empty")
        return text.split(delimiters)

    fields = []
    start = 0
    for index, character in enumerate(text):
        if character in delimiters:
            fields.append(text[start:index])
            start = index + 1
    fields.append(text[start:])
    return fields


def parse_float_field(value: str) -> float:
    """Parse a plain decimal field to float.

    Unlike coordinates, plain numeric fields have no "no data" encoding that
    could be decoded safely, so empty text is rejected too.

    Args:
        value: String value from an NMEA field

    Returns:
        Parsed float value

    Raises:
        NumericConversionError: If the field is empty or not a number.

    Example:
        >>> parse_float_field("1.4")
        1.4
    """
    try:
        return float(value)
    except ValueError:
        raise NumericConversionError(
            f"NMEA numeric field conversion error. value=[{value}]"
        ) from None


def parse_string_field(value: str) -> str | None:
    """Parse a string field, returning None if empty.

    Example:
        >>> parse_string_field("235458.00")
        '235458.00'
        >>> parse_string_field("")
        None
    """
    if not value:
        return None
    return value


def _parse_digits(value: str) -> int:
    """Parse an unsigned run of ASCII digits, treating empty text as 0."""
    if not _DIGITS.issuperset(value):
        raise NumericConversionError(
            f"NMEA coordinate conversion error. value=[{value}]"
        )
    return int(value) if value else 0


def convert_nmea_to_degrees(value: str) -> float:
    """Convert an NMEA coordinate (DDMM.MMMM or DDDMM.MMMM) to decimal degrees.

    The integer part before the decimal point packs degrees and whole minutes
    together: its last two digits are minutes, the rest are degrees. The
    fractional part belongs to the minutes.

    The conversion formula is:
        decimal_degrees = (k // 100) + ((k % 100) + fraction) / 60

    Args:
        value: Coordinate string (e.g., "4807.038")

    Returns:
        Non-negative decimal degrees. The hemisphere is applied separately
        by ``apply_hemisphere``. Returns 0.0 if the value has no decimal
        point, which includes the empty field sent before a fix.

    Raises:
        NumericConversionError: If either side of the decimal point contains
            anything other than digits.

    Example:
        >>> convert_nmea_to_degrees("4807.038")  # 48° 07.038'
        48.1173
        >>> convert_nmea_to_degrees("01131.000")  # 11° 31.000'
        11.5166667
    """
    integer_part, dot, fraction_part = value.partition(".")
    if not dot:
        return 0.0

    packed = _parse_digits(integer_part)
    fraction = _parse_digits(fraction_part) / 10 ** len(fraction_part)

    degrees = packed // 100
    minutes = packed % 100 + fraction
    return degrees + minutes / 60.0


def apply_hemisphere(magnitude: float, hemisphere: str) -> float:
    """Apply the N/S or E/W indicator to a coordinate magnitude.

    Example:
        >>> apply_hemisphere(48.1173, "S")
        -48.1173
        >>> apply_hemisphere(11.5166667, "E")
        11.5166667
    """
    if hemisphere in _NEGATIVE_HEMISPHERES:
        return -magnitude
    return magnitude
