"""NMEA checksum validation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over every character after the leading '$' (or '#')
up to the '*' (exclusive), then written as hexadecimal digits after the '*'.

Example sentence structure:
    $GPRMC,172312.00,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*4D
    ^                          checksum content                          ^^
    start                                                 checksum (0x4D = 77)
"""

import logging
import string

from gps_utils.nmea.errors import ChecksumError

logger = logging.getLogger(__name__)

_CHECKSUM_DELIMITER = "*"


def _split_checksum(sentence: str) -> tuple[str, str]:
    """Separate the checksummed content from the provided checksum digits.

    The first character is the start delimiter and is never part of the
    content, whatever it is.

    Raises:
        ChecksumError: If the sentence has no '*' delimiter.

    Example:
        >>> _split_checksum("$GNGGA,123519*7F")
        ('GNGGA,123519', '7F')
    """
    position = sentence.find(_CHECKSUM_DELIMITER)
    if position == -1:
        raise ChecksumError(
            f"NMEA sentence format error. character[*] not found. src=[{sentence}]"
        )
    return sentence[1:position], sentence[position + 1 :]


def calculate_checksum(content: str) -> int:
    """Calculate the XOR checksum of a content string.

    Args:
        content: The string between the start delimiter and '*' (exclusive)

    Returns:
        Integer checksum value (0-255 for ASCII input)

    Example:
        >>> calculate_checksum("")
        0
        >>> hex(calculate_checksum("GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,"))
        '0x7f'
    """
    result = 0
    for character in content:
        result ^= ord(character)
    return result


def verify_checksum(sentence: str) -> None:
    """Check the checksum of an NMEA sentence, raising on any failure.

    Everything after the '*' is read as one hexadecimal number, so receivers
    that emit more than two digits are accepted as long as the value matches.

    Args:
        sentence: Complete NMEA sentence including the start character, '*'
            and checksum digits, with line endings already stripped.

    Raises:
        ChecksumError: If the '*' is missing, the checksum digits are not
            hexadecimal, or the calculated checksum does not match.
    """
    content, provided = _split_checksum(sentence)

    if not provided or not all(digit in string.hexdigits for digit in provided):
        raise ChecksumError(
            f"NMEA checksum is not hexadecimal: [{provided}]. src=[{sentence}]"
        )
    expected = int(provided, 16)

    derived = calculate_checksum(content)
    if derived != expected:
        raise ChecksumError(
            f"NMEA CRC error encountered. expected {expected:x} derived {derived:x}. "
            f"src=[{sentence}]"
        )


def validate_checksum(sentence: str, log: logging.Logger | None = None) -> bool:
    """Validate the checksum of an NMEA sentence.

    Boolean form of ``verify_checksum``. The reason for a rejection is logged
    at WARNING level rather than raised.

    Args:
        sentence: Complete NMEA sentence. Trailing whitespace/newlines are
            stripped before validation.
        log: Where to report the diagnostic. Defaults to this module's
            logger.

    Returns:
        True if the checksum is valid, False otherwise.

    Example:
        >>> validate_checksum("$GNGGA,123519.00,...*7F")
        True
        >>> validate_checksum("$GNGGA,123519.00,...*FF")  # wrong checksum
        False
    """
    log = log or logger
    try:
        verify_checksum(sentence.strip())
    except ChecksumError as error:
        log.warning("%s", error)
        return False
    return True
