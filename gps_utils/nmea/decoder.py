"""Validation stages shared by every sentence decoder.

A decoder runs three stages before it touches any field:
    1. Checksum: the sentence must carry a matching XOR checksum
    2. Tag: the message field must contain the layout's three-letter tag
    3. Arity: the sentence must have at least the layout's field count

Failures in stages 1 and 3 are logged and raised. A tag mismatch is not an
error; it only means the sentence belongs to another decoder.
"""

import logging

from gps_utils.nmea.checksum import verify_checksum
from gps_utils.nmea.errors import ChecksumError, FormatError
from gps_utils.nmea.fields import split_fields
from gps_utils.nmea.layouts import SentenceLayout

logger = logging.getLogger(__name__)

_FIELD_DELIMITER = ","


def decode_fields(
    sentence: str,
    layout: SentenceLayout,
    log: logging.Logger | None = None,
) -> dict[str, str] | None:
    """Validate a sentence against a layout and name its fields.

    Args:
        sentence: Raw NMEA sentence. Surrounding whitespace (\\r\\n) is
            stripped first.
        layout: Layout of the sentence type the caller expects
        log: Where to report diagnostics. Defaults to this module's logger.

    Returns:
        Mapping from field name to raw field text, or None if the sentence
        is of another type. Fields beyond the layout are dropped.

    Raises:
        ChecksumError: If checksum validation fails.
        FormatError: If the sentence has too few fields.

    Example:
        >>> fields = decode_fields("$GNGST,082356.00,1.8,,,,1.7,1.3,2.2*60", GST_LAYOUT)
        >>> fields["latitude_std_dev"]
        '1.7'
    """
    log = log or logger
    sentence = sentence.strip()

    try:
        verify_checksum(sentence)
    except ChecksumError as error:
        log.warning("%s", error)
        raise

    fields = split_fields(sentence, _FIELD_DELIMITER)
    if layout.tag not in fields[0]:
        return None

    expected = layout.minimum_field_count
    if len(fields) < expected:
        error = FormatError(
            f"{fields[0][1:]} sentence format error. {len(fields)} fields, "
            f"expected {expected}(min) fields. src=[{sentence}]",
            fields_found=len(fields),
            fields_expected=expected,
        )
        log.warning("%s", error)
        raise error

    return dict(zip(layout.field_names, fields))

