"""GGA sentence validation.

GGA (Global Positioning System Fix Data) sentences are checked for integrity
and completeness only; none of their fields are decoded here. Position comes
from RMC and accuracy from GBS/GST.
"""

import logging

from gps_utils.nmea.decoder import decode_fields
from gps_utils.nmea.layouts import GGA_LAYOUT

logger = logging.getLogger(__name__)


def parse_gngga(sentence: str, log: logging.Logger | None = None) -> bool:
    """Validate a GGA sentence.

    Args:
        sentence: Raw NMEA GGA sentence string
        log: Where to report diagnostics. Defaults to this module's logger.

    Returns:
        True if the sentence is a complete GGA sentence, False if it is
        another sentence type.

    Raises:
        ChecksumError: If checksum validation fails.
        FormatError: If the sentence has fewer than 15 fields.

    Example:
        >>> parse_gngga("$GNGGA,075956.00,3734.25906,N,12201.18133,W,2,12,0.83,16.6,M,-29.7,M,,0000*40")
        True
    """
    return decode_fields(sentence, GGA_LAYOUT, log or logger) is not None
