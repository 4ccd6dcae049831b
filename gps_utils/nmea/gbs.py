"""GBS sentence parser.

GBS (GNSS Satellite Fault Detection) reports the expected position error
of the current fix, in meters, as computed by the receiver's integrity
monitoring.
"""

import logging

from gps_utils.nmea.decoder import decode_fields
from gps_utils.nmea.errors import NumericConversionError
from gps_utils.nmea.fields import parse_float_field, parse_string_field
from gps_utils.nmea.layouts import GBS_LAYOUT
from gps_utils.nmea.types import GBSData

logger = logging.getLogger(__name__)


def parse_gngbs(sentence: str, log: logging.Logger | None = None) -> GBSData | None:
    """Parse a GBS sentence into latitude and longitude error estimates.

    Args:
        sentence: Raw NMEA GBS sentence string
        log: Where to report diagnostics. Defaults to this module's logger.

    Returns:
        GBSData if parsing succeeds, or None if the sentence is not GBS.

    Raises:
        ChecksumError: If checksum validation fails.
        FormatError: If the sentence has fewer than 11 fields.
        NumericConversionError: If an error field is empty or not a number.

    Example:
        >>> result = parse_gngbs("$GNGBS,235458.00,1.4,1.3,3.1,03,,-21.4,3.8,1,0*44")
        >>> result.lat_err, result.lon_err
        (1.4, 1.3)
    """
    log = log or logger

    fields = decode_fields(sentence, GBS_LAYOUT, log)
    if fields is None:
        return None

    try:
        return GBSData(
            lat_err=parse_float_field(fields["latitude_error"]),
            lon_err=parse_float_field(fields["longitude_error"]),
            utc_time=parse_string_field(fields["time"]),
        )
    except NumericConversionError as error:
        log.warning("%s src=[%s]", error, sentence.strip())
        raise
