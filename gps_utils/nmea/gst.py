"""GST sentence parser.

GST (GNSS Pseudorange Error Statistics) reports the standard deviation of
the position error, in meters. RTK receivers emit it alongside GGA to
describe the accuracy of each fix.
"""

import logging

from gps_utils.nmea.decoder import decode_fields
from gps_utils.nmea.errors import NumericConversionError
from gps_utils.nmea.fields import parse_float_field, parse_string_field
from gps_utils.nmea.layouts import GST_LAYOUT
from gps_utils.nmea.types import GSTData

logger = logging.getLogger(__name__)


def parse_gngst(sentence: str, log: logging.Logger | None = None) -> GSTData | None:
    """Parse a GST sentence into latitude and longitude standard deviations.

    Args:
        sentence: Raw NMEA GST sentence string
        log: Where to report diagnostics. Defaults to this module's logger.

    Returns:
        GSTData if parsing succeeds, or None if the sentence is not GST.

    Raises:
        ChecksumError: If checksum validation fails.
        FormatError: If the sentence has fewer than 9 fields.
        NumericConversionError: If a deviation field is empty or not a number.
    """
    log = log or logger

    fields = decode_fields(sentence, GST_LAYOUT, log)
    if fields is None:
        return None

    try:
        return GSTData(
            lat_std_dev=parse_float_field(fields["latitude_std_dev"]),
            lon_std_dev=parse_float_field(fields["longitude_std_dev"]),
            utc_time=parse_string_field(fields["time"]),
        )
    except NumericConversionError as error:
        log.warning("%s src=[%s]", error, sentence.strip())
        raise
