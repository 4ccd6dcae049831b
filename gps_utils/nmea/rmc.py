"""RMC sentence parser.

RMC (Recommended Minimum Navigation Information) is the only supported
sentence that carries both the date and the time of a fix, so it is the
source of absolute timestamps as well as position. See
``gps_utils.nmea.layouts`` for the field map.
"""

import logging

from gps_utils.nmea.decoder import decode_fields
from gps_utils.nmea.errors import NumericConversionError
from gps_utils.nmea.fields import (
    apply_hemisphere,
    convert_nmea_to_degrees,
    parse_string_field,
)
from gps_utils.nmea.layouts import RMC_LAYOUT
from gps_utils.nmea.timestamp import utc_time_from_date_time_strings
from gps_utils.nmea.types import RMCData

logger = logging.getLogger(__name__)

_ACTIVE_STATUS = "A"


def _build_rmc_data(fields: dict[str, str]) -> RMCData:
    """Construct an RMCData object from named fields.

    Coordinates without a decimal point (as sent before a fix) decode
    to 0.0; the date and time must always be well-formed.
    """
    latitude = convert_nmea_to_degrees(fields["latitude"])
    longitude = convert_nmea_to_degrees(fields["longitude"])
    status = parse_string_field(fields["status"])

    return RMCData(
        timestamp_ms=utc_time_from_date_time_strings(fields["date"], fields["time"]),
        latitude=apply_hemisphere(latitude, fields["latitude_hemisphere"]),
        longitude=apply_hemisphere(longitude, fields["longitude_hemisphere"]),
        status=status,
        valid=status == _ACTIVE_STATUS,
    )


def parse_gprmc(sentence: str, log: logging.Logger | None = None) -> RMCData | None:
    """Parse an RMC sentence into structured data.

    Any talker ID is accepted ("$GPRMC", "$GNRMC", ...) as long as the
    message field contains "RMC".

    Args:
        sentence: Raw NMEA RMC sentence string
        log: Where to report diagnostics. Defaults to this module's logger.

    Returns:
        RMCData if parsing succeeds, or None if the sentence is not RMC.

    Raises:
        ChecksumError: If checksum validation fails.
        FormatError: If the sentence has fewer than 12 fields.
        NumericConversionError: If the date, time or a coordinate is malformed.

    Example:
        >>> result = parse_gprmc("$GPRMC,172312.00,A,3356.123,S,15112.456,W,022.4,084.4,230394,003.1,W*42")
        >>> result.latitude, result.longitude
        (-33.935383..., -151.2076)
    """
    log = log or logger

    fields = decode_fields(sentence, RMC_LAYOUT, log)
    if fields is None:
        return None

    try:
        return _build_rmc_data(fields)
    except NumericConversionError as error:
        log.warning("%s src=[%s]", error, sentence.strip())
        raise
