"""NMEA 0183 decoders for RMC, GGA, GBS and GST sentences."""

from gps_utils.nmea.checksum import calculate_checksum, validate_checksum, verify_checksum
from gps_utils.nmea.errors import (
    ChecksumError,
    DecodeError,
    DecodeOutcome,
    FormatError,
    NumericConversionError,
)
from gps_utils.nmea.fields import (
    SplitMode,
    apply_hemisphere,
    convert_nmea_to_degrees,
    split_fields,
)
from gps_utils.nmea.gbs import parse_gngbs
from gps_utils.nmea.gga import parse_gngga
from gps_utils.nmea.gst import parse_gngst
from gps_utils.nmea.rmc import parse_gprmc
from gps_utils.nmea.timestamp import utc_time_from_date_time_strings
from gps_utils.nmea.types import GBSData, GSTData, RMCData

__all__ = [
    "ChecksumError",
    "DecodeError",
    "DecodeOutcome",
    "FormatError",
    "GBSData",
    "GSTData",
    "NumericConversionError",
    "RMCData",
    "SplitMode",
    "apply_hemisphere",
    "calculate_checksum",
    "convert_nmea_to_degrees",
    "parse_gngbs",
    "parse_gngga",
    "parse_gngst",
    "parse_gprmc",
    "split_fields",
    "utc_time_from_date_time_strings",
    "validate_checksum",
    "verify_checksum",
]
