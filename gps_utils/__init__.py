"""GPS utilities for decoding NMEA 0183 sentences from GNSS receivers."""

from gps_utils.nmea import (
    ChecksumError,
    DecodeError,
    DecodeOutcome,
    FormatError,
    GBSData,
    GSTData,
    NumericConversionError,
    RMCData,
    SplitMode,
    convert_nmea_to_degrees,
    parse_gngbs,
    parse_gngga,
    parse_gngst,
    parse_gprmc,
    split_fields,
    utc_time_from_date_time_strings,
    validate_checksum,
)

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
    "convert_nmea_to_degrees",
    "parse_gngbs",
    "parse_gngga",
    "parse_gngst",
    "parse_gprmc",
    "split_fields",
    "utc_time_from_date_time_strings",
    "validate_checksum",
]
