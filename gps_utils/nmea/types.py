"""NMEA data types for decoded sentences.

This module defines dataclasses for structured NMEA sentence data.

Design Decisions:
    1. Whole-result dataclasses: a decoder fills every attribute it owns and
       the caller reads the ones it needs. A decoder never returns a partly
       filled result; on failure it raises instead.

    2. Separate valid flag on RMCData: ``valid`` reflects the receiver's
       A/V status, NOT parse validity. A void fix still decodes (coordinates
       are typically 0.0), so consumers can log it while filtering it out
       for navigation.

    3. utc_time kept as text on GBS/GST: these sentences carry no date, so
       no absolute timestamp can be composed from them alone.
"""

from dataclasses import dataclass


@dataclass
class RMCData:
    """Decoded RMC (Recommended Minimum Navigation Information) sentence.

    Attributes:
        timestamp_ms: Fix time in milliseconds since the Unix epoch (UTC),
            composed from the date and time fields. Resolution is 10 ms.

        latitude: Latitude in decimal degrees, positive=North.
            0.0 when the receiver sent an empty latitude field.

        longitude: Longitude in decimal degrees, positive=East.
            0.0 when the receiver sent an empty longitude field.

        status: Raw status indicator ("A" = active, "V" = void).
            None if the field was empty.

        valid: Navigation validity flag. True only if status is "A".

    Example:
        >>> rmc = parse_gprmc("$GPRMC,172312.00,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*4D")
        >>> rmc.timestamp_ms
        764443392000
        >>> rmc.latitude
        48.1173
    """

    timestamp_ms: int
    latitude: float
    longitude: float
    status: str | None
    valid: bool


@dataclass
class GBSData:
    """Decoded GBS (GNSS Satellite Fault Detection) sentence.

    Attributes:
        lat_err: Expected error in latitude, in meters.
        lon_err: Expected error in longitude, in meters.
        utc_time: UTC time of the associated fix in HHMMSS.ss format.
            None if the field was empty.
    """

    lat_err: float
    lon_err: float
    utc_time: str | None


@dataclass
class GSTData:
    """Decoded GST (GNSS Pseudorange Error Statistics) sentence.

    Attributes:
        lat_std_dev: Standard deviation of the latitude error, in meters.
        lon_std_dev: Standard deviation of the longitude error, in meters.
        utc_time: UTC time of the associated fix in HHMMSS.ss format.
            None if the field was empty.
    """

    lat_std_dev: float
    lon_std_dev: float
    utc_time: str | None
