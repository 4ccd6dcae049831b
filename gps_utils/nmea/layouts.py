"""Field layouts of the supported NMEA sentence types.

Each layout names the field positions a decoder reads and the minimum number
of comma-separated fields a sentence must have. Field positions count the
message field ("$GPRMC") as index 0, and the last field still carries the
"*HH" checksum suffix because the whole sentence is split.

RMC Sentence Format:
    $GPRMC,172312.00,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*4D
           |         | |        | |         | |     |     |      |     |
           |         | |        | |         | |     |     |      +-----+-- Magnetic variation + E/W
           |         | |        | |         | |     |     +-- Date (DDMMYY)
           |         | |        | |         | |     +-- Course over ground (degrees)
           |         | |        | |         | +-- Speed over ground (knots)
           |         | |        | +---------+-- Longitude + E/W
           |         | +--------+-- Latitude + N/S
           |         +-- Status (A=active, V=void)
           +-- UTC time (HHMMSS.ss)

GBS Sentence Format (NMEA 4.10):
    $GNGBS,235458.00,1.4,1.3,3.1,03,,-21.4,3.8,1,0*44
           |         |   |   |   |  | |     |   | |
           |         |   |   |   |  | |     |   | +-- Signal ID
           |         |   |   |   |  | |     |   +-- System ID
           |         |   |   |   |  | |     +-- Bias standard deviation
           |         |   |   |   |  | +-- Bias estimate of the failed satellite
           |         |   |   |   |  +-- Probability of missed detection
           |         |   |   |   +-- ID of most likely failed satellite
           |         |   |   +-- Expected altitude error (meters)
           |         |   +-- Expected longitude error (meters)
           |         +-- Expected latitude error (meters)
           +-- UTC time (HHMMSS.ss)

GST Sentence Format:
    $GNGST,082356.00,1.8,,,,1.7,1.3,2.2*60
           |         |   | | | |   |   |
           |         |   | | | |   |   +-- Altitude standard deviation (meters)
           |         |   | | | |   +-- Longitude standard deviation (meters)
           |         |   | | | +-- Latitude standard deviation (meters)
           |         |   | | +-- Orientation of the error ellipse
           |         |   | +-- Error ellipse semi-minor axis
           |         |   +-- Error ellipse semi-major axis
           |         +-- RMS of pseudorange residuals
           +-- UTC time (HHMMSS.ss)

GGA has the fifteen fields documented by u-blox:
    $GNGGA,075956.00,3734.25906,N,12201.18133,W,2,12,0.83,16.6,M,-29.7,M,,0000*40
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SentenceLayout:
    """Where a sentence type keeps its fields.

    Attributes:
        tag: Three-letter sentence type that must appear in the message field
            (e.g., "RMC" matches "$GPRMC" and "$GNRMC").
        field_names: Name of each field position, starting with "message".
            The number of names is the minimum field count.
    """

    tag: str
    field_names: tuple[str, ...]

    @property
    def minimum_field_count(self) -> int:
        return len(self.field_names)


RMC_LAYOUT = SentenceLayout(
    tag="RMC",
    field_names=(
        "message",
        "time",
        "status",
        "latitude",
        "latitude_hemisphere",
        "longitude",
        "longitude_hemisphere",
        "speed_knots",
        "course",
        "date",
        "magnetic_variation",
        "magnetic_variation_hemisphere",
    ),
)

GGA_LAYOUT = SentenceLayout(
    tag="GGA",
    field_names=(
        "message",
        "time",
        "latitude",
        "latitude_hemisphere",
        "longitude",
        "longitude_hemisphere",
        "fix_quality",
        "num_satellites",
        "hdop",
        "altitude",
        "altitude_units",
        "geoid_height",
        "geoid_height_units",
        "dgps_age",
        "dgps_station_id",
    ),
)

GBS_LAYOUT = SentenceLayout(
    tag="GBS",
    field_names=(
        "message",
        "time",
        "latitude_error",
        "longitude_error",
        "altitude_error",
        "satellite_id",
        "missed_detection_probability",
        "bias",
        "bias_std_dev",
        "system_id",
        "signal_id",
    ),
)

GST_LAYOUT = SentenceLayout(
    tag="GST",
    field_names=(
        "message",
        "time",
        "range_rms",
        "std_major",
        "std_minor",
        "orientation",
        "latitude_std_dev",
        "longitude_std_dev",
        "altitude_std_dev",
    ),
)
