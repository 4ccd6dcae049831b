"""UTC timestamp composition from NMEA date and time fields.

RMC sentences split the fix time across two fields:
    date: DDMMYY      (e.g., "230394" = 23 March 1994)
    time: HHMMSS.ss   (e.g., "172312.00" = 17:23:12.00)

Both are read as fixed-width digit groups. Only two fractional digits are
honored, so the result has a resolution of 10 ms.
"""

from datetime import date, datetime, time, timedelta, timezone

from gps_utils.nmea.errors import NumericConversionError

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Two-digit years at or above the pivot belong to the 1900s. GPS time starts
# on 6 January 1980, so no receiver reports an earlier year.
_PIVOT_YEAR = 80

_MINIMUM_DATE_LENGTH = 6
_MINIMUM_TIME_LENGTH = 6

# Weights of the first two fractional-second digits, in milliseconds
_FRACTION_DIGIT_MILLISECONDS = (100, 10)


def _parse_two_digits(text: str, start: int, label: str) -> int:
    """Parse the two-character decimal group starting at ``start``."""
    group = text[start : start + 2]
    if not (len(group) == 2 and group.isascii() and group.isdigit()):
        raise NumericConversionError(
            f"NMEA {label} conversion error. value=[{text}]"
        )
    return int(group)


def _expand_year(two_digit_year: int) -> int:
    if two_digit_year >= _PIVOT_YEAR:
        return 1900 + two_digit_year
    return 2000 + two_digit_year


def _fraction_milliseconds(time_string: str) -> int:
    """Millisecond contribution of the first two digits after the seconds.

    The character at index 6 is the decimal point; missing digits count as 0.
    """
    milliseconds = 0
    digits = time_string[7:9]
    for digit, weight in zip(digits, _FRACTION_DIGIT_MILLISECONDS):
        if not (digit.isascii() and digit.isdigit()):
            raise NumericConversionError(
                f"NMEA time conversion error. value=[{time_string}]"
            )
        milliseconds += int(digit) * weight
    return milliseconds


def utc_time_from_date_time_strings(date_string: str, time_string: str) -> int:
    """Combine NMEA date and time strings into milliseconds since the Unix epoch.

    The date and time are always interpreted as UTC. Values out of their
    usual range are not rejected; they roll over the way calendar
    normalization does (month 13 is January of the following year, day 32
    is the first days of the following month, hour 24 is the next day).

    Args:
        date_string: Date in DDMMYY format
        time_string: Time in HHMMSS.ss format; the fractional part may be
            shorter or absent

    Returns:
        Milliseconds since 1970-01-01T00:00:00Z

    Raises:
        NumericConversionError: If either string is too short or a digit
            position holds something other than a digit.

    Example:
        >>> utc_time_from_date_time_strings("230394", "172312.00")
        764443392000  # 1994-03-23T17:23:12.000Z
    """
    if len(date_string) < _MINIMUM_DATE_LENGTH:
        raise NumericConversionError(
            f"NMEA date conversion error. value=[{date_string}]"
        )
    if len(time_string) < _MINIMUM_TIME_LENGTH:
        raise NumericConversionError(
            f"NMEA time conversion error. value=[{time_string}]"
        )

    day = _parse_two_digits(date_string, 0, "date")
    month = _parse_two_digits(date_string, 2, "date")
    year = _expand_year(_parse_two_digits(date_string, 4, "date"))
    hours = _parse_two_digits(time_string, 0, "time")
    minutes = _parse_two_digits(time_string, 2, "time")
    seconds = _parse_two_digits(time_string, 4, "time")
    milliseconds = _fraction_milliseconds(time_string)

    # Normalize the month first; day and time of day roll over via timedelta
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    first_of_month = datetime.combine(
        date(year, month, 1), time(), tzinfo=timezone.utc
    )
    moment = first_of_month + timedelta(
        days=day - 1,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        milliseconds=milliseconds,
    )
    return (moment - _EPOCH) // timedelta(milliseconds=1)
