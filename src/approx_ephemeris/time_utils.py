"""Time conversion wrappers around rms-julian: UTC dates <-> days since J2000.

The element model treats UTC as its time scale; the TT-UTC offset (about a
minute) is far below the accuracy of the approximate elements.
"""

from __future__ import annotations

import logging
import math
import re
from datetime import datetime, timezone

import julian

from approx_ephemeris.config import get_leapsecs_path
from approx_ephemeris.constants import (
    DAYS_PER_YEAR,
    J2000_DAY_OFFSET,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)

logger = logging.getLogger(__name__)

# Leap seconds loaded once at first use.
_leapsecs_loaded = False


def _ensure_leapsecs() -> None:
    """Load the leap seconds kernel for rms-julian if not already loaded.

    Uses JULIAN_LEAPSECS when set; a missing or unreadable file falls back to
    the LSK bundled with rms-julian.
    """
    global _leapsecs_loaded
    if _leapsecs_loaded:
        return
    julian.set_ut_model('SPICE')
    path = get_leapsecs_path()
    if path is None:
        julian.load_lsk()
        _leapsecs_loaded = True
        return
    try:
        julian.load_lsk(path)
    except (OSError, KeyError, ValueError) as e:
        logger.info(
            'Leap seconds from %s not used (%s); using rms-julian bundled LSK.',
            path,
            e,
        )
        julian.load_lsk()
    _leapsecs_loaded = True


def days_since_j2000(day: int, sec: float) -> float:
    """Convert UTC (day, sec) to continuous days since J2000 (2000-01-01 12:00).

    Parameters:
        day: Days since 2000-01-01 (rms-julian day number).
        sec: Seconds within that day.

    Returns:
        Days since the J2000 epoch.
    """
    return day + sec / SECONDS_PER_DAY - J2000_DAY_OFFSET


def day_sec_from_days(days: float) -> tuple[int, float]:
    """Inverse of days_since_j2000: split into (day, sec)."""
    shifted = days + J2000_DAY_OFFSET
    day = math.floor(shifted)
    sec = (shifted - day) * SECONDS_PER_DAY
    return (int(day), sec)


def days_since_j2000_from_ymd(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: float = 0.0,
) -> float:
    """Days since J2000 for a UTC calendar date and time of day."""
    sec = hour * SECONDS_PER_HOUR + minute * SECONDS_PER_MINUTE + second
    return days_since_j2000(int(julian.day_from_ymd(year, month, day)), sec)


def days_since_j2000_now() -> float:
    """Days since J2000 for the current system time (UTC)."""
    now = datetime.now(timezone.utc)
    return days_since_j2000_from_ymd(
        now.year,
        now.month,
        now.day,
        now.hour,
        now.minute,
        now.second + now.microsecond / 1.0e6,
    )


def parse_datetime(string: str) -> tuple[int, float] | None:
    """Parse date/time string to UTC (day, sec).

    Parameters:
        string: Date/time string (format accepted by rms-julian).

    Returns:
        (day, sec) where day is days since 2000-01-01, sec is seconds within
        that day; None on parse failure.
    """
    _ensure_leapsecs()
    candidate_strings = [string]
    stripped = string.strip()
    if stripped.endswith(('Z', 'z')):
        # rms-julian does not parse the ISO UTC suffix "Z".
        candidate_strings.append(stripped[:-1])
    year_hms_match = re.fullmatch(r'(\d{4})\s+(\d{1,2}:\d{2}:\d{2})', stripped)
    if year_hms_match is not None:
        year, hms = year_hms_match.groups()
        # "YYYY HH:MM:SS" means Jan 1st of that year at the given time.
        candidate_strings.append(f'{year}-01-01 {hms}')
    for candidate in candidate_strings:
        try:
            result = julian.day_sec_from_string(candidate)
            day, sec = result[0], result[1]
            return (int(day), float(sec))
        except (ValueError, TypeError, LookupError, OSError):
            continue
    return None


def parse_days_since_j2000(string: str) -> float | None:
    """Parse a UTC date/time string to days since J2000, or None on failure.

    A bare number prefixed with 'J2000+' / 'J2000-' (e.g. 'J2000+9146.5') is
    taken as days since J2000 directly.
    """
    stripped = string.strip()
    match = re.fullmatch(r'[Jj]2000\s*([+-]\s*\d+(?:\.\d*)?)', stripped)
    if match is not None:
        return float(match.group(1).replace(' ', ''))
    parsed = parse_datetime(stripped)
    if parsed is None:
        return None
    return days_since_j2000(parsed[0], parsed[1])


def ymd_from_day(day: int) -> tuple[int, int, int]:
    """Convert day since 2000-01-01 to calendar date."""
    return julian.ymd_from_day(day)


def hms_from_sec(sec: float) -> tuple[int, int, float]:
    """Convert seconds within day to (hour, minute, second)."""
    return julian.hms_from_sec(sec)


def format_days(days: float) -> str:
    """Format days since J2000 as 'YYYY-MM-DD HH:MM:SS' (UTC, rounded to the second)."""
    day, sec = day_sec_from_days(days)
    isec = int(round(sec))
    if isec >= int(SECONDS_PER_DAY):
        day += 1
        isec -= int(SECONDS_PER_DAY)
    year, month, mday = ymd_from_day(day)
    hour, minute, second = (int(v) for v in hms_from_sec(isec))
    return f'{int(year):04d}-{int(month):02d}-{int(mday):02d} {hour:02d}:{minute:02d}:{second:02d}'


def year_from_days(days: float) -> float:
    """Approximate decimal year for days since J2000."""
    return 2000.0 + days / DAYS_PER_YEAR


def interval_days(interval: float, time_unit: str) -> float:
    """Convert interval and time_unit to days.

    Parameters:
        interval: Numeric interval value (sign ignored).
        time_unit: 'min', 'hour', 'day' or 'year', case-insensitive; only the first
            four characters are compared, so plurals such as 'days' also work.

    Returns:
        Interval in days.

    Raises:
        ValueError: If time_unit is unknown or the interval is zero.
    """
    u = time_unit.strip().lower()[:4]
    if u in ('min', 'minu'):
        days = abs(interval) * SECONDS_PER_MINUTE / SECONDS_PER_DAY
    elif u == 'hour':
        days = abs(interval) * SECONDS_PER_HOUR / SECONDS_PER_DAY
    elif u in ('day', 'days'):
        days = abs(interval)
    elif u == 'year':
        days = abs(interval) * DAYS_PER_YEAR
    else:
        raise ValueError(f'Invalid time_unit {time_unit!r}; expected one of min, hour, day, year')
    if days == 0.0:
        raise ValueError('Interval must be non-zero')
    return days
