"""Civil time <-> Julian Date conversion and sidereal time.

Civil times are UTC with one-second resolution. Leap seconds are not
modelled; rms-julian is used only to parse ISO-8601 timestamps.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

import julian

from astroflare.angle_utils import format_number
from astroflare.config import get_leapsecs_path
from astroflare.constants import (
    DAYS_PER_JULIAN_CENTURY,
    DEGREES_PER_CIRCLE,
    GST_AT_J2000,
    GST_RATE,
    GST_T2,
    GST_T3_DIVISOR,
    HOURS_PER_DAY,
    JD_CIVIL_OFFSET,
    JD_FRACTION_EPSILON,
    JD_GREGORIAN_REFORM,
    JD_J2000,
    MINUTES_PER_DAY,
    MJD_OFFSET,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
"""Zero-argument callable returning the current instant."""

# Trailing UTC offset after a clock time, e.g. "...12:00:00+00:00".
_OFFSET_RE = re.compile(r'^(?P<body>.*\d:\d{2}(?::\d{2}(?:\.\d*)?)?)(?P<offset>[+-]\d{2}:?\d{2})$')
_UTC_OFFSETS = ('+00:00', '-00:00', '+0000', '-0000')

# Leap seconds loaded once at first use.
_leapsecs_loaded = False


def system_clock() -> datetime:
    """Return the current wall-clock instant in UTC."""
    return datetime.now(timezone.utc)


def _ensure_leapsecs() -> None:
    """Load the rms-julian leap seconds table if not already loaded.

    Uses the LSK named by JULIAN_LEAPSECS when set and readable, otherwise
    the table bundled with rms-julian.
    """
    global _leapsecs_loaded
    if _leapsecs_loaded:
        return
    path = get_leapsecs_path()
    if path is not None:
        try:
            julian.load_lsk(path)
            _leapsecs_loaded = True
            return
        except (OSError, KeyError, ValueError) as e:
            logger.info(
                'Leap seconds from %s not used (%s); using rms-julian bundled LSK.',
                path,
                e,
            )
    julian.load_lsk()
    _leapsecs_loaded = True


def jd_from_civil(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> float:
    """Convert a UTC civil time to Julian Date.

    Closed-form day-number formula, calendar-correct for 1901-2099. Fields
    are not validated: out-of-range values give a deterministic JD.

    Returns:
        Julian Date.
    """
    year_f = float(year)
    month_f = float(month)
    return (
        367.0 * year_f
        - math.floor(math.floor(year_f + (month_f + 9.0) / 12.0) * 7.0 / 4.0)
        + math.floor(275.0 * month_f / 9.0)
        + day
        + JD_CIVIL_OFFSET
        + ((hour + minute / SECONDS_PER_MINUTE + second / SECONDS_PER_HOUR) / HOURS_PER_DAY)
    )


def civil_from_jd(jd: float) -> tuple[int, int, int, int, int, int]:
    """Convert Julian Date to UTC (year, month, day, hour, minute, second).

    Meeus' algorithm, with the Gregorian correction applied from day number
    2299161 (1582-10-15) on; earlier days are on the Julian calendar.
    Sub-second fractions are truncated.

    Parameters:
        jd: Julian Date.

    Returns:
        (year, month, day, hour, minute, second).
    """
    temp = jd + 0.5
    z = math.floor(temp)
    f = temp - z
    # Day number 2299161 is itself Gregorian 1582-10-15.
    if z >= JD_GREGORIAN_REFORM:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - math.floor(alpha / 4)
    else:
        a = z
    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)
    day = int(b - d - math.floor(30.6001 * e) + f)
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715

    # Whole-second instants must not truncate to the previous second.
    frac = min(f + JD_FRACTION_EPSILON, 1.0 - JD_FRACTION_EPSILON)
    hour = math.floor(frac * HOURS_PER_DAY)
    frac = abs(frac - hour / HOURS_PER_DAY)
    minute = math.floor(frac * MINUTES_PER_DAY)
    frac = abs(frac - minute / MINUTES_PER_DAY)
    second = math.floor(frac * SECONDS_PER_DAY)
    return (year, month, day, hour, minute, second)


def mjd_from_jd(jd: float) -> float:
    """Convert Julian Date to Modified Julian Date."""
    return jd - MJD_OFFSET


def jd_from_mjd(mjd: float) -> float:
    """Convert Modified Julian Date to Julian Date."""
    return mjd + MJD_OFFSET


def gst_from_jd(jd: float) -> float:
    """Greenwich sidereal time in degrees [0, 360) for a Julian Date.

    Parameters:
        jd: Julian Date (UT).

    Returns:
        GST in degrees.
    """
    t = (jd - JD_J2000) / DAYS_PER_JULIAN_CENTURY
    gst = GST_AT_J2000 + GST_RATE * (jd - JD_J2000) + GST_T2 * t * t - (t * t * t) / GST_T3_DIVISOR
    return gst % DEGREES_PER_CIRCLE


def local_sidereal_time(gst: float, longitude: float) -> float:
    """Local sidereal time in degrees [0, 360).

    Parameters:
        gst: Greenwich sidereal time in degrees.
        longitude: Observer longitude in degrees, east-positive.

    Returns:
        LST in degrees.
    """
    return (gst + longitude + DEGREES_PER_CIRCLE) % DEGREES_PER_CIRCLE


@dataclass(frozen=True)
class CivilTime:
    """A UTC instant with one-second resolution.

    Fields are not validated; out-of-range values still convert to a
    (meaningless but deterministic) Julian Date.

    Parameters:
        year: Year.
        month: Month (1-12).
        day: Day of month (1-31).
        hour: Hour (0-23).
        minute: Minute (0-59).
        second: Second (0-59).
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    @classmethod
    def now(cls, clock: Clock = system_clock) -> CivilTime:
        """Current instant from clock, truncated to the second."""
        return cls.from_datetime(clock())

    @classmethod
    def from_datetime(cls, dt: datetime) -> CivilTime:
        """Build from a datetime; naive values are taken as UTC."""
        if dt.tzinfo is not None:
            dt = dt.astimezone(timezone.utc)
        return cls(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second)

    @classmethod
    def from_isot(cls, text: str) -> CivilTime:
        """Parse an ISO-8601 UTC timestamp (e.g. '2020-01-01T00:00:00Z').

        Parameters:
            text: Timestamp; a trailing 'Z' or zero UTC offset is accepted.

        Returns:
            CivilTime with fractional seconds truncated.

        Raises:
            ValueError: If the text cannot be parsed or has a non-UTC offset.
        """
        body = text.strip()
        if body.endswith(('Z', 'z')):
            body = body[:-1]
        else:
            match = _OFFSET_RE.match(body)
            if match is not None:
                if match.group('offset') not in _UTC_OFFSETS:
                    raise ValueError(f'Only UTC timestamps are supported, got {text!r}')
                body = match.group('body')
        _ensure_leapsecs()
        try:
            day, sec = julian.day_sec_from_string(body)[:2]
        except (ValueError, TypeError, LookupError, OSError) as e:
            raise ValueError(f'Invalid ISO-8601 timestamp {text!r}') from e
        year, month, mday = julian.ymd_from_day(int(day))
        hour, minute, second = julian.hms_from_sec(float(sec))
        return cls(int(year), int(month), int(mday), int(hour), int(minute), int(second))

    @classmethod
    def from_jd(cls, jd: float) -> CivilTime:
        """Build from a Julian Date (sub-second fraction truncated)."""
        return cls(*civil_from_jd(jd))

    @classmethod
    def from_mjd(cls, mjd: float) -> CivilTime:
        """Build from a Modified Julian Date."""
        return cls.from_jd(jd_from_mjd(mjd))

    def to_jd(self) -> float:
        """Julian Date of this instant."""
        return jd_from_civil(self.year, self.month, self.day, self.hour, self.minute, self.second)

    def to_mjd(self) -> float:
        """Modified Julian Date of this instant."""
        return mjd_from_jd(self.to_jd())

    def to_gst(self) -> float:
        """Greenwich sidereal time in degrees [0, 360)."""
        return gst_from_jd(self.to_jd())

    def to_datetime(self) -> datetime:
        """Timezone-aware UTC datetime; raises ValueError for out-of-range fields."""
        return datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            tzinfo=timezone.utc,
        )

    def to_string(self, fmt: str | None = None) -> str:
        """Format as 'jd', 'mjd', 'utc' (default) or 'isot'.

        Raises:
            ValueError: For an unknown format.
        """
        if fmt is None or fmt == 'utc':
            return self.to_datetime().strftime('%Y-%m-%d %H:%M:%S UTC')
        if fmt == 'isot':
            return self.to_datetime().isoformat()
        if fmt == 'jd':
            return format_number(self.to_jd())
        if fmt == 'mjd':
            return format_number(self.to_mjd())
        raise ValueError(f'Invalid time format {fmt!r}; expected one of jd, mjd, utc, isot')

    def __str__(self) -> str:
        return self.to_string()
