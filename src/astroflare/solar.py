"""Sunrise, sunset and twilight times from the sunrise equation.

Follows the NOAA / Wikipedia formulation: a mean solar transit for the
observer's longitude, corrected by the equation of center and the equation
of time, and the hour angle at which the sun's center crosses the
requested altitude. Observer elevation lowers the apparent horizon by
2.076 * sqrt(metres) arcminutes.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, NamedTuple

from astroflare.constants import (
    ARCMIN_PER_DEGREE,
    ASTRONOMICAL_TWILIGHT_ALTITUDE,
    CIVIL_TWILIGHT_ALTITUDE,
    DEGREES_PER_CIRCLE,
    EARTH_OBLIQUITY,
    ELEVATION_DIP_COEFFICIENT,
    HALF_CIRCLE_DEGREES,
    JD_J2000,
    NAUTICAL_TWILIGHT_ALTITUDE,
    SECONDS_PER_DAY,
    SUN_MEAN_ANOMALY_AT_J2000,
    SUN_MEAN_ANOMALY_RATE,
    SUN_PERIHELION_LONGITUDE,
    SUNRISE_ALTITUDE,
    TRANSIT_LEAP_SECONDS,
    TRANSIT_OFFSET_DAYS,
)
from astroflare.errors import DomainError
from astroflare.time_utils import CivilTime, Clock, system_clock

if TYPE_CHECKING:
    from astroflare.observer import Observer

logger = logging.getLogger(__name__)


class SolarEvents(NamedTuple):
    """Next sunrise and next sunset, each independently computed."""

    sunrise: CivilTime
    sunset: CivilTime


def solar_transit_and_hour_angle(
    latitude: float,
    longitude: float,
    elevation: float,
    jd: float,
    altitude: float = SUNRISE_ALTITUDE,
) -> tuple[float, float]:
    """Solve the sunrise equation for the solar day following jd.

    Parameters:
        latitude: Observer latitude in degrees.
        longitude: Observer longitude in degrees, east-positive.
        elevation: Observer elevation in metres.
        jd: Reference Julian Date.
        altitude: Solar altitude threshold in degrees.

    Returns:
        (transit_jd, hour_angle_deg) for the local solar noon and the hour
        angle at which the sun crosses altitude.

    Raises:
        DomainError: If elevation is negative or the sun never crosses
            altitude on that day.
    """
    if elevation < 0.0:
        raise DomainError(f'elevation must be non-negative, got {elevation} m')
    n = math.ceil(jd - JD_J2000 - TRANSIT_OFFSET_DAYS - TRANSIT_LEAP_SECONDS / SECONDS_PER_DAY)
    jstar = n + TRANSIT_OFFSET_DAYS - longitude / DEGREES_PER_CIRCLE

    mean_anomaly = (SUN_MEAN_ANOMALY_AT_J2000 + SUN_MEAN_ANOMALY_RATE * jstar) % DEGREES_PER_CIRCLE
    m_rad = math.radians(mean_anomaly)
    center = 1.9148 * math.sin(m_rad) + 0.0200 * math.sin(2.0 * m_rad) + 0.0003 * math.sin(3.0 * m_rad)
    ecliptic_lon = (
        mean_anomaly + center + HALF_CIRCLE_DEGREES + SUN_PERIHELION_LONGITUDE
    ) % DEGREES_PER_CIRCLE
    lambda_rad = math.radians(ecliptic_lon)
    transit = JD_J2000 + jstar + 0.0053 * math.sin(m_rad) - 0.0069 * math.sin(2.0 * lambda_rad)

    sin_dec = math.sin(lambda_rad) * math.sin(math.radians(EARTH_OBLIQUITY))
    cos_dec = math.cos(math.asin(sin_dec))
    lat_rad = math.radians(latitude)
    dip = ELEVATION_DIP_COEFFICIENT * math.sqrt(elevation) / ARCMIN_PER_DEGREE
    cos_h0 = (math.sin(math.radians(altitude - dip)) - math.sin(lat_rad) * sin_dec) / (
        math.cos(lat_rad) * cos_dec
    )
    if not -1.0 <= cos_h0 <= 1.0:
        raise DomainError(
            f'sun does not reach altitude {altitude} deg at latitude {latitude} on this date'
        )
    hour_angle = math.degrees(math.acos(cos_h0))
    logger.debug(
        'Sunrise equation: n=%d transit=%.8f cos(H0)=%.8f H0=%.6f deg',
        n,
        transit,
        cos_h0,
        hour_angle,
    )
    return transit, hour_angle


def sun_event_jds(
    location: Observer,
    time: CivilTime | None = None,
    altitude: float | None = None,
    *,
    clock: Clock = system_clock,
) -> tuple[float, float]:
    """Julian Dates of the next sunrise and sunset (full precision).

    Same arguments as sun_set_time().

    Returns:
        (sunrise_jd, sunset_jd).
    """
    if time is None:
        time = CivilTime.now(clock)
    if altitude is None:
        altitude = SUNRISE_ALTITUDE
    transit, hour_angle = solar_transit_and_hour_angle(
        location.latitude,
        location.longitude,
        location.elevation,
        time.to_jd(),
        altitude,
    )
    return (
        transit - hour_angle / DEGREES_PER_CIRCLE,
        transit + hour_angle / DEGREES_PER_CIRCLE,
    )


def sun_set_time(
    location: Observer,
    time: CivilTime | None = None,
    altitude: float | None = None,
    *,
    clock: Clock = system_clock,
) -> SolarEvents:
    """Next sunrise and sunset at or after time for an observer.

    Parameters:
        location: Observer position.
        time: Reference instant; None uses the current instant from clock.
        altitude: Solar altitude threshold in degrees; None uses -0.833.
        clock: Wall clock used when time is None.

    Returns:
        SolarEvents(sunrise, sunset).

    Raises:
        DomainError: If the observer elevation is negative or the sun never
            crosses altitude on that day.
    """
    sunrise_jd, sunset_jd = sun_event_jds(location, time, altitude, clock=clock)
    return SolarEvents(CivilTime.from_jd(sunrise_jd), CivilTime.from_jd(sunset_jd))


def twilight_astronomical(
    location: Observer, time: CivilTime | None = None, *, clock: Clock = system_clock
) -> SolarEvents:
    """Astronomical dawn and dusk (sun at -18 deg)."""
    return sun_set_time(location, time, ASTRONOMICAL_TWILIGHT_ALTITUDE, clock=clock)


def twilight_nautical(
    location: Observer, time: CivilTime | None = None, *, clock: Clock = system_clock
) -> SolarEvents:
    """Nautical dawn and dusk (sun at -12 deg)."""
    return sun_set_time(location, time, NAUTICAL_TWILIGHT_ALTITUDE, clock=clock)


def twilight_civil(
    location: Observer, time: CivilTime | None = None, *, clock: Clock = system_clock
) -> SolarEvents:
    """Civil dawn and dusk (sun at -6 deg)."""
    return sun_set_time(location, time, CIVIL_TWILIGHT_ALTITUDE, clock=clock)
