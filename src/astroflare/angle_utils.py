"""Sexagesimal angle formatting and compact number formatting."""

from __future__ import annotations

import math

from astroflare.constants import (
    ARCMIN_PER_DEGREE,
    DEGREES_PER_CIRCLE,
    HALF_CIRCLE_DEGREES,
)
from astroflare.errors import DomainError


def format_number(value: float) -> str:
    """Shortest round-trip repr of value, without a trailing '.0' for integral values.

    Parameters:
        value: Number to format.

    Returns:
        String such as '1870', '33.3633675' or '2458849.5'.
    """
    text = repr(float(value))
    if text.endswith('.0'):
        return text[:-2]
    return text


def deg2hms(deg: float) -> str:
    """Format a right ascension in degrees as 'HH:MM:SS.ssss'.

    Parameters:
        deg: Right ascension in degrees, 0 < deg <= 360.

    Returns:
        Sexagesimal hours string (e.g. '03:00:00.0000').

    Raises:
        DomainError: If deg is outside (0, 360].
    """
    if deg <= 0.0 or deg > DEGREES_PER_CIRCLE:
        raise DomainError(f'Invalid RA input: {deg}')
    h = deg * 12.0 / HALF_CIRCLE_DEGREES
    hours = math.floor(h)
    m = (h - hours) * ARCMIN_PER_DEGREE
    minutes = math.floor(m)
    seconds = (m - minutes) * ARCMIN_PER_DEGREE
    return f'{hours:02d}:{minutes:02d}:{seconds:07.4f}'


def deg2dms(deg: float) -> str:
    """Format a declination in degrees as 'DD:MM:SS.sss'.

    The sign is carried on the degrees field only.

    Parameters:
        deg: Declination in degrees, -90 < deg < 90.

    Returns:
        Sexagesimal degrees string (e.g. '45:00:00.000').

    Raises:
        DomainError: If deg is outside (-90, 90).
    """
    if deg <= -90.0 or deg >= 90.0:
        raise DomainError(f'Invalid DEC input: {deg}')
    degrees = math.copysign(math.floor(abs(deg)), deg)
    m = abs(deg - degrees) * ARCMIN_PER_DEGREE
    minutes = math.floor(m)
    seconds = abs(m - minutes) * ARCMIN_PER_DEGREE
    return f'{degrees:02.0f}:{minutes:02d}:{seconds:06.3f}'
