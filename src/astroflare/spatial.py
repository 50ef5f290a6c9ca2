"""Celestial-sphere geometry: galactic coordinates, separations, ellipse membership."""

from __future__ import annotations

import math

import numpy as np

from astroflare.constants import EQUATORIAL_TO_GALACTIC

_RGE = np.array(EQUATORIAL_TO_GALACTIC)


def radec2lb(ra: float, dec: float) -> tuple[float, float]:
    """Convert J2000 equatorial coordinates to galactic coordinates.

    Parameters:
        ra: Right ascension in degrees.
        dec: Declination in degrees.

    Returns:
        (l, b) galactic longitude in (-180, 180] and latitude, in degrees.
    """
    ra_rad = math.radians(ra)
    dec_rad = math.radians(dec)
    u = np.array(
        [
            math.cos(ra_rad) * math.cos(dec_rad),
            math.sin(ra_rad) * math.cos(dec_rad),
            math.sin(dec_rad),
        ]
    )
    x, y, z = (float(v) for v in _RGE @ u)
    galactic_l = math.degrees(math.atan2(y, x))
    galactic_b = math.degrees(math.atan2(z, math.sqrt(x * x + y * y)))
    return galactic_l, galactic_b


def great_circle_distance(ra1: float, dec1: float, ra2: float, dec2: float) -> float:
    """Angular distance between two sky positions (Vincenty formula).

    Parameters:
        ra1, dec1: First position in degrees.
        ra2, dec2: Second position in degrees.

    Returns:
        Separation in degrees.
    """
    ra1_rad = math.radians(ra1)
    dec1_rad = math.radians(dec1)
    ra2_rad = math.radians(ra2)
    dec2_rad = math.radians(dec2)
    delta_ra = abs(ra2_rad - ra1_rad)
    num = (math.cos(dec2_rad) * math.sin(delta_ra)) ** 2 + (
        math.cos(dec1_rad) * math.sin(dec2_rad)
        - math.sin(dec1_rad) * math.cos(dec2_rad) * math.cos(delta_ra)
    ) ** 2
    den = math.sin(dec1_rad) * math.sin(dec2_rad) + math.cos(dec1_rad) * math.cos(dec2_rad) * math.cos(
        delta_ra
    )
    return math.degrees(math.atan2(math.sqrt(num), den))


def in_ellipse(
    alpha: float,
    delta0: float,
    alpha1: float,
    delta01: float,
    d0: float,
    axis_ratio: float,
    pao: float,
) -> bool:
    """Test whether a sky position lies inside an ellipse on the sphere.

    Parameters:
        alpha: Right ascension of the point in degrees.
        delta0: Declination of the point in degrees.
        alpha1: Right ascension of the ellipse center in degrees.
        delta01: Declination of the ellipse center in degrees.
        d0: Semi-major axis in degrees.
        axis_ratio: Minor-to-major axis ratio (1 for a circle).
        pao: Position angle of the minor axis in degrees.

    Returns:
        True if the point is inside; always False for points more than 90
        degrees from the center.
    """
    d_alpha = math.radians(alpha1 - alpha)
    delta1 = math.radians(delta01)
    delta = math.radians(delta0)
    pa = math.radians(pao)
    d = math.radians(d0)

    e = math.sqrt(1.0 - axis_ratio**2)

    t1 = math.cos(d_alpha)
    t22 = math.sin(d_alpha)
    t3 = math.cos(delta1)
    t32 = math.sin(delta1)
    t6 = math.cos(delta)
    t26 = math.sin(delta)
    t9 = math.cos(d)
    t55 = math.sin(d)

    # Opposite hemisphere.
    if t3 * t6 * t1 + t32 * t26 < 0.0:
        return False

    t2 = t1 * t1
    t4 = t3 * t3
    t5 = t2 * t4
    t7 = t6 * t6
    t8 = t5 * t7
    t10 = t9 * t9
    t11 = t7 * t10
    t13 = math.cos(pa)
    t14 = t13 * t13
    t15 = t14 * t10
    t18 = t7 * t14
    t19 = t18 * t10
    t24 = math.sin(pa)
    t31 = t1 * t3
    t36 = 2.0 * t31 * t32 * t26 * t6
    t37 = t31 * t32
    t38 = t26 * t6
    t45 = t4 * t10
    t56 = t55 * t55
    t57 = t4 * t7

    t60 = (
        -t8
        + t5 * t11
        + 2.0 * t5 * t15
        - t5 * t19
        - 2.0 * t1 * t4 * t22 * t10 * t24 * t13 * t26
        - t36
        + 2.0 * t37 * t38 * t10
        - 2.0 * t37 * t38 * t15
        - t45 * t14
        - t45 * t2
        + 2.0 * t22 * t3 * t32 * t6 * t24 * t10 * t13
        - t56
        + t7
        - t11
        + t4
        - t57
        + t57 * t10
        + t19
        - t18 * t45
    )
    t61 = e * e
    t63 = t60 * t61 + t8 + t57 - t4 - t7 + t56 + t36
    return t63 > 0.0
