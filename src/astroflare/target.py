"""Fixed sky target: altitude, airmass, separations and coordinate formats."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from astroflare.angle_utils import deg2dms, deg2hms, format_number
from astroflare.constants import DEGREES_PER_CIRCLE
from astroflare.spatial import great_circle_distance, radec2lb

if TYPE_CHECKING:
    from astroflare.observer import Observer
    from astroflare.time_utils import CivilTime


@dataclass(frozen=True)
class Target:
    """A J2000 sky position.

    Parameters:
        ra: Right ascension in degrees.
        dec: Declination in degrees.
        name: Optional label.
    """

    ra: float
    dec: float
    name: str | None = None

    def altitude(self, observer: Observer, time: CivilTime) -> float:
        """Geometric altitude in degrees (no refraction)."""
        ha = math.radians(math.fmod(observer.local_sidereal_time(time) - self.ra, DEGREES_PER_CIRCLE))
        lat = math.radians(observer.latitude)
        dec = math.radians(self.dec)
        return math.degrees(
            math.asin(math.sin(dec) * math.sin(lat) + math.cos(dec) * math.cos(lat) * math.cos(ha))
        )

    def airmass(self, observer: Observer, time: CivilTime) -> float:
        """Airmass at time; -inf when the target is at or below the horizon.

        Uses 1 / sin(h + 244 / (165 + 47 h^1.1)) with h the altitude in degrees.
        """
        alt = self.altitude(observer, time)
        if alt <= 0.0:
            return -math.inf
        sinarg = alt + 244.0 / (165.0 + 47.0 * alt**1.1)
        return 1.0 / math.sin(math.radians(sinarg))

    def separation(self, other: Target) -> float:
        """Angular separation from other in degrees."""
        return great_circle_distance(self.ra, self.dec, other.ra, other.dec)

    def separations(self, others: Iterable[Target]) -> list[float]:
        """Angular separations from each of others, in degrees."""
        return [self.separation(other) for other in others]

    def radec2hmsdms(self) -> tuple[str, str]:
        """(RA as 'HH:MM:SS.ssss', Dec as 'DD:MM:SS.sss')."""
        return deg2hms(self.ra), deg2dms(self.dec)

    def radec2lb(self) -> tuple[float, float]:
        """Galactic (l, b) in degrees."""
        return radec2lb(self.ra, self.dec)

    def __str__(self) -> str:
        coords = f'RA: {format_number(self.ra)}, DEC: {format_number(self.dec)}'
        if self.name is not None:
            return f'Name: {self.name}, {coords}'
        return f'{coords} (no name)'
