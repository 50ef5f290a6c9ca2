"""Ground-based observer: sidereal time, airmass grids and solar events."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from astroflare import solar
from astroflare.angle_utils import format_number
from astroflare.constants import AIRMASS_ALTITUDE_TERM, DEGREES_PER_CIRCLE
from astroflare.time_utils import CivilTime, Clock, local_sidereal_time, system_clock

if TYPE_CHECKING:
    from astroflare.target import Target


@dataclass(frozen=True)
class Observer:
    """Observer position on the Earth's surface.

    Parameters:
        latitude: Latitude in degrees [-90, 90].
        longitude: Longitude in degrees [-180, 180]; east-positive, west negative.
        elevation: Elevation in metres (>= 0).
        name: Optional label (e.g. observatory code).
    """

    latitude: float
    longitude: float
    elevation: float = 0.0
    name: str | None = None

    def local_sidereal_time(self, time: CivilTime) -> float:
        """Local sidereal time in degrees [0, 360) at time."""
        return local_sidereal_time(time.to_gst(), self.longitude)

    def targets_airmasses(self, targets: Sequence[Target], times: Sequence[CivilTime]) -> np.ndarray:
        """Airmass of every target at every time.

        Before the airmass formula of Target.airmass(), the altitude h is
        lowered by the empirical term 0.0347 * tan(90 - h)^2, with the
        tangent taken of the plain number 90 - h. Cells whose corrected
        altitude is negative are NaN, so they compare false against any
        airmass threshold.

        Parameters:
            targets: Targets (rows).
            times: Times (columns).

        Returns:
            Array of shape (len(targets), len(times)).
        """
        lsts = np.array([self.local_sidereal_time(t) for t in times], dtype=float)
        ra = np.array([t.ra for t in targets], dtype=float)
        dec = np.radians(np.array([t.dec for t in targets], dtype=float))[:, np.newaxis]
        lat = math.radians(self.latitude)

        ha = np.radians(np.fmod(lsts[np.newaxis, :] - ra[:, np.newaxis], DEGREES_PER_CIRCLE))
        alt = np.degrees(np.arcsin(np.sin(dec) * math.sin(lat) + np.cos(dec) * math.cos(lat) * np.cos(ha)))
        alt = alt - AIRMASS_ALTITUDE_TERM * np.tan(90.0 - alt) ** 2
        # Negative altitudes give NaN from the fractional power.
        with np.errstate(invalid='ignore'):
            sinarg = alt + 244.0 / (165.0 + 47.0 * np.power(alt, 1.1))
        return 1.0 / np.sin(np.radians(sinarg))

    def sun_set_time(
        self,
        time: CivilTime | None = None,
        altitude: float | None = None,
        *,
        clock: Clock = system_clock,
    ) -> solar.SolarEvents:
        """Next sunrise and sunset; see astroflare.solar.sun_set_time()."""
        return solar.sun_set_time(self, time, altitude, clock=clock)

    def twilight_astronomical(
        self, time: CivilTime | None = None, *, clock: Clock = system_clock
    ) -> solar.SolarEvents:
        """Astronomical dawn and dusk (sun at -18 deg)."""
        return solar.twilight_astronomical(self, time, clock=clock)

    def twilight_nautical(
        self, time: CivilTime | None = None, *, clock: Clock = system_clock
    ) -> solar.SolarEvents:
        """Nautical dawn and dusk (sun at -12 deg)."""
        return solar.twilight_nautical(self, time, clock=clock)

    def twilight_civil(
        self, time: CivilTime | None = None, *, clock: Clock = system_clock
    ) -> solar.SolarEvents:
        """Civil dawn and dusk (sun at -6 deg)."""
        return solar.twilight_civil(self, time, clock=clock)

    def __str__(self) -> str:
        coords = (
            f'Lat: {format_number(self.latitude)}, Lon: {format_number(self.longitude)}, '
            f'Elevation: {format_number(self.elevation)}'
        )
        if self.name is not None:
            return f'Name: {self.name}, {coords}'
        return f'{coords} (no name)'
