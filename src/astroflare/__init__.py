"""Small astronomical computation kernel.

This package provides:
- Calendar/time kernel: civil time <-> Julian Date / MJD, sidereal time
- Solar event solver: sunrise, sunset and twilight for an observer
- Cosmology: luminosity, angular-diameter distance and distance modulus
- Sky-position helpers: altitude, airmass, separations, galactic coordinates
- Photometry: magnitude <-> flux conversions

ISO timestamp parsing uses rms-julian; vector work uses numpy.
"""

from astroflare.cosmo import PLANCK18, Cosmology, planck18
from astroflare.errors import DomainError
from astroflare.observer import Observer
from astroflare.solar import SolarEvents, sun_set_time
from astroflare.target import Target
from astroflare.time_utils import CivilTime

__all__: list[str] = [
    'PLANCK18',
    'CivilTime',
    'Cosmology',
    'DomainError',
    'Observer',
    'SolarEvents',
    'Target',
    'planck18',
    'sun_set_time',
]
