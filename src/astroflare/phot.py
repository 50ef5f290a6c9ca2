"""Magnitude <-> flux conversions.

Fluxes are in the units implied by the zero point; the default ZP of 23.9
gives microJansky for AB magnitudes.
"""

from __future__ import annotations

import math

from astroflare.constants import DEFAULT_LIMMAG_SIGMA, DEFAULT_ZERO_POINT

ZP = DEFAULT_ZERO_POINT

# 2.5 / ln(10): converts fractional flux error to magnitude error.
FACTOR = 2.5 / math.log(10.0)


def mag_to_flux(mag: float, magerr: float, zp: float = ZP) -> tuple[float, float]:
    """Convert a magnitude and its error to flux and flux error."""
    flux = 10.0 ** (-0.4 * (mag - zp))
    fluxerr = magerr / FACTOR * flux
    return flux, fluxerr


def flux_to_mag(flux: float, fluxerr: float, zp: float = ZP) -> tuple[float, float]:
    """Convert a flux and its error to magnitude and magnitude error."""
    mag = zp - 2.5 * math.log10(flux)
    magerr = FACTOR * fluxerr / flux
    return mag, magerr


def limmag_to_fluxerr(limmag: float, zp: float = ZP, sigma: float = DEFAULT_LIMMAG_SIGMA) -> float:
    """Flux error implied by a sigma-level limiting magnitude."""
    return 10.0 ** ((limmag - zp) / -2.5) / sigma


def fluxerr_to_limmag(fluxerr: float, zp: float = ZP, sigma: float = DEFAULT_LIMMAG_SIGMA) -> float:
    """Sigma-level limiting magnitude implied by a flux error."""
    return -2.5 * math.log10(sigma * fluxerr) + zp
