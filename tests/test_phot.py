"""Tests for magnitude and flux conversions."""

from __future__ import annotations

import pytest

from astroflare import phot


def test_mag_to_flux() -> None:
    """20 +/- 0.1 mag at ZP 23.9."""

    flux, fluxerr = phot.mag_to_flux(20.0, 0.1)
    assert flux == pytest.approx(36.307805, abs=1e-6)
    assert fluxerr == pytest.approx(3.344072, abs=1e-6)


def test_flux_to_mag_inverts_mag_to_flux() -> None:
    """flux_to_mag undoes mag_to_flux."""

    mag, magerr = phot.flux_to_mag(*phot.mag_to_flux(18.5, 0.05))
    assert mag == pytest.approx(18.5, abs=1e-12)
    assert magerr == pytest.approx(0.05, abs=1e-12)


def test_custom_zero_point() -> None:
    """Flux equals one at the zero point magnitude."""

    flux, _ = phot.mag_to_flux(25.0, 0.0, zp=25.0)
    assert flux == pytest.approx(1.0)


def test_limiting_magnitude_conversions() -> None:
    """5-sigma limiting magnitude and flux error are inverses."""

    assert phot.fluxerr_to_limmag(10.0) == pytest.approx(19.652575, abs=1e-6)
    assert phot.limmag_to_fluxerr(19.652575) == pytest.approx(10.0, abs=1e-6)
    assert phot.fluxerr_to_limmag(phot.limmag_to_fluxerr(21.0, sigma=3.0), sigma=3.0) == pytest.approx(21.0)
