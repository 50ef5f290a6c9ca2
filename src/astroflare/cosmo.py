"""Cosmological distances from numerical integration of the Friedmann equation."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from astroflare.angle_utils import format_number
from astroflare.config import get_integration_steps
from astroflare.constants import (
    ANGULAR_DIAMETER_MIN_REDSHIFT,
    DISTANCE_MODULUS_REFERENCE_PC,
    PARSECS_PER_MEGAPARSEC,
    PLANCK18_H0,
    PLANCK18_OMEGA_LAMBDA,
    PLANCK18_OMEGA_M,
    SPEED_OF_LIGHT_KM_S,
)
from astroflare.errors import DomainError
from astroflare.quadrature import integrate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cosmology:
    """Friedmann-Lemaitre cosmology with matter and dark energy.

    Parameters:
        h0: Hubble constant in km/s/Mpc.
        omega_m: Matter density parameter.
        omega_lambda: Dark-energy density parameter.
        name: Optional label; ignored by equality.
        steps: Quadrature subintervals; None uses get_integration_steps().

    omega_k = 1 - omega_m - omega_lambda is derived. Transverse comoving
    distance always uses the flat-universe form, even when omega_k != 0.
    """

    h0: float
    omega_m: float
    omega_lambda: float
    name: str | None = field(default=None, compare=False)
    steps: int | None = field(default=None, compare=False)
    omega_k: float = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'omega_k', 1.0 - self.omega_m - self.omega_lambda)

    def _inverse_efunc(self, z: float) -> float:
        """1 / E(z) for the Friedmann equation."""
        return 1.0 / math.sqrt(
            self.omega_m * (1.0 + z) ** 3 + self.omega_k * (1.0 + z) ** 2 + self.omega_lambda
        )

    def luminosity_distance(self, redshift: float) -> float:
        """Luminosity distance in Mpc.

        Parameters:
            redshift: Redshift z >= 0.

        Returns:
            d_L in Mpc (0 at z = 0).

        Raises:
            DomainError: If redshift is negative.
        """
        if redshift < 0.0:
            raise DomainError(f'Redshift must be non-negative, got {redshift}')
        steps = self.steps if self.steps is not None else get_integration_steps()
        integral = integrate(self._inverse_efunc, 0.0, redshift, steps)
        logger.debug('Comoving integral at z=%s over %d steps: %s', redshift, steps, integral)
        d_c = (SPEED_OF_LIGHT_KM_S / self.h0) * integral
        d_m = d_c / (1.0 + redshift)
        return (1.0 + redshift) ** 2 * d_m

    def distance_modulus(self, redshift: float) -> float:
        """Distance modulus 5 log10(d_L / 10 pc).

        Raises:
            DomainError: If redshift is negative or zero (zero distance).
        """
        lumdist = self.luminosity_distance(redshift)
        if lumdist <= 0.0:
            raise DomainError(f'Distance modulus undefined at redshift {redshift}')
        return 5.0 * math.log10((lumdist * PARSECS_PER_MEGAPARSEC) / DISTANCE_MODULUS_REFERENCE_PC)

    dm = distance_modulus

    def angular_diameter_distance(self, redshift: float) -> float:
        """Angular-diameter distance in Mpc.

        At z <= 0.01 the luminosity distance is returned unchanged.
        """
        lumdist = self.luminosity_distance(redshift)
        if redshift > ANGULAR_DIAMETER_MIN_REDSHIFT:
            return lumdist / (1.0 + redshift) ** 2
        return lumdist

    def __str__(self) -> str:
        label = self.name if self.name is not None else 'Cosmology'
        return (
            f'{label}: H0={format_number(self.h0)}, '
            f'Om={format_number(self.omega_m)}, Ode={format_number(self.omega_lambda)}'
        )


def planck18() -> Cosmology:
    """Planck 2018 cosmology (H0=67.66, Om=0.3103, Ode=0.6897)."""
    return Cosmology(PLANCK18_H0, PLANCK18_OMEGA_M, PLANCK18_OMEGA_LAMBDA, name='Planck18')


PLANCK18 = planck18()
