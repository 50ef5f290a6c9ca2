"""Configuration: leap-second kernel, quadrature steps and logging from environment."""

from __future__ import annotations

import logging
import os
import sys

from astroflare.constants import DEFAULT_INTEGRATION_STEPS

logger = logging.getLogger(__name__)

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def get_leapsecs_path() -> str | None:
    """Return path to a NAIF LSK leap seconds file for rms-julian.

    Returns:
        Value of JULIAN_LEAPSECS, or None to use the table bundled with
        rms-julian.
    """
    path = os.environ.get('JULIAN_LEAPSECS', '').strip()
    return path or None


def get_integration_steps() -> int:
    """Return default quadrature step count (ASTROFLARE_INTEGRATION_STEPS or 1000).

    Invalid or non-positive values are logged and ignored.

    Returns:
        Positive step count.
    """
    raw = os.environ.get('ASTROFLARE_INTEGRATION_STEPS', '').strip()
    if not raw:
        return DEFAULT_INTEGRATION_STEPS
    try:
        steps = int(raw)
    except ValueError:
        logger.warning(
            'Ignoring ASTROFLARE_INTEGRATION_STEPS=%r (not an integer); using %d',
            raw,
            DEFAULT_INTEGRATION_STEPS,
        )
        return DEFAULT_INTEGRATION_STEPS
    if steps <= 0:
        logger.warning(
            'Ignoring ASTROFLARE_INTEGRATION_STEPS=%d (must be positive); using %d',
            steps,
            DEFAULT_INTEGRATION_STEPS,
        )
        return DEFAULT_INTEGRATION_STEPS
    return steps


def configure_logging(verbose: bool = False) -> None:
    """Configure logging (stderr, level from verbose or ASTROFLARE_LOG).

    Parameters:
        verbose: Log at DEBUG instead of WARNING.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    env_level = os.environ.get('ASTROFLARE_LOG', '').upper()
    if env_level in _LOG_LEVELS:
        level = getattr(logging, env_level)
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )
    # rms-julian chatters at DEBUG while loading kernels.
    logging.getLogger('julian').setLevel(max(level, logging.INFO))
