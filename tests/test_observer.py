"""Tests for Observer."""

from __future__ import annotations

import dataclasses
import math

import numpy as np
import pytest

from astroflare.observer import Observer
from astroflare.target import Target
from astroflare.time_utils import CivilTime

P48 = Observer(33.3633675, -116.8361345, 1870.0, name='P48')


def test_local_sidereal_time() -> None:
    """LST at Palomar for the reference instant."""

    lst = P48.local_sidereal_time(CivilTime(2024, 8, 24, 6, 35, 34))
    assert lst == pytest.approx(315.09169822871746, abs=1e-9)


def test_default_elevation_is_sea_level() -> None:
    """Elevation defaults to 0 m."""

    assert Observer(0.0, 0.0).elevation == 0.0


def test_targets_airmasses_applies_altitude_term() -> None:
    """Each cell lowers the altitude by 0.0347 tan(90 - h)^2 before the airmass formula."""

    targets = [Target(6.374817, 20.242942), Target(120.0, 45.0)]
    times = [CivilTime(2024, 8, 24, 6, 35, 34), CivilTime(2024, 8, 24, 9, 0, 0), CivilTime(2024, 8, 24, 11)]

    grid = P48.targets_airmasses(targets, times)

    assert grid.shape == (2, 3)
    assert grid[0, 0] == pytest.approx(1.467530349155935, rel=1e-9)
    for i, target in enumerate(targets):
        for j, time in enumerate(times):
            alt = target.altitude(P48, time)
            alt -= 0.0347 * math.tan(90.0 - alt) ** 2
            if alt < 0.0:
                assert math.isnan(grid[i, j])
                continue
            sinarg = alt + 244.0 / (165.0 + 47.0 * alt**1.1)
            assert grid[i, j] == pytest.approx(1.0 / math.sin(math.radians(sinarg)), rel=1e-9)


def test_targets_airmasses_below_horizon_is_nan() -> None:
    """A target that never rises gives NaN in every cell."""

    grid = P48.targets_airmasses([Target(10.0, -80.0)], [CivilTime(2024, 8, 24, h) for h in range(0, 24, 3)])

    assert np.all(np.isnan(grid))
    assert not np.any(grid > 0.0)


def _day_samples(nb_samples: int, noon_rollover: bool) -> list[CivilTime]:
    """Evenly spaced instants over 2024-08-24 00:00 to 23:00 UTC."""

    start = CivilTime(2024, 8, 24).to_jd()
    delta = (CivilTime(2024, 8, 24, 23).to_jd() - start) / nb_samples
    times = []
    for i in range(nb_samples):
        jd = start + i * delta
        time = CivilTime.from_jd(jd)
        if noon_rollover and (jd + 0.5) % 1.0 >= 0.5:
            time = dataclasses.replace(time, day=time.day + 1)
        times.append(time)
    return times


def test_targets_airmasses_day_grid_counts() -> None:
    """Two neighbouring targets over one day at Palomar, 10000 samples each."""

    observer = Observer(33.3633675, -116.8361345, 1870.0)
    targets = [Target(6.374817, 20.242942), Target(6.374817, 21.242942)]

    grid = observer.targets_airmasses(targets, _day_samples(10000, noon_rollover=False))

    assert grid.shape == (2, 10000)
    assert np.count_nonzero(grid > 0.0) == 11712
    assert np.count_nonzero(grid > 2.0) == 4170


def test_targets_airmasses_day_grid_counts_with_noon_rollover() -> None:
    """Samples whose date advances at UT noon reproduce the published 11665 / 4179 counts."""

    observer = Observer(33.3633675, -116.8361345, 1870.0)
    targets = [Target(6.374817, 20.242942), Target(6.374817, 21.242942)]

    grid = observer.targets_airmasses(targets, _day_samples(10000, noon_rollover=True))

    assert np.count_nonzero(grid > 0.0) == 11665
    assert np.count_nonzero(grid > 2.0) == 4179


def test_observer_is_frozen() -> None:
    """Observer instances are immutable."""

    with pytest.raises(dataclasses.FrozenInstanceError):
        P48.latitude = 0.0  # type: ignore[misc]


def test_observer_str() -> None:
    """String form with and without a name."""

    assert str(P48) == 'Name: P48, Lat: 33.3633675, Lon: -116.8361345, Elevation: 1870'
    assert str(Observer(10.5, 20.0)) == 'Lat: 10.5, Lon: 20, Elevation: 0 (no name)'
