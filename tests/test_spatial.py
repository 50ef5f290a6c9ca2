"""Tests for galactic coordinates, separations and ellipse membership."""

from __future__ import annotations

import pytest

from astroflare.spatial import great_circle_distance, in_ellipse, radec2lb


def test_radec2lb_reference() -> None:
    """(45, 45) in galactic coordinates."""

    galactic_l, galactic_b = radec2lb(45.0, 45.0)
    assert galactic_l == pytest.approx(145.56299769769032, abs=1e-9)
    assert galactic_b == pytest.approx(-12.148257544681918, abs=1e-9)


def test_radec2lb_north_galactic_pole() -> None:
    """The J2000 north galactic pole maps to b = 90."""

    _, galactic_b = radec2lb(192.85948, 27.12825)
    assert galactic_b == pytest.approx(90.0, abs=1e-3)


def test_radec2lb_negative_longitude() -> None:
    """Longitudes west of the galactic center come back negative."""

    galactic_l, galactic_b = radec2lb(250.0, -50.0)
    assert galactic_l == pytest.approx(-24.360396944086, abs=1e-9)
    assert galactic_b == pytest.approx(-2.229827210498, abs=1e-9)


def test_radec2lb_longitude_range() -> None:
    """Galactic longitude is the raw atan2 angle in (-180, 180]."""

    for ra in range(0, 360, 15):
        for dec in (-60.0, -10.0, 0.0, 30.0, 75.0):
            galactic_l, galactic_b = radec2lb(float(ra), dec)
            assert -180.0 < galactic_l <= 180.0
            assert -90.0 <= galactic_b <= 90.0


def test_great_circle_distance_reference() -> None:
    """Separation between (45, 45) and (46, 46)."""

    assert great_circle_distance(45.0, 45.0, 46.0, 46.0) == pytest.approx(1.221153650840359, abs=1e-9)


def test_great_circle_distance_symmetric_and_antipodal() -> None:
    """Distance is symmetric and reaches 180 at the antipode."""

    assert great_circle_distance(10.0, 20.0, 30.0, -5.0) == pytest.approx(
        great_circle_distance(30.0, -5.0, 10.0, 20.0), abs=1e-12
    )
    assert great_circle_distance(45.0, 45.0, 225.0, -45.0) == pytest.approx(180.0, abs=1e-9)
    assert great_circle_distance(12.0, 34.0, 12.0, 34.0) == 0.0


@pytest.mark.parametrize(
    ('args', 'expected'),
    [
        ((45.0, 45.0, 46.0, 46.0, 1.0, 1.0, 0.0), False),
        ((45.0, 45.0, 46.0, 46.0, 1.23, 1.0, 0.0), True),
        ((45.0, 45.0, 225.0, -45.0, 1.0, 1.0, 0.0), False),
        ((10.0, 20.0, 10.0, 20.5, 1.0, 0.5, 0.0), True),
        ((10.0, 20.0, 10.0, 20.9, 1.0, 0.5, 90.0), False),
        ((10.0, 20.0, 10.0, 20.9, 1.0, 0.5, 0.0), True),
    ],
)
def test_in_ellipse(args: tuple[float, ...], expected: bool) -> None:
    """Circle and ellipse membership, including the opposite hemisphere."""

    assert in_ellipse(*args) is expected
