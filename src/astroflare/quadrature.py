"""Composite trapezoidal quadrature over a scalar function."""

from __future__ import annotations

from typing import Callable

from astroflare.errors import DomainError


def integrate(f: Callable[[float], float], a: float, b: float, n: int) -> float:
    """Integrate f from a to b with the composite trapezoidal rule.

    Uses n equal subintervals and no refinement, so cost is exactly n + 1
    evaluations of f. Reversed bounds (a > b) give the negated integral and
    a == b gives 0.

    Parameters:
        f: Real function of one real variable.
        a: Lower bound.
        b: Upper bound.
        n: Number of subintervals (positive).

    Returns:
        Approximate integral.

    Raises:
        DomainError: If n is not positive.
    """
    if n <= 0:
        raise DomainError(f'Integration step count must be positive, got {n}')
    h = (b - a) / n
    s = sum(f(a + i * h) for i in range(1, n))
    return h / 2.0 * (f(a) + f(b) + 2.0 * s)
