"""Exceptions raised by astroflare computations."""


class DomainError(ValueError):
    """Input lies outside the domain where a computation is defined.

    Raised when the sun never reaches a requested altitude, for invalid
    sexagesimal ranges, for non-positive quadrature step counts and for
    negative redshifts.
    """
