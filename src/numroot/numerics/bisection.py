# src/numroot/numerics/bisection.py
from __future__ import annotations

import math

from numroot.special import sign
from numroot.types import ScalarFn

__all__ = ["BISECT_TOLERANCE", "BISECT_MAX_ITER", "bisect"]

BISECT_TOLERANCE = 1e-11
BISECT_MAX_ITER = 100


def bisect(fx: ScalarFn, a: float, b: float) -> float:
    """Bisection of ``fx`` on the bracket ``[a, b]``.

    The bracket is presumed, not verified, to contain a sign change: an
    invalid bracket gives a deterministic but meaningless answer rather than
    an error.

    Parameters
    ----------
    fx : callable
        Scalar function ``f(x)``.
    a, b : float
        Lower / upper end of the bracket.

    Returns
    -------
    float
        The midpoint at which ``fx`` is exactly zero or the half-width dropped
        below :data:`BISECT_TOLERANCE`; NaN if that did not happen within
        :data:`BISECT_MAX_ITER` rounds.
    """
    for _ in range(BISECT_MAX_ITER):
        c = (a + b) / 2.0

        fc = fx(c)
        if fc == 0 or (b - a) / 2.0 < BISECT_TOLERANCE:
            return c

        # fx(a) is re-evaluated every round
        if sign(fc) == sign(fx(a)):
            a = c
        else:
            b = c

    return math.nan
