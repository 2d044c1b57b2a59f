# src/numroot/special.py
"""
Sign utility and the special functions typically inverted with the solvers.

The formulas are thin wrappers around :mod:`scipy.special`; they follow the
solver convention of returning NaN instead of raising outside the domain.
"""

from __future__ import annotations

import math

import numpy as np
from scipy import special as sc

__all__ = [
    "sign",
    "lgamma",
    "beta",
    "beta_incomplete_regular",
    "beta_incomplete",
    "binomial",
]


def sign(x: float) -> int:
    """Return -1, 0 or 1. Zero (and NaN) map to 0."""
    if x < 0.0:
        return -1
    if x > 0.0:
        return 1
    return 0


def lgamma(x: float) -> float:
    """Natural log of ``|Gamma(x)|``; the sign of Gamma is discarded."""
    return float(sc.gammaln(x))


def beta(a: float, b: float) -> float:
    """Complete beta function ``B(a, b) = Gamma(a) Gamma(b) / Gamma(a + b)``."""
    with np.errstate(over="ignore"):
        return float(np.exp(lgamma(a) + lgamma(b) - lgamma(a + b)))


def beta_incomplete_regular(x: float, a: float, b: float) -> float:
    """Regularized incomplete beta function ``I_x(a, b)``.

    Not to be confused with the (non-regularized) incomplete beta function,
    see :func:`beta_incomplete`.

    Returns
    -------
    float
        ``I_x(a, b)``, or NaN if ``x`` lies outside ``[0, 1]``.
    """
    if not (0.0 <= x <= 1.0):
        return math.nan
    return float(sc.betainc(a, b, x))


def beta_incomplete(x: float, a: float, b: float) -> float:
    """Non-regularized incomplete beta function ``B(x; a, b) = I_x(a, b) B(a, b)``."""
    return beta_incomplete_regular(x, a, b) * beta(a, b)


def binomial(x: float, k: float, n: float) -> float:
    """Bernoulli probability term ``x**k * (1 - x)**(n - k)``.

    Evaluated in log space as ``exp((n - k) ln(1 - x) + k ln(x))``. Used as the
    derivative kernel when inverting the binomial cumulative distribution,
    which is expressed through :func:`beta_incomplete_regular`.
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.exp((n - k) * np.log(1.0 - x) + k * np.log(x)))
