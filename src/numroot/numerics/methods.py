# src/numroot/numerics/methods.py
from __future__ import annotations

import math

from numroot.types import ScalarFn, StepFn, StepMethod

__all__ = [
    "StepMethod",
    "safe_div",
    "newton_raphson",
    "homeier",
    "get_step_method",
    "method_name",
]


def safe_div(num: float, den: float) -> float:
    """IEEE-754 division for plain Python floats.

    ``x / ±0`` yields ``±inf`` (sign taken from both operands) and ``0 / 0`` or
    ``nan / 0`` yields NaN, instead of raising ``ZeroDivisionError``.
    """
    if den == 0.0:
        if num == 0.0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


def newton_raphson(x: float, fx: ScalarFn, dfx: ScalarFn) -> float:
    """One Newton-Raphson step, ``x - f(x) / f'(x)``."""
    return x - safe_div(fx(x), dfx(x))


def homeier(x: float, fx: ScalarFn, dfx: ScalarFn) -> float:
    """One step of Homeier's modified Newton method (cubic convergence).

    The derivative is evaluated at the Newton half-step midpoint
    ``m = x - f(x) / (2 f'(x))`` instead of at ``x``.

    References
    ----------
    H. H. H. Homeier, "A modified Newton method for rootfinding with cubic
    convergence", J. Comput. Appl. Math. 157 (2003) 227-230.
    """
    f0 = fx(x)
    mid = x - safe_div(0.5 * f0, dfx(x))
    return x - safe_div(f0, dfx(mid))


_STEP_METHODS: dict[StepMethod, StepFn] = {
    StepMethod.NEWTON_RAPHSON: newton_raphson,
    StepMethod.HOMEIER: homeier,
}


def get_step_method(method: StepMethod | str | StepFn) -> StepFn:
    """Resolve a stepping strategy.

    Parameters
    ----------
    method : StepMethod, str or callable
        A built-in method (enum member or its string value), or any callable
        with the ``step(x, fx, dfx) -> float`` signature.

    Returns
    -------
    StepFn
        The callable the Finder will apply each round.

    Raises
    ------
    ValueError
        If a string does not name a built-in method.
    TypeError
        If ``method`` is neither a name nor a callable.
    """
    if isinstance(method, str):
        try:
            return _STEP_METHODS[StepMethod(method)]
        except ValueError:
            known = ", ".join(m.value for m in StepMethod)
            raise ValueError(
                f"Unknown step method {method!r}; expected one of: {known}"
            ) from None
    if callable(method):
        return method
    raise TypeError(f"step method must be a StepMethod, str or callable, got {method!r}")


def method_name(method: StepMethod | str | StepFn) -> str:
    if isinstance(method, StepMethod):
        return method.value
    if isinstance(method, str):
        return method
    return getattr(method, "__name__", type(method).__name__)
