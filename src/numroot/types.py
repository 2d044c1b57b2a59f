from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from numroot.exceptions import NoConvergenceError

ScalarFn = Callable[[float], float]


class StepFn(Protocol):
    """Capability interface of a stepping strategy.

    A stepping strategy maps the current iterate ``x`` to the next one using
    the function ``fx`` and its derivative ``dfx``. Implementations must be
    pure: no state may survive between calls.
    """

    def __call__(self, x: float, fx: ScalarFn, dfx: ScalarFn) -> float: ...


class StepMethod(str, Enum):
    """Built-in stepping strategies.

    Attributes
    ----------
    NEWTON_RAPHSON : str
        Classic Newton-Raphson step ("newton_raphson").
    HOMEIER : str
        Homeier's modified Newton step with cubic convergence ("homeier").
    """

    NEWTON_RAPHSON = "newton_raphson"
    HOMEIER = "homeier"


@dataclass(frozen=True, slots=True)
class FindResult:
    """Outcome of a single Finder solve.

    Parameters
    ----------
    root : float
        Final iterate. NaN when the solve aborted on an undefined step.
    converged : bool
        ``True`` when ``|fx(root)| < target_precision``.
    iterations : int
        Number of accepted steps.
    retries : int
        Number of rounds restarted by bound clamping or heuristics.
    method : str
        Name of the stepping strategy used.
    f_at_root : float
        ``fx(root)``, or NaN if the solve aborted.
    """

    root: float
    converged: bool
    iterations: int
    retries: int
    method: str
    f_at_root: float

    def unwrap(self) -> float:
        """Return ``root`` or raise :class:`NoConvergenceError`."""
        if not math.isfinite(self.root):
            raise NoConvergenceError(
                f"{self.method} produced a non-finite root ({self.root!r}) "
                f"after {self.iterations} iterations"
            )
        if not self.converged:
            raise NoConvergenceError(
                f"{self.method} did not reach target precision after "
                f"{self.iterations} iterations: root={self.root:.12g}, "
                f"f(root)={self.f_at_root:.3g}"
            )
        return self.root
