from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from numbers import Integral

from numroot.types import StepFn, StepMethod

__all__ = [
    "FinderConfig",
    "FinderOption",
    "DEFAULT_CONFIG",
    "build_config",
    "apply_options",
    "with_min_iterations",
    "with_max_iterations",
    "with_target_precision",
    "with_method",
    "with_limits",
    "with_heuristics",
    "with_diagnostics",
]

_FLOAT_MAX = sys.float_info.max


@dataclass(frozen=True, slots=True)
class FinderConfig:
    """Settings of the iterative root Finder.

    Parameters
    ----------
    min_iterations : int, default 5
        Accepted steps performed before convergence is tested at all.
    max_iterations : int, default 25
        Accepted steps after which the current iterate is returned regardless
        of precision.
    target_precision : float, default 1e-9
        Convergence threshold on ``|f(x)|`` (not on the step size).
    method : StepMethod, str or callable, default StepMethod.NEWTON_RAPHSON
        Stepping strategy, see :func:`numroot.numerics.methods.get_step_method`.
    bounds : tuple[float, float], default (-float max, +float max)
        ``(x_min, x_max)``. Candidates outside trigger a clamp-and-retry.
    heuristics : bool, default False
        Enable recovery from infinite steps, stationary points and cycles.
    diagnostics : bool, default False
        Emit a :class:`numroot.exceptions.RootFindingWarning` on failure.

    Notes
    -----
    Only single fields are validated. Cross-field combinations such as
    ``min_iterations > max_iterations`` or reversed bounds are accepted as-is.
    """

    min_iterations: int = 5
    max_iterations: int = 25
    target_precision: float = 1e-9
    method: StepMethod | str | StepFn = StepMethod.NEWTON_RAPHSON
    bounds: tuple[float, float] = (-_FLOAT_MAX, _FLOAT_MAX)
    heuristics: bool = False
    diagnostics: bool = False

    def validate(self) -> None:
        for name in ("min_iterations", "max_iterations"):
            value = getattr(self, name)
            if not isinstance(value, Integral) or isinstance(value, bool):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.min_iterations < 0:
            raise ValueError("min_iterations must be >= 0")
        if self.max_iterations < 0:
            raise ValueError("max_iterations must be >= 0")
        if not self.target_precision > 0:
            raise ValueError("target_precision must be > 0")
        if len(self.bounds) != 2:
            raise ValueError("bounds must be a (x_min, x_max) pair")


FinderOption = Callable[[FinderConfig], FinderConfig]

DEFAULT_CONFIG: FinderConfig = FinderConfig()


def build_config(
    *options: FinderOption, base: FinderConfig | None = None
) -> FinderConfig:
    """Apply ``options`` to ``base`` (defaults if omitted), strictly in order.

    Later options overwrite earlier ones touching the same field.
    """
    return apply_options(DEFAULT_CONFIG if base is None else base, options)


def apply_options(cfg: FinderConfig, options: Iterable[FinderOption]) -> FinderConfig:
    for option in options:
        cfg = option(cfg)
    cfg.validate()
    return cfg


def with_min_iterations(n_iterations: int) -> FinderOption:
    return lambda cfg: replace(cfg, min_iterations=int(n_iterations))


def with_max_iterations(n_iterations: int) -> FinderOption:
    return lambda cfg: replace(cfg, max_iterations=int(n_iterations))


def with_target_precision(target_precision: float) -> FinderOption:
    """Set the threshold on ``|f(x)|`` below which the Finder stops."""
    return lambda cfg: replace(cfg, target_precision=float(target_precision))


def with_method(method: StepMethod | str | StepFn) -> FinderOption:
    return lambda cfg: replace(cfg, method=method)


def with_limits(x_min: float, x_max: float) -> FinderOption:
    """Restrict the iterate to ``[x_min, x_max]``."""
    return lambda cfg: replace(cfg, bounds=(float(x_min), float(x_max)))


def with_heuristics(enabled: bool = True) -> FinderOption:
    """Enable escape logic for stationary points, cycles and divergence."""
    return lambda cfg: replace(cfg, heuristics=bool(enabled))


def with_diagnostics(enabled: bool = True) -> FinderOption:
    return lambda cfg: replace(cfg, diagnostics=bool(enabled))
