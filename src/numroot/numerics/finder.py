# src/numroot/numerics/finder.py
from __future__ import annotations

import math
import warnings
from dataclasses import dataclass

from numroot.config import DEFAULT_CONFIG, FinderConfig, FinderOption, apply_options
from numroot.exceptions import RootFindingWarning
from numroot.types import FindResult, ScalarFn, StepFn

from .methods import get_step_method, method_name

__all__ = ["Finder", "find", "find_result"]

# Steps smaller than this are treated as negligible progress and are never
# looked up in the seen-values set.
_MIN_PROGRESS = 1e-15


def _nudge_up(x: float) -> float:
    return x + (0.1 * x + 0.1)


def _nudge_down(x: float) -> float:
    return x - (0.1 * x - 0.1)


@dataclass(frozen=True, slots=True)
class Finder:
    """Iterative non-linear root finder.

    One instance drives one stepping strategy over a scalar iterate. The
    instance is immutable; all per-solve state (iterate, counters, the set of
    candidates already produced) lives inside :meth:`solve`, so a Finder can
    be reused and shared between threads as long as ``fx`` / ``dfx`` are pure.

    Round structure, in precedence order:

    1. step: ``candidate = step(x, fx, dfx)``
    2. bound clamp: a finite candidate above ``x_max`` (below ``x_min``)
       moves ``x`` halfway towards that bound and the round restarts
    3. NaN abort: the solve ends immediately with NaN
    4. heuristics (optional): infinite candidates nudge ``x`` away from the
       stationary tangent; a candidate seen before bisects the cycle, or
       nudges ``x`` if it is a fixed point; both restart the round
    5. accept: ``x = candidate`` and the iteration counter advances
    6. once ``min_iterations`` steps were accepted, stop when
       ``|fx(x)| < target_precision`` or ``max_iterations`` is reached

    Only accepted steps count towards the iteration limits. Restarted rounds
    are not capped separately.
    """

    fx: ScalarFn
    dfx: ScalarFn
    step: StepFn
    method: str
    x_min: float
    x_max: float
    min_iterations: int
    max_iterations: int
    target_precision: float
    use_heuristics: bool = False
    diagnostics: bool = False

    @classmethod
    def from_config(
        cls, fx: ScalarFn, dfx: ScalarFn, cfg: FinderConfig = DEFAULT_CONFIG
    ) -> Finder:
        x_min, x_max = cfg.bounds
        return cls(
            fx=fx,
            dfx=dfx,
            step=get_step_method(cfg.method),
            method=method_name(cfg.method),
            x_min=float(x_min),
            x_max=float(x_max),
            min_iterations=cfg.min_iterations,
            max_iterations=cfg.max_iterations,
            target_precision=cfg.target_precision,
            use_heuristics=cfg.heuristics,
            diagnostics=cfg.diagnostics,
        )

    def solve(self, x0: float) -> FindResult:
        result, reason = self._iterate(x0)
        self._report(result, reason, stacklevel=3)
        return result

    def _iterate(self, x0: float) -> tuple[FindResult, str]:
        x = float(x0)
        n_iter = 0
        retries = 0
        seen: set[float] = set()

        while True:
            candidate = float(self.step(x, self.fx, self.dfx))

            if not math.isinf(candidate):
                if candidate > self.x_max:
                    x = 0.5 * (x + self.x_max)
                    retries += 1
                    continue
                if candidate < self.x_min:
                    x = 0.5 * (x + self.x_min)
                    retries += 1
                    continue

            if math.isnan(candidate):
                return (
                    FindResult(
                        root=math.nan,
                        converged=False,
                        iterations=n_iter,
                        retries=retries,
                        method=self.method,
                        f_at_root=math.nan,
                    ),
                    f"step from x={x!r} is undefined (NaN)",
                )

            if self.use_heuristics:
                if math.isinf(candidate):
                    x = _nudge_up(x) if candidate > 0 else _nudge_down(x)
                    retries += 1
                    continue

                if abs(candidate - x) > _MIN_PROGRESS:
                    if candidate in seen:
                        x = (candidate + x) / 2.0 if candidate != x else _nudge_up(x)
                        retries += 1
                        continue
                    seen.add(candidate)

            x = candidate
            n_iter += 1

            if n_iter >= self.min_iterations:
                f_val = self.fx(x)
                converged = abs(f_val) < self.target_precision
                if converged or n_iter >= self.max_iterations:
                    break

        return (
            FindResult(
                root=x,
                converged=bool(converged),
                iterations=n_iter,
                retries=retries,
                method=self.method,
                f_at_root=float(f_val),
            ),
            f"max_iterations={self.max_iterations} reached",
        )

    def _report(self, result: FindResult, reason: str, *, stacklevel: int) -> None:
        """Warn about a failed solve; ``stacklevel`` points at the public caller."""
        if self.diagnostics and not result.converged:
            warnings.warn(
                f"{self.method} root finding failed: {reason}; "
                f"root={result.root!r}, f(root)={result.f_at_root!r}, "
                f"iterations={result.iterations}, retries={result.retries}",
                category=RootFindingWarning,
                stacklevel=stacklevel,
            )


def _solve(
    fx: ScalarFn,
    dfx: ScalarFn,
    x0: float,
    options: tuple[FinderOption, ...],
    config: FinderConfig | None,
) -> FindResult:
    cfg = apply_options(DEFAULT_CONFIG if config is None else config, options)
    finder = Finder.from_config(fx, dfx, cfg)
    result, reason = finder._iterate(x0)
    # _report -> _solve -> find / find_result -> caller
    finder._report(result, reason, stacklevel=4)
    return result


def find_result(
    fx: ScalarFn,
    dfx: ScalarFn,
    x0: float,
    *options: FinderOption,
    config: FinderConfig | None = None,
) -> FindResult:
    """Run the Finder and return the root together with solve diagnostics.

    Parameters
    ----------
    fx, dfx : callable
        The function and its derivative.
    x0 : float
        Initial iterate.
    *options : FinderOption
        Mutators such as :func:`numroot.config.with_heuristics`, applied in
        order on top of ``config``.
    config : FinderConfig, optional
        Base configuration; defaults to :data:`numroot.config.DEFAULT_CONFIG`.

    Returns
    -------
    FindResult
    """
    return _solve(fx, dfx, x0, options, config)


def find(
    fx: ScalarFn,
    dfx: ScalarFn,
    x0: float,
    *options: FinderOption,
    config: FinderConfig | None = None,
) -> float:
    """Find a root of ``fx`` starting from ``x0``.

    Returns
    -------
    float
        The estimated root; NaN if a step was undefined; otherwise the
        best-effort iterate after ``max_iterations`` accepted steps. Callers
        must check the value before use, no exception is raised for a
        numerical failure.

    Examples
    --------
    >>> from numroot import find, with_heuristics
    >>> round(find(lambda x: x * x - 612, lambda x: 2 * x, 10.0, with_heuristics()), 4)
    24.7386
    """
    return _solve(fx, dfx, x0, options, config).root
