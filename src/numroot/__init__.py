"""
numroot

Scalar root finding for numeric and statistics code.

This package exposes the main user-facing functions at the top level, so you
can write, for example:

    from numroot import bisect, find, with_heuristics
"""

from .config import (
    DEFAULT_CONFIG,
    FinderConfig,
    build_config,
    with_diagnostics,
    with_heuristics,
    with_limits,
    with_max_iterations,
    with_method,
    with_min_iterations,
    with_target_precision,
)
from .exceptions import NoConvergenceError, RootFindingError, RootFindingWarning
from .hist import CenteredHistogram1D, Histogram1D
from .numerics import (
    Finder,
    bisect,
    find,
    find_result,
    get_step_method,
    homeier,
    newton_raphson,
)
from .special import sign
from .types import FindResult, StepFn, StepMethod

__all__ = [
    # Solvers
    "bisect",
    "find",
    "find_result",
    "Finder",
    # Stepping strategies
    "StepMethod",
    "StepFn",
    "get_step_method",
    "newton_raphson",
    "homeier",
    # Configuration
    "FinderConfig",
    "DEFAULT_CONFIG",
    "build_config",
    "with_min_iterations",
    "with_max_iterations",
    "with_target_precision",
    "with_method",
    "with_limits",
    "with_heuristics",
    "with_diagnostics",
    # Results / errors
    "FindResult",
    "RootFindingError",
    "NoConvergenceError",
    "RootFindingWarning",
    # Collaborators
    "sign",
    "Histogram1D",
    "CenteredHistogram1D",
]

__version__ = "0.1.0"
