"""
Root-finding building blocks (advanced API).

Top-level package `numroot` re-exports the everyday entry points
(``find``, ``bisect``). This subpackage exposes the engine and the
stepping strategies it drives.
"""

from .bisection import BISECT_MAX_ITER, BISECT_TOLERANCE, bisect
from .finder import Finder, find, find_result
from .methods import StepMethod, get_step_method, homeier, newton_raphson, safe_div

__all__ = [
    # Bisection
    "bisect",
    "BISECT_TOLERANCE",
    "BISECT_MAX_ITER",
    # Iterative engine
    "Finder",
    "find",
    "find_result",
    # Stepping strategies
    "StepMethod",
    "get_step_method",
    "newton_raphson",
    "homeier",
    "safe_div",
]
