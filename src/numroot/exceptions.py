class RootFindingError(Exception):
    """Base class for root-finding failures.

    The solvers themselves never raise for a numerical failure; they return a
    sentinel (NaN, or a best-effort iterate). This hierarchy is used by the
    opt-in strict accessors such as :meth:`numroot.types.FindResult.unwrap`.
    """


class NoConvergenceError(RootFindingError):
    """Raised when a solve did not reach its target precision or produced a non-finite root."""


class RootFindingWarning(RuntimeWarning):
    """Emitted by the Finder when diagnostics are enabled and a solve fails.

    Notes
    -----
    Filter it like any other warning, e.g.
    ``warnings.simplefilter("error", RootFindingWarning)`` turns silent
    failures into exceptions during testing.
    """
