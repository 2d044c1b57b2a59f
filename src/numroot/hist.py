# src/numroot/hist.py
"""
One-dimensional histograms with under/overflow bins.

Bin 0 collects underflow, bins ``1..n_bins`` are the regular bins and bin
``n_bins + 1`` collects overflow. Two axes are provided:

* :class:`Histogram1D` - ``n_bins`` equal-width bins on ``[x_min, x_max]``
* :class:`CenteredHistogram1D` - one bin per explicit bin center; values
  must match a center within a tolerance (e.g. counts, integer outcomes)

NaN values are counted as entries (and in :attr:`sum`) but land in no bin.
"""

from __future__ import annotations

import math
import sys
from typing import TextIO

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = ["Histogram1D", "CenteredHistogram1D", "CENTER_TOLERANCE"]

CENTER_TOLERANCE = 1e-9

_BLOCKS = ("▏", "▎", "▍", "▌", "▋", "▊", "▉", "█")


def _bar(v: float) -> str:
    if v < 0.0 or math.isnan(v):
        v = 0.0
    idx = int(math.floor((v - math.floor(v)) * 10.0) / 10.0 * 8.0)
    return "█" * int(v) + _BLOCKS[idx]


class _Hist1DBase:
    """Shared bookkeeping; subclasses define the axis."""

    def __init__(self, n_bins: int) -> None:
        self._n_bins = int(n_bins)
        self._n_entries = 0
        self._sum_of_weights = 0.0

        self._content: NDArray[np.floating] = np.zeros(self._n_bins + 2, dtype=float)
        self._variance: NDArray[np.floating] = np.zeros(self._n_bins + 2, dtype=float)

    # --- axis (subclass hooks) ----------------------------------------------

    @property
    def x_min(self) -> float:
        raise NotImplementedError

    @property
    def x_max(self) -> float:
        raise NotImplementedError

    def bin_center(self, bin: int) -> float:
        raise NotImplementedError

    def find_bin(self, x: float) -> int:
        raise NotImplementedError

    def _fill_bin(self, value: float) -> int:
        raise NotImplementedError

    def _bin_label(self, bin: int) -> str:
        raise NotImplementedError

    # --- bookkeeping --------------------------------------------------------

    @property
    def n_bins(self) -> int:
        return self._n_bins

    @property
    def n_entries(self) -> int:
        return self._n_entries

    @property
    def sum(self) -> float:
        """Sum of weights, including under/overflow."""
        return self._sum_of_weights

    def bin_content(self, bin: int) -> float:
        return float(self._content[bin])

    def bin_variance(self, bin: int) -> float:
        return float(self._variance[bin])

    def set_bin_content(self, bin: int, sum_of_weights: float) -> None:
        """Overwrite the content of ``bin``, keeping :attr:`sum` consistent."""
        self._sum_of_weights += sum_of_weights - float(self._content[bin])
        self._content[bin] = sum_of_weights

    def set_bin_variance(self, bin: int, variance: float) -> None:
        self._variance[bin] = variance

    def maximum_bin(self) -> int:
        """Regular bin with the largest content (first one on ties)."""
        return 1 + int(np.argmax(self._content[1 : self._n_bins + 1]))

    def mode(self) -> float:
        return self.bin_center(self.maximum_bin())

    # --- filling ------------------------------------------------------------

    def fill(self, value: float, weight: float = 1.0) -> None:
        """Add ``value`` with ``weight``.

        The entry and its weight are always counted; a NaN value is not
        assigned to any bin.
        """
        bin = None if math.isnan(value) else self._fill_bin(value)

        self._n_entries += 1
        self._sum_of_weights += weight
        if bin is not None:
            self._content[bin] += weight

    def scale(self, factor: float) -> None:
        self._sum_of_weights *= factor
        self._content *= factor
        self._variance *= factor

    def interpolate(self, x: float) -> float:
        """Linear interpolation of bin contents between neighbouring bin centers.

        Values left of the first bin center (right of the last) return the
        content of the first (last) regular bin.
        """
        if x <= self.bin_center(1):
            return self.bin_content(1)
        if x >= self.bin_center(self._n_bins):
            return self.bin_content(self._n_bins)

        b = self.find_bin(x)
        if x <= self.bin_center(b):
            lo, hi = b - 1, b
        else:
            lo, hi = b, b + 1

        x0, x1 = self.bin_center(lo), self.bin_center(hi)
        y0, y1 = self.bin_content(lo), self.bin_content(hi)
        return y0 + (x - x0) * ((y1 - y0) / (x1 - x0))

    # --- rendering ----------------------------------------------------------

    def format(self) -> str:
        """Text rendering: one row per regular bin with share and a bar."""
        rows = []
        total = self._sum_of_weights
        for b in range(1, self._n_bins + 1):
            content = self.bin_content(b)
            pct = content * 100.0 / total if total else 0.0
            rows.append(
                (
                    self._bin_label(b),
                    f"{pct:.3g}%",
                    _bar(pct),
                    str(int(content)) if content > 0 else "",
                )
            )

        widths = [max((len(r[c]) for r in rows), default=0) for c in range(3)]
        lines = [f"Mode: {self.mode():.6g}"]
        for r in rows:
            cells = [r[c].ljust(widths[c]) for c in range(3)] + [r[3]]
            lines.append("  ".join(cells).rstrip())
        return "\n".join(lines) + "\n"

    def print(self, file: TextIO | None = None) -> None:
        (file or sys.stdout).write(self.format())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(n_bins={self._n_bins}, x_min={self.x_min!r}, "
            f"x_max={self.x_max!r}, n_entries={self._n_entries})"
        )


class Histogram1D(_Hist1DBase):
    """Fixed-width one-dimensional histogram.

    Parameters
    ----------
    n_bins : int
        Number of regular bins (>= 1).
    x_min, x_max : float
        Lower / upper edge of the axis, ``x_min < x_max``.
    """

    def __init__(self, n_bins: int, x_min: float, x_max: float) -> None:
        if n_bins < 1:
            raise ValueError("n_bins must be >= 1")
        if not (x_min < x_max):
            raise ValueError("Need x_min < x_max")
        super().__init__(n_bins)

        step = (float(x_max) - float(x_min)) / self._n_bins
        self._edges: NDArray[np.floating] = float(x_min) + np.arange(
            self._n_bins + 1, dtype=float
        ) * step

    @property
    def x_min(self) -> float:
        return float(self._edges[0])

    @property
    def x_max(self) -> float:
        return float(self._edges[self._n_bins])

    @property
    def edges(self) -> NDArray[np.floating]:
        return self._edges.copy()

    def bin_center(self, bin: int) -> float:
        return float(0.5 * (self._edges[bin - 1] + self._edges[bin]))

    def _fill_bin(self, value: float) -> int:
        if value < self._edges[0]:
            return 0
        if value > self._edges[self._n_bins]:
            return self._n_bins + 1
        # side="right" puts values equal to an edge into the bin starting there
        idx = int(np.searchsorted(self._edges, value, side="right"))
        return min(idx, self._n_bins)

    def find_bin(self, x: float) -> int:
        """Bin index matching ``x`` by arithmetic on the (uniform) edges."""
        if x < self.x_min:
            return 0
        if x > self.x_max:
            return self._n_bins + 1
        idx = 1 + int(self._n_bins * (x - self.x_min) / (self.x_max - self.x_min))
        # x == x_max belongs to the last regular bin, as in fill()
        return min(idx, self._n_bins)

    def _bin_label(self, bin: int) -> str:
        return f"{self._edges[bin - 1]:.4g}-{self._edges[bin]:.4g}"


class CenteredHistogram1D(_Hist1DBase):
    """Histogram with one bin per explicit bin center.

    Parameters
    ----------
    centers : array_like
        Strictly increasing bin centers (at least one).
    tol : float, default CENTER_TOLERANCE
        Absolute tolerance for matching a filled value to a center.

    Notes
    -----
    Values below the first / above the last center go to under / overflow.
    A value in between that matches no center raises ``ValueError``.
    """

    def __init__(self, centers: ArrayLike, tol: float = CENTER_TOLERANCE) -> None:
        c = np.asarray(centers, dtype=float)
        if c.ndim != 1 or c.size < 1:
            raise ValueError("centers must be a non-empty 1D sequence")
        if np.any(np.diff(c) <= 0.0):
            raise ValueError("centers must be strictly increasing")
        if tol < 0:
            raise ValueError("tol must be >= 0")
        super().__init__(c.size)

        self._centers: NDArray[np.floating] = c
        self._tol = float(tol)

    @property
    def x_min(self) -> float:
        return float(self._centers[0])

    @property
    def x_max(self) -> float:
        return float(self._centers[-1])

    @property
    def centers(self) -> NDArray[np.floating]:
        return self._centers.copy()

    def bin_center(self, bin: int) -> float:
        return float(self._centers[bin - 1])

    def _fill_bin(self, value: float) -> int:
        if value < self._centers[0]:
            return 0
        if value > self._centers[-1]:
            return self._n_bins + 1
        bin = self._nearest_bin(value)
        if abs(value - self.bin_center(bin)) > self._tol:
            raise ValueError(
                f"value {value!r} matches no bin center within tol={self._tol:g}"
            )
        return bin

    def _nearest_bin(self, x: float) -> int:
        idx = int(np.searchsorted(self._centers, x, side="left"))
        if idx == 0:
            return 1
        if idx == self._n_bins:
            return self._n_bins
        left, right = self._centers[idx - 1], self._centers[idx]
        return idx if x - left <= right - x else idx + 1

    def find_bin(self, x: float) -> int:
        """Bin whose center is nearest to ``x``."""
        if x < self.x_min:
            return 0
        if x > self.x_max:
            return self._n_bins + 1
        return self._nearest_bin(x)

    def _bin_label(self, bin: int) -> str:
        return f"{self.bin_center(bin):.4g}"
