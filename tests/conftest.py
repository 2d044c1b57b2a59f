"""Pytest helpers for the numroot library."""

from __future__ import annotations

import math

import pytest

from numroot import StepMethod

EXPECTED_PRECISION = 1e-9


@pytest.fixture(params=list(StepMethod), ids=lambda m: m.value)
def step_method(request) -> StepMethod:
    """Every built-in stepping strategy."""
    return request.param


@pytest.fixture
def square_612():
    """f(x) = x^2 - 612 with root sqrt(612) ~ 24.7386."""
    return (lambda x: x * x - 612.0, lambda x: 2.0 * x)


@pytest.fixture
def cosine_cubic():
    """f(x) = cos(x) - x^3 with root ~ 0.8655."""
    return (lambda x: math.cos(x) - x * x * x, lambda x: -math.sin(x) - 3.0 * x * x)


@pytest.fixture
def make_recorder():
    """Wrap a scalar function so every argument it is evaluated at is kept."""

    def _make(fn):
        calls: list[float] = []

        def wrapped(x: float) -> float:
            calls.append(x)
            return fn(x)

        return wrapped, calls

    return _make
