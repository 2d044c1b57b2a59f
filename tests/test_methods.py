from __future__ import annotations

import math

import pytest

from numroot import StepMethod, get_step_method, homeier, newton_raphson
from numroot.numerics.methods import method_name, safe_div


@pytest.mark.parametrize(
    "num, den, expected",
    [
        (6.0, 3.0, 2.0),
        (1.0, 0.0, math.inf),
        (1.0, -0.0, -math.inf),
        (-1.0, 0.0, -math.inf),
        (-1.0, -0.0, math.inf),
    ],
)
def test_safe_div_follows_ieee(num: float, den: float, expected: float) -> None:
    assert safe_div(num, den) == expected


@pytest.mark.parametrize("num", [0.0, math.nan])
def test_safe_div_undefined_is_nan(num: float) -> None:
    assert math.isnan(safe_div(num, 0.0))


def test_newton_raphson_single_step(square_612):
    f, df = square_612
    # 10 - (100 - 612) / 20
    assert newton_raphson(10.0, f, df) == pytest.approx(35.6)


def test_homeier_single_step(square_612):
    f, df = square_612
    # midpoint m = 10 + 12.8; step = 10 + 512 / (2 * 22.8)
    assert homeier(10.0, f, df) == pytest.approx(10.0 + 512.0 / 45.6)


def test_newton_raphson_stationary_tangent_is_infinite():
    # f'(0) == -0.0, so 1 / f'(0) == -inf
    assert newton_raphson(0.0, lambda x: 1.0 - x * x, lambda x: -2.0 * x) == math.inf


@pytest.mark.parametrize("step", [newton_raphson, homeier])
def test_strategies_propagate_nan(step) -> None:
    assert math.isnan(step(1.0, lambda x: math.nan, lambda x: 1.0))
    assert math.isnan(step(1.0, lambda x: 1.0, lambda x: math.nan))


def test_strategies_are_stateless(cosine_cubic):
    f, df = cosine_cubic
    for step in (newton_raphson, homeier):
        assert step(0.5, f, df) == step(0.5, f, df)


@pytest.mark.parametrize(
    "method, expected",
    [
        (StepMethod.NEWTON_RAPHSON, newton_raphson),
        (StepMethod.HOMEIER, homeier),
        ("newton_raphson", newton_raphson),
        ("homeier", homeier),
    ],
)
def test_get_step_method_resolves_builtins(method, expected) -> None:
    assert get_step_method(method) is expected


def test_get_step_method_passes_callables_through():
    def damped(x, fx, dfx):
        return x - 0.5 * fx(x) / dfx(x)

    assert get_step_method(damped) is damped


def test_get_step_method_rejects_unknown_name():
    with pytest.raises(ValueError, match="Unknown step method"):
        get_step_method("secant")


def test_get_step_method_rejects_non_callable():
    with pytest.raises(TypeError):
        get_step_method(42)  # type: ignore[arg-type]


def test_method_name():
    assert method_name(StepMethod.HOMEIER) == "homeier"
    assert method_name("newton_raphson") == "newton_raphson"
    assert method_name(newton_raphson) == "newton_raphson"
