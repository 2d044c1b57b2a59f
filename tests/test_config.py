from __future__ import annotations

import sys
from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from numroot import (
    DEFAULT_CONFIG,
    FinderConfig,
    StepMethod,
    build_config,
    find,
    with_diagnostics,
    with_heuristics,
    with_limits,
    with_max_iterations,
    with_method,
    with_min_iterations,
    with_target_precision,
)


def test_defaults():
    cfg = build_config()

    assert cfg == DEFAULT_CONFIG
    assert cfg.min_iterations == 5
    assert cfg.max_iterations == 25
    assert cfg.target_precision == 1e-9
    assert cfg.method == StepMethod.NEWTON_RAPHSON
    assert cfg.bounds == (-sys.float_info.max, sys.float_info.max)
    assert cfg.heuristics is False
    assert cfg.diagnostics is False


def test_each_option_sets_its_field():
    cfg = build_config(
        with_min_iterations(2),
        with_max_iterations(40),
        with_target_precision(1e-12),
        with_method("homeier"),
        with_limits(-3.0, 7.0),
        with_heuristics(),
        with_diagnostics(),
    )

    assert cfg == FinderConfig(
        min_iterations=2,
        max_iterations=40,
        target_precision=1e-12,
        method="homeier",
        bounds=(-3.0, 7.0),
        heuristics=True,
        diagnostics=True,
    )


@pytest.mark.parametrize(
    "options, field, expected",
    [
        ((with_max_iterations(10), with_max_iterations(40)), "max_iterations", 40),
        ((with_max_iterations(40), with_max_iterations(10)), "max_iterations", 10),
        ((with_heuristics(), with_heuristics(False)), "heuristics", False),
        ((with_limits(0, 1), with_limits(-2, 2)), "bounds", (-2.0, 2.0)),
        ((with_method("homeier"), with_method(StepMethod.NEWTON_RAPHSON)), "method", StepMethod.NEWTON_RAPHSON),
    ],
)
def test_last_write_wins(options, field: str, expected) -> None:
    assert getattr(build_config(*options), field) == expected


def test_base_config_is_not_mutated():
    base = FinderConfig(max_iterations=7)
    cfg = build_config(with_max_iterations(9), base=base)

    assert cfg.max_iterations == 9
    assert base.max_iterations == 7
    with pytest.raises(FrozenInstanceError):
        base.max_iterations = 3  # type: ignore[misc]


def test_no_cross_field_validation():
    cfg = build_config(with_min_iterations(30), with_max_iterations(3), with_limits(5.0, -5.0))

    assert cfg.min_iterations > cfg.max_iterations
    assert cfg.bounds == (5.0, -5.0)


@pytest.mark.parametrize(
    "option",
    [with_target_precision(0.0), with_target_precision(-1e-9), with_min_iterations(-1), with_max_iterations(-1)],
    ids=["zero_precision", "negative_precision", "negative_min", "negative_max"],
)
def test_single_field_validation(option) -> None:
    with pytest.raises(ValueError):
        build_config(option)


def test_method_given_by_name(square_612):
    f, df = square_612
    by_name = find(f, df, 10.0, with_method("homeier"))
    by_enum = find(f, df, 10.0, with_method(StepMethod.HOMEIER))

    assert by_name == by_enum


def test_unknown_method_name_fails_at_solve(square_612):
    f, df = square_612
    with pytest.raises(ValueError, match="Unknown step method"):
        find(f, df, 10.0, with_method("regula_falsi"))


@pytest.mark.parametrize(
    "cfg",
    [FinderConfig(min_iterations=2.5), FinderConfig(max_iterations=10.0), FinderConfig(max_iterations=True)],  # type: ignore[arg-type]
    ids=["float_min", "float_max", "bool_max"],
)
def test_iteration_counts_must_be_integers(cfg: FinderConfig) -> None:
    with pytest.raises(ValueError, match="must be an integer"):
        cfg.validate()


def test_numpy_integer_iteration_counts_are_accepted():
    FinderConfig(min_iterations=np.int64(3), max_iterations=np.int32(7)).validate()
