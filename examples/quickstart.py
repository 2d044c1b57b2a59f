from __future__ import annotations


def main() -> None:
    # [START README_QUICKSTART]
    import math

    from numroot import (
        StepMethod,
        bisect,
        find,
        find_result,
        with_heuristics,
        with_limits,
        with_method,
    )

    def f(x: float) -> float:
        return math.cos(x) - x * x * x

    def df(x: float) -> float:
        return -math.sin(x) - 3.0 * x * x

    print("Bisect:", bisect(f, 0.1, 1.0))
    print("Newton-Raphson:", find(f, df, 0.5, with_heuristics()))
    print("Homeier:", find(f, df, 0.5, with_heuristics(), with_method(StepMethod.HOMEIER)))

    # Newton from 0 cycles 0 -> 1 -> 0 without the heuristics
    res = find_result(
        lambda x: x * x * x - 2.0 * x + 2.0,
        lambda x: 3.0 * x * x - 2.0,
        0.0,
        with_heuristics(),
        with_limits(-10.0, 10.0),
    )
    print("Cycle escape:", res)
    # [END README_QUICKSTART]


if __name__ == "__main__":
    main()
