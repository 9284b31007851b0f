from __future__ import annotations

import math
from collections.abc import Callable
from typing import Final, NamedTuple

from beartype import beartype

from numeric_core.exceptions import LimitExceededError
from numeric_core.floats import Real
from numeric_core.logs.structlog import logger

DEFAULT_MAX_ITERATIONS: Final[int] = 40


class NaNBoundary(NamedTuple):
    """Bracket around the point where a function starts returning NaN."""

    x_valid: Real
    x_nan: Real
    f_valid: Real


@beartype
def find_nan(
    f: Callable[[Real], Real],
    x_valid: Real,
    x_nan: Real,
    x_tolerance: Real,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    *,
    f_valid: Real | None = None,
) -> NaNBoundary:
    """
    Use bisection to find the point where a function starts returning NaN.

    Args:
        f: Unary function of a real argument.
        x_valid: A point where f is known to return a valid (non-NaN) result.
        x_nan: A point where f is known to return NaN.
        x_tolerance: The search succeeds once abs(x_valid - x_nan) <= x_tolerance.
        max_iterations: Number of iterations after which the search gives up.
        f_valid: The value of f at x_valid, if already known. f is then not
            evaluated at x_valid.

    Returns:
        The narrowed bracket and the function value at its valid end.

    Raises:
        LimitExceededError: If the bracket is still wider than x_tolerance
            after max_iterations iterations.
    """
    assert x_tolerance > 0, "x_tolerance must be positive"
    assert math.isnan(f(x_nan)), "f(x_nan) is not NaN"
    if f_valid is None:
        f_valid = f(x_valid)
    assert not math.isnan(f_valid), "f_valid is NaN"

    for _ in range(max_iterations):
        if abs(x_valid - x_nan) <= x_tolerance:
            return NaNBoundary(x_valid, x_nan, f_valid)

        mid = (x_valid + x_nan) / 2
        fmid = f(mid)
        if math.isnan(fmid):
            x_nan = mid
        else:
            x_valid = mid
            f_valid = fmid

    width: float = float(abs(x_valid - x_nan))
    logger.warning(
        f"NaN boundary search did not converge in {max_iterations} iterations "
        f"(bracket [{x_valid!r}, {x_nan!r}], width {width:.3e})"
    )
    raise LimitExceededError(max_iterations=max_iterations, x_tolerance=float(x_tolerance), width=width)
