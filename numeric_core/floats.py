from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Final, Union

import numpy as np
from beartype import beartype

DEFAULT_CHOP_THRESHOLD: Final[float] = 1e-10

Real = Union[float, np.floating]
FloatArray = Union[Sequence[Real], np.ndarray]
FloatBuffer = Union[MutableSequence[Real], np.ndarray]


@beartype
def chop(x: Real, threshold: float = DEFAULT_CHOP_THRESHOLD) -> Real:
    """Replace a value that is closer to zero than threshold by exactly zero."""
    if abs(x) < threshold:
        return 0.0
    return x


@beartype
def chop_array(
    x: FloatArray,
    threshold: float = DEFAULT_CHOP_THRESHOLD,
    out: FloatBuffer | None = None,
) -> FloatBuffer:
    """
    Replace every element of x that is closer to zero than threshold by exactly zero.

    Pass the same object as x and out to chop in place.

    Args:
        x: Values to chop.
        threshold: Magnitude below which a value becomes zero.
        out: Optional output buffer. A list shorter than x is extended,
            an ndarray shorter than x is replaced by a new array.

    Returns:
        The buffer holding the chopped values in its first len(x) elements.
    """
    n: int = len(x)

    if isinstance(out, np.ndarray) or (out is None and isinstance(x, np.ndarray)):
        values = np.asarray(x)
        if out is None or len(out) < n:
            out = np.empty(n, dtype=values.dtype)
        # np.where materialises the result before assignment, so out may alias x
        out[:n] = np.where(np.abs(values) < threshold, 0.0, values)
        return out

    if out is None:
        out = [0.0] * n
    elif len(out) < n:
        out.extend([0.0] * (n - len(out)))

    for i in range(n):
        value = x[i]
        out[i] = 0.0 if abs(value) < threshold else value
    return out
