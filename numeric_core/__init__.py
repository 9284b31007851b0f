from numeric_core import config, exceptions, floats, nan_search
from numeric_core.exceptions import LimitExceededError, NumericError, NumericErrorKind
from numeric_core.floats import DEFAULT_CHOP_THRESHOLD, chop, chop_array
from numeric_core.nan_search import DEFAULT_MAX_ITERATIONS, NaNBoundary, find_nan

__all__ = [
    "DEFAULT_CHOP_THRESHOLD",
    "DEFAULT_MAX_ITERATIONS",
    "LimitExceededError",
    "NaNBoundary",
    "NumericError",
    "NumericErrorKind",
    "chop",
    "chop_array",
    "config",
    "exceptions",
    "find_nan",
    "floats",
    "nan_search",
]
