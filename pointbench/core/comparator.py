"""Fixed-precision comparison of work unit results against the fixture."""

import math

from .base import ResultTuple
from .errors import ValidationError
from .fixture import ExpectedFixture

# One decimal digit: values are scaled by 10 and rounded half up.
FLOAT_PRECISION = 10


def comp_floats(f1: float, f2: float, precision: int = FLOAT_PRECISION) -> bool:
    """Return True if two floats agree after rounding at the given precision.

    NaN, infinities and values that overflow when scaled never compare equal.
    """
    scaled1 = f1 * precision + 0.5
    scaled2 = f2 * precision + 0.5
    if not (math.isfinite(scaled1) and math.isfinite(scaled2)):
        return False
    return math.floor(scaled1) == math.floor(scaled2)


def validate_result(result: ResultTuple, expected: ExpectedFixture) -> None:
    """Check a result against the fixture: line count, then first, then second.

    Raises:
        ValidationError: On the first mismatching field
    """
    if result.lines != expected.lines:
        raise ValidationError(
            "lines",
            expected.lines,
            result.lines,
            f"Expected number of lines to be {expected.lines}, got: {result.lines}",
        )
    if not comp_floats(result.first, expected.first):
        raise ValidationError(
            "first",
            expected.first,
            result.first,
            f"Expected first number to be {expected.first}, got: {result.first}",
        )
    if not comp_floats(result.second, expected.second):
        raise ValidationError(
            "second",
            expected.second,
            result.second,
            f"Expected second number to be {expected.second}, got: {result.second}",
        )
