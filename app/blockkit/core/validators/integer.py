"""Validators for integer fields."""

from blockkit.core.validators._base import predicate_validator
from blockkit.core.value import Validator
from blockkit.errors import InvalidFormat, MaxIntegerValue, MinIntegerValue

BILLION = 1_000_000_000


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def max_value(limit: int) -> Validator:
    return predicate_validator(
        MaxIntegerValue(limit), lambda v: _is_int(v) and v > limit, f"max_{limit}"
    )


def min_value(limit: int) -> Validator:
    return predicate_validator(
        MinIntegerValue(limit), lambda v: _is_int(v) and v < limit, f"min_{limit}"
    )


max_10 = max_value(10)
max_3000 = max_value(3000)

min_0 = min_value(0)
min_1 = min_value(1)

# Unix timestamps in seconds
ten_digits = predicate_validator(
    InvalidFormat("10 digits"),
    lambda v: _is_int(v) and (v < BILLION or v >= 10 * BILLION),
    "ten_digits",
)
