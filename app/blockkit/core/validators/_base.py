"""Shared helper for building predicate validators."""

from typing import Any, Callable

from blockkit.core.value import Validator, Value
from blockkit.errors import ValidationErrorKind


def predicate_validator(
    error: ValidationErrorKind,
    predicate: Callable[[Any], bool],
    name: str,
) -> Validator:
    """Create a validator recording ``error`` when ``predicate`` holds.

    The predicate only sees present values.
    """

    def validator(value: Value) -> Value:
        if value.inner is not None and predicate(value.inner):
            return value.with_error(error)
        return value

    validator.__name__ = name
    validator.__qualname__ = name
    return validator
