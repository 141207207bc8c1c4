"""Value cell holding one builder field.

A Value carries the candidate value for a field together with the errors
its validators recorded. Cells are immutable: validators return a new
cell instead of mutating the one they were given, so builders can share
cells between copies safely.
"""

from dataclasses import dataclass, replace
from typing import Callable, Generic, Optional, Tuple, TypeVar

from blockkit.errors import ValidationErrorKind

T = TypeVar("T")

Validator = Callable[["Value"], "Value"]


@dataclass(frozen=True)
class Value(Generic[T]):
    """Candidate value of a builder field plus its recorded errors.

    Attributes:
        inner: The value as set by the caller, None when absent
        errors: Error kinds recorded by the field's validators
        deferred: True when the value changed without running validators
            (list pushes); the build step validates it again
    """

    inner: Optional[T] = None
    errors: Tuple[ValidationErrorKind, ...] = ()
    deferred: bool = False

    @classmethod
    def new(cls, inner: Optional[T] = None) -> "Value[T]":
        return cls(inner=inner)

    def inner_ref(self) -> Optional[T]:
        return self.inner

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def with_error(self, error: ValidationErrorKind) -> "Value[T]":
        """Return a copy of this cell with one more error recorded.

        The inner value is kept as-is so callers can still inspect what
        was attempted.
        """
        return replace(self, errors=self.errors + (error,))


def pipe(value: Value, *validators: Validator) -> Value:
    """Run validators over a cell in declaration order.

    Every validator runs, so a field violating several constraints
    reports all of them.

    Args:
        value: Cell to validate
        *validators: Validator functions taking and returning a Value

    Returns:
        The cell carrying every error the validators recorded
    """
    for validator in validators:
        value = validator(value)
    return value
