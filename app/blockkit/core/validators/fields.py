"""Across-field checks.

Helpers used by ``validate_across_fields`` implementations. Each takes
the candidate entity and returns an error kind or None. A field counts
as provided when it is not None.
"""

from typing import Any, Optional

from blockkit.errors import (
    EitherRequired,
    ExclusiveField,
    NoFieldProvided,
    ValidationErrorKind,
)


def _provided(obj: Any, name: str) -> bool:
    return getattr(obj, name, None) is not None


def either_required(obj: Any, first: str, second: str) -> Optional[ValidationErrorKind]:
    """EitherRequired when neither field is provided."""
    if not _provided(obj, first) and not _provided(obj, second):
        return EitherRequired(first, second)
    return None


def exclusive(obj: Any, first: str, second: str) -> Optional[ValidationErrorKind]:
    """ExclusiveField when both fields are provided."""
    if _provided(obj, first) and _provided(obj, second):
        return ExclusiveField(first, second)
    return None


def at_least_one(obj: Any, *names: str) -> Optional[ValidationErrorKind]:
    """NoFieldProvided when none of the named fields is provided."""
    if not any(_provided(obj, name) for name in names):
        return NoFieldProvided()
    return None


def one_of(obj: Any, first: str, second: str) -> Optional[ValidationErrorKind]:
    """Exactly one of two fields: EitherRequired or ExclusiveField."""
    return either_required(obj, first, second) or exclusive(obj, first, second)
