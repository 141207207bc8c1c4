"""Validation errors and exceptions for blockkit.

Provides the closed set of validation error kinds a builder can record,
the field-indexed report returned when a build fails, and the exception
hierarchy used by the library.

Example:
    result = Header.builder().build()
    if not result.is_success:
        errors = result.errors
        errors.field("text").includes(Required())  # True
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple


class BlockKitError(Exception):
    """Base exception for all blockkit errors.

    Example:
        try:
            section = builder.build().or_raise()
        except BlockKitError as e:
            logger.error("blockkit_error", error=str(e))
    """

    pass


class BuilderDefinitionError(BlockKitError):
    """Raised when an entity declares its builder fields inconsistently.

    This surfaces at import time, when the entity class is created.

    Example:
        >>> class Broken(BlockKitModel):
        ...     name: Annotated[Optional[str], builder_field(push_item="n")] = None
        Traceback (most recent call last):
        ...
        BuilderDefinitionError: Broken.name: push_item requires a list field
    """

    pass


# Error kinds


@dataclass(frozen=True)
class ValidationErrorKind:
    """One constraint violation recorded against a field or across fields."""

    def message(self) -> str:
        return "invalid"

    def __str__(self) -> str:
        return self.message()


@dataclass(frozen=True)
class Required(ValidationErrorKind):
    """Field is required but not provided."""

    def message(self) -> str:
        return "required"


@dataclass(frozen=True)
class MaxTextLength(ValidationErrorKind):
    """Field exceeds maximum text length."""

    limit: int

    def message(self) -> str:
        return f"max text length `{self.limit}` characters"


@dataclass(frozen=True)
class MinTextLength(ValidationErrorKind):
    """Field does not meet minimum text length."""

    limit: int

    def message(self) -> str:
        return f"min text length `{self.limit}` characters"


@dataclass(frozen=True)
class MaxArraySize(ValidationErrorKind):
    """Field exceeds maximum array length."""

    limit: int

    def message(self) -> str:
        return f"max array length `{self.limit}` items"


@dataclass(frozen=True)
class EmptyArray(ValidationErrorKind):
    """Field holds a list that must not be empty."""

    def message(self) -> str:
        return "the array cannot be empty"


@dataclass(frozen=True)
class InvalidFormat(ValidationErrorKind):
    """Field does not match the expected format."""

    format: str

    def message(self) -> str:
        return f"should be in the format `{self.format}`"


@dataclass(frozen=True)
class MaxIntegerValue(ValidationErrorKind):
    """Field exceeds maximum integer value."""

    limit: int

    def message(self) -> str:
        return f"max value is `{self.limit}`"


@dataclass(frozen=True)
class MinIntegerValue(ValidationErrorKind):
    """Field does not meet minimum integer value."""

    limit: int

    def message(self) -> str:
        return f"min value is `{self.limit}`"


@dataclass(frozen=True)
class ExclusiveField(ValidationErrorKind):
    """Both fields are provided but only one is allowed."""

    first: str
    second: str

    def message(self) -> str:
        return f"cannot provide both {self.first} and {self.second}"


@dataclass(frozen=True)
class EitherRequired(ValidationErrorKind):
    """Either field is required but none is provided."""

    first: str
    second: str

    def message(self) -> str:
        return f"required either {self.first} or {self.second}"


@dataclass(frozen=True)
class NoFieldProvided(ValidationErrorKind):
    """At least one field is required but none is provided."""

    def message(self) -> str:
        return "required at least one field"


@dataclass(frozen=True)
class InvalidValue(ValidationErrorKind):
    """Field value has the wrong type or shape for the wire format."""

    reason: str

    def message(self) -> str:
        return f"invalid value: {self.reason}"


# Error report


class ErrorKinds(tuple):
    """Read-only sequence of error kinds with equality-based lookup.

    Errors within a field are unordered; use ``includes`` rather than
    comparing against an exact sequence.
    """

    def __new__(cls, kinds: Iterable[ValidationErrorKind] = ()):
        return super().__new__(cls, tuple(kinds))

    def includes(self, kind: ValidationErrorKind) -> bool:
        return kind in self


@dataclass(frozen=True)
class ValidationError:
    """Errors for a single field, or across fields when ``field`` is None.

    Attributes:
        field: Name of the field, None for across-field errors
        errors: Error kinds recorded for that bucket
    """

    field: Optional[str]
    errors: Tuple[ValidationErrorKind, ...]

    @property
    def is_across_fields(self) -> bool:
        return self.field is None

    @classmethod
    def single_field(
        cls, field: str, errors: Iterable[ValidationErrorKind]
    ) -> Optional["ValidationError"]:
        errors = tuple(errors)
        return cls(field=field, errors=errors) if errors else None

    @classmethod
    def across_fields(
        cls, errors: Iterable[ValidationErrorKind]
    ) -> Optional["ValidationError"]:
        errors = tuple(errors)
        return cls(field=None, errors=errors) if errors else None


class ValidationErrors(BlockKitError):
    """Validation report for one object whose build failed.

    Holds every violation found during the build: one bucket per failing
    field plus one bucket for across-field checks. Returned inside a
    failed BuildResult, and raised by ``BuildResult.or_raise()``.

    Attributes:
        object: Name of the entity that failed to build (e.g. "Button")
        errors: All validation errors, field buckets first

    Example:
        >>> err = Opt.builder().value("v").build().errors
        >>> err.object
        'Opt'
        >>> err.field("text").includes(Required())
        True
    """

    def __init__(self, object_name: str, errors: Iterable[ValidationError]):
        self.object = object_name
        self.errors: List[ValidationError] = list(errors)
        super().__init__(self._describe())

    def field(self, name: str) -> ErrorKinds:
        """Return the error kinds recorded for one field.

        Args:
            name: Field name as declared on the entity

        Returns:
            ErrorKinds, empty if the field has no errors
        """
        return ErrorKinds(
            kind
            for error in self.errors
            if error.field == name
            for kind in error.errors
        )

    def across_fields(self) -> ErrorKinds:
        """Return the error kinds recorded by across-field checks."""
        return ErrorKinds(
            kind for error in self.errors if error.is_across_fields for kind in error.errors
        )

    def fields(self) -> Dict[str, ErrorKinds]:
        """Return a mapping of failing field name to its error kinds."""
        return {
            error.field: ErrorKinds(error.errors)
            for error in self.errors
            if error.field is not None
        }

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the report to plain data (for logs and diagnostics)."""
        return {
            "object": self.object,
            "fields": {
                name: [str(kind) for kind in kinds]
                for name, kinds in self.fields().items()
            },
            "across_fields": [str(kind) for kind in self.across_fields()],
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationErrors):
            return NotImplemented
        return self.object == other.object and self.errors == other.errors

    __hash__ = None  # type: ignore[assignment]

    def _describe(self) -> str:
        parts = []
        for error in self.errors:
            kinds = ", ".join(str(kind) for kind in error.errors)
            label = error.field if error.field is not None else "across fields"
            parts.append(f"{label}: [{kinds}]")
        return f"Validation Error {{ object: {self.object}, errors: {'; '.join(parts)} }}"
