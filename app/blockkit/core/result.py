"""Build result dataclass.

Uniform result type returned from every builder's ``build()`` call,
carrying either the constructed entity or the validation report.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from blockkit.core.status import BuildStatus
from blockkit.errors import ValidationErrors

T = TypeVar("T")


@dataclass(frozen=True)
class BuildResult(Generic[T]):
    """Outcome of a build.

    Attributes:
        status: BuildStatus -- high-level outcome
        data: Optional[T] -- the constructed entity on success
        errors: Optional[ValidationErrors] -- the report on failure
    """

    status: BuildStatus
    data: Optional[T] = None
    errors: Optional[ValidationErrors] = None

    @property
    def is_success(self) -> bool:
        """Helper property to check if the build succeeded.

        Returns:
            True if status is SUCCESS, False otherwise
        """
        return self.status == BuildStatus.SUCCESS

    @classmethod
    def success(cls, data: T) -> "BuildResult[T]":
        """Create a SUCCESS BuildResult wrapping the entity."""
        return cls(status=BuildStatus.SUCCESS, data=data)

    @classmethod
    def invalid(cls, errors: ValidationErrors) -> "BuildResult[T]":
        """Create an INVALID BuildResult wrapping the validation report."""
        return cls(status=BuildStatus.INVALID, errors=errors)

    def or_raise(self) -> T:
        """Return the entity, raising the validation report on failure.

        Returns:
            The constructed entity

        Raises:
            ValidationErrors: If the build failed
        """
        if self.errors is not None:
            raise self.errors
        return self.data  # type: ignore[return-value]
