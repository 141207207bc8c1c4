"""Base Pydantic model for every Block Kit entity.

This module defines the model configuration and the hooks shared by all
entities: builder generation, across-field validation and JSON
serialization in the wire format.
"""

from typing import Any, ClassVar, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict

from blockkit.core.builder import Builder, make_builder
from blockkit.errors import ValidationErrorKind


class BlockKitModel(BaseModel):
    """Base model for all Block Kit entities.

    Provides standard Pydantic configuration for:
    - Immutable instances once built
    - JSON serialization with populate_by_name
    - Enums kept as enum objects, rendered as their values in JSON

    Subclasses get a generated builder, reachable through ``builder()``.
    Entities with rules spanning several fields override
    ``validate_across_fields``.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        use_enum_values=False,
        extra="forbid",
    )

    builder_mixins: ClassVar[Tuple[type, ...]] = ()
    __builder__: ClassVar[type]

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        cls.__builder__ = make_builder(cls, cls.builder_mixins)

    @classmethod
    def builder(cls) -> Builder:
        """Return an empty builder for this entity."""
        return cls.__builder__()

    def validate_across_fields(self) -> List[ValidationErrorKind]:
        """Return the violations of rules spanning several fields."""
        return []

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to wire-format data; absent fields are omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        """Serialize to a compact wire-format JSON string."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
