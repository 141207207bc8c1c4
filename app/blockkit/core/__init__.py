"""Core engine: value cells, validators, builders and build results."""

from blockkit.core.builder import Builder
from blockkit.core.fields import BuilderField, builder_field
from blockkit.core.model import BlockKitModel
from blockkit.core.result import BuildResult
from blockkit.core.status import BuildStatus
from blockkit.core.value import Validator, Value, pipe

__all__ = [
    "BlockKitModel",
    "Builder",
    "BuilderField",
    "BuildResult",
    "BuildStatus",
    "Validator",
    "Value",
    "builder_field",
    "pipe",
]
