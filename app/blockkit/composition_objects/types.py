"""Enumerations and builder helpers shared by composition objects."""

from enum import Enum
from typing import Literal

Style = Literal["primary", "danger"]


class Conversation(str, Enum):
    """Conversation types for conversation list filters."""

    IM = "im"
    MPIM = "mpim"
    PRIVATE = "private"
    PUBLIC = "public"


class TriggerAction(str, Enum):
    """Interactions that dispatch a block_actions payload."""

    ON_ENTER_PRESSED = "on_enter_pressed"
    ON_CHARACTER_ENTERED = "on_character_entered"


class StyleBuilderMixin:
    """Adds ``primary()`` and ``danger()`` to builders with a private style."""

    def primary(self):
        """Set style to "primary"."""
        return self._style("primary")

    def danger(self):
        """Set style to "danger"."""
        return self._style("danger")
