"""Composition objects: text, options, dialogs, filters and other shared structures."""

from blockkit.composition_objects.confirmation_dialog import ConfirmationDialog
from blockkit.composition_objects.conversation_filter import ConversationFilter
from blockkit.composition_objects.dispatch_action_configuration import (
    DispatchActionConfiguration,
)
from blockkit.composition_objects.option import Opt, OptGroup, restricted_option_errors
from blockkit.composition_objects.slack_file import SlackFile
from blockkit.composition_objects.text import (
    MrkdwnText,
    PlainText,
    TextObject,
    mrkdwn,
    plain_text,
)
from blockkit.composition_objects.types import (
    Conversation,
    Style,
    StyleBuilderMixin,
    TriggerAction,
)
from blockkit.composition_objects.workflow import InputParameter, Trigger, Workflow

__all__ = [
    "ConfirmationDialog",
    "Conversation",
    "ConversationFilter",
    "DispatchActionConfiguration",
    "InputParameter",
    "MrkdwnText",
    "Opt",
    "OptGroup",
    "PlainText",
    "SlackFile",
    "Style",
    "StyleBuilderMixin",
    "TextObject",
    "Trigger",
    "TriggerAction",
    "Workflow",
    "mrkdwn",
    "plain_text",
    "restricted_option_errors",
]
