"""Log processors for applications embedding blockkit.

``configure_logging`` installs ``expand_validation_errors`` itself; the
other processors are opt-in through its ``extra_processors`` argument.

Usage:
    from blockkit.logging import configure_logging, truncate_payloads

    configure_logging(extra_processors=[truncate_payloads(max_length=1000)])
    logger.warning("message_invalid", errors=result.errors)
"""

from typing import Any, Callable, Dict

from blockkit.errors import ValidationErrors

EventDict = Dict[str, Any]
Processor = Callable[[Any, str, EventDict], EventDict]

TRUNCATION_MARKER = "...[truncated, {total} chars total]"


def expand_validation_errors(
    logger: Any, method_name: str, event_dict: EventDict
) -> EventDict:
    """Render ValidationErrors values as their ``to_dict()`` form.

    Renderers would otherwise fall back to the exception's message string,
    which loses the per-field structure.
    """
    return {
        key: value.to_dict() if isinstance(value, ValidationErrors) else value
        for key, value in event_dict.items()
    }


def truncate_payloads(max_length: int = 500) -> Processor:
    """Create a processor that shortens long string values.

    Meant for serialized messages logged while debugging; a full modal or
    message can run to tens of kilobytes.

    Args:
        max_length: Characters kept before the truncation marker.

    Returns:
        A structlog processor function.
    """

    def shorten(value: Any) -> Any:
        if isinstance(value, str) and len(value) > max_length:
            return value[:max_length] + TRUNCATION_MARKER.format(total=len(value))
        return value

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        return {key: shorten(value) for key, value in event_dict.items()}

    return processor


def tag_entries(**static_fields: Any) -> Processor:
    """Create a processor adding fixed key/values to every entry.

    Keys already present in the entry win over the static values.

    Example:
        configure_logging(extra_processors=[tag_entries(service="release-notifier")])
    """

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        return {**static_fields, **event_dict}

    return processor
