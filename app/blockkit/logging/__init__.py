"""Structured logging for blockkit, built on structlog.

Library modules get their logger with ``get_module_logger()``. Nothing is
emitted until the application configures logging, either on its own or
with ``configure_logging()``.
"""

from blockkit.logging.formatters import (
    expand_validation_errors,
    tag_entries,
    truncate_payloads,
)
from blockkit.logging.setup import (
    build_processors,
    configure_logging,
    get_logger,
    get_module_logger,
)

__all__ = [
    "build_processors",
    "configure_logging",
    "expand_validation_errors",
    "get_logger",
    "get_module_logger",
    "tag_entries",
    "truncate_payloads",
]
