"""Structlog configuration and logger lookup.

blockkit only asks for loggers; it never configures logging on import.
Applications that want the library's debug events rendered the same way
as their own call ``configure_logging()`` once at startup.

Usage:
    from blockkit.logging import configure_logging, get_module_logger

    configure_logging(log_level="DEBUG")

    logger = get_module_logger()
    logger.debug("build_failed", object="Button", fields=["text"])
"""

import inspect
import logging
import sys
from typing import List, Optional, Sequence

import structlog
from structlog.stdlib import BoundLogger

from blockkit.configuration import Settings, get_settings
from blockkit.logging.formatters import Processor, expand_validation_errors

# Level above CRITICAL: nothing passes
SILENT = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _caller_module_name(frame) -> Optional[str]:
    module = inspect.getmodule(frame) if frame else None
    return module.__name__ if module else None


def build_processors(
    is_production: bool, extra_processors: Sequence[Processor] = ()
) -> List[Processor]:
    """Return the structlog processor chain, ending with the renderer.

    Args:
        is_production: Render JSON when True, console output otherwise
        extra_processors: Processors run after the built-in ones and
            before rendering

    Returns:
        The processor list passed to ``structlog.configure``
    """
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        expand_validation_errors,
        *extra_processors,
    ]
    if is_production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def _silence_for_tests() -> BoundLogger:
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=SILENT, force=True)
    logging.root.setLevel(SILENT)
    return structlog.stdlib.get_logger()


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    extra_processors: Sequence[Processor] = (),
) -> BoundLogger:
    """Configure structlog and the stdlib root logger.

    Under pytest every log entry is suppressed, whatever the arguments.

    Args:
        settings: Settings to read defaults from. Defaults to get_settings().
        log_level: Level name overriding settings.LOG_LEVEL.
        is_production: Overrides settings.is_production; selects JSON
            rather than console rendering.
        extra_processors: Additional processors, e.g. ``truncate_payloads()``.

    Returns:
        A logger using the new configuration

    Example:
        logger = configure_logging(log_level="DEBUG", is_production=False)
    """
    if _is_test_environment():
        return _silence_for_tests()

    settings = settings or get_settings()
    if is_production is None:
        is_production = settings.is_production
    level_name = (log_level or settings.LOG_LEVEL).upper()

    structlog.configure(
        processors=build_processors(is_production, extra_processors),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )
    return structlog.stdlib.get_logger()


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Return a logger named ``name``, or after the calling module.

    The logger wraps the stdlib logger of that name, so it stays silent
    until the application sets up logging.
    """
    if not name:
        frame = inspect.currentframe()
        name = _caller_module_name(frame.f_back if frame else None) or "unknown"
    return structlog.wrap_logger(logging.getLogger(name), logger_name=name)


def get_module_logger() -> BoundLogger:
    """Return a logger for the calling module.

    The logger is bound with ``component`` (last segment of the module
    name) and ``module_path`` (the full module name).

    Example:
        # in blockkit/core/builder.py
        logger = get_module_logger()
        # context: {"component": "builder", "module_path": "blockkit.core.builder"}
    """
    frame = inspect.currentframe()
    module_name = _caller_module_name(frame.f_back if frame else None)
    if module_name is None:
        return structlog.wrap_logger(logging.getLogger("blockkit"), component="unknown")
    return structlog.wrap_logger(
        logging.getLogger(module_name),
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )
