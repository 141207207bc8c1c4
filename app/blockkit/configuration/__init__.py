"""Environment-driven settings for blockkit.

Only logging is configurable: ``LOG_LEVEL`` and ``ENVIRONMENT`` feed
``blockkit.logging.configure_logging()`` when it is called without
explicit arguments.

Example:
    ```python
    from blockkit.configuration import get_settings

    if get_settings().is_production:
        ...
    ```
"""

from blockkit.configuration.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
