"""blockkit configuration settings."""

from functools import lru_cache

from blockkit.configuration.base import BlockKitSettings


class Settings(BlockKitSettings):
    """blockkit configuration settings.

    The library itself has no runtime knobs beyond logging. Applications
    that embed it can tune how the library's own log output is rendered.

    Environment Variables:
        BLOCKKIT_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        BLOCKKIT_ENVIRONMENT: Deployment environment name. ``production``
            switches log rendering to JSON.

    Example:
        ```python
        from blockkit.configuration import get_settings

        settings = get_settings()

        if settings.is_production:
            # JSON log output...
        ```
    """

    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    @property
    def is_production(self) -> bool:
        """Check if the library is running in production.

        Returns:
            True if ENVIRONMENT is "production", False otherwise.
        """
        return self.ENVIRONMENT.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide Settings instance.

    Settings are read from the environment once and cached. Tests can call
    ``get_settings.cache_clear()`` after patching the environment.

    Returns:
        The cached Settings instance.
    """
    return Settings()
