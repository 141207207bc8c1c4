"""Base settings class for blockkit."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class BlockKitSettings(BaseSettings):
    """Settings read from ``BLOCKKIT_``-prefixed environment variables.

    A ``.env`` file in the working directory is read as well. Unknown
    variables are ignored so the library can share an environment with the
    application embedding it.
    """

    model_config = SettingsConfigDict(
        env_prefix="BLOCKKIT_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
