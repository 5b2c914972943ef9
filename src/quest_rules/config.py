"""Runtime configuration for quest-rules."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="QUEST_RULES_", env_file=".env", extra="ignore")

    app_name: str = "quest-rules"
    log_level: str = "INFO"
    catalogue_path: str | None = Field(
        default=None,
        description="JSON catalogue file to use instead of the built-in game world.",
    )


settings = Settings()
