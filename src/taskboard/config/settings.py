"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)


class Settings(BaseSettings):
    """Application settings.

    Read from init arguments, then TASKBOARD_* environment variables,
    then an optional taskboard.yml in the working directory.
    """

    server_url: str = Field(
        default="http://localhost:3000/task-manager",
        description="Root URL of the task server",
    )

    authorization: str = Field(
        default="Basic taskboard",
        description="Authorization header sent with every request",
    )

    request_timeout: float = Field(
        default=10.0,
        description="HTTP timeout in seconds",
    )

    page_size: int = Field(
        default=8,
        ge=1,
        description="Tasks revealed per 'load more' step",
    )

    abort_interval: float = Field(
        default=0.6,
        ge=0,
        description="Seconds a failed action is flagged before the form is re-enabled",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = SettingsConfigDict(
        env_prefix="TASKBOARD_",
        yaml_file="taskboard.yml",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings, env_settings, YamlConfigSettingsSource(settings_cls))
