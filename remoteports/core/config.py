"""Application configuration via Pydantic BaseSettings."""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_log = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_debug: bool = Field(default=False)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )

    # SSH defaults
    ssh_port: int = Field(default=22, ge=1, le=65535)
    ssh_user: str = Field(default="root")
    ssh_connect_timeout: float = Field(
        default=15.0, gt=0, description="SSH connection timeout in seconds"
    )
    ssh_command_timeout: float = Field(
        default=30.0, gt=0, description="Timeout for a single remote command in seconds"
    )
    ssh_known_hosts: str | None = Field(
        default=None,
        description="Path to a known_hosts file (unset = trust-on-first-use)",
    )

    @model_validator(mode="after")
    def _warn_unchecked_host_keys(self) -> "Settings":
        """Emit a warning when host keys are not verified outside debug mode."""
        if not self.app_debug and not self.ssh_known_hosts:
            _log.warning(
                "SSH_KNOWN_HOSTS is not set; remote host keys will not be verified"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
