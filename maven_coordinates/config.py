"""Application configuration using pydantic-settings.

All fields are overridable via environment variables with the same names
(case-insensitive).
"""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Top-level settings.

    Env var precedence follows pydantic-settings rules, e.g.
    `MAVEN_REPOSITORY_URL=https://maven.example.org/releases`.
    """

    # Repository used by CoordinateSet.resolve() when no base URL is given
    MAVEN_REPOSITORY_URL: str = "https://repo1.maven.org/maven2"

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_JSON: bool = False

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)


__all__ = ["Settings"]
