"""Configuration management using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server settings loaded from environment variables.

    Values are read once at startup and injected into the platform clients;
    nothing below the CLI / ``main.py`` layer reads the environment.
    """

    # Azure DevOps
    azure_devops_org_url: str = ""
    azure_devops_api_token: str = ""

    # GitHub
    github_personal_access_token: str = ""
    github_api_url: str = "https://api.github.com"

    # Figma — token is optional; without it Figma rejects each request itself.
    figma_access_token: str = ""
    figma_api_url: str = "https://api.figma.com/v1"

    # SonarQube
    sonar_token: str = ""
    sonar_url: str = ""

    # Google Cloud
    google_application_credentials: str = ""
    google_cloud_project: str = ""

    # LiteLLM proxy
    litellm_master_key: str = ""
    litellm_url: str = "http://localhost:4000"

    # Transport
    mcp_transport: str = ""  # "stdio" or "http"; empty uses the platform default
    port: int = 8080

    log_level: str = "info"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


# Used when SONAR_URL is unset (the server warns but still starts).
DEFAULT_SONAR_URL = "http://localhost:9000"


def check_settings(settings: Settings, required: tuple[str, ...]) -> list[str]:
    """Return the env var names of required settings that are empty."""
    return [name.upper() for name in required if not getattr(settings, name)]


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
