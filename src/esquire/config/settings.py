"""Client settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. YAML config file (if specified)
  2. Environment variables (ESQUIRE_ prefix)
  3. Default values
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from esquire.exceptions import ConfigurationError


class ClientSettings(BaseModel):
    """Connection settings for the search service."""

    base_url: str = Field(default="http://localhost:9200", description="Search service root URL")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    username: str | None = Field(default=None, description="HTTP basic-auth username")
    password: str | None = Field(default=None, description="HTTP basic-auth password")
    verify_certs: bool = Field(default=True, description="Whether to verify TLS certificates")
    headers: dict[str, str] = Field(default_factory=dict, description="Extra headers sent with every request")

    @field_validator("base_url")
    @classmethod
    def _strip_base_url(cls, v: str) -> str:
        """Reject empty URLs and drop trailing slashes."""
        v = v.strip()
        if not v:
            raise ValueError("base_url must not be empty")
        return v.rstrip("/")


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root settings.

    Configuration is loaded from environment variables with the ESQUIRE_ prefix.
    Nested settings use double underscores: ESQUIRE_CLIENT__BASE_URL=http://es:9200

    Example:
        ESQUIRE_CLIENT__BASE_URL=http://es:9200
        ESQUIRE_CLIENT__TIMEOUT=5
        ESQUIRE_OBSERVABILITY__LOG_FORMAT=console
    """

    model_config = {
        "env_prefix": "ESQUIRE_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    client: ClientSettings = Field(default_factory=ClientSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Values from the YAML file win over environment variables; anything
        the file leaves out falls back to the environment, then defaults.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigurationError: If the file does not hold a mapping, or holds
                invalid values.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data: Any = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file must contain a mapping: {config_path}")

        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid settings in {config_path}: {e}") from e
