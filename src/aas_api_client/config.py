"""Configuration models for the AAS API client."""

from pathlib import Path
from typing import Literal, Self

import yaml
from pydantic import BaseModel, Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ObservabilityConfig(BaseModel):
    """Logging and metrics configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "console"] = "console"
    metrics_enabled: bool = True
    """Record per-request Prometheus metrics."""


class ClientConfig(BaseModel):
    """Connection settings shared by all API interfaces."""

    base_url: str = "http://localhost:8080/api/v3.0"
    """Service endpoint; resource paths such as /shells are appended to it."""

    timeout_seconds: float = 30.0

    auth_token: SecretStr | None = None
    """Static bearer token sent as ``Authorization: Bearer <token>``."""

    username: str | None = None
    password: SecretStr | None = None
    """Basic-auth credentials; mutually exclusive with auth_token."""

    verify_tls: bool = True
    """Set to False to accept self-signed server certificates."""

    ca_cert: Path | None = None
    """Custom CA bundle used instead of the system store."""

    headers: dict[str, str] = Field(default_factory=dict)
    """Extra headers added to every request."""

    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Normalize the endpoint so paths can be appended."""
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {value!r}")
        return value.rstrip("/")

    @model_validator(mode="after")
    def check_auth(self) -> Self:
        """Reject ambiguous or incomplete credentials."""
        if self.auth_token is not None and self.username is not None:
            raise ValueError("auth_token and username/password are mutually exclusive")
        if (self.username is None) != (self.password is None):
            raise ValueError("username and password must be set together")
        return self

    @classmethod
    def from_yaml(cls, path: Path) -> "ClientConfig":
        """Load configuration from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data or {})


class ClientSettings(BaseSettings):
    """Environment-based settings (``AAS_CLIENT_*``)."""

    model_config = SettingsConfigDict(
        env_prefix="AAS_CLIENT_",
        env_nested_delimiter="__",
    )

    config_file: Path = Path("config/client.yaml")
    base_url: str | None = None
    """Overrides base_url from the config file."""

    auth_token: SecretStr | None = None
    """Overrides auth_token from the config file."""


def load_config(settings: ClientSettings | None = None) -> ClientConfig:
    """Load configuration from file, with environment overrides."""
    if settings is None:
        settings = ClientSettings()

    if settings.config_file.exists():
        config = ClientConfig.from_yaml(settings.config_file)
    else:
        config = ClientConfig()

    overrides: dict[str, object] = {}
    if settings.base_url:
        overrides["base_url"] = settings.base_url
    if settings.auth_token is not None:
        overrides["auth_token"] = settings.auth_token
    if overrides:
        config = ClientConfig.model_validate({**config.model_dump(), **overrides})
    return config
