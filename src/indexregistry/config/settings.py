"""Registry settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. YAML config file (if specified, via ``Settings.from_yaml``)
  2. Environment variables (INDEXREGISTRY_ prefix)
  3. Default values

YAML values only win for the keys the file sets; every key it leaves out is
still read from the environment before falling back to the default.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


class ClientSettings(BaseModel):
    """Configuration for the index client backing the registries."""

    backend: str = Field(default="elasticsearch", description="Client backend: elasticsearch, opensearch, memory")
    hosts: list[str] = Field(default_factory=list, description="Backend host URLs")
    username: str | None = Field(default=None, description="Authentication username")
    password: str | None = Field(default=None, description="Authentication password")
    api_key: str | None = Field(default=None, description="API key authentication")
    verify_certs: bool = Field(default=True, description="Verify TLS certificates")
    refresh: bool | Literal["wait_for"] = Field(
        default="wait_for",
        description="Refresh policy applied to writes",
    )
    max_documents: int = Field(default=10000, gt=0, description="Upper bound for listing a section's content")
    extra: dict[str, Any] = Field(default_factory=dict, description="Client-specific options")

    @field_validator("hosts", mode="before")
    @classmethod
    def _parse_hosts(cls, v: Any) -> list[str]:
        """Parse hosts from JSON string (env var) or list."""
        if isinstance(v, str):
            import json

            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return [str(h) for h in parsed]
            except (json.JSONDecodeError, TypeError):
                pass
            # Single host as plain string
            return [v] if v else []
        return list(v)

    @field_validator("backend")
    @classmethod
    def _normalize_backend(cls, v: str) -> str:
        return v.strip().lower()

    def client_kwargs(self) -> dict[str, Any]:
        """Constructor keyword arguments for the configured client class."""
        kwargs: dict[str, Any] = {
            "max_documents": self.max_documents,
        }
        if self.backend != "memory":
            kwargs.update(
                hosts=self.hosts or None,
                username=self.username,
                password=self.password,
                api_key=self.api_key,
                verify_certs=self.verify_certs,
                refresh=self.refresh,
            )
        kwargs.update(self.extra)
        return kwargs


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root settings.

    Configuration is loaded from environment variables with the INDEXREGISTRY_ prefix.
    Nested settings use double underscores: INDEXREGISTRY_CLIENT__BACKEND=opensearch

    Example:
        INDEXREGISTRY_CLIENT__HOSTS='["http://es-1:9200", "http://es-2:9200"]'
        INDEXREGISTRY_CLIENT__REFRESH=false
        INDEXREGISTRY_OBSERVABILITY__LOG_FORMAT=console
    """

    model_config = {
        "env_prefix": "INDEXREGISTRY_",
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

        Values from the YAML file are passed as init arguments, so they take
        precedence over environment variables for the keys they set.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
