"""Environment settings and the startup validation gate.

Settings are read once from the process environment (and an optional
``.env`` file) by :func:`load_settings`, then turned into the explicit
config objects handed to the data layer and the web app.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from moto_api.config import WebAppConfig
from moto_data.config import DataLayerConfig, HealthConfig, PostgresConfig, RedisConfig

_MISSING_ERROR_TYPES = {"missing", "string_too_short"}


class ConfigurationError(RuntimeError):
    """Raised when the environment cannot produce a valid configuration."""

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> ConfigurationError:
        # Report the first offending variable, in declaration order
        err = exc.errors()[0]
        variable = str(err["loc"][0]).upper() if err["loc"] else "<unknown>"
        if err["type"] in _MISSING_ERROR_TYPES or err.get("input") == "":
            return cls(f"Missing required environment variable: {variable}")
        return cls(f"Invalid value for environment variable {variable}: {err['msg']}")


class Settings(BaseSettings):
    """Application settings loaded from environment / .env file."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database (required, empty counts as missing)
    db_host: str = Field(min_length=1)
    db_port: int = Field(gt=0, lt=65536)
    db_username: str = Field(min_length=1)
    db_password: str = Field(min_length=1)
    db_name: str = Field(min_length=1)

    # Redis
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_password: Optional[str] = None

    # Runtime
    node_env: str = "development"
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: Optional[str] = None  # comma-separated
    health_timeout: float = Field(default=3.0, gt=0)
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @property
    def is_production(self) -> bool:
        return self.node_env == "production"

    @property
    def allowed_origins(self) -> Optional[list[str]]:
        if not self.cors_origins:
            return None
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    def data_layer_config(self) -> DataLayerConfig:
        return DataLayerConfig(
            postgres=PostgresConfig(
                host=self.db_host,
                port=self.db_port,
                database=self.db_name,
                user=self.db_username,
                password=self.db_password,
                ssl=self.is_production,
            ),
            redis=RedisConfig(
                host=self.redis_host,
                port=self.redis_port,
                password=self.redis_password or None,
            ),
            health=HealthConfig(timeout=self.health_timeout),
        )

    def webapp_config(self) -> WebAppConfig:
        return WebAppConfig(
            debug=self.node_env == "development",
            host=self.host,
            port=self.port,
            cors_origins=self.allowed_origins,
        )


def load_settings(**overrides) -> Settings:
    """Load and validate settings eagerly.

    Raises:
        ConfigurationError: naming the first missing or invalid variable.
    """
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        raise ConfigurationError.from_validation_error(exc) from exc
