"""Configuration management for the Picnic MCP server.

This module defines the ``PicnicConfig`` model and helpers to validate raw
environment-style input into it. ``validate_config`` reports violations as a
result value; ``PicnicConfig.from_mapping`` and ``PicnicConfig.from_env`` raise
``ConfigurationError`` instead.
"""

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Literal, Self

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, field_validator

# Load variables from a local .env file for development convenience
load_dotenv()

CountryCode = Literal["NL", "DE"]
SUPPORTED_COUNTRY_CODES: tuple[str, ...] = ("NL", "DE")

# Option name -> model field name.
ENV_FIELDS: dict[str, str] = {
    "PICNIC_USERNAME": "username",
    "PICNIC_PASSWORD": "password",
    "PICNIC_COUNTRY_CODE": "country_code",
    "ENABLE_HTTP_SERVER": "http_server_enabled",
    "HTTP_PORT": "http_port",
    "HTTP_HOST": "http_host",
}


class ConfigurationError(RuntimeError):
    """Raised when configuration input violates one or more constraints."""

    def __init__(self, violations: Mapping[str, str]) -> None:
        """Initialize the error.

        Args:
            violations: Mapping of field name to violation message.

        """
        self.violations = dict(violations)
        messages = "; ".join(f"{name}: {msg}" for name, msg in self.violations.items())
        super().__init__(f"Invalid Picnic configuration: {messages}")

    @property
    def fields(self) -> frozenset[str]:
        """Return the names of every violated field."""
        return frozenset(self.violations)


class PicnicConfig(BaseModel):
    """Validated settings for the Picnic client and the MCP server."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    username: StrictStr = Field(min_length=1)
    password: StrictStr = Field(min_length=1)
    country_code: CountryCode = "NL"
    http_server_enabled: bool = False
    http_port: int = Field(default=3000, ge=1, le=65535)
    http_host: str = "localhost"

    @field_validator("http_server_enabled", mode="before")
    @classmethod
    def _coerce_enabled(cls, value: Any) -> bool:
        # Only the literal string "true" enables the server.
        if isinstance(value, bool):
            return value
        return value == "true"

    @field_validator("http_port", mode="before")
    @classmethod
    def _parse_port(cls, value: Any) -> Any:
        if isinstance(value, str):
            digits = value.strip()
            # ASCII digits only; int() would also take "3_000" or non-Latin digits.
            if not re.fullmatch(r"[0-9]+", digits):
                msg = f"expected a base-10 integer, got {value!r}"
                raise ValueError(msg)
            return int(digits, 10)
        return value

    @classmethod
    def from_mapping(cls, raw: Mapping[str, object]) -> Self:
        """Build a configuration object from environment-style options.

        Args:
            raw: Mapping of option names (e.g. ``PICNIC_USERNAME``) to raw values.
                Absent options take their defaults.

        Returns:
            The validated configuration.

        Raises:
            ConfigurationError: If any option violates its constraints. Every
                violation is reported, not only the first.

        """
        values = {name: raw[option] for option, name in ENV_FIELDS.items() if option in raw}
        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigurationError(_collect_violations(exc)) from exc

    @classmethod
    def from_env(cls) -> Self:
        """Build a configuration object from environment variables."""
        return cls.from_mapping({option: os.environ[option] for option in ENV_FIELDS if option in os.environ})


@dataclass(frozen=True, slots=True)
class ConfigResult:
    """Outcome of validating raw configuration input."""

    config: PicnicConfig | None = None
    violations: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Return True when validation produced a configuration."""
        return self.config is not None


def _collect_violations(exc: ValidationError) -> dict[str, str]:
    violations: dict[str, str] = {}
    for err in exc.errors():
        name = str(err["loc"][0]) if err["loc"] else "__root__"
        if name in violations:
            violations[name] = f"{violations[name]}; {err['msg']}"
        else:
            violations[name] = err["msg"]
    return violations


def validate_config(raw: Mapping[str, object]) -> ConfigResult:
    """Validate raw options without raising for expected failures."""
    try:
        return ConfigResult(config=PicnicConfig.from_mapping(raw))
    except ConfigurationError as exc:
        return ConfigResult(violations=exc.violations)


@lru_cache(maxsize=1)
def load_config() -> PicnicConfig:
    """Return the process configuration, validating the environment once."""
    return PicnicConfig.from_env()


def clear_config_cache() -> None:
    """Forget the cached configuration so the next load re-reads the environment."""
    load_config.cache_clear()


__all__ = [
    "ENV_FIELDS",
    "SUPPORTED_COUNTRY_CODES",
    "ConfigResult",
    "ConfigurationError",
    "CountryCode",
    "PicnicConfig",
    "clear_config_cache",
    "load_config",
    "validate_config",
]
