"""Deployment environments and how to read them from configuration."""

from __future__ import annotations

import os
from enum import Enum

from foxtive.app_message import AppMessage

_ALIASES = {
    "local": "LOCAL",
    "development": "DEVELOPMENT",
    "dev": "DEVELOPMENT",
    "staging": "STAGING",
    "stage": "STAGING",
    "production": "PRODUCTION",
    "prod": "PRODUCTION",
}

_SHORT = {
    "LOCAL": "local",
    "DEVELOPMENT": "dev",
    "STAGING": "staging",
    "PRODUCTION": "prod",
}


class Environment(Enum):
    """The environment an application runs in."""

    LOCAL = "local"
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"

    def as_str(self) -> str:
        return self.value

    def as_short_str(self) -> str:
        return _SHORT[self.name]

    def is_production(self) -> bool:
        return self is Environment.PRODUCTION

    def is_local(self) -> bool:
        return self is Environment.LOCAL

    def is_dev_like(self) -> bool:
        return self in (Environment.LOCAL, Environment.DEVELOPMENT)

    def allows_debug(self) -> bool:
        return not self.is_production()

    @classmethod
    def parse(cls, value: str) -> Environment:
        """Parse a name or abbreviation, ignoring case."""
        name = _ALIASES.get(value.lower())
        if name is None:
            raise AppMessage.internal_server_error_message(
                f"Invalid environment value: '{value}'. Valid values are: "
                "local, development (dev), staging (stage), production (prod)"
            )
        return cls[name]

    @classmethod
    def default(cls) -> Environment:
        return cls.LOCAL

    @classmethod
    def all(cls) -> tuple[Environment, ...]:
        return tuple(cls)

    @classmethod
    def from_env(cls, var_name: str) -> Environment:
        """Read the environment from a variable, raising if missing or invalid."""
        value = os.environ.get(var_name)
        if value is None:
            raise AppMessage.missing_environment_variable(
                var_name, "environment variable not found"
            )
        return cls.parse(value)

    @classmethod
    def from_env_or_default(cls, var_name: str, default: Environment) -> Environment:
        value = os.environ.get(var_name)
        if value is None:
            return default
        try:
            return cls.parse(value)
        except AppMessage:
            return default

    def __str__(self) -> str:
        return self.value

    def __format__(self, spec: str) -> str:
        return format(self.value, spec)