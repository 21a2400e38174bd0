"""Connection pool settings for a database."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import timedelta

_ZERO = timedelta(0)


@dataclass(frozen=True)
class DbConfig:
    """Immutable pool configuration; the ``with_*`` methods return updated copies."""

    dsn: str
    max_size: int = 10
    min_idle: int | None = None
    test_on_check_out: bool = True
    max_lifetime: timedelta | None = timedelta(minutes=30)
    idle_timeout: timedelta | None = timedelta(minutes=10)
    connection_timeout: timedelta = timedelta(seconds=30)

    @classmethod
    def create(cls, dsn: str) -> DbConfig:
        """A configuration for ``dsn`` with the default pool settings."""
        return cls(dsn=dsn)

    def with_max_size(self, max_size: int) -> DbConfig:
        """Set the maximum number of pooled connections; must be positive."""
        if max_size <= 0:
            raise ValueError("max_size must be positive")
        return replace(self, max_size=max_size)

    def with_min_idle(self, min_idle: int | None) -> DbConfig:
        """Set the minimum idle connection count (None means ``max_size``)."""
        return replace(self, min_idle=min_idle)

    def with_test_on_check_out(self, test_on_check_out: bool) -> DbConfig:
        """Whether connections are validated before being checked out."""
        return replace(self, test_on_check_out=test_on_check_out)

    def with_max_lifetime(self, max_lifetime: timedelta | None) -> DbConfig:
        """Set the maximum connection lifetime; must be positive when given."""
        if max_lifetime is not None and max_lifetime <= _ZERO:
            raise ValueError("max_lifetime must be positive")
        return replace(self, max_lifetime=max_lifetime)

    def with_idle_timeout(self, idle_timeout: timedelta | None) -> DbConfig:
        """Set the idle timeout; must be positive when given."""
        if idle_timeout is not None and idle_timeout <= _ZERO:
            raise ValueError("idle_timeout must be positive")
        return replace(self, idle_timeout=idle_timeout)

    def with_connection_timeout(self, connection_timeout: timedelta) -> DbConfig:
        """Set how long to wait for a free connection; must be positive."""
        if connection_timeout <= _ZERO:
            raise ValueError("connection_timeout must be positive")
        return replace(self, connection_timeout=connection_timeout)