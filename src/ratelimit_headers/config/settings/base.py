"""Config settings – Settings base class and RateLimitSettings."""
from __future__ import annotations

import dataclasses
import logging

from ratelimit_headers.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class RateLimitSettings(Settings):
    """Tunables for header normalisation.

    Environment variables use the ``RATELIMIT_HEADERS_`` prefix, e.g.
    ``RATELIMIT_HEADERS_HONOR_RETRY_AFTER=false``.
    """

    _prefix: dataclasses.ClassVar[str] = "RATELIMIT_HEADERS"

    honor_retry_after: bool = True
    registry_lock_timeout: float = 5.0
    log_level: str = "WARNING"

    def _validate(self) -> None:
        if self.registry_lock_timeout <= 0:
            raise InvalidSettingValueError(
                "registry_lock_timeout", self.registry_lock_timeout, "must be positive"
            )
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")
        self.log_level = self.log_level.upper()

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["RateLimitSettings", "Settings"]
