"""Application – RateLimit result and the header normalisation algorithm.

Resolution order for one set of headers:

1. ``remaining`` from the first variant whose remaining header is present.
2. ``limit`` from the first variant whose limit header is present, otherwise
   ``used + remaining`` from the first variant whose used header is present.
   That variant decides the reported ``vendor`` and ``window``.
3. ``reset`` from ``Retry-After`` when present (always seconds), otherwise
   from the first variant whose reset header is present, decoded with that
   variant's reset kind.

Any missing or malformed field aborts the whole call.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Any

from ratelimit_headers.config import EnvSettingsLoader, RateLimitSettings
from ratelimit_headers.headers import HeaderMap
from ratelimit_headers.kernel.errors import (
    MissingRemainingError,
    MissingResetError,
    MissingUsedError,
    RateLimitHeaderError,
)
from ratelimit_headers.kernel.time import Clock
from ratelimit_headers.kernel.types import (
    Limit,
    Remaining,
    ResetDateTime,
    ResetSeconds,
    ResetTime,
    Used,
    parse_count,
    parse_reset_time,
)
from ratelimit_headers.observability.logging import get_logger
from ratelimit_headers.registry import RateLimitVariant, VariantRegistry, Vendor, default_registry

RETRY_AFTER = "Retry-After"


@dataclasses.dataclass(frozen=True)
class RateLimit:
    """Normalised rate-limit state of one HTTP response."""

    limit: int
    remaining: int
    reset: ResetTime
    window: timedelta | None
    """Length of the quota window, when the vendor fixes one."""
    vendor: Vendor
    """Convention the limit (or used) header was recognised as."""

    @classmethod
    def from_text(cls, raw: str) -> "RateLimit":
        """Normalise a raw ``Name: value`` header blob."""
        return RateLimitNormalizer().normalize(HeaderMap.from_text(raw))

    @classmethod
    def from_headers(cls, headers: Any) -> "RateLimit":
        """Normalise a structured header collection (mapping, pairs, ``httpx.Headers``)."""
        return RateLimitNormalizer().normalize(HeaderMap.from_headers(headers))

    @property
    def used(self) -> int:
        return max(0, self.limit - self.remaining)

    @property
    def exhausted(self) -> bool:
        return self.remaining == 0

    def reset_at(self, clock: Clock | None = None) -> datetime:
        """Absolute reset instant; relative resets are anchored at *clock*'s now."""
        return self.reset.as_datetime(clock)

    def seconds_until_reset(self, clock: Clock | None = None) -> float:
        return self.reset.seconds_until(clock)

    def to_dict(self) -> dict[str, Any]:
        """Serialise to plain JSON-friendly values."""
        match self.reset:
            case ResetSeconds(seconds=seconds):
                reset: Any = seconds
            case ResetDateTime(at=at):
                reset = at.isoformat()
        return {
            "limit": self.limit,
            "remaining": self.remaining,
            "reset": reset,
            "window": self.window.total_seconds() if self.window is not None else None,
            "vendor": self.vendor.value,
        }


class RateLimitNormalizer:
    """Turns a :class:`HeaderMap` into a :class:`RateLimit`.

    Holds no per-call state, so one instance can serve any number of
    concurrent callers.
    """

    def __init__(
        self,
        registry: VariantRegistry | None = None,
        settings: RateLimitSettings | None = None,
    ) -> None:
        self._settings = settings or RateLimitSettings()
        self._registry = registry
        self._log = get_logger(__name__, level=self._settings.log_level_number)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "RateLimitNormalizer":
        """Build a normalizer configured from ``RATELIMIT_HEADERS_*`` variables."""
        return cls(settings=EnvSettingsLoader(environ).load(RateLimitSettings))

    @property
    def registry(self) -> VariantRegistry:
        if self._registry is None:
            return default_registry(self._settings.registry_lock_timeout)
        return self._registry

    def normalize(self, headers: HeaderMap) -> RateLimit:
        try:
            return self._normalize(headers)
        except RateLimitHeaderError as exc:
            self._log.debug("rate_limit_headers_rejected", code=exc.code, error=exc.message)
            raise

    def _normalize(self, headers: HeaderMap) -> RateLimit:
        registry = self.registry

        remaining = self._resolve_remaining(registry, headers)
        limit, variant = self._resolve_limit(registry, headers, remaining)
        reset = self._resolve_reset(registry, headers)

        result = RateLimit(
            limit=limit.count,
            remaining=remaining.count,
            reset=reset,
            window=variant.window,
            vendor=variant.vendor,
        )
        self._log.debug("rate_limit_headers_normalized", rate_limit=result)
        return result

    def _resolve_remaining(self, registry: VariantRegistry, headers: HeaderMap) -> Remaining:
        found = registry.find_remaining(headers)
        if found is None:
            raise MissingRemainingError()
        value, variant = found
        return Remaining.parse(value, header=variant.remaining_header)

    def _resolve_limit(
        self,
        registry: VariantRegistry,
        headers: HeaderMap,
        remaining: Remaining,
    ) -> tuple[Limit, RateLimitVariant]:
        found = registry.find_limit(headers)
        if found is not None:
            value, variant = found
            return Limit.parse(value, header=variant.limit_header), variant

        found = registry.find_used(headers)
        if found is not None:
            value, variant = found
            used = Used.parse(value, header=variant.used_header)
            self._log.debug(
                "rate_limit_derived_from_used",
                vendor=variant.vendor.value,
                used=used.count,
                remaining=remaining.count,
            )
            return used + remaining, variant

        raise MissingUsedError()

    def _resolve_reset(self, registry: VariantRegistry, headers: HeaderMap) -> ResetTime:
        if self._settings.honor_retry_after:
            retry_after = headers.get(RETRY_AFTER)
            if retry_after is not None:
                self._log.debug("rate_limit_reset_from_retry_after", retry_after=retry_after)
                return ResetSeconds(parse_count(retry_after, header=RETRY_AFTER))

        found = registry.find_reset(headers)
        if found is None:
            raise MissingResetError()
        value, variant = found
        return parse_reset_time(value, variant.reset_kind, header=variant.reset_header)


def parse(raw: str) -> RateLimit:
    """Normalise a raw ``Name: value`` header blob."""
    return RateLimit.from_text(raw)


def parse_headers(headers: Any) -> RateLimit:
    """Normalise a structured header collection."""
    return RateLimit.from_headers(headers)


__all__ = ["RETRY_AFTER", "RateLimit", "RateLimitNormalizer", "parse", "parse_headers"]
