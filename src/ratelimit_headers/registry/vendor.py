"""Registry – Vendor and RateLimitVariant."""
from __future__ import annotations

import dataclasses
from datetime import timedelta
from enum import Enum

from ratelimit_headers.kernel.types import ResetTimeKind


class Vendor(str, Enum):
    """Convention a set of rate-limit headers follows."""

    STANDARD = "STANDARD"
    """IETF draft ``RateLimit-*`` fields (draft-polli-ratelimit-headers)."""
    GITHUB = "GITHUB"
    """``x-ratelimit-*``, hourly window, epoch-seconds reset."""
    TWITTER = "TWITTER"
    """``x-rate-limit-*``, 15-minute window, epoch-seconds reset."""
    VIMEO = "VIMEO"
    """``X-RateLimit-*``, 60-second window, HTTP-date reset."""


@dataclasses.dataclass(frozen=True)
class RateLimitVariant:
    """Header names and semantics of one vendor convention.

    ``limit_header`` and ``used_header`` are both optional, but a variant
    without either can never supply a limit.
    """

    vendor: Vendor
    remaining_header: str
    reset_header: str
    reset_kind: ResetTimeKind
    limit_header: str | None = None
    used_header: str | None = None
    window: timedelta | None = None

    def header_for(self, field: str) -> str | None:
        """Return the header name this variant uses for *field*."""
        try:
            return {
                "limit": self.limit_header,
                "used": self.used_header,
                "remaining": self.remaining_header,
                "reset": self.reset_header,
            }[field]
        except KeyError:
            raise ValueError(f"Unknown rate limit field: {field!r}") from None


__all__ = ["RateLimitVariant", "Vendor"]
