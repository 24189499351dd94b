"""Registry – ordered, immutable collection of known header variants.

Lookups walk the variants in registration order and stop at the first one
whose header is present, so order decides between variants whose header
names collide once case is ignored.
"""
from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from datetime import timedelta

from ratelimit_headers.headers import HeaderMap
from ratelimit_headers.kernel.errors import RegistryLockError
from ratelimit_headers.kernel.types import ResetTimeKind
from ratelimit_headers.registry.vendor import RateLimitVariant, Vendor

DEFAULT_VARIANTS: tuple[RateLimitVariant, ...] = (
    # https://tools.ietf.org/id/draft-polli-ratelimit-headers-00.html
    RateLimitVariant(
        vendor=Vendor.STANDARD,
        limit_header="RateLimit-Limit",
        remaining_header="Ratelimit-Remaining",
        reset_header="Ratelimit-Reset",
        reset_kind=ResetTimeKind.SECONDS,
    ),
    # https://docs.github.com/en/rest/overview/resources-in-the-rest-api
    RateLimitVariant(
        vendor=Vendor.GITHUB,
        limit_header="x-ratelimit-limit",
        remaining_header="x-ratelimit-remaining",
        reset_header="x-ratelimit-reset",
        used_header="x-ratelimit-used",
        window=timedelta(hours=1),
        reset_kind=ResetTimeKind.TIMESTAMP,
    ),
    RateLimitVariant(
        vendor=Vendor.TWITTER,
        limit_header="x-rate-limit-limit",
        remaining_header="x-rate-limit-remaining",
        reset_header="x-rate-limit-reset",
        window=timedelta(minutes=15),
        reset_kind=ResetTimeKind.TIMESTAMP,
    ),
    RateLimitVariant(
        vendor=Vendor.VIMEO,
        limit_header="X-RateLimit-Limit",
        remaining_header="X-RateLimit-Remaining",
        reset_header="X-RateLimit-Reset",
        window=timedelta(seconds=60),
        reset_kind=ResetTimeKind.IMF_FIXDATE,
    ),
)


class VariantRegistry:
    """Read-only ordered variant list with per-field lookups."""

    __slots__ = ("_variants",)

    def __init__(self, variants: Iterable[RateLimitVariant]) -> None:
        self._variants = tuple(variants)

    @property
    def variants(self) -> tuple[RateLimitVariant, ...]:
        return self._variants

    def __iter__(self) -> Iterator[RateLimitVariant]:
        return iter(self._variants)

    def __len__(self) -> int:
        return len(self._variants)

    def find(self, headers: HeaderMap, field: str) -> tuple[str, RateLimitVariant] | None:
        """Return ``(value, variant)`` for the first variant whose *field* header is present."""
        for variant in self._variants:
            name = variant.header_for(field)
            if name is None:
                continue
            value = headers.get(name)
            if value is not None:
                return value, variant
        return None

    def find_limit(self, headers: HeaderMap) -> tuple[str, RateLimitVariant] | None:
        return self.find(headers, "limit")

    def find_used(self, headers: HeaderMap) -> tuple[str, RateLimitVariant] | None:
        return self.find(headers, "used")

    def find_remaining(self, headers: HeaderMap) -> tuple[str, RateLimitVariant] | None:
        return self.find(headers, "remaining")

    def find_reset(self, headers: HeaderMap) -> tuple[str, RateLimitVariant] | None:
        return self.find(headers, "reset")


_default: VariantRegistry | None = None
_default_lock = threading.Lock()


def default_registry(timeout: float = 5.0) -> VariantRegistry:
    """Return the process-wide registry of built-in variants.

    Built on first use; later calls return the same instance without
    taking the lock. Raises :class:`RegistryLockError` if the lock is not
    acquired within *timeout* seconds during that first build.
    """
    global _default
    if _default is not None:
        return _default
    if not _default_lock.acquire(timeout=timeout):
        raise RegistryLockError(timeout)
    try:
        if _default is None:
            _default = VariantRegistry(DEFAULT_VARIANTS)
        return _default
    finally:
        _default_lock.release()


__all__ = ["DEFAULT_VARIANTS", "VariantRegistry", "default_registry"]
