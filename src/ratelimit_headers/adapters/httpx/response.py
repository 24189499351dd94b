"""HTTP adapter – read rate limits off httpx responses."""
from __future__ import annotations

import httpx

from ratelimit_headers.application import RateLimit, RateLimitNormalizer
from ratelimit_headers.headers import HeaderMap
from ratelimit_headers.kernel.errors import MissingHeaderError


def rate_limit_from_headers(
    headers: httpx.Headers,
    normalizer: RateLimitNormalizer | None = None,
) -> RateLimit:
    """Normalise an ``httpx.Headers`` collection.

    Repeated headers keep their first value, as with every other input.
    """
    return (normalizer or RateLimitNormalizer()).normalize(HeaderMap.from_headers(headers))


def rate_limit_from_response(
    response: httpx.Response,
    normalizer: RateLimitNormalizer | None = None,
) -> RateLimit:
    return rate_limit_from_headers(response.headers, normalizer)


def try_rate_limit_from_response(
    response: httpx.Response,
    normalizer: RateLimitNormalizer | None = None,
) -> RateLimit | None:
    """Like :func:`rate_limit_from_response` but ``None`` when no rate-limit headers are sent.

    Malformed values still raise.
    """
    try:
        return rate_limit_from_response(response, normalizer)
    except MissingHeaderError:
        return None


__all__ = ["rate_limit_from_headers", "rate_limit_from_response", "try_rate_limit_from_response"]
