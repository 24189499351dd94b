"""
ratelimit_headers – normalise vendor HTTP rate-limit headers.

Supports the IETF draft ``RateLimit-*`` fields and, on a best-effort basis,
vendor conventions such as GitHub's ``x-ratelimit-*``::

    from ratelimit_headers import RateLimit, ResetDateTime, Vendor

    rate = RateLimit.from_text(
        "x-ratelimit-limit: 5000\\n"
        "x-ratelimit-remaining: 4987\\n"
        "x-ratelimit-reset: 1350085394\\n"
    )
    assert rate.vendor is Vendor.GITHUB
    assert isinstance(rate.reset, ResetDateTime)

Import path convention::

    from ratelimit_headers.kernel.errors import InvalidCountError
    from ratelimit_headers.registry import VariantRegistry
    from ratelimit_headers.adapters.httpx import rate_limit_from_response
"""

from ratelimit_headers.application import RateLimit, RateLimitNormalizer, parse, parse_headers
from ratelimit_headers.headers import HeaderMap
from ratelimit_headers.kernel.errors import RateLimitHeaderError
from ratelimit_headers.kernel.types import (
    Limit,
    Remaining,
    ResetDateTime,
    ResetSeconds,
    ResetTime,
    ResetTimeKind,
    Used,
)
from ratelimit_headers.registry import RateLimitVariant, VariantRegistry, Vendor

__version__ = "0.1.0"
__all__ = [
    "HeaderMap",
    "Limit",
    "RateLimit",
    "RateLimitHeaderError",
    "RateLimitNormalizer",
    "RateLimitVariant",
    "Remaining",
    "ResetDateTime",
    "ResetSeconds",
    "ResetTime",
    "ResetTimeKind",
    "Used",
    "VariantRegistry",
    "Vendor",
    "__version__",
    "parse",
    "parse_headers",
]
