"""Application – header normalisation."""
from ratelimit_headers.application.normalizer import (
    RETRY_AFTER,
    RateLimit,
    RateLimitNormalizer,
    parse,
    parse_headers,
)

__all__ = ["RETRY_AFTER", "RateLimit", "RateLimitNormalizer", "parse", "parse_headers"]
