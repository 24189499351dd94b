"""HTTP adapter – httpx integration.

Requires the ``httpx`` extra: ``pip install "ratelimit-headers[httpx]"``.
"""
from ratelimit_headers.adapters.httpx.response import (
    rate_limit_from_headers,
    rate_limit_from_response,
    try_rate_limit_from_response,
)

__all__ = ["rate_limit_from_headers", "rate_limit_from_response", "try_rate_limit_from_response"]
