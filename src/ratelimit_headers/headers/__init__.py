"""Headers – case-insensitive header ingestion."""
from ratelimit_headers.headers.store import HeaderMap

__all__ = ["HeaderMap"]
