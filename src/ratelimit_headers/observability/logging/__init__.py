"""Observability – structured logging helpers."""
from ratelimit_headers.observability.logging.factory import JsonLoggerFactory, configure_logging
from ratelimit_headers.observability.logging.processors import RateLimitProcessor, get_logger

__all__ = ["JsonLoggerFactory", "RateLimitProcessor", "configure_logging", "get_logger"]
