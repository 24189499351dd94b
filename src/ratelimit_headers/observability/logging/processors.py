"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class RateLimitProcessor:
    """structlog processor that flattens a ``rate_limit`` entry.

    A :class:`~ratelimit_headers.RateLimit` bound as ``rate_limit=`` is
    replaced by ``rate_limit_*`` keys so JSON renderers see plain values.
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        rate_limit = event_dict.get("rate_limit")
        to_dict = getattr(rate_limit, "to_dict", None)
        if callable(to_dict):
            del event_dict["rate_limit"]
            for key, value in to_dict().items():
                event_dict.setdefault(f"rate_limit_{key}", value)
        return event_dict


def get_logger(name: str | None = None, *, level: int | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    With *level*, events below it are dropped before any processor runs,
    whatever structlog configuration the application has installed.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    level:
        Minimum stdlib level number, e.g. ``logging.WARNING``.
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    if level is None:
        logger = structlog.get_logger(name)
    else:
        logger = structlog.wrap_logger(
            None,
            wrapper_class=structlog.make_filtering_bound_logger(level),
            logger_factory_args=(name,) if name else (),
        )
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["RateLimitProcessor", "get_logger"]
