"""Header parsing errors – one class per failure condition."""

from __future__ import annotations

from typing import Any

from ratelimit_headers.kernel.errors.base import BaseError


class RateLimitHeaderError(BaseError):
    """Rate-limit headers could not be normalised."""

    default_code = "rate_limit_header_error"


class MalformedHeaderError(RateLimitHeaderError):
    """A non-blank header line has no ``:`` separator."""

    default_code = "malformed_header"

    def __init__(self, line: str, *, line_number: int | None = None, **kwargs: Any) -> None:
        where = f" on line {line_number}" if line_number is not None else ""
        super().__init__(
            f"Malformed header{where}: {line!r} has no ':' separator",
            detail={"line": line, "line_number": line_number},
            **kwargs,
        )
        self.line = line
        self.line_number = line_number


class MissingHeaderError(RateLimitHeaderError):
    """No registered header name for a field was present."""

    default_code = "missing_header"

    def __init__(self, message: str | None = None, *, field: str = "", **kwargs: Any) -> None:
        super().__init__(
            message or f"No known '{field}' rate limit header found",
            detail={"field": field},
            **kwargs,
        )
        self.field = field


class MissingLimitError(MissingHeaderError):
    default_code = "missing_limit"

    def __init__(self, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, field="limit", **kwargs)


class MissingUsedError(MissingLimitError):
    """Neither a limit header nor a used header was found.

    Raised after the used header, the last fallback for deriving a limit,
    came up empty.
    """

    default_code = "missing_used"

    def __init__(self, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or "No known 'limit' or 'used' rate limit header found", **kwargs)
        self.field = "used"
        self.detail["field"] = "used"


class MissingRemainingError(MissingHeaderError):
    default_code = "missing_remaining"

    def __init__(self, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, field=kwargs.pop("field", "remaining"), **kwargs)


class MissingResetError(MissingRemainingError):
    """No reset header (and no ``Retry-After``) was found.

    Subclasses :class:`MissingRemainingError` so handlers written against the
    older error kind keep matching.
    """

    default_code = "missing_reset"

    def __init__(self, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, field="reset", **kwargs)


class InvalidValueError(RateLimitHeaderError):
    """A header value failed its field-specific parse."""

    default_code = "invalid_value"

    def __init__(
        self,
        value: str,
        reason: str,
        *,
        header: str | None = None,
        **kwargs: Any,
    ) -> None:
        source = f" in header '{header}'" if header else ""
        super().__init__(
            f"Invalid value {value!r}{source}: {reason}",
            detail={"value": value, "header": header},
            **kwargs,
        )
        self.value = value
        self.header = header


class InvalidCountError(InvalidValueError):
    default_code = "invalid_count"

    def __init__(self, value: str, *, header: str | None = None, **kwargs: Any) -> None:
        super().__init__(value, "expected a non-negative integer", header=header, **kwargs)


class InvalidTimestampError(InvalidValueError):
    default_code = "invalid_timestamp"

    def __init__(self, value: str, *, header: str | None = None, **kwargs: Any) -> None:
        super().__init__(value, "Unix timestamp out of range", header=header, **kwargs)


class InvalidDateError(InvalidValueError):
    default_code = "invalid_date"

    def __init__(self, value: str, *, header: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            value,
            "expected an IMF-fixdate such as 'Tue, 15 Nov 1994 08:12:31 GMT'",
            header=header,
            **kwargs,
        )


class RegistryLockError(RateLimitHeaderError):
    """The variant registry guard could not be acquired."""

    default_code = "registry_lock"

    def __init__(self, timeout: float, **kwargs: Any) -> None:
        super().__init__(
            f"Could not acquire the variant registry lock within {timeout}s",
            detail={"timeout": timeout},
            **kwargs,
        )
        self.timeout = timeout


__all__ = [
    "InvalidCountError",
    "InvalidDateError",
    "InvalidTimestampError",
    "InvalidValueError",
    "MalformedHeaderError",
    "MissingHeaderError",
    "MissingLimitError",
    "MissingRemainingError",
    "MissingResetError",
    "MissingUsedError",
    "RateLimitHeaderError",
    "RegistryLockError",
]
