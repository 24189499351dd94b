"""Reset time – when the current rate-limit window ends.

A reset is either a relative delay (:class:`ResetSeconds`) or an absolute UTC
instant (:class:`ResetDateTime`). Vendors encode it three ways, selected by
:class:`ResetTimeKind`; the IMF-fixdate encoding is only a parsing strategy
and yields a :class:`ResetDateTime` like a Unix timestamp does.
"""
from __future__ import annotations

import dataclasses
import re
from datetime import UTC, datetime, timedelta
from enum import Enum

from ratelimit_headers.kernel.errors import InvalidDateError, InvalidTimestampError
from ratelimit_headers.kernel.time import Clock, SystemClock
from ratelimit_headers.kernel.types.counts import parse_count


class ResetTimeKind(str, Enum):
    SECONDS = "SECONDS"
    """Bare integer, seconds until the window resets."""
    TIMESTAMP = "TIMESTAMP"
    """Bare integer, Unix epoch seconds at which the window resets."""
    IMF_FIXDATE = "IMF_FIXDATE"
    """RFC 7231 HTTP-date, e.g. ``Tue, 15 Nov 1994 08:12:31 GMT``."""


@dataclasses.dataclass(frozen=True)
class ResetSeconds:
    """Relative reset: the window ends *seconds* after the response."""

    seconds: int

    def as_datetime(self, clock: Clock | None = None) -> datetime:
        return (clock or SystemClock()).now() + timedelta(seconds=self.seconds)

    def seconds_until(self, clock: Clock | None = None) -> float:  # noqa: ARG002
        return float(self.seconds)


@dataclasses.dataclass(frozen=True)
class ResetDateTime:
    """Absolute reset: the window ends at *at* (UTC)."""

    at: datetime

    def as_datetime(self, clock: Clock | None = None) -> datetime:  # noqa: ARG002
        return self.at

    def seconds_until(self, clock: Clock | None = None) -> float:
        """Seconds from *clock*'s now until the reset, never negative."""
        delta = self.at - (clock or SystemClock()).now()
        return max(0.0, delta.total_seconds())


type ResetTime = ResetSeconds | ResetDateTime


_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_IMF_FIXDATE = re.compile(
    r"(?P<weekday>[A-Z][a-z]{2}), (?P<day>[0-9]{2}) (?P<month>[A-Z][a-z]{2}) (?P<year>[0-9]{4}) "
    r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2}) GMT"
)


def parse_timestamp(raw: str, *, header: str | None = None) -> datetime:
    seconds = parse_count(raw, header=header)
    try:
        return datetime.fromtimestamp(seconds, UTC)
    except (OverflowError, OSError, ValueError) as exc:
        raise InvalidTimestampError(raw, header=header, cause=exc) from exc


def parse_imf_fixdate(raw: str, *, header: str | None = None) -> datetime:
    """Parse an IMF-fixdate (RFC 7231 §7.1.1.1) into an aware UTC datetime.

    Only the preferred fixed-length format is accepted; the obsolete RFC 850
    and asctime forms are rejected.
    """
    match = _IMF_FIXDATE.fullmatch(raw.strip())
    if match is None or match["weekday"] not in _WEEKDAYS or match["month"] not in _MONTHS:
        raise InvalidDateError(raw, header=header)
    try:
        return datetime(
            int(match["year"]),
            _MONTHS.index(match["month"]) + 1,
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
            tzinfo=UTC,
        )
    except ValueError as exc:
        raise InvalidDateError(raw, header=header, cause=exc) from exc


def parse_reset_time(raw: str, kind: ResetTimeKind, *, header: str | None = None) -> ResetTime:
    """Parse a reset header value according to its vendor's encoding."""
    match kind:
        case ResetTimeKind.SECONDS:
            return ResetSeconds(parse_count(raw, header=header))
        case ResetTimeKind.TIMESTAMP:
            return ResetDateTime(parse_timestamp(raw, header=header))
        case ResetTimeKind.IMF_FIXDATE:
            return ResetDateTime(parse_imf_fixdate(raw, header=header))
    raise ValueError(f"Unknown reset time kind: {kind!r}")


__all__ = [
    "ResetDateTime",
    "ResetSeconds",
    "ResetTime",
    "ResetTimeKind",
    "parse_imf_fixdate",
    "parse_reset_time",
    "parse_timestamp",
]
