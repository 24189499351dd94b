"""Kernel value types – counts and reset times.

Modules:
  counts.py – Limit, Remaining, Used, parse_count
  reset.py  – ResetTime (ResetSeconds | ResetDateTime), ResetTimeKind, parsers
"""

from ratelimit_headers.kernel.types.counts import Limit, Remaining, Used, parse_count
from ratelimit_headers.kernel.types.reset import (
    ResetDateTime,
    ResetSeconds,
    ResetTime,
    ResetTimeKind,
    parse_imf_fixdate,
    parse_reset_time,
    parse_timestamp,
)

__all__ = [
    "Limit",
    "Remaining",
    "ResetDateTime",
    "ResetSeconds",
    "ResetTime",
    "ResetTimeKind",
    "Used",
    "parse_count",
    "parse_imf_fixdate",
    "parse_reset_time",
    "parse_timestamp",
]
