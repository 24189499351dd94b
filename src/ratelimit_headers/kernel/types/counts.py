"""Count value objects – Limit, Remaining, Used.

Each wraps a non-negative integer parsed from a header value. They are
separate types so a remaining count is never passed where a limit is
expected.
"""
from __future__ import annotations

import dataclasses
import re
from typing import Self

from ratelimit_headers.kernel.errors import InvalidCountError

_DIGITS = re.compile(r"[0-9]+")


def parse_count(raw: str, *, header: str | None = None) -> int:
    """Parse *raw* as a non-negative base-10 integer.

    Surrounding whitespace is ignored; anything else that is not an ASCII
    digit (signs, underscores, trailing text) raises :class:`InvalidCountError`.
    """
    text = raw.strip()
    if not _DIGITS.fullmatch(text):
        raise InvalidCountError(raw, header=header)
    try:
        return int(text)
    except ValueError as exc:
        # more digits than sys.get_int_max_str_digits() allows
        raise InvalidCountError(raw, header=header, cause=exc) from exc


@dataclasses.dataclass(frozen=True)
class _Count:
    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise InvalidCountError(str(self.count))

    @classmethod
    def parse(cls, raw: str, *, header: str | None = None) -> Self:
        return cls(parse_count(raw, header=header))

    def __int__(self) -> int:
        return self.count


@dataclasses.dataclass(frozen=True)
class Limit(_Count):
    """Requests allowed in the current window."""


@dataclasses.dataclass(frozen=True)
class Remaining(_Count):
    """Requests left in the current window."""


@dataclasses.dataclass(frozen=True)
class Used(_Count):
    """Requests already spent in the current window."""

    def __add__(self, other: Remaining) -> Limit:
        if not isinstance(other, Remaining):
            return NotImplemented
        return Limit(self.count + other.count)


__all__ = ["Limit", "Remaining", "Used", "parse_count"]
