"""Headers – case-insensitive, first-wins header store."""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from ratelimit_headers.kernel.errors import MalformedHeaderError


class HeaderMap(Mapping[str, str]):
    """Read-only header lookup keyed by lower-cased name.

    When a name occurs more than once, the first occurrence is kept and later
    ones are ignored. The original spelling of each kept name is remembered
    for diagnostics.

    Build one with :meth:`from_text` for a raw ``Name: value`` blob or with
    :meth:`from_headers` for an existing header collection; both produce the
    same map for the same logical content.
    """

    __slots__ = ("_entries",)

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()) -> None:
        entries: dict[str, tuple[str, str]] = {}
        for name, value in pairs:
            name = name.strip()
            entries.setdefault(name.lower(), (name, value.strip()))
        self._entries = entries

    @classmethod
    def from_text(cls, raw: str) -> "HeaderMap":
        """Parse newline-separated ``Name: value`` lines.

        Lines end at LF or CRLF only; other Unicode line breaks stay part of
        the value. Blank lines are skipped. Raises :class:`MalformedHeaderError`
        for a non-blank line without a colon.
        """
        pairs: list[tuple[str, str]] = []
        for number, line in enumerate(raw.split("\n"), start=1):
            line = line.removesuffix("\r")
            if not line.strip():
                continue
            name, sep, value = line.partition(":")
            if not sep:
                raise MalformedHeaderError(line, line_number=number)
            pairs.append((name, value))
        return cls(pairs)

    @classmethod
    def from_headers(cls, headers: Any) -> "HeaderMap":
        """Build from a structured header collection.

        Accepts objects with ``multi_items()`` (``httpx.Headers``), mappings of
        name to value or to a list of values, and iterables of pairs.
        """
        if isinstance(headers, HeaderMap):
            return headers
        if hasattr(headers, "multi_items"):
            items: Iterable[tuple[str, Any]] = headers.multi_items()
        elif isinstance(headers, Mapping):
            items = headers.items()
        else:
            items = headers
        return cls(_flatten(items))

    def get(self, name: str, default: Any = None) -> Any:  # type: ignore[override]
        entry = self._entries.get(name.lower())
        return entry[1] if entry is not None else default

    def original_name(self, name: str) -> str | None:
        """Return the header name as it was spelled in the input."""
        entry = self._entries.get(name.lower())
        return entry[0] if entry is not None else None

    def __getitem__(self, name: str) -> str:
        return self._entries[name.lower()][1]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        inner = ", ".join(f"{orig!r}: {value!r}" for orig, value in self._entries.values())
        return f"HeaderMap({{{inner}}})"


def _flatten(items: Iterable[tuple[str, Any]]) -> Iterator[tuple[str, str]]:
    for name, value in items:
        if isinstance(name, bytes):
            name = name.decode("latin-1")
        if isinstance(value, (list, tuple)):
            if not value:
                continue
            value = value[0]
        if isinstance(value, bytes):
            value = value.decode("latin-1")
        yield str(name), str(value)


__all__ = ["HeaderMap"]
