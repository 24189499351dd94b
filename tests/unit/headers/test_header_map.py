"""Unit tests for the case-insensitive header store."""

from __future__ import annotations

import pytest

from ratelimit_headers.headers import HeaderMap
from ratelimit_headers.kernel.errors import MalformedHeaderError


# ---------------------------------------------------------------------------
# HeaderMap.from_text
# ---------------------------------------------------------------------------


class TestFromText:
    def test_basic(self) -> None:
        hm = HeaderMap.from_text("foo: bar\nBAZ AND MORE: 124 456 moo")
        assert len(hm) == 2
        assert hm.get("foo") == "bar"
        assert hm.get("baz and more") == "124 456 moo"
        assert hm.get("BaZ aNd mOre") == "124 456 moo"

    def test_newlines_and_trailing_blank_lines(self) -> None:
        hm = HeaderMap.from_text(
            "x-ratelimit-limit: 5000\n"
            "x-ratelimit-remaining: 4987\n"
            "x-ratelimit-reset: 1350085394\n"
            "        "
        )
        assert len(hm) == 3
        assert hm["x-ratelimit-limit"] == "5000"
        assert hm["x-ratelimit-remaining"] == "4987"
        assert hm["x-ratelimit-reset"] == "1350085394"

    def test_crlf_line_endings(self) -> None:
        hm = HeaderMap.from_text("A: 1\r\nB: 2\r\n")
        assert hm.get("a") == "1"
        assert hm.get("b") == "2"

    @pytest.mark.parametrize("brk", ["\x0b", "\x0c", "\x1c", "\x85", "\u2028", "\u2029"])
    def test_only_lf_and_crlf_end_lines(self, brk: str) -> None:
        hm = HeaderMap.from_text(f"X-Note: a{brk}b\nA: 1")
        assert hm.get("x-note") == f"a{brk}b"
        assert hm.get("a") == "1"

    def test_lone_cr_is_not_a_line_break(self) -> None:
        hm = HeaderMap.from_text("A: 1\rB 2")
        assert len(hm) == 1
        assert hm.get("a") == "1\rB 2"

    def test_blank_lines_skipped(self) -> None:
        hm = HeaderMap.from_text("\n\nA: 1\n   \nB: 2\n\n")
        assert len(hm) == 2

    def test_splits_on_first_colon_only(self) -> None:
        hm = HeaderMap.from_text("Date: Tue, 15 Nov 1994 08:12:31 GMT")
        assert hm.get("date") == "Tue, 15 Nov 1994 08:12:31 GMT"

    def test_trims_name_and_value(self) -> None:
        hm = HeaderMap.from_text("   Retry-After   :    20   ")
        assert hm.get("retry-after") == "20"
        assert hm.original_name("RETRY-AFTER") == "Retry-After"

    def test_empty_value_allowed(self) -> None:
        assert HeaderMap.from_text("X-Empty:").get("x-empty") == ""

    def test_missing_colon_raises(self) -> None:
        with pytest.raises(MalformedHeaderError) as exc_info:
            HeaderMap.from_text("A: 1\n\nnot a header")
        assert exc_info.value.line_number == 3
        assert exc_info.value.line == "not a header"

    def test_empty_input(self) -> None:
        assert len(HeaderMap.from_text("")) == 0


# ---------------------------------------------------------------------------
# Lookup semantics
# ---------------------------------------------------------------------------


class TestLookup:
    @pytest.mark.parametrize("name", ["x-ratelimit-limit", "X-RATELIMIT-LIMIT", "X-RateLimit-Limit"])
    def test_case_insensitive(self, name: str) -> None:
        hm = HeaderMap.from_text("X-RateLimit-Limit: 60")
        assert hm.get(name) == "60"
        assert name in hm

    def test_first_occurrence_wins(self) -> None:
        hm = HeaderMap.from_text("x-ratelimit-limit: 1\nX-RateLimit-Limit: 2")
        assert hm.get("x-ratelimit-limit") == "1"
        assert hm.original_name("x-ratelimit-limit") == "x-ratelimit-limit"
        assert len(hm) == 1

    def test_missing_returns_default(self) -> None:
        hm = HeaderMap.from_text("A: 1")
        assert hm.get("b") is None
        assert hm.get("b", "fallback") == "fallback"
        assert hm.original_name("b") is None

    def test_getitem_missing_raises_key_error(self) -> None:
        with pytest.raises(KeyError):
            HeaderMap.from_text("A: 1")["b"]

    def test_iterates_lowercased_names(self) -> None:
        assert list(HeaderMap.from_text("Foo: 1\nBar: 2")) == ["foo", "bar"]

    def test_non_string_not_contained(self) -> None:
        assert 1 not in HeaderMap.from_text("A: 1")

    def test_repr_uses_original_names(self) -> None:
        assert "'Foo'" in repr(HeaderMap.from_text("Foo: 1"))


# ---------------------------------------------------------------------------
# HeaderMap.from_headers
# ---------------------------------------------------------------------------


class TestFromHeaders:
    def test_dict(self) -> None:
        hm = HeaderMap.from_headers({"X-RateLimit-Limit": " 60 "})
        assert hm.get("x-ratelimit-limit") == "60"

    def test_pairs_first_wins(self) -> None:
        hm = HeaderMap.from_headers([("A", "1"), ("a", "2")])
        assert hm.get("A") == "1"

    def test_multi_value_mapping_uses_first(self) -> None:
        hm = HeaderMap.from_headers({"Retry-After": ["20", "30"], "Empty": []})
        assert hm.get("retry-after") == "20"
        assert "empty" not in hm

    def test_bytes_are_decoded(self) -> None:
        hm = HeaderMap.from_headers([(b"Retry-After", b"5")])
        assert hm.get("retry-after") == "5"

    def test_multi_items_protocol(self) -> None:
        class Multi:
            def multi_items(self) -> list[tuple[str, str]]:
                return [("a", "1"), ("A", "2")]

        assert HeaderMap.from_headers(Multi()).get("a") == "1"

    def test_header_map_passthrough(self) -> None:
        hm = HeaderMap.from_text("A: 1")
        assert HeaderMap.from_headers(hm) is hm

    def test_equivalent_to_text(self) -> None:
        text = HeaderMap.from_text("RateLimit-Limit: 10\nratelimit-limit: 11\nRatelimit-Reset: 3")
        structured = HeaderMap.from_headers(
            [("RateLimit-Limit", "10"), ("ratelimit-limit", "11"), ("Ratelimit-Reset", "3")]
        )
        assert dict(text) == dict(structured)
