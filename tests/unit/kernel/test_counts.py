"""Unit tests for count value objects."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ratelimit_headers.kernel.errors import InvalidCountError
from ratelimit_headers.kernel.types import Limit, Remaining, Used, parse_count

_whitespace = st.text(alphabet=" \t", max_size=3)


# ---------------------------------------------------------------------------
# parse_count
# ---------------------------------------------------------------------------


class TestParseCount:
    def test_trims_whitespace(self) -> None:
        assert parse_count("  23 ") == 23

    def test_zero(self) -> None:
        assert parse_count("0") == 0

    @pytest.mark.parametrize("raw", ["foo", "0 foo", "bar 0", "", "   ", "-1", "+5", "1_000", "1.5", "12a3"])
    def test_rejects_non_integers(self, raw: str) -> None:
        with pytest.raises(InvalidCountError) as exc_info:
            parse_count(raw)
        assert exc_info.value.value == raw

    def test_too_many_digits_is_invalid_count(self) -> None:
        raw = "9" * 5000
        with pytest.raises(InvalidCountError) as exc_info:
            parse_count(raw, header="RateLimit-Limit")
        assert exc_info.value.header == "RateLimit-Limit"
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_error_names_header(self) -> None:
        with pytest.raises(InvalidCountError) as exc_info:
            parse_count("x", header="RateLimit-Limit")
        assert exc_info.value.header == "RateLimit-Limit"

    @given(st.integers(min_value=0, max_value=10**30), _whitespace, _whitespace)
    def test_any_non_negative_integer_round_trips(self, n: int, before: str, after: str) -> None:
        assert parse_count(f"{before}{n}{after}") == n

    @given(st.from_regex(r"[0-9]+[a-zA-Z ]+[0-9]+", fullmatch=True))
    def test_interleaved_text_is_rejected(self, raw: str) -> None:
        with pytest.raises(InvalidCountError):
            parse_count(raw)


# ---------------------------------------------------------------------------
# Limit / Remaining / Used
# ---------------------------------------------------------------------------


class TestCountTypes:
    def test_limit_parse(self) -> None:
        assert Limit.parse("  23 ").count == 23

    def test_remaining_parse(self) -> None:
        assert Remaining.parse("  23 ").count == 23

    @pytest.mark.parametrize("cls", [Limit, Remaining, Used])
    def test_invalid_values(self, cls: type) -> None:
        for raw in ("foo", "0 foo", "bar 0"):
            with pytest.raises(InvalidCountError):
                cls.parse(raw)

    def test_types_are_not_interchangeable(self) -> None:
        assert Limit(5) != Remaining(5)
        assert Limit(5) == Limit(5)

    def test_negative_rejected(self) -> None:
        with pytest.raises(InvalidCountError):
            Limit(-1)

    def test_used_plus_remaining_is_limit(self) -> None:
        limit = Used(100) + Remaining(22)
        assert isinstance(limit, Limit)
        assert limit.count == 122

    def test_used_plus_other_type_unsupported(self) -> None:
        with pytest.raises(TypeError):
            Used(1) + Limit(2)  # type: ignore[operator]

    def test_int_conversion(self) -> None:
        assert int(Remaining(7)) == 7

    def test_frozen(self) -> None:
        limit = Limit(1)
        with pytest.raises((AttributeError, TypeError)):
            limit.count = 2  # type: ignore[misc]
