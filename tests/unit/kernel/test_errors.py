"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import pytest

from ratelimit_headers.kernel.errors import (
    BaseError,
    InvalidCountError,
    InvalidDateError,
    InvalidTimestampError,
    InvalidValueError,
    MalformedHeaderError,
    MissingHeaderError,
    MissingLimitError,
    MissingRemainingError,
    MissingResetError,
    MissingUsedError,
    RateLimitHeaderError,
    RegistryLockError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"
        assert str(err) == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        assert BaseError("wrap", cause=cause).__cause__ is cause

    def test_repr_contains_code_and_message(self) -> None:
        r = repr(BaseError("hello", code="hi"))
        assert "hi" in r
        assert "hello" in r


# ---------------------------------------------------------------------------
# Parsing errors
# ---------------------------------------------------------------------------


class TestParsingErrors:
    @pytest.mark.parametrize(
        "err",
        [
            MalformedHeaderError("oops"),
            MissingLimitError(),
            MissingUsedError(),
            MissingRemainingError(),
            MissingResetError(),
            InvalidCountError("x"),
            InvalidTimestampError("x"),
            InvalidDateError("x"),
            RegistryLockError(1.0),
        ],
    )
    def test_all_are_rate_limit_header_errors(self, err: RateLimitHeaderError) -> None:
        assert isinstance(err, RateLimitHeaderError)
        assert isinstance(err, BaseError)

    def test_codes_are_distinct(self) -> None:
        codes = {
            MalformedHeaderError("l").code,
            MissingLimitError().code,
            MissingUsedError().code,
            MissingRemainingError().code,
            MissingResetError().code,
            InvalidCountError("x").code,
            InvalidTimestampError("x").code,
            InvalidDateError("x").code,
            RegistryLockError(1.0).code,
        }
        assert len(codes) == 9

    def test_malformed_header_carries_line(self) -> None:
        err = MalformedHeaderError("no colon here", line_number=3)
        assert err.line == "no colon here"
        assert err.line_number == 3
        assert "line 3" in err.message
        assert err.detail == {"line": "no colon here", "line_number": 3}

    def test_missing_used_is_missing_limit(self) -> None:
        err = MissingUsedError()
        assert isinstance(err, MissingLimitError)
        assert isinstance(err, MissingHeaderError)
        assert err.field == "used"
        assert err.code == "missing_used"

    def test_missing_reset_still_matches_missing_remaining(self) -> None:
        err = MissingResetError()
        assert isinstance(err, MissingRemainingError)
        assert err.field == "reset"
        assert err.code == "missing_reset"
        assert "reset" in err.message

    def test_missing_remaining_field(self) -> None:
        assert MissingRemainingError().field == "remaining"

    def test_invalid_value_mentions_header(self) -> None:
        err = InvalidCountError("abc", header="x-ratelimit-limit")
        assert isinstance(err, InvalidValueError)
        assert err.value == "abc"
        assert err.header == "x-ratelimit-limit"
        assert "x-ratelimit-limit" in err.message

    def test_registry_lock_timeout(self) -> None:
        err = RegistryLockError(0.5)
        assert err.timeout == 0.5
        assert err.to_dict()["detail"] == {"timeout": 0.5}

    def test_is_raisable(self) -> None:
        with pytest.raises(RateLimitHeaderError):
            raise InvalidDateError("yesterday")
