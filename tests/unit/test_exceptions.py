"""Tests for RestContextError hierarchy."""

from __future__ import annotations

from fastapi_rest_context.exceptions import (
    InternalEncodingFailure,
    InvalidParameter,
    RequestNotAttached,
    RestContextError,
)


class TestRestContextError:
    def test_is_base_exception(self) -> None:
        exc = RestContextError("test")
        assert isinstance(exc, Exception)
        assert str(exc) == "test"


class TestInvalidParameter:
    def test_default_status_code(self) -> None:
        exc = InvalidParameter("bad limit")
        assert exc.status_code == 400
        assert exc.detail == "bad limit"
        assert exc.parameter is None

    def test_carries_parameter_name(self) -> None:
        exc = InvalidParameter("bad limit", parameter="limit")
        assert exc.parameter == "limit"
        assert str(exc) == "bad limit"

    def test_is_rest_context_error(self) -> None:
        assert issubclass(InvalidParameter, RestContextError)


class TestRequestNotAttached:
    def test_default_detail(self) -> None:
        exc = RequestNotAttached()
        assert exc.detail == "No request is attached to this context"

    def test_is_not_invalid_parameter(self) -> None:
        assert not issubclass(RequestNotAttached, InvalidParameter)


class TestInternalEncodingFailure:
    def test_wraps_cause(self) -> None:
        original = UnicodeEncodeError("utf-8", "\ud800", 0, 1, "surrogates not allowed")
        exc = InternalEncodingFailure("encoding failed", cause=original)
        assert exc.cause is original
        assert str(exc) == "encoding failed"

    def test_cause_is_optional(self) -> None:
        assert InternalEncodingFailure("unknown").cause is None

    def test_is_not_invalid_parameter(self) -> None:
        assert issubclass(InternalEncodingFailure, RestContextError)
        assert not issubclass(InternalEncodingFailure, InvalidParameter)
