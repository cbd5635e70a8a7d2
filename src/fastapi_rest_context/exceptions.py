"""RestContextError hierarchy for rejected parameters and broken invariants."""

from __future__ import annotations


class RestContextError(Exception):
    """Base for all request-context exceptions."""


class InvalidParameter(RestContextError):
    """A query-shaping parameter was rejected (400)."""

    def __init__(
        self,
        detail: str,
        *,
        parameter: str | None = None,
        status_code: int = 400,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.parameter = parameter
        self.status_code = status_code


class RequestNotAttached(RestContextError):
    """Link derivation was attempted on a context with no request."""

    def __init__(self, detail: str = "No request is attached to this context") -> None:
        super().__init__(detail)
        self.detail = detail


class InternalEncodingFailure(RestContextError):
    """A value could not be percent-encoded as UTF-8."""

    def __init__(self, detail: str, *, cause: Exception | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.cause = cause
