"""Shared pytest fixtures for fastapi-rest-context tests."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest
from starlette.requests import Request

from fastapi_rest_context.settings import LimitPolicy, get_limit_policy


@pytest.fixture
def make_request() -> Any:
    """Factory for creating Starlette Request objects from a raw scope."""

    def _make(
        method: str = "GET",
        path: str = "/ws/rest/v1/patient",
        query_string: str = "",
        headers: dict[str, str] | None = None,
    ) -> Request:
        scope: dict[str, Any] = {
            "type": "http",
            "method": method,
            "scheme": "http",
            "server": ("testserver", 80),
            "path": path,
            "query_string": query_string.encode(),
            "headers": [
                (k.lower().encode(), v.encode()) for k, v in (headers or {}).items()
            ],
            "root_path": "",
        }
        return Request(scope)

    return _make


@pytest.fixture
def policy() -> LimitPolicy:
    """Small policy so boundary values are easy to reach."""
    return LimitPolicy(default_limit=10, absolute_limit=50)


@pytest.fixture(autouse=True)
def _clean_policy_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep REST_* variables from the host out of the cached default policy."""
    for name in (
        "REST_DEFAULT_LIMIT",
        "REST_ABSOLUTE_LIMIT",
        "REST_START_INDEX_PARAM",
        "REST_LIMIT_PARAM",
        "REST_REPRESENTATION_PARAM",
    ):
        monkeypatch.delenv(name, raising=False)
    get_limit_policy.cache_clear()
    yield
    get_limit_policy.cache_clear()
