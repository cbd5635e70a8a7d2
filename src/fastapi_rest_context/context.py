"""RequestContext — per-request pagination and representation state."""

from __future__ import annotations

import logging
from typing import Any

from fastapi_rest_context._types import RequestSource
from fastapi_rest_context.exceptions import InvalidParameter, RequestNotAttached
from fastapi_rest_context.links import Hyperlink, build_query
from fastapi_rest_context.representation import (
    DefaultRepresentation,
    Representation,
)
from fastapi_rest_context.settings import LimitPolicy, get_limit_policy

logger = logging.getLogger(__name__)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class RequestContext:
    """Query-shaping state bound to a single inbound request.

    ``limit`` always stays within ``1..policy.absolute_limit`` and
    ``start_index`` never goes negative: a rejected assignment raises
    InvalidParameter and leaves the previous value in place.
    """

    def __init__(
        self,
        request: RequestSource | None = None,
        *,
        policy: LimitPolicy | None = None,
    ) -> None:
        self.request = request
        self.policy = policy if policy is not None else get_limit_policy()
        self._representation: Representation = DefaultRepresentation()
        self._start_index = 0
        self._limit = self.policy.default_limit

    def __repr__(self) -> str:
        return (
            f"RequestContext(representation={self._representation.name!r},"
            f" start_index={self._start_index}, limit={self._limit})"
        )

    @property
    def representation(self) -> Representation:
        return self._representation

    @representation.setter
    def representation(self, value: Representation) -> None:
        if not isinstance(value, Representation):
            raise InvalidParameter(
                "A representation must be provided",
                parameter=self.policy.representation_param,
            )
        self._representation = value

    @property
    def limit(self) -> int:
        """Maximum number of main results a search should return."""
        return self._limit

    @limit.setter
    def limit(self, value: int | None) -> None:
        if value is None or not _is_int(value) or value <= 0:
            raise InvalidParameter(
                "If you specify a number of results to return,"
                " it must be >0 and not null",
                parameter=self.policy.limit_param,
            )
        absolute = self.policy.absolute_limit
        if value > absolute:
            raise InvalidParameter(
                f"Administrator has set absolute limit at {absolute}",
                parameter=self.policy.limit_param,
            )
        self._limit = value

    @property
    def start_index(self) -> int:
        """Offset of the first result a search should return."""
        return self._start_index

    @start_index.setter
    def start_index(self, value: int | None) -> None:
        if value is None or not _is_int(value) or value < 0:
            raise InvalidParameter(
                "If you specify a start index, it must be >=0 and not null",
                parameter=self.policy.start_index_param,
            )
        self._start_index = value

    def next_link(self) -> Hyperlink:
        """Link to GET for the page after this one."""
        return Hyperlink("next", self._page_url(self._start_index + self._limit))

    def previous_link(self) -> Hyperlink:
        """Link to GET for the page before this one.

        The offset is clamped at zero and dropped from the query when it
        lands there, so the link points at the first page.
        """
        prev_start = max(self._start_index - self._limit, 0)
        return Hyperlink("prev", self._page_url(prev_start or None))

    def _page_url(self, offset: int | None) -> str:
        if self.request is None:
            raise RequestNotAttached()
        name = self.policy.start_index_param
        extra = (name, str(offset)) if offset is not None else None
        query = build_query(self.request.query_params, exclude=name, extra=extra)
        base = str(self.request.url.replace(query="", fragment=""))
        url = f"{base}?{query}" if query else base
        logger.debug("Derived page link %s", url)
        return url
