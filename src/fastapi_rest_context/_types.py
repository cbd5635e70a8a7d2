"""Shared type aliases and protocols."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from starlette.datastructures import URL


class QueryMapping(Protocol):
    """Multi-valued query parameters, as exposed by Starlette's QueryParams."""

    def keys(self) -> Iterable[str]: ...

    def getlist(self, key: str) -> list[str]: ...


class RequestSource(Protocol):
    """The parts of an inbound request a context reads."""

    @property
    def url(self) -> URL: ...

    @property
    def query_params(self) -> QueryMapping: ...
