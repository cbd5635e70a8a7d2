"""ContextBinder abstract base class and BinderCategory enum."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar

from fastapi_rest_context.context import RequestContext


class BinderCategory(Enum):
    """Binder categories, defining strict execution order."""

    REPRESENTATION = "representation"
    LIMIT = "limit"
    START_INDEX = "start_index"
    CUSTOM = "custom"

    @property
    def order(self) -> int:
        _ORDER = {
            "representation": 1,
            "limit": 2,
            "start_index": 3,
            "custom": 4,
        }
        return _ORDER[self.value]


class ContextBinder(ABC):
    """Base abstraction for units that copy request parameters onto a context."""

    category: ClassVar[BinderCategory]

    @abstractmethod
    async def bind(self, ctx: RequestContext) -> None: ...
