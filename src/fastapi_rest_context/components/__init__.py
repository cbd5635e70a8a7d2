"""Built-in context binders."""

from fastapi_rest_context.components.params import (
    LimitParam,
    RepresentationParam,
    StartIndexParam,
    pagination_flow,
)

__all__ = [
    "LimitParam",
    "RepresentationParam",
    "StartIndexParam",
    "pagination_flow",
]
