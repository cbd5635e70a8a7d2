"""FastAPI REST Context - per-request pagination and representation state for FastAPI."""

from fastapi_rest_context.component import BinderCategory, ContextBinder
from fastapi_rest_context.components.params import (
    LimitParam,
    RepresentationParam,
    StartIndexParam,
    pagination_flow,
)
from fastapi_rest_context.context import RequestContext
from fastapi_rest_context.dependency import context_dependency
from fastapi_rest_context.exceptions import (
    InternalEncodingFailure,
    InvalidParameter,
    RequestNotAttached,
    RestContextError,
)
from fastapi_rest_context.flow import Flow
from fastapi_rest_context.links import Hyperlink, build_query
from fastapi_rest_context.representation import (
    CustomRepresentation,
    DefaultRepresentation,
    FullRepresentation,
    NamedRepresentation,
    RefRepresentation,
    Representation,
    parse_representation,
)
from fastapi_rest_context.settings import LimitPolicy, get_limit_policy

__all__ = [
    "BinderCategory",
    "ContextBinder",
    "CustomRepresentation",
    "DefaultRepresentation",
    "Flow",
    "FullRepresentation",
    "Hyperlink",
    "InternalEncodingFailure",
    "InvalidParameter",
    "LimitParam",
    "LimitPolicy",
    "NamedRepresentation",
    "RefRepresentation",
    "Representation",
    "RepresentationParam",
    "RequestContext",
    "RequestNotAttached",
    "RestContextError",
    "StartIndexParam",
    "build_query",
    "context_dependency",
    "get_limit_policy",
    "pagination_flow",
    "parse_representation",
]
