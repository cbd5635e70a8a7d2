"""Parameter binders — representation, limit and start index."""

from __future__ import annotations

import logging

from fastapi_rest_context.component import BinderCategory, ContextBinder
from fastapi_rest_context.context import RequestContext
from fastapi_rest_context.exceptions import InvalidParameter
from fastapi_rest_context.flow import Flow
from fastapi_rest_context.representation import Representation, parse_representation

logger = logging.getLogger(__name__)


def _query_value(ctx: RequestContext, name: str) -> str | None:
    if ctx.request is None:
        return None
    values = ctx.request.query_params.getlist(name)
    return values[0] if values else None


def _parse_int(raw: str, name: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise InvalidParameter(
            f"Invalid {name} parameter: {raw!r} is not an integer", parameter=name
        ) from None


class RepresentationParam(ContextBinder):
    """Selects the representation from ``?v=``, falling back to ``default``."""

    category = BinderCategory.REPRESENTATION

    def __init__(self, *, default: Representation | None = None) -> None:
        self._default = default

    async def bind(self, ctx: RequestContext) -> None:
        name = ctx.policy.representation_param
        raw = _query_value(ctx, name)
        if raw is None:
            if self._default is not None:
                ctx.representation = self._default
            return
        try:
            ctx.representation = parse_representation(raw)
        except ValueError:
            logger.warning("Rejected empty %s parameter", name)
            raise InvalidParameter(
                f"?{name}=(empty string) is not allowed", parameter=name
            ) from None


class LimitParam(ContextBinder):
    """Applies ``?limit=`` through the context's validating setter."""

    category = BinderCategory.LIMIT

    async def bind(self, ctx: RequestContext) -> None:
        name = ctx.policy.limit_param
        raw = _query_value(ctx, name)
        if raw is None:
            return
        try:
            ctx.limit = _parse_int(raw, name)
        except InvalidParameter as exc:
            logger.warning("Rejected %s=%r: %s", name, raw, exc.detail)
            raise


class StartIndexParam(ContextBinder):
    """Applies ``?startIndex=`` through the context's validating setter."""

    category = BinderCategory.START_INDEX

    async def bind(self, ctx: RequestContext) -> None:
        name = ctx.policy.start_index_param
        raw = _query_value(ctx, name)
        if raw is None:
            return
        try:
            ctx.start_index = _parse_int(raw, name)
        except InvalidParameter as exc:
            logger.warning("Rejected %s=%r: %s", name, raw, exc.detail)
            raise


def pagination_flow(*, default_representation: Representation | None = None) -> Flow:
    """Flow binding representation, limit and start index in that order."""
    return Flow(
        RepresentationParam(default=default_representation),
        LimitParam(),
        StartIndexParam(),
    )
