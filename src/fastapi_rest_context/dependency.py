"""context_dependency() — factory producing FastAPI-compatible dependency callables."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from fastapi import HTTPException
from starlette.requests import Request

from fastapi_rest_context.context import RequestContext
from fastapi_rest_context.exceptions import (
    InvalidParameter,
    RestContextError,
)
from fastapi_rest_context.flow import Flow
from fastapi_rest_context.settings import LimitPolicy

logger = logging.getLogger(__name__)


def context_dependency(
    flow: Flow, *, policy: LimitPolicy | None = None
) -> Callable[..., Awaitable[RequestContext]]:
    """Return a FastAPI-compatible dependency that binds a RequestContext.

    ``policy`` defaults to :func:`get_limit_policy`, looked up per request so
    that clearing its cache takes effect without rebuilding the app.
    """
    resolved = flow.resolve()

    async def dependency(request: Request) -> RequestContext:
        ctx = RequestContext(request, policy=policy)

        try:
            for binder in resolved.binders:
                await binder.bind(ctx)
        except InvalidParameter as exc:
            raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
        except RestContextError:
            raise
        except Exception as exc:
            logger.exception("Unexpected error while binding %s", request.url.path)
            raise HTTPException(
                status_code=500, detail="Internal context error"
            ) from exc

        logger.debug("Bound %r for %s", ctx, request.url.path)
        return ctx

    return dependency
