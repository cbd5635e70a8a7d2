"""Tests for Flow class and ResolvedFlow."""

from __future__ import annotations

import pytest

from fastapi_rest_context.component import BinderCategory, ContextBinder
from fastapi_rest_context.components.params import (
    LimitParam,
    RepresentationParam,
    StartIndexParam,
)
from fastapi_rest_context.context import RequestContext
from fastapi_rest_context.flow import Flow, ResolvedFlow


class _CustomStub(ContextBinder):
    category = BinderCategory.CUSTOM

    async def bind(self, ctx: RequestContext) -> None:
        pass


class TestFlowInit:
    def test_init_with_binders(self) -> None:
        flow = Flow(LimitParam(), StartIndexParam())
        assert len(flow.resolve().binders) == 2

    def test_init_empty(self) -> None:
        assert Flow().resolve().binders == ()

    def test_add_returns_self(self) -> None:
        flow = Flow()
        assert flow.add(LimitParam()) is flow


class TestFlowResolve:
    def test_binders_sorted_by_category_order(self) -> None:
        flow = Flow(_CustomStub(), StartIndexParam(), LimitParam(), RepresentationParam())
        categories = [b.category for b in flow.resolve().binders]
        assert categories == [
            BinderCategory.REPRESENTATION,
            BinderCategory.LIMIT,
            BinderCategory.START_INDEX,
            BinderCategory.CUSTOM,
        ]

    def test_preserves_registration_order_within_category(self) -> None:
        first, second = _CustomStub(), _CustomStub()
        binders = Flow(first, second).resolve().binders
        assert binders == (first, second)

    def test_nested_flows_are_flattened(self) -> None:
        inner = Flow(StartIndexParam())
        flow = Flow(_CustomStub(), inner, LimitParam())
        categories = [b.category for b in flow.resolve().binders]
        assert categories == [
            BinderCategory.LIMIT,
            BinderCategory.START_INDEX,
            BinderCategory.CUSTOM,
        ]

    def test_resolve_is_cached(self) -> None:
        flow = Flow(LimitParam())
        assert flow.resolve() is flow.resolve()

    def test_add_invalidates_cache(self) -> None:
        flow = Flow(LimitParam())
        before = flow.resolve()
        flow.add(StartIndexParam())
        after = flow.resolve()
        assert before is not after
        assert len(after.binders) == 2

    def test_resolved_flow_is_frozen(self) -> None:
        resolved = Flow().resolve()
        assert isinstance(resolved, ResolvedFlow)
        with pytest.raises(AttributeError):
            resolved.binders = ()  # type: ignore[misc]
