"""Flow class — ordered container of ContextBinders."""

from __future__ import annotations

from dataclasses import dataclass

from fastapi_rest_context.component import ContextBinder


@dataclass(frozen=True)
class ResolvedFlow:
    """Immutable, pre-computed binding plan."""

    binders: tuple[ContextBinder, ...]


class Flow:
    """Ordered container of ContextBinder instances."""

    def __init__(self, *binders: ContextBinder | Flow) -> None:
        self._items: list[ContextBinder | Flow] = list(binders)
        self._resolved: ResolvedFlow | None = None

    def add(self, *binders: ContextBinder | Flow) -> Flow:
        self._items.extend(binders)
        self._resolved = None
        return self

    def resolve(self) -> ResolvedFlow:
        if self._resolved is not None:
            return self._resolved

        flat: list[ContextBinder] = []
        self._flatten(self._items, flat)

        self._resolved = ResolvedFlow(
            binders=tuple(sorted(flat, key=lambda b: b.category.order)),
        )
        return self._resolved

    @staticmethod
    def _flatten(items: list[ContextBinder | Flow], out: list[ContextBinder]) -> None:
        for item in items:
            if isinstance(item, Flow):
                Flow._flatten(item._items, out)
            else:
                out.append(item)
