"""Representation selectors — how much detail a response should carry."""

from __future__ import annotations

from dataclasses import dataclass

CUSTOM_PREFIX = "custom:"


@dataclass(frozen=True)
class Representation:
    """Opaque selector stored on the context and handed to serializers."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class DefaultRepresentation(Representation):
    name: str = "default"


@dataclass(frozen=True)
class FullRepresentation(Representation):
    name: str = "full"


@dataclass(frozen=True)
class RefRepresentation(Representation):
    name: str = "ref"


@dataclass(frozen=True)
class NamedRepresentation(Representation):
    """Any other representation registered by the application."""


@dataclass(frozen=True, init=False)
class CustomRepresentation(Representation):
    """Client-described representation, e.g. ``custom:(uuid,display)``."""

    spec: str

    def __init__(self, spec: str) -> None:
        object.__setattr__(self, "spec", spec)
        object.__setattr__(self, "name", CUSTOM_PREFIX + spec)


_BUILTIN: dict[str, type[Representation]] = {
    "default": DefaultRepresentation,
    "full": FullRepresentation,
    "ref": RefRepresentation,
}


def parse_representation(value: str) -> Representation:
    """Map a raw ``v=`` query value onto a representation.

    Built-in names match case-insensitively; ``custom:<spec>`` keeps its spec
    verbatim. Anything else becomes a NamedRepresentation.
    """
    if not value:
        raise ValueError("Representation name must not be empty")
    builtin = _BUILTIN.get(value.lower())
    if builtin is not None:
        return builtin()
    if value.lower().startswith(CUSTOM_PREFIX):
        return CustomRepresentation(value[len(CUSTOM_PREFIX) :])
    return NamedRepresentation(value)
