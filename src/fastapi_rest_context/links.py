"""Hyperlink value and query-string reconstruction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal
from urllib.parse import quote_plus

from fastapi_rest_context._types import QueryMapping
from fastapi_rest_context.exceptions import InternalEncodingFailure


@dataclass(frozen=True)
class Hyperlink:
    """A named link to a related page of results."""

    relation: Literal["next", "prev"]
    url: str

    def to_dict(self) -> dict[str, str]:
        return {"rel": self.relation, "uri": self.url}


def _encode(text: str) -> str:
    try:
        return quote_plus(text, encoding="utf-8", errors="strict")
    except UnicodeEncodeError as exc:
        raise InternalEncodingFailure(
            "UTF-8 encoding should always be supported", cause=exc
        ) from exc


def build_query(
    params: QueryMapping,
    exclude: str,
    extra: tuple[str, str] | None = None,
) -> str:
    """Rebuild a query string without ``exclude``, optionally adding one pair.

    Keys keep the order of ``params.keys()`` and every value of a multi-valued
    key is emitted. Keys and values are form-encoded as UTF-8. The result has
    no leading ``?`` and no trailing ``&``.
    """
    pairs: list[str] = []
    for key in params.keys():
        if key == exclude:
            continue
        for value in params.getlist(key):
            pairs.append(f"{_encode(key)}={_encode(value)}")
    if extra is not None:
        pairs.append(f"{_encode(extra[0])}={_encode(extra[1])}")
    return "&".join(pairs)
