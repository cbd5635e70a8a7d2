"""LimitPolicy — configured result limits and reserved parameter names.

Environment variables use the REST_ prefix, e.g. ``REST_DEFAULT_LIMIT=25``
or ``REST_ABSOLUTE_LIMIT=500``.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LimitPolicy(BaseSettings):
    """Default and absolute page sizes plus the query names they are read from."""

    default_limit: int = Field(
        default=50,
        ge=1,
        description="Page size used when the request does not specify one",
    )
    absolute_limit: int = Field(
        default=100,
        ge=1,
        description="Largest page size a client may request",
    )
    start_index_param: str = Field(
        default="startIndex",
        min_length=1,
        description="Query parameter carrying the result offset",
    )
    limit_param: str = Field(
        default="limit",
        min_length=1,
        description="Query parameter carrying the page size",
    )
    representation_param: str = Field(
        default="v",
        min_length=1,
        description="Query parameter selecting the representation",
    )

    model_config = SettingsConfigDict(
        env_prefix="REST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="after")
    def _check_consistency(self) -> LimitPolicy:
        if self.default_limit > self.absolute_limit:
            raise ValueError(
                f"default_limit ({self.default_limit}) must not exceed"
                f" absolute_limit ({self.absolute_limit})"
            )
        names = {self.start_index_param, self.limit_param, self.representation_param}
        if len(names) != 3:
            raise ValueError("Reserved parameter names must be distinct")
        return self


@lru_cache
def get_limit_policy() -> LimitPolicy:
    """Return the process-wide policy loaded from the environment."""
    return LimitPolicy()
