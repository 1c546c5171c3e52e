"""Pydantic models for exported posts."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Post(BaseModel):
    """A single blog post as read from the source database or dump.

    `name` is the URL tail of the post and may still be percent-encoded.
    """

    model_config = ConfigDict(frozen=True)

    id: int = 0
    published: datetime
    updated: datetime | None = None
    title: str = ""
    name: str = ""
    content: str = ""
    excerpt: str = ""
    status: str = "publish"
    tags: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    author_name: str = ""

    @field_validator("title", "name", "content", "excerpt", "author_name", mode="before")
    @classmethod
    def _coerce_text(cls, value: object) -> object:
        if value is None:
            return ""
        # Unquoted YAML scalars such as `name: 2024` arrive as numbers.
        if isinstance(value, (bool, int, float)):
            return str(value)
        return value

    @field_validator("tags", "categories", mode="before")
    @classmethod
    def _dedupe(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        if isinstance(value, (list, tuple, set)):
            # Keep first occurrence; these behave as ordered sets.
            return list(dict.fromkeys(str(v) for v in value))
        return value
