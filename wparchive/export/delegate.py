"""Delegate interface and the stock export behaviour."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Protocol, runtime_checkable
from urllib.parse import unquote_plus

from wparchive.posts.models import Post

_PATH_SEPARATORS_RE = re.compile(r"[\\/]+")


@runtime_checkable
class ExportDelegate(Protocol):
    """Customization hooks the exporter calls once per post."""

    def get_output_path(self, post: Post, content_dir: Path) -> Path: ...

    def process_post(self, post: Post) -> Post: ...

    def populate_front_matter(self, post: Post, node: dict[str, object]) -> dict[str, object]: ...


class DefaultDelegate:
    """Stock behaviour: flat `{date}-{name}` paths and a plain metadata block."""

    def get_output_path(self, post: Post, content_dir: Path) -> Path:
        content_dir = Path(content_dir)
        content_dir.mkdir(parents=True, exist_ok=True)
        name = _PATH_SEPARATORS_RE.sub("-", unquote_plus(post.name)).strip(".") or str(post.id)
        return content_dir / f"{post.published:%Y-%m-%d}-{name}"

    def process_post(self, post: Post) -> Post:
        content = post.content.replace("\r\n", "\n").replace("\r", "\n").rstrip()
        return post.model_copy(update={"content": content})

    def populate_front_matter(self, post: Post, node: dict[str, object]) -> dict[str, object]:
        """Add stock keys; keys a wrapping delegate already set are kept."""
        fields: dict[str, object] = {
            "Title": post.title or None,
            "Date": post.published.isoformat(),
            "Updated": post.updated.isoformat() if post.updated else None,
            "Author": post.author_name or None,
            "Tags": list(post.tags) or None,
            "Categories": list(post.categories) or None,
            "Status": post.status or None,
            "Excerpt": post.excerpt or None,
        }
        for key, value in fields.items():
            if value is not None and key not in node:
                node[key] = value
        return node
