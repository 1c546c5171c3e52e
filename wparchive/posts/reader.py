"""Post readers: the boundary between storage and the export pipeline."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from datetime import datetime, timezone
from pathlib import Path

import yaml
from pydantic import ValidationError

from wparchive.posts.models import Post

logger = logging.getLogger(__name__)


def _publish_order(post: Post) -> datetime:
    # Dumps may mix local post_date and offset-bearing post_date_gmt values.
    published = post.published
    if published.tzinfo is None:
        return published.replace(tzinfo=timezone.utc)
    return published


class PostReader(ABC):
    """Abstract source of posts.

    Implementations own connection handling; the exporter only iterates.
    """

    @abstractmethod
    def read_posts(self) -> Iterator[Post]:
        """Yield fully populated posts in export order."""
        ...


class FilePostReader(PostReader):
    """Reads posts from a YAML or JSON dump.

    The file holds either a list of post records or a mapping with a
    `posts` list. Only posts whose status is in `statuses` are yielded;
    an empty `statuses` yields everything. Timestamps without an offset
    are ordered as UTC.
    """

    def __init__(self, path: str | Path, statuses: Iterable[str] = ("publish",)) -> None:
        self.path = Path(path)
        self.statuses = frozenset(statuses)

    def read_posts(self) -> Iterator[Post]:
        records = self._load_records()
        posts: list[Post] = []
        for index, record in enumerate(records):
            try:
                post = Post.model_validate(record)
            except ValidationError as e:
                raise ValueError(f"Invalid post #{index} in {self.path}: {e}") from e
            if self.statuses and post.status not in self.statuses:
                logger.debug("skipping post %d with status %r", post.id, post.status)
                continue
            posts.append(post)

        posts.sort(key=_publish_order)
        logger.info("read %d post(s) from %s", len(posts), self.path)
        yield from posts

    def _load_records(self) -> list:
        with open(self.path, encoding="utf-8") as f:
            if self.path.suffix.lower() == ".json":
                try:
                    raw = json.load(f)
                except json.JSONDecodeError as e:
                    raise ValueError(f"Invalid JSON in {self.path}: {e}") from e
            else:
                try:
                    raw = yaml.safe_load(f)
                except yaml.YAMLError as e:
                    raise ValueError(f"Invalid YAML in {self.path}: {e}") from e

        if raw is None:
            return []
        if isinstance(raw, dict):
            raw = raw.get("posts", [])
        if not isinstance(raw, list):
            raise ValueError(f"Expected a list of posts in {self.path}, got {type(raw).__name__}")
        return raw
