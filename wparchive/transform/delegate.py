"""ArchiveDelegate: path, content and front matter policy for the archive."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from urllib.parse import unquote_plus

from wparchive.config.models import PatternTable
from wparchive.export.delegate import DefaultDelegate, ExportDelegate
from wparchive.posts.models import Post
from wparchive.transform.normalizer import apply_patterns, normalize_common_punctuation

logger = logging.getLogger(__name__)

_UNSAFE_SLUG_RE = re.compile(r"[^A-Za-z0-9-]")
_TRIM_CHARS = "\"' "
_EXCLUDED_TAGS = frozenset({"null", "uncategorized"})
_FALLBACK_TAG = "untagged"


class ArchiveDelegate:
    """Layers the archive's rewriting rules on top of a default delegate.

    Text rules come from the shared pattern table: "Tag" rules apply to
    slugs and tags, "Content" rules to post bodies.
    """

    def __init__(
        self,
        patterns: PatternTable,
        default: ExportDelegate | None = None,
        log: logging.Logger = logger,
        placeholder_slug: str = "untitled",
    ) -> None:
        self.patterns = patterns
        self.default = default if default is not None else DefaultDelegate()
        self.log = log
        self.placeholder_slug = placeholder_slug

    # -- Delegate hooks ------------------------------------------------------

    def get_output_path(self, post: Post, content_dir: Path) -> Path:
        """Return `{content_dir}/{YYYY}/{MM}-{DD}-{slug}`, creating the year dir."""
        decoded = unquote_plus(post.name)
        self.log.info("name: %s", decoded)

        slug = self.clean_slug(decoded)
        if not slug:
            self.log.warning(
                "post %d name %r has no filesystem-safe characters, using %r",
                post.id, decoded, self.placeholder_slug,
            )
            slug = self.placeholder_slug

        post_dir = Path(content_dir) / f"{post.published:%Y}"
        post_dir.mkdir(parents=True, exist_ok=True)
        return post_dir / f"{post.published:%m-%d}-{slug}"

    def process_post(self, post: Post) -> Post:
        """Run default processing, then rewrite the resulting content."""
        post = self.default.process_post(post)
        return post.model_copy(update={"content": self.process_content(post.content)})

    def populate_front_matter(self, post: Post, node: dict[str, object]) -> dict[str, object]:
        """Insert Title and Tags, then let the default delegate add its keys."""
        if post.title:
            node["Title"] = self.clean_title(post.title)

        node["Tags"] = [self.clean_tag(tag) for tag in self.collect_tags(post)]

        return self.default.populate_front_matter(post, node)

    # -- Rewriting helpers ---------------------------------------------------

    def clean_slug(self, name: str) -> str:
        # Strip after substitution so substitutes may introduce hyphens.
        name = apply_patterns(normalize_common_punctuation(name), "Tag", self.patterns, self.log)
        return _UNSAFE_SLUG_RE.sub("", name)

    def process_content(self, content: str) -> str:
        content = normalize_common_punctuation(content).replace("http://", "https://")
        return apply_patterns(content, "Content", self.patterns, self.log)

    def clean_title(self, title: str) -> str:
        # Colons are ambiguous in YAML scalars.
        return normalize_common_punctuation(title).strip(_TRIM_CHARS).replace(":", " -")

    def clean_tag(self, tag: str) -> str:
        tag = apply_patterns(normalize_common_punctuation(tag), "Tag", self.patterns, self.log)
        return tag.strip(_TRIM_CHARS)

    @staticmethod
    def collect_tags(post: Post) -> list[str]:
        """Ordered union of tags, categories and author, minus placeholders."""
        tags = [t for t in dict.fromkeys([*post.tags, *post.categories]) if t not in _EXCLUDED_TAGS]
        if post.author_name and post.author_name not in tags:
            tags.append(post.author_name)
        return tags or [_FALLBACK_TAG]
