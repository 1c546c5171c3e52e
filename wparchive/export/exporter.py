"""ArchiveExporter: drives a delegate over every post and writes the archive."""

from __future__ import annotations

import logging
import time
from pathlib import Path

import yaml

from wparchive.export.delegate import ExportDelegate
from wparchive.export.models import ExportedPost, ExportReport
from wparchive.posts.reader import PostReader

logger = logging.getLogger(__name__)


def render_post(front_matter: dict[str, object], content: str) -> str:
    """Render a front matter block followed by the post body."""
    dumped = yaml.safe_dump(
        front_matter,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        width=1000,
    )
    return f"---\n{dumped}---\n\n{content}\n"


class ArchiveExporter:
    """Writes one Markdown file per post, plus an optional archive index.

    Path, content and front matter decisions belong to the delegate; the
    exporter owns iteration, serialization and file writes. I/O errors
    propagate to the caller.
    """

    def __init__(
        self,
        reader: PostReader,
        content_dir: str | Path,
        delegate: ExportDelegate,
        archive_path: str | Path | None = None,
        extension: str = ".md",
    ) -> None:
        self.reader = reader
        self.content_dir = Path(content_dir)
        self.delegate = delegate
        self.archive_path = Path(archive_path) if archive_path else None
        self.extension = extension

    def export(self, *, dry_run: bool = False) -> ExportReport:
        """Export every post from the reader. Returns a summary report."""
        start = time.monotonic()
        report = ExportReport(dry_run=dry_run)
        claimed: set[Path] = set()

        for post in self.reader.read_posts():
            base = self.delegate.get_output_path(post, self.content_dir)
            dest = self._unique_path(base, claimed)
            if dest.name != base.name + self.extension:
                report.renamed += 1
                logger.warning("post %d collides with %s, writing %s", post.id, base, dest.name)
            claimed.add(dest)

            processed = self.delegate.process_post(post)
            front_matter = self.delegate.populate_front_matter(processed, {})

            if dry_run:
                logger.debug("dry-run: would write %s", dest)
            else:
                text = render_post(front_matter, processed.content)
                dest.write_text(text, encoding="utf-8")
                logger.info("wrote %s (%d bytes)", dest, len(text))

            report.posts.append(ExportedPost(
                post_id=post.id,
                title=str(front_matter.get("Title", post.title)),
                published=post.published.isoformat(),
                path=str(dest),
            ))
            report.exported += 1

        if self.archive_path and not dry_run:
            self._write_archive(report.posts)

        report.duration = time.monotonic() - start
        return report

    # -- Internals -----------------------------------------------------------

    def _unique_path(self, base: Path, claimed: set[Path]) -> Path:
        dest = base.with_name(base.name + self.extension)
        counter = 2
        while dest in claimed:
            dest = base.with_name(f"{base.name}-{counter}{self.extension}")
            counter += 1
        return dest

    def _write_archive(self, posts: list[ExportedPost]) -> None:
        entries = [
            {"id": p.post_id, "title": p.title, "published": p.published, "path": p.path}
            for p in posts
        ]
        self.archive_path.parent.mkdir(parents=True, exist_ok=True)
        self.archive_path.write_text(
            yaml.safe_dump(entries, default_flow_style=False, sort_keys=False, allow_unicode=True),
            encoding="utf-8",
        )
        logger.info("wrote archive index %s (%d entries)", self.archive_path, len(entries))
