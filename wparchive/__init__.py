"""wparchive - export blog posts into a dated Markdown archive with YAML front matter."""

from wparchive.config import ExportConfig, load_config
from wparchive.export import ArchiveExporter, DefaultDelegate, ExportDelegate
from wparchive.posts import FilePostReader, Post, PostReader
from wparchive.transform import ArchiveDelegate, apply_patterns, normalize_common_punctuation

__version__ = "0.1.0"

__all__ = [
    "ArchiveDelegate",
    "ArchiveExporter",
    "DefaultDelegate",
    "ExportConfig",
    "ExportDelegate",
    "FilePostReader",
    "Post",
    "PostReader",
    "apply_patterns",
    "load_config",
    "normalize_common_punctuation",
]
