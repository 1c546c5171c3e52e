"""Archive-specific rewriting of post paths, content and front matter."""

from wparchive.transform.delegate import ArchiveDelegate
from wparchive.transform.normalizer import apply_patterns, normalize_common_punctuation

__all__ = [
    "ArchiveDelegate",
    "apply_patterns",
    "normalize_common_punctuation",
]
