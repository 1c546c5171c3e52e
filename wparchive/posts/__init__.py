"""Post records and readers."""

from wparchive.posts.models import Post
from wparchive.posts.reader import FilePostReader, PostReader

__all__ = [
    "FilePostReader",
    "Post",
    "PostReader",
]
