"""Export pipeline: delegates, the exporter and its report."""

from wparchive.export.delegate import DefaultDelegate, ExportDelegate
from wparchive.export.exporter import ArchiveExporter, render_post
from wparchive.export.models import ExportedPost, ExportReport

__all__ = [
    "ArchiveExporter",
    "DefaultDelegate",
    "ExportDelegate",
    "ExportReport",
    "ExportedPost",
    "render_post",
]
