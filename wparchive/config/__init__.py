from .loader import DEFAULT_CONFIG_TEMPLATE, load_config
from .models import (
    DatabaseConfig,
    ExportConfig,
    OutputConfig,
    PatternTable,
    ReplacePattern,
    SourceConfig,
)

__all__ = [
    "DEFAULT_CONFIG_TEMPLATE",
    "DatabaseConfig",
    "ExportConfig",
    "OutputConfig",
    "PatternTable",
    "ReplacePattern",
    "SourceConfig",
    "load_config",
]
