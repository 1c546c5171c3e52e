"""YAML config loading with env var expansion."""

import json
import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import ExportConfig


def load_config(cli_path: str | None = None) -> ExportConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults.

    Files with a `.json` suffix are parsed as JSON, everything else as YAML.
    """
    if cli_path and not Path(cli_path).exists():
        raise ValueError(f"Config file not found: {cli_path}")

    config_paths = [
        Path(cli_path) if cli_path else None,
        Path("./wparchive.yaml"),
        Path("./wparchive.json"),
        Path.home() / ".wparchive" / "config.yaml",
    ]

    for path in config_paths:
        if path and path.exists():
            try:
                with open(path, encoding="utf-8") as f:
                    raw = json.load(f) if path.suffix.lower() == ".json" else yaml.safe_load(f)
                if raw is None:
                    continue
                if not isinstance(raw, dict):
                    raise ValueError(f"Invalid config in {path}: expected a mapping, got {type(raw).__name__}")
                raw = _expand_env_vars(raw)
                return ExportConfig(**raw)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {path}: {e}") from e
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
            except ValidationError as e:
                raise ValueError(f"Invalid config in {path}: {e}") from e

    return ExportConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `wparchive config init`
DEFAULT_CONFIG_TEMPLATE = """\
# wparchive.yaml

# Database (read by external post readers; the bundled reader uses `source`)
database:
  host: "localhost"
  port: 3306
  database: "wordpress"
  username: "${WP_DB_USER}"
  password: "${WP_DB_PASSWORD}"

# Post dump to export (YAML or JSON list of posts)
source:
  path: "posts.yaml"
  statuses: [publish]          # empty list exports every status

# Output
output:
  content_dir: "content/posts"
  # archive_path: "content/archive.yaml"
  extension: ".md"

# Literal find/replace rules, applied in order
patterns:
  Content:
    - needle: "http://old.example.com"
      substitute: "https://example.com"
  Tag:
    - needle: "&amp;"
      substitute: "and"
    - needle: " "
      substitute: "-"

# Slug used when a post name sanitizes to nothing
placeholder_slug: "untitled"

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
