from collections.abc import Mapping, Sequence
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ReplacePattern(BaseModel):
    """A literal find/replace rule."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    needle: str = Field(alias="Needle")
    substitute: str = Field(default="", alias="Substitute")

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, data: object) -> object:
        # Allow the compact `["needle", "substitute"]` spelling in YAML.
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError(f"replace pattern must be a [needle, substitute] pair, got {data!r}")
            return {"needle": data[0], "substitute": data[1]}
        return data


PatternTable = Mapping[str, Sequence[ReplacePattern] | None]


class DatabaseConfig(BaseModel):
    host: str = "localhost"
    port: int = Field(default=3306, gt=0)
    database: str = "wordpress"
    username: str = ""
    password: str = ""


class SourceConfig(BaseModel):
    path: str = "posts.yaml"
    statuses: list[str] = Field(default_factory=lambda: ["publish"])


class OutputConfig(BaseModel):
    content_dir: str = "content/posts"
    archive_path: str | None = None
    extension: str = ".md"


class ExportConfig(BaseModel):
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    source: SourceConfig = Field(default_factory=SourceConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    patterns: dict[str, list[ReplacePattern] | None] = Field(default_factory=dict)
    placeholder_slug: str = Field(default="untitled", min_length=1, pattern=r"^[A-Za-z0-9-]+$")
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"

    @model_validator(mode="before")
    @classmethod
    def _from_legacy_options(cls, data: object) -> object:
        """Accept the original exporter's flat PascalCase settings.

        `Host`, `Database`, `Username`, `Password`, `ContentOutputDirectory`,
        `ArchiveOutputFilePath` and `Patterns` are folded into their sections,
        optionally wrapped in an `Options` mapping. Explicit sections win.
        """
        if not isinstance(data, dict):
            return data
        data = dict(data)
        options = data.pop("Options", None)
        if isinstance(options, dict):
            data = {**options, **data}

        for key, (section, field) in _LEGACY_KEYS.items():
            if key not in data:
                continue
            value = data.pop(key)
            if section is None:
                data.setdefault(field, value)
                continue
            target = data.get(section)
            if isinstance(target, BaseModel):
                target = target.model_dump()
            target = dict(target) if isinstance(target, dict) else {}
            target.setdefault(field, value)
            data[section] = target
        return data


_LEGACY_KEYS: dict[str, tuple[str | None, str]] = {
    "Host": ("database", "host"),
    "Database": ("database", "database"),
    "Username": ("database", "username"),
    "Password": ("database", "password"),
    "ContentOutputDirectory": ("output", "content_dir"),
    "ArchiveOutputFilePath": ("output", "archive_path"),
    "Patterns": (None, "patterns"),
}
