"""Tests for wparchive.config — models and YAML loader."""

import json

import pytest
from pydantic import ValidationError

from wparchive.config.loader import DEFAULT_CONFIG_TEMPLATE, _expand_env_vars, load_config
from wparchive.config.models import DatabaseConfig, ExportConfig, OutputConfig, ReplacePattern


# ── ExportConfig defaults ───────────────────────────────────────────


class TestExportConfigDefaults:
    def test_default_log_level(self, sample_config):
        assert sample_config.log_level == "info"

    def test_default_log_format(self, sample_config):
        assert sample_config.log_format == "text"

    def test_default_patterns_empty(self, sample_config):
        assert sample_config.patterns == {}

    def test_default_output(self, sample_config):
        assert sample_config.output.content_dir == "content/posts"
        assert sample_config.output.archive_path is None
        assert sample_config.output.extension == ".md"

    def test_default_source_statuses(self, sample_config):
        assert sample_config.source.statuses == ["publish"]

    def test_default_placeholder_slug(self, sample_config):
        assert sample_config.placeholder_slug == "untitled"


# ── Individual model validations ────────────────────────────────────


class TestReplacePattern:
    def test_lowercase_keys(self):
        p = ReplacePattern.model_validate({"needle": "a", "substitute": "b"})
        assert (p.needle, p.substitute) == ("a", "b")

    def test_capitalized_keys(self):
        p = ReplacePattern.model_validate({"Needle": "a", "Substitute": "b"})
        assert (p.needle, p.substitute) == ("a", "b")

    def test_pair_list(self):
        p = ReplacePattern.model_validate(["a", "b"])
        assert (p.needle, p.substitute) == ("a", "b")

    def test_bad_pair_rejected(self):
        with pytest.raises(ValidationError):
            ReplacePattern.model_validate(["a", "b", "c"])

    def test_substitute_defaults_empty(self):
        assert ReplacePattern(needle="x").substitute == ""


class TestDatabaseConfig:
    def test_defaults(self):
        cfg = DatabaseConfig()
        assert cfg.host == "localhost"
        assert cfg.port == 3306

    def test_invalid_port(self):
        with pytest.raises(ValidationError):
            DatabaseConfig(port=0)


class TestExportConfigValidation:
    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            ExportConfig(log_level="verbose")

    def test_placeholder_must_be_slug_safe(self):
        with pytest.raises(ValidationError):
            ExportConfig(placeholder_slug="not safe!")

    def test_null_category_allowed(self):
        cfg = ExportConfig(patterns={"Tag": None})
        assert cfg.patterns["Tag"] is None

    def test_output_override(self):
        assert OutputConfig(archive_path="a.yaml").archive_path == "a.yaml"


# ── Loader ──────────────────────────────────────────────────────────


class TestLoadConfig:
    def test_defaults_when_no_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert load_config() == ExportConfig()

    def test_loads_cli_path(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("patterns:\n  Tag:\n    - [' ', '-']\nlog_level: debug\n")
        cfg = load_config(str(path))
        assert cfg.log_level == "debug"
        assert cfg.patterns["Tag"][0].substitute == "-"

    def test_loads_json_config(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "database": {"host": "db.local"},
            "patterns": {"Content": [{"Needle": "x", "Substitute": "y"}]},
        }))
        cfg = load_config(str(path))
        assert cfg.database.host == "db.local"
        assert cfg.patterns["Content"][0].needle == "x"

    def test_project_local_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "wparchive.yaml").write_text("placeholder_slug: post\n")
        assert load_config().placeholder_slug == "post"

    def test_env_vars_expanded(self, tmp_path, monkeypatch):
        monkeypatch.setenv("WP_PASS", "s3cret")
        path = tmp_path / "c.yaml"
        path.write_text("database:\n  password: '${WP_PASS}'\n")
        assert load_config(str(path)).database.password == "s3cret"

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("log_level: [unclosed")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(str(path))

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("log_format: xml\n")
        with pytest.raises(ValueError, match="Invalid config"):
            load_config(str(path))

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="expected a mapping"):
            load_config(str(path))

    def test_missing_cli_path(self, tmp_path):
        with pytest.raises(ValueError, match="not found"):
            load_config(str(tmp_path / "nope.yaml"))

    def test_default_template_parses(self, tmp_path):
        path = tmp_path / "wparchive.yaml"
        path.write_text(DEFAULT_CONFIG_TEMPLATE)
        cfg = load_config(str(path))
        assert [p.needle for p in cfg.patterns["Tag"]] == ["&amp;", " "]


class TestExpandEnvVars:
    def test_nested(self, monkeypatch):
        monkeypatch.setenv("A", "1")
        assert _expand_env_vars({"x": ["${A}", {"y": "${A}-${A}"}], "n": 3}) == {
            "x": ["1", {"y": "1-1"}],
            "n": 3,
        }

    def test_unset_becomes_empty(self, monkeypatch):
        monkeypatch.delenv("NOT_SET_ANYWHERE", raising=False)
        assert _expand_env_vars("${NOT_SET_ANYWHERE}") == ""


class TestLegacyOptions:
    def test_flat_pascal_case_keys(self):
        cfg = ExportConfig.model_validate({
            "Host": "db.example.com",
            "Database": "blog",
            "Username": "wp",
            "Password": "pw",
            "ContentOutputDirectory": "out/posts",
            "ArchiveOutputFilePath": "out/archive.yaml",
            "Patterns": {"Tag": [{"Needle": " ", "Substitute": "-"}]},
        })
        assert cfg.database.host == "db.example.com"
        assert cfg.database.database == "blog"
        assert cfg.database.username == "wp"
        assert cfg.database.password == "pw"
        assert cfg.output.content_dir == "out/posts"
        assert cfg.output.archive_path == "out/archive.yaml"
        assert cfg.patterns["Tag"][0].substitute == "-"

    def test_wrapped_in_options(self):
        cfg = ExportConfig.model_validate({"Options": {"Host": "h", "ContentOutputDirectory": "c"}})
        assert cfg.database.host == "h"
        assert cfg.output.content_dir == "c"

    def test_explicit_sections_win(self):
        cfg = ExportConfig.model_validate({"Host": "legacy", "database": {"host": "modern"}})
        assert cfg.database.host == "modern"

    def test_legacy_json_file(self, tmp_path):
        path = tmp_path / "appsettings.json"
        path.write_text(json.dumps({
            "Host": "db",
            "ContentOutputDirectory": "posts",
            "Patterns": {"Content": [{"Needle": "a", "Substitute": "b"}], "Tag": None},
        }, indent="\t"))
        cfg = load_config(str(path))
        assert cfg.database.host == "db"
        assert cfg.output.content_dir == "posts"
        assert cfg.patterns["Tag"] is None

    def test_invalid_json_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(str(path))
