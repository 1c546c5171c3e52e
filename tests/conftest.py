"""Shared test fixtures for wparchive."""

from datetime import datetime

import pytest
import yaml

from wparchive.config.models import ExportConfig, ReplacePattern
from wparchive.posts.models import Post


@pytest.fixture
def sample_post():
    return Post(
        id=42,
        published=datetime(2021, 3, 7, 14, 30),
        title="“Hello”: A Tour",
        name="hello%2C-world%21-2024",
        content="Visit http://example.com — it’s “great”",
        tags=["python", "travel"],
        categories=["uncategorized", "Notes"],
        author_name="Sam",
    )


@pytest.fixture
def bare_post():
    return Post(published=datetime(2020, 12, 31), name="bare")


@pytest.fixture
def sample_patterns():
    return {
        "Content": [ReplacePattern(needle="old.example.com", substitute="example.com")],
        "Tag": [
            ReplacePattern(needle="&amp;", substitute="and"),
            ReplacePattern(needle=" ", substitute="-"),
        ],
    }


@pytest.fixture
def sample_config():
    return ExportConfig()


@pytest.fixture
def post_dump(tmp_path):
    """A YAML post dump with one draft among published posts."""
    records = [
        {
            "id": 2,
            "published": "2022-05-01T09:00:00",
            "title": "Second: Post",
            "name": "second-post",
            "content": "See http://old.example.com/page",
            "tags": ["Rock &amp; Roll"],
            "categories": ["null"],
            "author_name": "Alex",
            "status": "publish",
        },
        {
            "id": 1,
            "published": "2021-01-15T08:00:00",
            "title": "First",
            "name": "first",
            "content": "Hello\r\nworld\r\n",
            "status": "publish",
        },
        {
            "id": 3,
            "published": "2022-06-01T09:00:00",
            "title": "Draft",
            "name": "draft",
            "status": "draft",
        },
    ]
    path = tmp_path / "posts.yaml"
    path.write_text(yaml.safe_dump(records, sort_keys=False), encoding="utf-8")
    return path
