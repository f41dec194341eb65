#!/usr/bin/env python3
"""
Tests for the local archive cache.
"""

import json

import pytest

from walkthrough_archive.core.errors import ArchiveStoreError
from walkthrough_archive.core.models import ArticleRecord
from walkthrough_archive.utils.archive_store import ArchiveStore, default_cache_path


ARCHIVE = {
    "https://this-week-in-rust.org/blog/2021/03/03/this-week-in-rust-380/": [
        ArticleRecord(title="Building a shell in Rust", link="https://example.com/shell"),
        ArticleRecord(title="[Video] Async in depth", link="https://www.youtube.com/watch?v=1"),
    ],
    "https://this-week-in-rust.org/blog/2021/03/10/this-week-in-rust-381/": [],
}


def test_missing_file_loads_as_none(tmp_path):
    assert ArchiveStore(tmp_path / "absent.json").load() is None


def test_empty_file_loads_as_none(tmp_path):
    path = tmp_path / "cache.json"
    path.write_text("", encoding='utf-8')
    assert ArchiveStore(path).load() is None


def test_save_then_load_returns_same_archive(tmp_path):
    store = ArchiveStore(tmp_path / "cache.json")
    store.save(ARCHIVE)
    assert store.load() == ARCHIVE


def test_saved_format_uses_title_and_link_fields(tmp_path):
    path = tmp_path / "cache.json"
    ArchiveStore(path).save(ARCHIVE)

    data = json.loads(path.read_text(encoding='utf-8'))
    first_issue = "https://this-week-in-rust.org/blog/2021/03/03/this-week-in-rust-380/"
    assert data[first_issue][0] == {"title": "Building a shell in Rust", "link": "https://example.com/shell"}


def test_save_overwrites_previous_content(tmp_path):
    store = ArchiveStore(tmp_path / "cache.json")
    store.save(ARCHIVE)
    store.save({"https://example.com/issue": []})
    assert store.load() == {"https://example.com/issue": []}


def test_malformed_json_is_an_error(tmp_path):
    path = tmp_path / "cache.json"
    path.write_text("{not json", encoding='utf-8')
    with pytest.raises(ArchiveStoreError):
        ArchiveStore(path).load()


def test_wrong_shape_is_an_error(tmp_path):
    path = tmp_path / "cache.json"
    path.write_text(json.dumps({"https://example.com/issue": [{"title": "no link"}]}), encoding='utf-8')
    with pytest.raises(ArchiveStoreError):
        ArchiveStore(path).load()

    path.write_text(json.dumps(["not", "an", "object"]), encoding='utf-8')
    with pytest.raises(ArchiveStoreError):
        ArchiveStore(path).load()

    bad_records = [
        [{"title": "t", "link": ""}],
        [{"title": 3, "link": 4}],
        [{"title": None, "link": "https://example.com/a"}],
        ["https://example.com/a"],
        {"title": "t", "link": "https://example.com/a"},
    ]
    for records in bad_records:
        path.write_text(json.dumps({"https://example.com/issue": records}), encoding='utf-8')
        with pytest.raises(ArchiveStoreError):
            ArchiveStore(path).load()


def test_default_path_is_in_home_directory():
    assert default_cache_path().name == ".rust_walkthrough_articles"
    assert ArchiveStore().path == default_cache_path()
