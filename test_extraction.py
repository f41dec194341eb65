#!/usr/bin/env python3
"""
Tests for issue link discovery and walkthrough article extraction.

Both work on markup strings only, so no network is involved.
"""

import pytest

from walkthrough_archive.core.article_extractor import ArticleExtractor
from walkthrough_archive.core.errors import IssueIndexError
from walkthrough_archive.core.issue_index import IssueLinkDiscoverer
from walkthrough_archive.core.models import ArticleRecord


INDEX_HTML = """
<html><body>
  <div class="post-title"><a href="/issue/1">This Week in Rust 1</a></div>
  <div class="post-title"><a href="/issue/2">This Week in Rust 2</a></div>
  <div class="post-date">2013-06-22</div>
</body></html>
"""

ISSUE_HTML = """
<html><body>
  <h3 id="updates-from-rust-community">Updates from Rust Community</h3>
  <h4 id="rust-walkthroughs">Rust Walkthroughs</h4>
  <ul>
    <li><a href="/a">Article A</a></li>
    <li>Article B</li>
  </ul>
  <h4 id="miscellaneous">Miscellaneous</h4>
  <ul>
    <li><a href="/misc">Not a walkthrough</a></li>
  </ul>
</body></html>
"""


def test_discover_returns_hrefs_in_order():
    links = IssueLinkDiscoverer().discover(INDEX_HTML)
    assert links == ["/issue/1", "/issue/2"]


def test_discover_resolves_against_index_url():
    links = IssueLinkDiscoverer().discover(
        INDEX_HTML, base_url="https://this-week-in-rust.org/blog/archives/index.html")
    assert links == [
        "https://this-week-in-rust.org/issue/1",
        "https://this-week-in-rust.org/issue/2",
    ]


def test_discover_keeps_duplicates():
    html = ('<div class="post-title"><a href="/issue/1">x</a></div>'
            '<div class="post-title"><a href="/issue/1">x</a></div>')
    assert IssueLinkDiscoverer().discover(html) == ["/issue/1", "/issue/1"]


def test_discover_without_post_titles_is_empty():
    assert IssueLinkDiscoverer().discover("<html><body><p>nothing</p></body></html>") == []


def test_discover_fails_on_post_title_without_anchor():
    html = ('<div class="post-title"><a href="/issue/1">x</a></div>'
            '<div class="post-title">No link here</div>')
    with pytest.raises(IssueIndexError):
        IssueLinkDiscoverer().discover(html)


def test_discover_fails_on_anchor_without_href():
    with pytest.raises(IssueIndexError):
        IssueLinkDiscoverer().discover('<div class="post-title"><a name="x">x</a></div>')


def test_extract_skips_items_without_anchor():
    articles = ArticleExtractor().extract(ISSUE_HTML)
    assert articles == [ArticleRecord(title="Article A", link="/a")]


def test_extract_without_section_is_empty():
    html = "<html><body><h4 id='miscellaneous'>Misc</h4><ul><li><a href='/x'>x</a></li></ul></body></html>"
    assert ArticleExtractor().extract(html) == []


def test_extract_preserves_document_order():
    html = """
    <h3 id="rust-walkthroughs">Rust Walkthroughs</h3>
    <ul>
      <li><a href="https://example.com/a">A</a></li>
      <li><a href="https://example.com/b">B</a></li>
      <li><a href="https://example.com/c">C</a></li>
    </ul>
    """
    links = [article.link for article in ArticleExtractor().extract(html)]
    assert links == ["https://example.com/a", "https://example.com/b", "https://example.com/c"]


def test_extract_title_is_full_trimmed_item_text():
    html = """
    <h3 id="rust-walkthroughs">Rust Walkthroughs</h3>
    <ul>
      <li>
        <a href="https://blog.example.com/post">Writing a parser</a> (part 2)
      </li>
    </ul>
    """
    articles = ArticleExtractor().extract(html)
    assert articles[0].title == "Writing a parser (part 2)"
    assert articles[0].link == "https://blog.example.com/post"


def test_extract_resolves_relative_links_with_base_url():
    articles = ArticleExtractor().extract(ISSUE_HTML, base_url="https://this-week-in-rust.org/blog/2020/01/01/this-week-in-rust-320/")
    assert articles == [ArticleRecord(title="Article A", link="https://this-week-in-rust.org/a")]


def test_extract_skips_text_between_heading_and_list():
    html = """
    <h3 id="rust-walkthroughs">Rust Walkthroughs</h3>
    <p>Some intro paragraph.</p>
    <ul><li><a href="/a">A</a></li></ul>
    """
    assert ArticleExtractor().extract(html) == [ArticleRecord(title="A", link="/a")]


def test_extract_does_not_take_list_of_next_section():
    html = """
    <h3 id="rust-walkthroughs">Rust Walkthroughs</h3>
    <p>No walkthroughs this week.</p>
    <h3 id="research">Research</h3>
    <ul><li><a href="/paper">Paper</a></li></ul>
    """
    assert ArticleExtractor().extract(html) == []


def test_extract_with_id_on_anchor_inside_heading():
    html = """
    <h3><a id="rust-walkthroughs"></a>Rust Walkthroughs</h3>
    <ol><li><a href="/a">A</a></li></ol>
    """
    assert ArticleExtractor().extract(html) == [ArticleRecord(title="A", link="/a")]


def test_extract_ignores_nested_list_items_as_separate_records():
    html = """
    <h3 id="rust-walkthroughs">Rust Walkthroughs</h3>
    <ul>
      <li><a href="/series">Series</a>
        <ul><li><a href="/series/1">Part 1</a></li></ul>
      </li>
    </ul>
    """
    articles = ArticleExtractor().extract(html)
    assert [a.link for a in articles] == ["/series"]


def test_extract_uses_first_anchor_of_item():
    html = """
    <h3 id="rust-walkthroughs">Rust Walkthroughs</h3>
    <ul>
      <li><a href="/first">First</a> and <a href="/second">Second</a></li>
      <li><a name="anchor-only"></a><a href="/later">Later</a></li>
      <li><a href="">Empty</a></li>
    </ul>
    """
    assert [a.link for a in ArticleExtractor().extract(html)] == ["/first"]


if __name__ == "__main__":
    raise SystemExit(pytest.main([__file__]))
