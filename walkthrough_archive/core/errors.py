"""
Exception types raised by the walkthrough pipeline.

Every failure the pipeline treats as fatal derives from WalkthroughError so
callers (the CLI in particular) can report it with a single handler.
"""

from typing import Optional


class WalkthroughError(Exception):
    """Base class for all pipeline errors."""


class FetchError(WalkthroughError):
    """A page could not be retrieved (transport failure or non-success status)."""

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Failed to fetch {url}: {reason}")


class MarkupError(WalkthroughError):
    """Raw markup could not be parsed into a document."""


class IssueIndexError(WalkthroughError):
    """The archive index page does not have the expected structure."""


class ArticleExtractionError(WalkthroughError):
    """The walkthrough section of a single issue page could not be read."""


class CrawlError(WalkthroughError):
    """An issue page failed while crawling the archive."""

    def __init__(self, issue_url: str, cause: Exception):
        self.issue_url = issue_url
        self.cause = cause
        super().__init__(f"Failed to get walkthrough articles for {issue_url}: {cause}")


class ArchiveStoreError(WalkthroughError):
    """The local archive cache holds content that cannot be deserialized."""
