"""
Issue Index Discovery

This module reads the This Week in Rust archive index page and returns the
URL of every past issue listed on it.
"""

import logging
from typing import List, Optional
from urllib.parse import urljoin

from .errors import IssueIndexError
from .markup import parse_markup


class IssueLinkDiscoverer:
    """
    Extracts per-issue links from the archive index page.

    Each issue on the index page sits in a ``div.post-title`` container whose
    first anchor points at the issue. A container without a usable anchor
    means the page layout is not the one we understand, so discovery stops
    instead of silently skipping it.
    """

    POST_TITLE_SELECTOR = 'div.post-title'

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def discover(self, index_markup: str, base_url: Optional[str] = None) -> List[str]:
        """
        Discover all issue URLs listed on the archive index page.

        Args:
            index_markup: Raw HTML of the archive index page
            base_url: URL of the index page, used to resolve relative hrefs

        Returns:
            Issue URLs in page order (not deduplicated)

        Raises:
            MarkupError: If the index page cannot be parsed
            IssueIndexError: If a post-title container has no linked anchor
        """
        document = parse_markup(index_markup)

        issue_links = []
        for position, container in enumerate(document.select(self.POST_TITLE_SELECTOR), 1):
            anchor = container.find('a')
            if anchor is None:
                raise IssueIndexError(f"Post title #{position} has no <a> element")

            href = anchor.get('href')
            if not href:
                raise IssueIndexError(f"Post title #{position} has an anchor without href")

            issue_links.append(urljoin(base_url, href) if base_url else href)

        self.logger.info(f"Discovered {len(issue_links)} issue links")
        return issue_links
