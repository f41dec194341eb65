"""
Walkthrough Article Extraction

This module finds the "Rust Walkthroughs" section of a single issue page and
turns its list entries into ArticleRecords.

Most issues have no such section; that is a normal outcome and yields an
empty list rather than an error.
"""

import logging
from typing import List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from .errors import ArticleExtractionError, MarkupError
from .markup import parse_markup
from .models import ArticleRecord


HEADING_TAGS = ['h1', 'h2', 'h3', 'h4', 'h5', 'h6']
LIST_TAGS = ['ul', 'ol']


class ArticleExtractor:
    """
    Extracts walkthrough articles from an issue page.

    The section is marked by the element with id ``rust-walkthroughs``. Its
    articles live in the first list that follows the heading as a sibling,
    before any further heading starts a new section.
    """

    SECTION_ID = 'rust-walkthroughs'

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def extract(self, issue_markup: str, base_url: Optional[str] = None) -> List[ArticleRecord]:
        """
        Extract the walkthrough articles of one issue page.

        Args:
            issue_markup: Raw HTML of the issue page
            base_url: URL of the issue page, used to resolve relative hrefs

        Returns:
            Articles in document order; empty if the page has no walkthrough
            section

        Raises:
            ArticleExtractionError: If the issue page cannot be parsed
        """
        try:
            document = parse_markup(issue_markup)
        except MarkupError as e:
            raise ArticleExtractionError(str(e)) from e

        return self.extract_from_document(document, base_url)

    def extract_from_document(self, document: BeautifulSoup, base_url: Optional[str] = None) -> List[ArticleRecord]:
        """Extract walkthrough articles from an already parsed issue page."""
        heading = document.find(id=self.SECTION_ID)
        if heading is None:
            return []

        walkthrough_list = self._find_section_list(heading)
        if walkthrough_list is None:
            self.logger.debug(f"#{self.SECTION_ID} found but no list follows it")
            return []

        articles = []
        for list_item in walkthrough_list.find_all('li', recursive=False):
            link = self._first_href(list_item)
            if link is None:
                continue

            articles.append(ArticleRecord(
                title=list_item.get_text().strip(),
                link=urljoin(base_url, link) if base_url else link,
            ))

        return articles

    def _find_section_list(self, heading: Tag) -> Optional[Tag]:
        """
        Find the list belonging to the section heading.

        Looks at the following siblings of the heading and stops at the next
        heading. When the id sits on an element nested inside a heading
        (e.g. ``<h3><a id=...>``), the enclosing heading is used instead.
        """
        if heading.name not in HEADING_TAGS:
            enclosing = heading.find_parent(HEADING_TAGS)
            if enclosing is not None:
                heading = enclosing

        for sibling in heading.find_next_siblings():
            if sibling.name in LIST_TAGS:
                return sibling
            if sibling.name in HEADING_TAGS:
                return None
        return None

    def _first_href(self, list_item: Tag) -> Optional[str]:
        """Return the href of the item's first anchor; None when it has no anchor or no href."""
        anchor = list_item.find('a')
        if anchor is None:
            return None
        return (anchor.get('href') or '').strip() or None
