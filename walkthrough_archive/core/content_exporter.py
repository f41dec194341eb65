"""
Content Export Module

This module downloads the pages of collected articles and reduces them to
plain text: the readable text of every title, paragraph and list element,
one element per line.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Dict, List, Optional

from .errors import WalkthroughError
from .html_retriever import HTMLRetriever
from .logger import ErrorTracker
from .markup import parse_markup
from .models import ArticleRecord
from walkthrough_archive.utils.file_manager import FileManager


TEXT_TAGS = ['title', 'p', 'ul', 'ol']


def reduce_to_text(html_content: str) -> str:
    """
    Reduce an HTML page to plain text.

    Args:
        html_content: Raw HTML of the page

    Returns:
        Stripped text of each title, p, ul and ol element in document
        order, empty entries dropped, joined by newlines
    """
    document = parse_markup(html_content)
    texts = (element.get_text().strip() for element in document.find_all(TEXT_TAGS))
    return "\n".join(text for text in texts if text)


class ContentExporter:
    """
    Downloads article pages into ``scrape/`` and writes their text into
    ``contents/``. Files that already exist are never overwritten, so an
    interrupted export can simply be run again.
    """

    def __init__(self,
                 retriever: HTMLRetriever,
                 files: FileManager,
                 concurrency: int = 4,
                 isolate_failures: bool = False,
                 error_tracker: Optional[ErrorTracker] = None):
        self.retriever = retriever
        self.files = files
        self.concurrency = max(1, concurrency)
        self.isolate_failures = isolate_failures
        self.logger = logging.getLogger(__name__)
        self.error_tracker = error_tracker or ErrorTracker(self.logger)

    def select(self,
               articles: List[ArticleRecord],
               predicate: Callable[[ArticleRecord], bool],
               limit: Optional[int] = None) -> List[ArticleRecord]:
        """Keep the articles accepted by the predicate, up to an optional limit."""
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be 0 or greater, got {limit}")
        selected = [article for article in articles if predicate(article)]
        if limit is not None:
            selected = selected[:limit]
        self.logger.info(f"Selected {len(selected)} of {len(articles)} articles for download")
        return selected

    def download(self, articles: List[ArticleRecord]) -> Dict[str, str]:
        """
        Download the page of every article that has not been downloaded yet.

        Args:
            articles: Articles to download

        Returns:
            Mapping of article link to the path of the newly saved page

        Raises:
            WalkthroughError: On the first failed download unless failures
                are isolated
        """
        pending = [a for a in articles if not self.files.scrape_path(a.link).exists()]
        self.logger.info(f"Downloading {len(pending)} article pages "
                         f"({len(articles) - len(pending)} already present)")

        saved: Dict[str, str] = {}
        with ThreadPoolExecutor(max_workers=self.concurrency) as ex:
            futures = {ex.submit(self._download_one, article): article for article in pending}
            for fut in as_completed(futures):
                article = futures[fut]
                try:
                    path = fut.result()
                except WalkthroughError as e:
                    if not self.isolate_failures:
                        for queued in futures:
                            queued.cancel()
                        raise
                    self.error_tracker.log_error(e, context="download", url=article.link)
                    continue
                if path is not None:
                    saved[article.link] = path
        return saved

    def _download_one(self, article: ArticleRecord) -> Optional[str]:
        html_content = self.retriever.fetch(article.link)
        path = self.files.write_new(self.files.scrape_path(article.link), html_content)
        return str(path) if path else None

    def extract_contents(self) -> List[str]:
        """
        Write the text reduction of every downloaded page.

        Returns:
            Paths of the content files written in this call
        """
        written = []
        for filename in self.files.list_scraped():
            target = self.files.contents_path(filename)
            if target.exists():
                continue

            content = reduce_to_text(self.files.read_scraped(filename))
            if not content.strip():
                self.logger.debug(f"No readable text in {filename}")
                continue

            path = self.files.write_new(target, content)
            if path is not None:
                written.append(str(path))

        self.logger.info(f"Extracted contents of {len(written)} pages")
        return written
