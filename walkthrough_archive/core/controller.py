"""
Walkthrough Orchestrator: runs the crawl-and-extract pipeline.

Discovers issue links on the archive index page, fans the issues out to a
thread pool for fetching and extraction, and collects the per-issue results
into one IssueArchive. The local cache is read before and written after the
parallel phase, never during it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional
from concurrent.futures import ThreadPoolExecutor, as_completed

from .article_extractor import ArticleExtractor
from .content_exporter import ContentExporter
from .errors import CrawlError, WalkthroughError
from .html_retriever import HTMLRetriever
from .issue_index import IssueLinkDiscoverer
from .logger import ErrorTracker
from .models import ArticleRecord, IssueArchive, flatten_archive
from walkthrough_archive.utils.archive_store import ArchiveStore, default_cache_path
from walkthrough_archive.utils.file_manager import FileManager
from walkthrough_archive.utils.link_filter import ArticleFilter


DEFAULT_INDEX_URL = "https://this-week-in-rust.org/blog/archives/index.html"


@dataclass
class RunConfig:
    index_url: str = DEFAULT_INDEX_URL
    cache_path: Path = field(default_factory=default_cache_path)
    output_dir: str = "output"
    concurrency: int = 8
    isolate_failures: bool = False
    request_timeout: Optional[float] = None
    max_articles: Optional[int] = None  # None = no cap


class WalkthroughController:
    def __init__(self,
                 config: RunConfig,
                 logger: Optional[logging.Logger] = None,
                 retriever: Optional[HTMLRetriever] = None):
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.retriever = retriever or HTMLRetriever(timeout=config.request_timeout)
        self.discoverer = IssueLinkDiscoverer()
        self.extractor = ArticleExtractor()
        self.store = ArchiveStore(config.cache_path)
        self.error_tracker = ErrorTracker(self.logger)

    def load_or_scrape(self, force: bool = False) -> IssueArchive:
        """
        Return the cached archive, scraping and caching it when needed.

        Args:
            force: Ignore the cache and crawl the archive again

        Returns:
            The walkthrough archive
        """
        if not force:
            cached = self.store.load()
            if cached is not None:
                self.logger.info("Got walkthrough articles from local cache")
                return cached

        self.logger.info("Start scraping")
        archive = self.scrape_archive()
        if archive:
            self.store.save(archive)
        return archive

    def scrape_archive(self) -> IssueArchive:
        """Discover every issue on the index page and crawl them all."""
        index_html = self.retriever.fetch(self.config.index_url)
        issue_links = self.discoverer.discover(index_html, base_url=self.config.index_url)
        return self.crawl(issue_links)

    def crawl(self, issue_links: Iterable[str]) -> IssueArchive:
        """
        Fetch and extract every issue, collecting results into one archive.

        Workers only fetch and extract; results and failures are handled
        here, in the submitting thread.

        Args:
            issue_links: Absolute issue page URLs

        Returns:
            Mapping of issue URL to its walkthrough articles

        Raises:
            CrawlError: On the first failed issue unless failures are isolated
        """
        links = list(issue_links)
        self.logger.info(f"Crawling {len(links)} issues with {self.config.concurrency} workers")

        archive: IssueArchive = {}
        if self.config.concurrency > 1:
            with ThreadPoolExecutor(max_workers=self.config.concurrency) as ex:
                futures = {ex.submit(self.process_issue, link): link for link in links}
                for fut in as_completed(futures):
                    issue_link = futures[fut]
                    try:
                        archive[issue_link] = fut.result()
                    except WalkthroughError as e:
                        if not self.config.isolate_failures:
                            # queued issues must not be fetched after a fatal failure
                            for queued in futures:
                                queued.cancel()
                        archive[issue_link] = self._handle_failure(issue_link, e)
        else:
            for link in links:
                try:
                    archive[link] = self.process_issue(link)
                except WalkthroughError as e:
                    archive[link] = self._handle_failure(link, e)

        with_articles = sum(1 for articles in archive.values() if articles)
        self.logger.info(f"Crawl complete: {len(archive)} issues, {with_articles} with walkthroughs")
        summary = self.error_tracker.get_error_summary()
        if summary['total_errors']:
            self.logger.warning(f"{summary['total_errors']} issues failed: {summary['error_types']}")
        return archive

    def process_issue(self, issue_link: str) -> List[ArticleRecord]:
        """Fetch one issue page and extract its walkthrough articles."""
        self.logger.info(f"Getting past issue - {issue_link}")
        issue_html = self.retriever.fetch(issue_link)
        return self.extractor.extract(issue_html, base_url=issue_link)

    def _handle_failure(self, issue_link: str, error: WalkthroughError) -> List[ArticleRecord]:
        if not self.config.isolate_failures:
            raise CrawlError(issue_link, error) from error
        self.error_tracker.log_error(error, context="issue", url=issue_link)
        return []

    def export_contents(self,
                        archive: IssueArchive,
                        predicate: Optional[Callable[[ArticleRecord], bool]] = None) -> List[str]:
        """
        Download the selected article pages and reduce them to text.

        Args:
            archive: The walkthrough archive
            predicate: Article selection policy (defaults to ArticleFilter())

        Returns:
            Paths of the content files written
        """
        exporter = ContentExporter(
            self.retriever,
            FileManager(self.config.output_dir),
            concurrency=self.config.concurrency,
            isolate_failures=self.config.isolate_failures,
            error_tracker=self.error_tracker,
        )
        articles = exporter.select(flatten_archive(archive), predicate or ArticleFilter(),
                                   limit=self.config.max_articles)
        exporter.download(articles)
        return exporter.extract_contents()

    def close(self):
        self.retriever.close()
