"""
Article Selection Utilities

This module decides which collected articles are worth downloading for the
content export. The policy (hosts and title keywords to skip) is passed in,
so it can change without touching the extraction code.
"""

import logging
from typing import Iterable, Optional
from urllib.parse import urlparse

from walkthrough_archive.core.models import ArticleRecord


DEFAULT_IGNORED_HOSTS = frozenset({
    "medium.com",
    "www.medium.com",
    "youtube.com",
    "www.youtube.com",
    "youtu.be",
    "www.youtu.be",
})

DEFAULT_IGNORED_TITLE_KEYWORDS = ("[Video]",)


def extract_host(url: str) -> Optional[str]:
    """
    Extract the lowercase host name of an http(s) URL.

    Args:
        url: The URL to inspect

    Returns:
        Host name, or None if the URL is not an absolute http(s) URL
    """
    try:
        parsed = urlparse(url)
    except ValueError:
        return None

    if parsed.scheme not in ('http', 'https'):
        return None
    return parsed.hostname or None


class ArticleFilter:
    """
    Predicate selecting the articles whose pages should be downloaded.
    """

    def __init__(self,
                 ignored_hosts: Iterable[str] = DEFAULT_IGNORED_HOSTS,
                 ignored_title_keywords: Iterable[str] = DEFAULT_IGNORED_TITLE_KEYWORDS):
        self.ignored_hosts = frozenset(host.lower() for host in ignored_hosts)
        self.ignored_title_keywords = tuple(ignored_title_keywords)
        self.logger = logging.getLogger(__name__)

    def __call__(self, article: ArticleRecord) -> bool:
        return self.should_download(article)

    def should_download(self, article: ArticleRecord) -> bool:
        """
        Check whether an article's page should be downloaded.

        Args:
            article: The article to check

        Returns:
            False for titles with an ignored keyword, links without a
            usable host, or ignored hosts; True otherwise
        """
        if any(keyword in article.title for keyword in self.ignored_title_keywords):
            return False

        host = extract_host(article.link)
        if host is None:
            self.logger.debug(f"Skipping article with unusable link: {article.link}")
            return False

        return host not in self.ignored_hosts
