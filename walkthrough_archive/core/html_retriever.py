"""
HTML Content Retrieval Module

This module downloads raw page markup over HTTP. Failures are not retried:
a transport error or a non-success status is reported as a FetchError.
"""

import logging
from typing import Optional

import requests

from .errors import FetchError


class HTMLRetriever:
    """
    Retrieves raw markup for a URL with a plain HTTP GET.

    A single requests session is shared by the crawl workers; each call
    returns its own response text and keeps no per-request state.
    """

    def __init__(self, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        """
        Initialize the HTML retriever.

        Args:
            timeout: Per-request timeout in seconds (None waits indefinitely)
            session: Optional pre-built session (mainly for tests)
        """
        self.timeout = timeout
        self.logger = logging.getLogger(__name__)
        self.session = session or requests.Session()

    def fetch(self, url: str) -> str:
        """
        Fetch the response body of a URL as text.

        Args:
            url: Absolute URL to request

        Returns:
            Response body decoded as text

        Raises:
            FetchError: On transport failure or a non-success HTTP status
        """
        self.logger.info(f"Getting html {url}")

        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            self.logger.error(f"HTTP error {status_code} for {url}")
            raise FetchError(url, f"HTTP {status_code}", status_code) from e
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Request error for {url}: {e}")
            raise FetchError(url, str(e)) from e

        html_content = response.text
        self.logger.debug(f"Retrieved {len(html_content)} characters from {url}")
        return html_content

    def close(self):
        """Close the HTTP session."""
        self.session.close()
        self.logger.info("HTML retriever session closed")
