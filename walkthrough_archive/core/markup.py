"""
Markup parsing

Thin wrapper around BeautifulSoup so every stage of the pipeline parses
pages the same way (lxml tree builder) and reports parse failures with
the pipeline's own exception type.
"""

import logging

from bs4 import BeautifulSoup

from .errors import MarkupError

logger = logging.getLogger(__name__)

PARSER = 'lxml'


def parse_markup(markup: str) -> BeautifulSoup:
    """
    Parse raw markup into a queryable document.

    Args:
        markup: Raw HTML text

    Returns:
        BeautifulSoup document supporting CSS selectors via ``select``

    Raises:
        MarkupError: If the markup is not text or the parser fails
    """
    if not isinstance(markup, str):
        raise MarkupError(f"Expected markup text, got {type(markup).__name__}")

    try:
        return BeautifulSoup(markup, PARSER)
    except Exception as e:
        logger.error(f"Failed to parse markup: {e}")
        raise MarkupError(f"Failed to parse markup: {e}") from e
