"""
Local cache for the collected walkthrough archive.

The archive is stored as one JSON object mapping each issue URL to the list
of its articles (``{"title": ..., "link": ...}`` records).
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from walkthrough_archive.core.errors import ArchiveStoreError
from walkthrough_archive.core.models import ArticleRecord, IssueArchive


DEFAULT_CACHE_NAME = ".rust_walkthrough_articles"


def default_cache_path() -> Path:
    """Return the cache file location in the user's home directory."""
    return Path.home() / DEFAULT_CACHE_NAME


class ArchiveStore:
    def __init__(self, path: Union[str, Path, None] = None):
        self.path = Path(path) if path is not None else default_cache_path()
        self.logger = logging.getLogger(__name__)

    def load(self) -> Optional[IssueArchive]:
        """
        Load the cached archive.

        Returns:
            The archive, or None when the cache file is missing or empty

        Raises:
            ArchiveStoreError: If the file content is not a valid archive
        """
        if not self.path.exists():
            return None

        with open(self.path, 'r', encoding='utf-8') as f:
            content = f.read()
        if not content.strip():
            return None

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ArchiveStoreError(f"Malformed archive cache {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise ArchiveStoreError(f"Archive cache {self.path} is not a JSON object")

        archive: IssueArchive = {}
        for issue_url, records in data.items():
            if not isinstance(records, list):
                raise ArchiveStoreError(f"Articles of {issue_url} in {self.path} are not a JSON list")
            archive[issue_url] = [self._parse_record(issue_url, rec) for rec in records]

        self.logger.info(f"Loaded {len(archive)} issues from {self.path}")
        return archive

    def save(self, archive: IssueArchive) -> None:
        """Serialize the archive, overwriting any previous cache content."""
        data = {
            issue_url: [rec.to_dict() for rec in records]
            for issue_url, records in archive.items()
        }
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write(json.dumps(data, ensure_ascii=False))

        self.logger.info(f"Stored result to {self.path}")

    def _parse_record(self, issue_url: str, data) -> ArticleRecord:
        """Build a record, rejecting entries without a string title and a non-empty string link."""
        title = data.get('title') if isinstance(data, dict) else None
        link = data.get('link') if isinstance(data, dict) else None
        if not isinstance(title, str) or not isinstance(link, str) or not link:
            raise ArchiveStoreError(f"Invalid article record for {issue_url} in {self.path}: {data!r}")
        return ArticleRecord.from_dict(data)
