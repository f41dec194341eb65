"""
File Management Utilities

This module manages the output directories of the content export: raw
article pages go to ``scrape/`` and their text reductions to ``contents/``,
both named after a slug of the article URL.
"""

from pathlib import Path
from typing import List, Optional
import logging

from slugify import slugify


class FileManager:
    """
    Manages file organization and naming for exported article content.
    """

    def __init__(self, base_output_dir: str = "output"):
        """
        Initialize the file manager.

        Args:
            base_output_dir: Base directory for all output files
        """
        self.base_output_dir = Path(base_output_dir)
        self.scrape_dir = self.base_output_dir / "scrape"
        self.contents_dir = self.base_output_dir / "contents"
        self.logger = logging.getLogger(__name__)

        self._create_directories()

    def _create_directories(self):
        """Create necessary output directories."""
        for directory in (self.base_output_dir, self.scrape_dir, self.contents_dir):
            directory.mkdir(parents=True, exist_ok=True)

        self.logger.debug(f"Output directories ready at: {self.base_output_dir.absolute()}")

    def generate_filename(self, url: str) -> str:
        """
        Generate a file system safe name from a URL.

        Args:
            url: The article URL

        Returns:
            Slug of the full URL (scheme included)
        """
        return slugify(url)

    def scrape_path(self, url: str) -> Path:
        """Path of the raw page downloaded for a URL."""
        return self.scrape_dir / self.generate_filename(url)

    def contents_path(self, filename: str) -> Path:
        """Path of the text file produced from a scraped page."""
        return self.contents_dir / filename

    def list_scraped(self) -> List[str]:
        """Names of all files in the scrape directory."""
        return sorted(entry.name for entry in self.scrape_dir.iterdir() if entry.is_file())

    def read_scraped(self, filename: str) -> str:
        with open(self.scrape_dir / filename, 'r', encoding='utf-8', errors='replace') as f:
            return f.read()

    def write_new(self, path: Path, content: str) -> Optional[Path]:
        """
        Write content to a file unless it already exists.

        Args:
            path: Target file
            content: Text to write

        Returns:
            The path when written, None when an existing file was kept
        """
        if path.exists():
            self.logger.debug(f"Keeping existing file: {path.name}")
            return None

        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)

        self.logger.info(f"Saved {path.stat().st_size} bytes: {path.name}")
        return path
