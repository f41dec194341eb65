"""
Data types shared across the walkthrough pipeline.
"""

from dataclasses import dataclass, asdict
from typing import Dict, List, Any


@dataclass(frozen=True)
class ArticleRecord:
    title: str
    link: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ArticleRecord":
        return cls(title=data['title'], link=data['link'])


# issue URL -> walkthrough articles of that issue, in document order
IssueArchive = Dict[str, List[ArticleRecord]]


def flatten_archive(archive: IssueArchive) -> List[ArticleRecord]:
    """Return every record of the archive, issue by issue."""
    articles: List[ArticleRecord] = []
    for records in archive.values():
        articles.extend(records)
    return articles


def format_markdown_list(articles: List[ArticleRecord]) -> str:
    """Render records as a markdown bullet list of links."""
    return "\n".join(f"- [{article.title}]({article.link})" for article in articles)
