"""Wikilink extraction from raw note text."""

import re
from typing import Iterator, List

from wikisite.domain.relationships import WikilinkOccurrence

# Name body of a [[wikilink]]: letters, digits, hyphens and spaces
WIKILINK_NAME = r"[A-Za-z0-9\- ]+"
WIKILINK_PATTERN = re.compile(r"\[\[(" + WIKILINK_NAME + r")\]\]")


class ContentExtractor:
    """Service for extracting link references from markdown text."""

    @staticmethod
    def extract_wikilinks(content: str) -> List[str]:
        """Extract wikilink targets from markdown content.

        Extracts links in the form of [[link name]]. Bracket sequences whose
        body falls outside the link grammar are ignored.

        Args:
            content: Markdown content to extract wikilinks from

        Returns:
            Wikilink targets in order of appearance, duplicates included
        """
        return WIKILINK_PATTERN.findall(content)

    @classmethod
    def extract_occurrences(cls, source: str, content: str) -> Iterator[WikilinkOccurrence]:
        """Yield a (source, target) pair for every wikilink in *content*."""
        for target in cls.extract_wikilinks(content):
            yield WikilinkOccurrence(source=source, target=target)
