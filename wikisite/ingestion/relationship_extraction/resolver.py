"""Rewriting wikilinks into HTML anchors."""

import html
import re

from loguru import logger

from wikisite.domain.note import CorpusEntry
from wikisite.ingestion.content_extractor import WIKILINK_NAME

DANGLING_HREF = "#"


class LinkResolver:
    """Rewrites ``[[name]]`` references against the identities of a corpus.

    Known identities are matched before the generic link grammar, and they match
    exactly, so an identity such as ``sub/Note`` resolves even though ``/`` is
    not part of the grammar. Anything else that fits the grammar becomes a
    dangling anchor. Both cases are handled in a single scan of the text.
    """

    def __init__(self, link_targets: dict[str, CorpusEntry]):
        """Initialize resolver with the corpus link targets.

        Args:
            link_targets: Mapping of identity to corpus entry
        """
        self.link_targets = link_targets
        # Longest first so the alternation is independent of dict order
        known = sorted(link_targets, key=lambda name: (-len(name), name))
        known_branch = "|".join(re.escape(name) for name in known)
        if known_branch:
            pattern = rf"\[\[(?:({known_branch})|({WIKILINK_NAME}))\]\]"
        else:
            pattern = rf"\[\[()({WIKILINK_NAME})\]\]"
        self._pattern = re.compile(pattern)

    def rewrite(self, content: str, source: str | None = None) -> str:
        """Replace every wikilink in *content* with an anchor.

        Args:
            content: Raw note text
            source: Identity of the note being rewritten, used for logging

        Returns:
            Text with known links pointing at their output file and unknown
            links pointing at ``#``
        """
        dangling: list[str] = []

        def replace_match(match: re.Match[str]) -> str:
            known, name = match.group(1), match.group(2)
            if known:
                return self._anchor(self.link_targets[known].href, known)
            if name not in dangling:
                dangling.append(name)
            return self._anchor(DANGLING_HREF, name)

        rewritten = self._pattern.sub(replace_match, content)
        if dangling:
            logger.debug(f"Dangling links in {source or '<text>'}: {', '.join(dangling)}")
        return rewritten

    def dangling_links(self, content: str) -> list[str]:
        """Return the wikilink names in *content* that match no identity."""
        return [m.group(2) for m in self._pattern.finditer(content) if not m.group(1)]

    @staticmethod
    def _anchor(href: str, text: str) -> str:
        return f'<a href="{html.escape(href)}">{html.escape(text, quote=False)}</a>'
