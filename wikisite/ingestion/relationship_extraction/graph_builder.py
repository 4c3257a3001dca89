"""Building the incoming-link index from a corpus."""

from loguru import logger

from wikisite.domain.note import Corpus
from wikisite.domain.relationships import IncomingLinkIndex
from wikisite.ingestion.content_extractor import ContentExtractor


class LinkGraphBuilder:
    """Builds the backlink index for every note in a corpus."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding
        self.content_extractor = ContentExtractor()

    def build(self, corpus: Corpus) -> IncomingLinkIndex:
        """Build the incoming-link index for *corpus*.

        Only notes are scanned; assets never contribute edges. Edges are keyed by
        the target name exactly as written, whether or not a note with that
        identity exists.

        Args:
            corpus: Loaded corpus

        Returns:
            IncomingLinkIndex mapping target names to linking note identities
        """
        incoming: dict[str, set[str]] = {}

        for note in corpus.notes():
            for occurrence in self.content_extractor.extract_occurrences(
                note.identity, note.text(self.encoding)
            ):
                incoming.setdefault(occurrence.target, set()).add(occurrence.source)

        index = IncomingLinkIndex(
            incoming={target: frozenset(sources) for target, sources in incoming.items()}
        )
        logger.debug(f"Built link index: {len(incoming)} targets, {index.edge_count} edges")
        return index
