"""Generating every output file of a site from a loaded corpus."""

from pathlib import PurePosixPath

from loguru import logger

from wikisite.config import settings
from wikisite.domain.note import Corpus
from wikisite.ingestion.relationship_extraction import LinkGraphBuilder, LinkResolver
from wikisite.rendering.base import MarkdownRenderer, TemplateRenderer

from .page_assembler import PageAssembler


class SiteGenerator:
    """Produces the full output of a site without touching the filesystem."""

    def __init__(
        self,
        *,
        markdown_renderer: MarkdownRenderer,
        template_renderer: TemplateRenderer,
        copy_assets: bool | None = None,
        encoding: str | None = None,
    ):
        """Initialize the generator with its renderers.

        Args:
            markdown_renderer: Converts rewritten note text to HTML
            template_renderer: Turns page models into file bytes
            copy_assets: Include asset bytes in the output. Defaults to the configured value.
            encoding: Encoding of note text. Defaults to the configured value.
        """
        self.copy_assets = settings.copy_assets if copy_assets is None else copy_assets
        self.encoding = encoding or settings.encoding

        self.graph_builder = LinkGraphBuilder(encoding=self.encoding)
        self.page_assembler = PageAssembler(
            markdown_renderer=markdown_renderer,
            template_renderer=template_renderer,
        )

    def generate(self, corpus: Corpus) -> dict[PurePosixPath, bytes]:
        """Render every note and collect every asset of *corpus*.

        The link index is built over the whole corpus before any page is
        rendered, since each page's backlinks depend on every other note.

        Args:
            corpus: Loaded corpus

        Returns:
            Mapping of destination-relative output path to file bytes
        """
        index = self.graph_builder.build(corpus)
        resolver = LinkResolver(corpus.link_targets())

        outputs: dict[PurePosixPath, bytes] = {}
        dangling = 0

        for note in corpus.notes():
            text = note.text(self.encoding)
            dangling += len(resolver.dangling_links(text))
            rewritten = resolver.rewrite(text, source=note.identity)
            self._add(outputs, note.output_path, self.page_assembler.render(note, rewritten, index))

        if self.copy_assets:
            for asset in corpus.assets():
                self._add(outputs, asset.output_path, asset.content)

        logger.info(
            f"Generated {len(outputs)} files: {len(corpus.notes())} pages, "
            f"{index.edge_count} links, {dangling} dangling"
        )
        return outputs

    @staticmethod
    def _add(outputs: dict[PurePosixPath, bytes], path: PurePosixPath, content: bytes) -> None:
        if path in outputs:
            logger.warning(f"Several files map to {path}, keeping the last one")
        outputs[path] = content
