"""Assembling rendered pages from notes and the link index."""

from loguru import logger

from wikisite.domain.note import CorpusEntry, slugify
from wikisite.domain.page import LinkDescriptor, Page
from wikisite.domain.relationships import IncomingLinkIndex
from wikisite.errors import PageRenderError, TemplateRenderError
from wikisite.rendering.base import MarkdownRenderer, TemplateRenderer


class PageAssembler:
    """Turns one rewritten note into the bytes of its output page."""

    def __init__(
        self,
        *,
        markdown_renderer: MarkdownRenderer,
        template_renderer: TemplateRenderer,
    ):
        self.markdown_renderer = markdown_renderer
        self.template_renderer = template_renderer

    @staticmethod
    def build_backlinks(identity: str, index: IncomingLinkIndex) -> list[LinkDescriptor]:
        """Return the backlinks of the note with *identity*, sorted by name.

        Args:
            identity: Identity of the page's own note
            index: Incoming-link index of the whole corpus

        Returns:
            One descriptor per linking note, ordered by ordinal name compare
        """
        descriptors = [
            LinkDescriptor(name=source, href=f"{slugify(source)}.html")
            for source in index.get(identity)
        ]
        return sorted(descriptors, key=lambda d: d.name)

    def assemble(self, note: CorpusEntry, rewritten: str, index: IncomingLinkIndex) -> Page:
        """Build the page model for *note* from its rewritten text."""
        return Page(
            title=note.title,
            body=self.markdown_renderer.render(rewritten),
            incoming=self.build_backlinks(note.identity, index),
        )

    def render(self, note: CorpusEntry, rewritten: str, index: IncomingLinkIndex) -> bytes:
        """Assemble and template the page for *note*.

        Raises:
            PageRenderError: If the template fails for this page
        """
        page = self.assemble(note, rewritten, index)
        logger.debug(f"Rendering {note.relative_path} with {len(page.incoming)} backlinks")
        try:
            return self.template_renderer.render(page)
        except TemplateRenderError as err:
            raise PageRenderError(note.relative_path, str(err)) from err
