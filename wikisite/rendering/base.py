from typing import Protocol

from wikisite.domain.page import Page


class MarkdownRenderer(Protocol):
    def render(self, text: str) -> str:
        """Convert markdown text to an HTML fragment."""
        ...


class TemplateRenderer(Protocol):
    def render(self, page: Page) -> bytes:
        """Render a page model into the bytes of an output file.

        Raises:
            TemplateRenderError: If the template cannot be filled in
        """
        ...
