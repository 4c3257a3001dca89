"""Markdown to HTML conversion backed by python-markdown."""

from urllib.parse import urlparse
from xml.etree.ElementTree import Element

import markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from wikisite.config import settings
from wikisite.rendering.base import MarkdownRenderer

EXTERNAL_SCHEMES = {"http", "https", "ftp"}


class _ExternalLinkTreeprocessor(Treeprocessor):
    """Opens absolute links in a new tab. Raw HTML anchors are left alone."""

    def run(self, root: Element) -> None:
        for element in root.iter("a"):
            href = element.get("href", "")
            if href.startswith("//") or urlparse(href).scheme in EXTERNAL_SCHEMES:
                element.set("target", "_blank")


class ExternalLinksExtension(Extension):
    def extendMarkdown(self, md: markdown.Markdown) -> None:  # noqa: N802
        md.treeprocessors.register(_ExternalLinkTreeprocessor(md), "external_links", 0)


class PythonMarkdownRenderer(MarkdownRenderer):
    """Markdown renderer using the ``markdown`` package."""

    def __init__(
        self,
        extensions: list[str] | None = None,
        external_links_new_tab: bool | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            extensions: python-markdown extension names. Defaults to the configured list.
            external_links_new_tab: Add ``target="_blank"`` to absolute links.
                Defaults to the configured value.
        """
        names = list(settings.markdown_extensions if extensions is None else extensions)
        if external_links_new_tab is None:
            external_links_new_tab = settings.external_links_new_tab

        all_extensions: list[str | Extension] = [*names]
        if external_links_new_tab:
            all_extensions.append(ExternalLinksExtension())
        self._md = markdown.Markdown(extensions=all_extensions, output_format="html")

    def render(self, text: str) -> str:
        return self._md.reset().convert(text)
