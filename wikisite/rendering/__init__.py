from wikisite.rendering.base import MarkdownRenderer, TemplateRenderer

__all__ = ["MarkdownRenderer", "TemplateRenderer"]
