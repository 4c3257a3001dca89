from tests.fakes.corpus import make_corpus
from tests.fakes.fake_markdown_renderer import FakeMarkdownRenderer
from tests.fakes.fake_template_renderer import FakeTemplateRenderer

__all__ = ["FakeMarkdownRenderer", "FakeTemplateRenderer", "make_corpus"]
