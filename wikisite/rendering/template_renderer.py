"""Page templating backed by Jinja2."""

from pathlib import Path

from jinja2 import Environment, StrictUndefined, Template, TemplateError, TemplateSyntaxError

from wikisite.domain.page import Page
from wikisite.errors import SetupError, TemplateRenderError
from wikisite.rendering.base import TemplateRenderer


class Jinja2TemplateRenderer(TemplateRenderer):
    """Renders pages through a single Jinja2 template.

    The template sees ``title``, ``body`` and ``incoming`` (a list of items with
    ``href`` and ``name``), plus the whole model as ``page``. ``body`` is HTML,
    so output is not autoescaped.
    """

    def __init__(self, source: str, encoding: str = "utf-8") -> None:
        """Compile the template.

        Args:
            source: Template source text
            encoding: Encoding of the rendered bytes

        Raises:
            SetupError: If the template does not parse
        """
        self.encoding = encoding
        env = Environment(
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )
        try:
            self._template: Template = env.from_string(source)
        except TemplateSyntaxError as err:
            raise SetupError(f"parse template: line {err.lineno}: {err.message}") from err

    @classmethod
    def from_file(cls, path: str | Path, encoding: str = "utf-8") -> "Jinja2TemplateRenderer":
        """Read and compile a template file.

        Raises:
            SetupError: If the file cannot be read or does not parse
        """
        try:
            source = Path(path).read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as err:
            raise SetupError(f"read template: {err}") from err
        return cls(source, encoding=encoding)

    def render(self, page: Page) -> bytes:
        try:
            html = self._template.render(
                page=page,
                title=page.title,
                body=page.body,
                incoming=page.incoming,
            )
        except TemplateError as err:
            raise TemplateRenderError(f"render template: {err}") from err
        return html.encode(self.encoding)
