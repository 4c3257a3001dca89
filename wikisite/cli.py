"""CLI for building a static HTML site from a directory of linked markdown notes"""

import argparse
import sys
from pathlib import Path

from loguru import logger

from wikisite.config import settings
from wikisite.errors import WikisiteError
from wikisite.rendering.markdown_renderer import PythonMarkdownRenderer
from wikisite.rendering.template_renderer import Jinja2TemplateRenderer
from wikisite.site.orchestrator import BuildOrchestrator


def main(src: str, dst: str, tpl: str) -> None:
    # The template is read before the destination is touched
    template_renderer = Jinja2TemplateRenderer.from_file(tpl, encoding=settings.encoding)
    markdown_renderer = PythonMarkdownRenderer()

    orchestrator = BuildOrchestrator(
        markdown_renderer=markdown_renderer,
        template_renderer=template_renderer,
    )
    orchestrator.build(Path(src), Path(dst))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wikisite", description="Render a folder of wikilinked notes to HTML"
    )
    parser.add_argument(
        "-src", "--src", type=str, required=True, help="Folder containing the notes"
    )
    parser.add_argument(
        "-dst",
        "--dst",
        type=str,
        required=True,
        help="Folder for the generated html, removed and recreated on every run",
    )
    parser.add_argument(
        "-tpl", "--tpl", type=str, required=True, help="Path of the Jinja2 page template"
    )
    return parser


def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

    try:
        main(src=args.src, dst=args.dst, tpl=args.tpl)
    except WikisiteError as err:
        logger.error(f"Build failed: {err}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(run())
