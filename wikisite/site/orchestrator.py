"""Orchestration service for the complete site build."""

import shutil
from pathlib import Path, PurePosixPath

from loguru import logger

from wikisite.errors import PageWriteError, SetupError
from wikisite.ingestion.corpus_loader import CorpusLoader
from wikisite.rendering.base import MarkdownRenderer, TemplateRenderer

from .generator import SiteGenerator


class BuildOrchestrator:
    """Orchestrates a full rebuild from a source directory to a destination directory."""

    def __init__(
        self,
        *,
        markdown_renderer: MarkdownRenderer,
        template_renderer: TemplateRenderer,
        corpus_loader: CorpusLoader | None = None,
        copy_assets: bool | None = None,
    ):
        """Initialize the orchestrator with required services.

        Args:
            markdown_renderer: Converts rewritten note text to HTML
            template_renderer: Turns page models into file bytes
            corpus_loader: Loader for the source tree. Defaults to the configured allow-list.
            copy_assets: Copy assets to the destination. Defaults to the configured value.
        """
        self.corpus_loader = corpus_loader or CorpusLoader()
        self.generator = SiteGenerator(
            markdown_renderer=markdown_renderer,
            template_renderer=template_renderer,
            copy_assets=copy_assets,
        )

    def build(self, src: Path, dst: Path) -> dict[PurePosixPath, bytes]:
        """Rebuild the site in *dst* from the notes in *src*.

        The destination is wiped first. Any error aborts the build and may
        leave the destination empty or partially written.

        Args:
            src: Source directory of notes
            dst: Destination directory, owned by this build

        Returns:
            The outputs that were written, keyed by destination-relative path
        """
        src, dst = Path(src), Path(dst)

        self._prepare_destination(src, dst)
        corpus = self.corpus_loader.load(src)
        outputs = self.generator.generate(corpus)

        for relative_path, content in sorted(outputs.items()):
            self._write(dst / relative_path, content)

        logger.info(f"Build complete: wrote {len(outputs)} files to {dst}")
        return outputs

    @staticmethod
    def _prepare_destination(src: Path, dst: Path) -> None:
        """Remove and recreate *dst*."""
        resolved_src, resolved_dst = src.resolve(), dst.resolve()
        if resolved_src == resolved_dst or resolved_dst in resolved_src.parents:
            raise SetupError(f"clean dst: {dst} contains the source directory {src}")

        try:
            if dst.exists():
                shutil.rmtree(dst)
        except OSError as err:
            raise SetupError(f"clean dst: {err}") from err
        try:
            dst.mkdir(parents=True)
        except OSError as err:
            raise SetupError(f"create dst: {err}") from err
        logger.debug(f"Prepared empty destination {dst}")

    @staticmethod
    def _write(path: Path, content: bytes) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "wb") as f:
                f.write(content)
        except OSError as err:
            raise PageWriteError(path, f"create {path.name}: {err.strerror or err}") from err
        logger.debug(f"Wrote {path}")
