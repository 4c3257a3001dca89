"""Exceptions raised while building a site. Every one of them aborts the run."""

from pathlib import Path


class WikisiteError(Exception):
    """Base class for all build failures."""


class SetupError(WikisiteError):
    """The destination or template could not be prepared."""


class DiscoveryError(WikisiteError):
    """The source tree could not be walked."""


class TemplateRenderError(WikisiteError):
    """A template renderer failed to fill in a page."""


class _PathError(WikisiteError):
    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class NoteReadError(_PathError):
    """A file selected for the corpus could not be read."""


class PageRenderError(_PathError):
    """A note could not be rendered into a page."""


class PageWriteError(_PathError):
    """A rendered file could not be written to the destination."""
