import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest
from loguru import logger

from tests.fakes import FakeMarkdownRenderer, FakeTemplateRenderer

PAGE_TEMPLATE = """<html>
<head><title>{{ title }}</title></head>
<body>
<main>{{ body }}</main>
<ul class="backlinks">
{%- for link in incoming %}
<li><a href="{{ link.href }}">{{ link.name }}</a></li>
{%- endfor %}
</ul>
</body>
</html>
"""


@pytest.fixture
def fake_markdown_renderer() -> FakeMarkdownRenderer:
    return FakeMarkdownRenderer()


@pytest.fixture
def fake_template_renderer() -> FakeTemplateRenderer:
    return FakeTemplateRenderer()


@pytest.fixture
def temp_site_base() -> Generator[Path, None, None]:
    """Create a temporary directory holding the source, destination and template
    used when testing a full build.
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def notes_directory(temp_site_base: Path) -> Path:
    """Create notes subdirectory."""
    notes_dir = temp_site_base / "notes"
    notes_dir.mkdir()
    return notes_dir


@pytest.fixture
def site_directory(temp_site_base: Path) -> Path:
    """Destination path; not created, the build owns it."""
    return temp_site_base / "site"


@pytest.fixture
def template_file(temp_site_base: Path) -> Path:
    template = temp_site_base / "page.html"
    template.write_text(PAGE_TEMPLATE, encoding="utf-8")
    return template


@pytest.fixture
def write_notes(notes_directory: Path) -> Callable[[dict[str, str | bytes]], Path]:
    """Write files below the notes directory, creating subfolders as needed."""

    def _write(files: dict[str, str | bytes]) -> Path:
        for relative_path, content in files.items():
            path = notes_directory / relative_path
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return notes_directory

    return _write


@pytest.fixture
def log_messages() -> Generator[list[str], None, None]:
    """Collect loguru output emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level}|{message}")
    yield messages
    logger.remove(handler_id)
