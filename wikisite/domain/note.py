"""Corpus domain models."""

from enum import Enum
from pathlib import PurePosixPath

from pydantic import BaseModel, ConfigDict

from wikisite.errors import NoteReadError


class AssetKind(str, Enum):
    """How a corpus entry is processed.

    NOTE entries are parsed for wikilinks and rendered to HTML.
    IMAGE entries are never parsed and are copied through unchanged.
    """

    NOTE = "note"
    IMAGE = "image"


def slugify(identity: str) -> str:
    """Make an identity URL-safe by replacing each space with a hyphen."""
    return identity.replace(" ", "-")


class CorpusEntry(BaseModel):
    """A single file selected from the source tree.

    Attributes:
        relative_path: POSIX path relative to the source root, extension kept
        kind: Processing policy for the file
        content: Raw file bytes
    """

    model_config = ConfigDict(frozen=True)

    relative_path: str
    kind: AssetKind
    content: bytes

    @property
    def identity(self) -> str:
        """Relative path with its extension stripped, spaces kept."""
        return str(PurePosixPath(self.relative_path).with_suffix(""))

    @property
    def title(self) -> str:
        """File name without extension."""
        return PurePosixPath(self.relative_path).stem

    @property
    def slug(self) -> str:
        return slugify(self.identity)

    @property
    def href(self) -> str:
        """Link target used when another note references this entry.

        Notes link to their rendered ``.html`` page. Assets are copied rather than
        rendered, so they link to the copied file with its own extension.
        """
        return f"./{self.output_path}"

    @property
    def output_path(self) -> PurePosixPath:
        """Destination-relative path this entry is written to."""
        if self.kind is AssetKind.NOTE:
            return PurePosixPath(f"{self.slug}.html")
        return PurePosixPath(slugify(self.relative_path))

    def text(self, encoding: str = "utf-8") -> str:
        try:
            return self.content.decode(encoding)
        except UnicodeDecodeError as err:
            raise NoteReadError(self.relative_path, f"decode as {encoding}: {err.reason}") from err


class Corpus(BaseModel):
    """Every file selected for a run, keyed by relative path.

    Built once by the corpus loader and read-only afterwards.
    """

    model_config = ConfigDict(frozen=True)

    entries: dict[str, CorpusEntry] = {}

    def __len__(self) -> int:
        return len(self.entries)

    def sorted_entries(self) -> list[CorpusEntry]:
        return [self.entries[path] for path in sorted(self.entries)]

    def notes(self) -> list[CorpusEntry]:
        return [entry for entry in self.sorted_entries() if entry.kind is AssetKind.NOTE]

    def assets(self) -> list[CorpusEntry]:
        return [entry for entry in self.sorted_entries() if entry.kind is not AssetKind.NOTE]

    def link_targets(self) -> dict[str, CorpusEntry]:
        """Map each identity to its entry.

        Notes take priority over assets with the same identity, so ``[[Note]]``
        always reaches the rendered page. Among entries of the same priority the
        later one in sorted relative-path order wins.
        """
        targets = {entry.identity: entry for entry in self.assets()}
        targets.update({entry.identity: entry for entry in self.notes()})
        return targets
