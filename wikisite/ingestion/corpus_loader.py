"""Discovery of the note corpus in a source directory."""

import os
from collections import Counter
from pathlib import Path

from loguru import logger

from wikisite.config import settings
from wikisite.domain.note import AssetKind, Corpus, CorpusEntry
from wikisite.errors import DiscoveryError, NoteReadError


class CorpusLoader:
    """Walks a source directory and reads every allow-listed file."""

    def __init__(self, extensions: dict[str, AssetKind] | None = None):
        """Initialize the loader.

        Args:
            extensions: Allow-list mapping a file extension (with leading dot) to
                the kind of entry it produces. Defaults to the configured list.
        """
        self.extensions = dict(settings.extensions if extensions is None else extensions)

    def load(self, root: Path) -> Corpus:
        """Read every allow-listed file below *root*.

        Args:
            root: Source directory

        Returns:
            Corpus keyed by root-relative POSIX path

        Raises:
            DiscoveryError: If the tree cannot be walked
            NoteReadError: If a selected file cannot be read
        """
        root = Path(root)
        if not root.is_dir():
            raise DiscoveryError(f"walk dir: {root} is not a readable directory")

        entries: dict[str, CorpusEntry] = {}
        for file in self._walk(root):
            relative_path = file.relative_to(root).as_posix().lstrip("/")
            entries[relative_path] = CorpusEntry(
                relative_path=relative_path,
                kind=self.extensions[file.suffix],
                content=self._read(file),
            )
            logger.debug(f"Loaded {relative_path}")

        corpus = Corpus(entries=entries)
        self._warn_on_identity_collisions(corpus)

        logger.info(
            f"Found {len(corpus.notes())} notes and {len(corpus.assets())} assets in {root}"
        )
        return corpus

    def _walk(self, root: Path) -> list[Path]:
        """List allow-listed files below *root* in a stable order."""

        def on_error(err: OSError) -> None:
            raise DiscoveryError(f"walk: {err}") from err

        files = []
        for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
            dirnames.sort()
            for name in sorted(filenames):
                path = Path(dirpath) / name
                if path.suffix in self.extensions:
                    files.append(path)
        return files

    @staticmethod
    def _read(file: Path) -> bytes:
        try:
            with open(file, "rb") as f:
                return f.read()
        except OSError as err:
            raise NoteReadError(file, f"read path: {err.strerror or err}") from err

    @staticmethod
    def _warn_on_identity_collisions(corpus: Corpus) -> None:
        """Log every identity shared by more than one entry."""
        counts = Counter(entry.identity for entry in corpus.sorted_entries())
        for identity, count in sorted(counts.items()):
            if count > 1:
                winner = corpus.link_targets()[identity]
                logger.warning(
                    f"{count} files share the identity {identity!r}; "
                    f"links resolve to {winner.relative_path}"
                )
