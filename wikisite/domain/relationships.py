"""Relationship domain models."""

from pydantic import BaseModel, ConfigDict


class WikilinkOccurrence(BaseModel):
    """A single ``[[target]]`` found in a note's raw text."""

    model_config = ConfigDict(frozen=True)

    source: str  # identity of the note containing the link
    target: str  # name exactly as written between the brackets


class IncomingLinkIndex(BaseModel):
    """Maps a raw target name to the identities of the notes that link to it."""

    model_config = ConfigDict(frozen=True)

    incoming: dict[str, frozenset[str]] = {}

    def get(self, target: str) -> frozenset[str]:
        return self.incoming.get(target, frozenset())

    def targets(self) -> list[str]:
        return sorted(self.incoming)

    @property
    def edge_count(self) -> int:
        return sum(len(sources) for sources in self.incoming.values())
