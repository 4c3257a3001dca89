"""Page domain models handed to the template renderer."""

from pydantic import BaseModel, ConfigDict


class LinkDescriptor(BaseModel):
    """A backlink as shown on a page."""

    model_config = ConfigDict(frozen=True)

    name: str
    href: str


class Page(BaseModel):
    """Represents one output page.

    Attributes:
        title: Note file name without extension
        body: Rendered HTML of the rewritten note text
        incoming: Backlinks sorted by name
    """

    model_config = ConfigDict(frozen=True)

    title: str
    body: str
    incoming: list[LinkDescriptor] = []
