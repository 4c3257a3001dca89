"""Relationship extraction module for building the link index and rewriting wikilinks."""

from wikisite.ingestion.relationship_extraction.graph_builder import LinkGraphBuilder
from wikisite.ingestion.relationship_extraction.resolver import LinkResolver

__all__ = [
    "LinkGraphBuilder",
    "LinkResolver",
]
