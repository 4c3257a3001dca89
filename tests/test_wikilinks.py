#!/usr/bin/env python3
"""Test suite for wikilink parsing and rewriting."""

import pytest

from tests.fakes import make_corpus
from wikisite.domain.relationships import WikilinkOccurrence
from wikisite.ingestion.content_extractor import ContentExtractor
from wikisite.ingestion.relationship_extraction import LinkResolver


@pytest.mark.parametrize(
    "description,content,expected_links",
    [
        ("Single link", "See [[Getting Started]] for details.", ["Getting Started"]),
        ("Several links in order", "[[Z]] then [[A]] then [[M]]", ["Z", "A", "M"]),
        ("Duplicates are kept", "[[A]] and [[A]] again", ["A", "A"]),
        ("Digits and hyphens", "[[2024-01-02 Log]]", ["2024-01-02 Log"]),
        ("No links", "Plain text, no links.", []),
        ("Single brackets", "[A] and [link](A.md)", []),
        ("Alias syntax is outside the grammar", "[[index|Home]]", []),
        ("Heading syntax is outside the grammar", "[[Note#Section]]", []),
        ("Underscore is outside the grammar", "[[snake_case]]", []),
        ("Path separator is outside the grammar", "[[sub/Note]]", []),
        ("Empty brackets", "[[]]", []),
        ("Unclosed brackets", "[[Open and [[Closed]]", ["Closed"]),
    ],
)
def test_extract_wikilinks(description: str, content: str, expected_links: list[str]) -> None:
    assert ContentExtractor.extract_wikilinks(content) == expected_links, description


def test_extract_occurrences() -> None:
    occurrences = list(ContentExtractor.extract_occurrences("A", "See [[B]] and [[C]]"))

    assert occurrences == [
        WikilinkOccurrence(source="A", target="B"),
        WikilinkOccurrence(source="A", target="C"),
    ]


@pytest.fixture
def resolver() -> LinkResolver:
    corpus = make_corpus(
        {
            "A.md": "",
            "B.md": "",
            "My Note.md": "",
            "sub/Deep Note.md": "",
            "img/diagram.png": b"png",
        }
    )
    return LinkResolver(corpus.link_targets())


def test_known_link_resolves(resolver: LinkResolver) -> None:
    assert resolver.rewrite("See [[B]].") == 'See <a href="./B.html">B</a>.'


def test_unknown_link_is_dangling(resolver: LinkResolver) -> None:
    assert resolver.rewrite("See [[C]].") == 'See <a href="#">C</a>.'


def test_mixed_known_and_unknown(resolver: LinkResolver) -> None:
    rewritten = resolver.rewrite("See [[B]] and [[C]]")

    assert rewritten == 'See <a href="./B.html">B</a> and <a href="#">C</a>'


def test_spaces_are_slugged_in_href_only(resolver: LinkResolver) -> None:
    assert resolver.rewrite("[[My Note]]") == '<a href="./My-Note.html">My Note</a>'


def test_hyphenated_reference_does_not_match_spaced_identity(resolver: LinkResolver) -> None:
    """Lookup uses the unslugged identity, so the slug form is a different name."""
    assert resolver.rewrite("[[My-Note]]") == '<a href="#">My-Note</a>'


def test_case_is_preserved(resolver: LinkResolver) -> None:
    assert resolver.rewrite("[[b]]") == '<a href="#">b</a>'


def test_known_identity_outside_link_grammar(resolver: LinkResolver) -> None:
    """Identities with a path separator resolve because known names match exactly."""
    rewritten = resolver.rewrite("[[sub/Deep Note]]")

    assert rewritten == '<a href="./sub/Deep-Note.html">sub/Deep Note</a>'


def test_unknown_reference_outside_grammar_is_left_alone(resolver: LinkResolver) -> None:
    text = "[[other/Note]] and [[index|Home]] and [[snake_case]]"

    assert resolver.rewrite(text) == text


def test_asset_link_points_at_copied_file(resolver: LinkResolver) -> None:
    rewritten = resolver.rewrite("![[img/diagram]]")

    assert rewritten == '!<a href="./img/diagram.png">img/diagram</a>'


def test_every_occurrence_is_rewritten(resolver: LinkResolver) -> None:
    rewritten = resolver.rewrite("[[A]] [[A]] [[Nope]] [[Nope]]")

    assert rewritten.count('<a href="./A.html">A</a>') == 2
    assert rewritten.count('<a href="#">Nope</a>') == 2
    assert "[[" not in rewritten


def test_without_known_identities_everything_dangles() -> None:
    resolver = LinkResolver({})

    assert resolver.rewrite("[[A]] and [[B]]") == '<a href="#">A</a> and <a href="#">B</a>'


def test_dangling_links(resolver: LinkResolver) -> None:
    assert resolver.dangling_links("[[A]] [[C]] [[My Note]] [[D]]") == ["C", "D"]


def test_rewrite_logs_dangling_links(resolver: LinkResolver, log_messages: list[str]) -> None:
    resolver.rewrite("[[C]] and [[C]]", source="A")

    assert "DEBUG|Dangling links in A: C\n" in log_messages
