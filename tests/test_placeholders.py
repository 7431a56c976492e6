"""Tests for ``{placeholder}`` substitution."""

from teamhub.application.use_cases.templates.placeholders import (
    substitute,
    substitute_object,
)


def test_substitute_replaces_known_placeholder() -> None:
    assert substitute("Project for {client}", {"client": "Acme"}) == "Project for Acme"


def test_substitute_keeps_unknown_placeholder_verbatim() -> None:
    assert substitute("Hi {x}", {}) == "Hi {x}"
    assert substitute("{a} and {b}", {"a": "1"}) == "1 and {b}"


def test_substitute_replaces_every_occurrence() -> None:
    assert substitute("{n}-{n}-{n}", {"n": "7"}) == "7-7-7"


def test_substitute_is_case_sensitive() -> None:
    assert substitute("{Client}", {"client": "Acme"}) == "{Client}"


def test_substitute_passes_through_non_strings() -> None:
    assert substitute(None, {"client": "Acme"}) is None
    assert substitute(3, {"client": "Acme"}) == 3


def test_substitute_object_walks_nested_structures() -> None:
    node = {
        "name": "Launch {product}",
        "steps": ["Plan {product}", ("Ship", "{product} GA")],
        "meta": {"owner": "{owner}", "days": 3, "active": True},
    }

    result = substitute_object(node, {"product": "Widget", "owner": "Ana"})

    assert result == {
        "name": "Launch Widget",
        "steps": ["Plan Widget", ("Ship", "Widget GA")],
        "meta": {"owner": "Ana", "days": 3, "active": True},
    }
    assert node["name"] == "Launch {product}"
