"""Substitution of ``{placeholder}`` tokens inside template text."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

# Nested structure the substitution walks: strings are rewritten, containers
# are rebuilt and every other scalar passes through untouched.
TemplateValue = Union[
    str,
    int,
    float,
    bool,
    None,
    list["TemplateValue"],
    tuple["TemplateValue", ...],
    dict[str, "TemplateValue"],
]


def substitute(text: Any, variables: Mapping[str, str]) -> Any:
    """Replace every ``{key}`` token in ``text`` with ``variables[key]``.

    Tokens without a matching key are left as they are. Matching is
    case-sensitive and there is no escape syntax. Values that are not strings
    (a missing description, for instance) are returned unchanged.
    """

    if not isinstance(text, str):
        return text
    result = text
    for key, value in variables.items():
        result = result.replace("{" + str(key) + "}", str(value))
    return result


def substitute_object(node: TemplateValue, variables: Mapping[str, str]) -> TemplateValue:
    """Apply :func:`substitute` to every string found in ``node``."""

    if isinstance(node, str):
        return substitute(node, variables)
    if isinstance(node, list):
        return [substitute_object(item, variables) for item in node]
    if isinstance(node, tuple):
        return tuple(substitute_object(item, variables) for item in node)
    if isinstance(node, Mapping):
        return {key: substitute_object(value, variables) for key, value in node.items()}
    return node


__all__ = ["TemplateValue", "substitute", "substitute_object"]
