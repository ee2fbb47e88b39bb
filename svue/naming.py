"""Object name normalisation."""

from __future__ import annotations

import re

from .registry import ObjectType

__all__ = ["capitalize", "format_object_name"]

# at least two capitalised word segments, or a hyphen anywhere
_WELL_FORMED = re.compile(r"([A-Z][a-z]*[0-9]*){2,}|-")
_LEADING_CAPITAL = re.compile(r"^[A-Z]")
_ANY_CAPITAL = re.compile(r"[A-Z]")


def capitalize(word: str) -> str:
    """Upper-case the first character of *word* and leave the rest alone."""
    return word[:1].upper() + word[1:]


def format_object_name(raw_name: str, object_type: ObjectType | str) -> str:
    """Return *raw_name* as a multi-word identifier for *object_type*.

    Only components are rewritten; every other object type passes through
    unchanged.

    * ``MyWidget`` or ``my-widget`` are already well formed.
    * ``Widget`` becomes ``WidgetComponent``.
    * ``myWidget`` becomes ``MyWidget``.
    * ``widget`` becomes ``widget-component``.
    """
    object_type = ObjectType(object_type)
    if object_type is not ObjectType.COMPONENT:
        return raw_name

    if _WELL_FORMED.search(raw_name):
        return raw_name
    if _LEADING_CAPITAL.search(raw_name):
        return f"{raw_name}{capitalize(object_type.value)}"
    if _ANY_CAPITAL.search(raw_name):
        return capitalize(raw_name)
    return f"{raw_name}-{object_type.value}"
