"""Generation request model and parsing of the command-line tokens."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .exceptions import UsageError
from .naming import format_object_name
from .registry import ObjectType, StructureType

__all__ = ["GenerationRequest", "OBJECT_TYPE_CODES", "parse_action", "parse_object_type", "parse_structure",
           "usage_message", ]

ACTIONS = {"g": "generate"}

OBJECT_TYPE_CODES: dict[str, ObjectType] = {"c": ObjectType.COMPONENT, "i": ObjectType.INTERFACE,
                                            "m": ObjectType.MODEL, "s": ObjectType.SERVICE, }

STYLE_FORMATS = ("css", "scss", "sass")


def usage_message() -> str:
    return "Improper parameters specified. Correct syntax is: 'svue generate component my-component-name'."


def _uses_abbreviations(action: str, object_type: str) -> bool:
    return len(action) == 1 and len(object_type) == 1


def parse_action(action: str, object_type: str) -> str:
    """Return the canonical action, accepting ``g`` only alongside a one-letter type."""
    if action in ACTIONS.values():
        return action
    if _uses_abbreviations(action, object_type) and action in ACTIONS:
        return ACTIONS[action]
    raise UsageError("Improper parameters specified. First parameter can be either 'generate' or 'g'.")


def parse_object_type(action: str, object_type: str) -> ObjectType:
    """Map a full or one-letter object type to :class:`ObjectType`."""
    if object_type in {t.value for t in OBJECT_TYPE_CODES.values()}:
        return ObjectType(object_type)
    if _uses_abbreviations(action, object_type) and object_type in OBJECT_TYPE_CODES:
        return OBJECT_TYPE_CODES[object_type]
    options = ", ".join(f"{code} (or '{t.value}')" for code, t in OBJECT_TYPE_CODES.items())
    raise UsageError(f"Improper parameters specified. Options for second parameter are: [{options}].")


def parse_structure(value: str) -> StructureType:
    if value in (StructureType.SINGLE.value, StructureType.MULTI.value):
        return StructureType(value)
    raise UsageError("Improper parameters specified. The --f flag accepts 'single' or 'multi'.")


class GenerationRequest(BaseModel):
    """One invocation of the generator.

    ``name`` is the formatted object name; it is derived from ``raw_name``
    once, when the request is created through :meth:`create`.
    """

    object_type: ObjectType
    raw_name: str
    name: str
    structure: StructureType = StructureType.SINGLE
    script_extension: str = "js"
    style_format: str = "css"

    model_config = ConfigDict(frozen = True)

    @classmethod
    def create(
            cls, object_type: ObjectType | str, raw_name: str, structure: StructureType | str = StructureType.SINGLE,
            script_extension: str = "js", style_format: str = "css", ) -> GenerationRequest:
        """Build a request, validating the name and formatting it."""
        if not raw_name.strip():
            raise UsageError(usage_message())
        if "/" in raw_name or "\\" in raw_name:
            raise UsageError(f"Improper parameters specified. Object name {raw_name!r} must not contain a path.")
        if style_format not in STYLE_FORMATS:
            raise UsageError(f"Unknown style format {style_format!r}; choose one of {', '.join(STYLE_FORMATS)}.")
        object_type = ObjectType(object_type)
        return cls(
                object_type = object_type, raw_name = raw_name, name = format_object_name(raw_name, object_type),
                structure = StructureType(structure), script_extension = script_extension,
                style_format = style_format, )
