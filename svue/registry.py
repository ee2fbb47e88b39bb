"""Template catalog and the request-scoped registry built on top of it.

The catalog (:data:`TEMPLATES`) is a static, immutable table of
:class:`TemplateDefinition` objects.  Everything that changes while a
request is processed - the resolved value of each placeholder and the
output file name of each file template - lives in a
:class:`TemplateRegistry` instance that is created fresh for every
request, so nothing leaks from one invocation to the next.

Two kinds of definitions exist:

* *value placeholders* have no ``source_ref``.  They are never written to
  disk and only serve as substitution sources (the object name, the script
  extension, ...).
* *file templates* point at a file under ``templates/``.  When selected,
  their resolved content becomes a generated file.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

log = logging.getLogger(__name__)

__all__ = ["ObjectType", "StructureType", "TemplateDefinition", "TemplateRegistry", "TEMPLATES", ]


class ObjectType(str, Enum):
    """Category of artifact being generated."""

    COMPONENT = "component"
    INTERFACE = "interface"
    MODEL = "model"
    SERVICE = "service"
    ANY = "any"


class StructureType(str, Enum):
    """Whether an object occupies one file or several cooperating files."""

    SINGLE = "single"
    MULTI = "multi"
    ANY = "any"


class TemplateDefinition(BaseModel):
    """Immutable identity of a template or value placeholder."""

    name: str = Field(..., min_length = 1, description = "Unique token, e.g. COMPONENT_SCRIPT")
    object_type: ObjectType = ObjectType.ANY
    structure_type: StructureType = StructureType.ANY
    source_ref: str = Field("", description = "File name under templates/, empty for value placeholders")
    output_pattern: str = Field("", description = "Output file name, written with tokens")
    default: str = Field("", description = "Initial resolved value of a value placeholder")
    filename_of: str = Field("", description = "File template whose output file name this placeholder exposes")

    model_config = ConfigDict(frozen = True)

    @property
    def is_file_template(self) -> bool:
        return bool(self.source_ref)


def _value(name: str, **kwargs) -> TemplateDefinition:
    return TemplateDefinition(name = name, **kwargs)


def _file(
        name: str, object_type: ObjectType, structure_type: StructureType, source_ref: str, output_pattern: str, ) \
        -> TemplateDefinition:
    return TemplateDefinition(
            name = name, object_type = object_type, structure_type = structure_type, source_ref = source_ref,
            output_pattern = output_pattern, )


_C, _S, _M = ObjectType.COMPONENT, StructureType.SINGLE, StructureType.MULTI

TEMPLATES: tuple[TemplateDefinition, ...] = (
        _value("OBJECT_NAME"),
        _value("SCRIPT_EXTENSION"),
        _value("STYLE_FORMAT"),
        _value("COMPONENT_TITLE", default = "OBJECT_NAME component"),
        _value("HTML_FILE_NAME", filename_of = "COMPONENT_HTML"),
        _value("SCRIPT_FILE_NAME", filename_of = "COMPONENT_SCRIPT"),
        _value("STYLE_FILE_NAME", filename_of = "COMPONENT_STYLE"),
        _file("COMPONENT_SINGLE", _C, _S, "component-single.vue", "OBJECT_NAME.vue"),
        _file("COMPONENT_VUE", _C, _M, "component.vue", "OBJECT_NAME.vue"),
        _file("COMPONENT_HTML", _C, _M, "component.template.html", "OBJECT_NAME.template.html"),
        _file("COMPONENT_SCRIPT", _C, _M, "component.script", "OBJECT_NAME.script.SCRIPT_EXTENSION"),
        _file("COMPONENT_STYLE", _C, _M, "component.style", "OBJECT_NAME.style.STYLE_FORMAT"),
        _file("INTERFACE_SINGLE", ObjectType.INTERFACE, _S, "interface", "OBJECT_NAME.SCRIPT_EXTENSION"),
        _file("MODEL_SINGLE", ObjectType.MODEL, _S, "model", "OBJECT_NAME.SCRIPT_EXTENSION"),
        _file("SERVICE_SINGLE", ObjectType.SERVICE, _S, "service", "OBJECT_NAME.service.SCRIPT_EXTENSION"),
        )


def _check_tokens(names: list[str]) -> None:
    """Reject tokens that contain one another.

    Replacement is literal, so ``FOO`` would also rewrite part of ``FOO_BAR``.
    """
    for name in names:
        for other in names:
            if name != other and name in other:
                raise ValueError(f"Template token {name!r} is part of token {other!r}")


class TemplateRegistry:
    """Request-scoped view over a template catalog.

    Parameters
    ----------
    catalog:
        Definitions in declaration order.  Defaults to :data:`TEMPLATES`.

    Raises
    ------
    ValueError
        If two definitions share a name or one token contains another.
    """

    def __init__(self, catalog: Iterable[TemplateDefinition] = TEMPLATES) -> None:
        self._definitions: dict[str, TemplateDefinition] = {}
        for definition in catalog:
            if definition.name in self._definitions:
                raise ValueError(f"Duplicate template name: {definition.name}")
            self._definitions[definition.name] = definition
        _check_tokens(list(self._definitions))

        self._values: dict[str, str] = {}
        self._literals: set[str] = set()
        self._output_file_names: dict[str, str] = {}

    def __iter__(self) -> Iterator[TemplateDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)

    def get(self, name: str) -> TemplateDefinition | None:
        return self._definitions.get(name)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select(
            self, object_type: ObjectType | str, structure: StructureType | str
            ) -> list[TemplateDefinition]:
        """Return the file templates written for *object_type* in *structure* mode.

        Matching is exact on both fields, so ``any`` placeholders are never
        selected.  The result keeps declaration order.
        """
        object_type = ObjectType(object_type)
        structure = StructureType(structure)
        return [d for d in self._definitions.values() if
                d.is_file_template and d.object_type is object_type and d.structure_type is structure]

    def file_templates(self, object_type: ObjectType | str) -> list[TemplateDefinition]:
        """Return every file template of *object_type*, whatever its structure mode."""
        object_type = ObjectType(object_type)
        return [d for d in self._definitions.values() if d.is_file_template and d.object_type is object_type]

    # ------------------------------------------------------------------
    # Request-scoped state
    # ------------------------------------------------------------------

    def value(self, name: str) -> str:
        """Current resolved value of *name* (its default until assigned)."""
        if name in self._values:
            return self._values[name]
        definition = self._definitions.get(name)
        return definition.default if definition else ""

    def set_value(self, name: str, value: str, *, literal: bool = False) -> None:
        """Assign *value* to *name*; unknown names are ignored.

        A *literal* value is final: it is spliced into text as is and never
        scanned for further tokens.
        """
        if name not in self._definitions:
            log.debug("Ignoring value for unknown template %s", name)
            return
        self._values[name] = value
        if literal:
            self._literals.add(name)
        else:
            self._literals.discard(name)

    def is_literal(self, name: str) -> bool:
        return name in self._literals

    def output_file_name(self, name: str) -> str:
        return self._output_file_names.get(name, "")

    def set_output_file_name(self, name: str, value: str) -> None:
        """Overwrite the output file name of *name*; unknown names are ignored."""
        if name not in self._definitions:
            log.debug("Ignoring output file name for unknown template %s", name)
            return
        self._output_file_names[name] = value

    def substitutions(self) -> list[tuple[str, str]]:
        """``(token, value)`` pairs of non-literal values in declaration order."""
        return [(name, self.value(name)) for name in self._definitions if name not in self._literals]

    def literal_values(self) -> dict[str, str]:
        """Literal values keyed by token."""
        return {name: self._values[name] for name in self._definitions if name in self._literals}
