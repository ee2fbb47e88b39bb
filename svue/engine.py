"""Placeholder substitution engine.

Templates are plain text in which registry tokens (``OBJECT_NAME``,
``STYLE_FORMAT``, ...) appear literally.  :meth:`TemplateEngine.substitute`
replaces them with their resolved values until nothing is left to
replace.  A value may itself contain tokens, so replacement runs as a
fixed-point loop; the number of passes is bounded and a registry whose
values reference each other in a loop raises
:class:`~svue.exceptions.CyclicTemplateError` instead of spinning forever.
"""

from __future__ import annotations

import logging
import re
from importlib.resources import files
from pathlib import Path
from typing import Literal

from .exceptions import CyclicTemplateError, TemplateLookupError
from .registry import TemplateRegistry

log = logging.getLogger(__name__)

__all__ = ["MissingTemplatePolicy", "TemplateEngine", "TemplateLoader"]

MissingTemplatePolicy = Literal["empty", "error"]


class TemplateLoader:
    """Read raw template text by ``source_ref``.

    Without *templates_dir* the templates shipped inside the package are
    used.
    """

    def __init__(self, templates_dir: Path | str | None = None) -> None:
        self.templates_dir = Path(templates_dir).expanduser() if templates_dir else None

    def read(self, source_ref: str) -> str:
        if self.templates_dir is not None:
            source = self.templates_dir / source_ref
        else:
            source = files("svue").joinpath("templates").joinpath(source_ref)
        if not source.is_file():
            raise TemplateLookupError(f"Template source {source_ref!r} not found")
        return source.read_text(encoding = "utf-8")


class TemplateEngine:
    """Resolve templates against the values held by a :class:`TemplateRegistry`.

    Parameters
    ----------
    registry:
        Request-scoped registry providing tokens and their values.
    loader:
        Source of raw template text.  Defaults to the packaged templates.
    on_missing:
        ``"empty"`` resolves an unknown template or missing source file to an
        empty string (with a warning); ``"error"`` raises
        :class:`TemplateLookupError`.
    """

    def __init__(
            self, registry: TemplateRegistry, loader: TemplateLoader | None = None, *,
            on_missing: MissingTemplatePolicy = "empty", ) -> None:
        if on_missing not in ("empty", "error"):
            raise ValueError(f"Unknown missing-template policy: {on_missing!r}")
        self.registry = registry
        self.loader = loader or TemplateLoader()
        self.on_missing = on_missing

    @property
    def max_passes(self) -> int:
        # an acyclic chain is at most one token per entry deep, plus a clean pass
        return len(self.registry) + 1

    def substitute(self, text: str) -> str:
        """Replace every registry token in *text*, recursively.

        Each pass walks the registry in declaration order and replaces all
        occurrences of every non-literal token found.  Passes repeat until
        one of them changes nothing.  Literal values are then spliced in by
        a single scan, so their own text is never substituted again.
        """
        for _ in range(self.max_passes):
            changed = False
            for token, value in self.registry.substitutions():
                if token in text:
                    text = text.replace(token, value)
                    changed = True
            if not changed:
                return self._splice_literals(text)
        remaining = [token for token, _ in self.registry.substitutions() if token in text]
        raise CyclicTemplateError(
                f"Placeholders still unresolved after {self.max_passes} passes: {', '.join(remaining)}"
                )

    def _splice_literals(self, text: str) -> str:
        literals = self.registry.literal_values()
        if not literals:
            return text
        pattern = re.compile("|".join(re.escape(token) for token in literals))
        return pattern.sub(lambda m: literals[m.group(0)], text)

    def resolve(self, name: str) -> str:
        """Return the fully substituted content of template *name*.

        The result is also stored as the template's resolved value so other
        templates may embed it.
        """
        definition = self.registry.get(name)
        if definition is None:
            return self._missing(TemplateLookupError(f"Unknown template {name!r}"))

        if definition.is_file_template:
            try:
                raw = self.loader.read(definition.source_ref)
            except TemplateLookupError as exc:
                return self._missing(exc)
        elif self.registry.is_literal(name):
            return self.registry.value(name)
        else:
            raw = self.registry.value(name)

        content = self.substitute(raw)
        self.registry.set_value(name, content, literal = True)
        return content

    def render_file_name(self, name: str) -> str:
        """Substitute the output pattern of template *name*."""
        definition = self.registry.get(name)
        if definition is None:
            return self._missing(TemplateLookupError(f"Unknown template {name!r}"))
        return self.substitute(definition.output_pattern)

    def _missing(self, exc: TemplateLookupError) -> str:
        if self.on_missing == "error":
            raise exc
        log.warning("%s; using empty content", exc)
        return ""
