"""Core generation pipeline for the *svue* package.

:func:`plan_generation` turns a :class:`~svue.request.GenerationRequest`
into a list of :class:`GeneratedFile` objects without touching the disk;
:func:`write_generated_files` writes such a plan.  :func:`generate` does
both.  The CLI, the tests and library callers all go through these three
functions.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from .config import SvueConfig
from .engine import TemplateEngine, TemplateLoader
from .exceptions import FileSystemError, UsageError
from .file_generator import create_folder, write_file
from .registry import StructureType, TemplateRegistry
from .request import GenerationRequest

log = logging.getLogger(__name__)

__all__ = ["GeneratedFile", "generate", "plan_generation", "write_generated_files", ]


class GeneratedFile(BaseModel):
    """A file produced for a request."""

    folder: Path
    file_name: str
    content: str
    template: str

    model_config = ConfigDict(frozen = True)

    @property
    def path(self) -> Path:
        return self.folder / self.file_name


def _assign_values(registry: TemplateRegistry, request: GenerationRequest) -> None:
    # request values are final and never scanned for tokens
    registry.set_value("OBJECT_NAME", request.name, literal = True)
    registry.set_value("SCRIPT_EXTENSION", request.script_extension, literal = True)
    registry.set_value("STYLE_FORMAT", request.style_format, literal = True)


def _assign_file_names(registry: TemplateRegistry, engine: TemplateEngine, request: GenerationRequest) -> None:
    """Name every file the object type can produce, then expose them to placeholders.

    Templates of the other structure mode are named too, since a bundle
    refers to its siblings by file name.
    """
    for definition in registry.file_templates(request.object_type):
        registry.set_output_file_name(definition.name, engine.render_file_name(definition.name))
    for definition in registry:
        if definition.filename_of:
            registry.set_value(definition.name, registry.output_file_name(definition.filename_of), literal = True)


def plan_generation(
        request: GenerationRequest, cwd: Path | str | None = None, config: SvueConfig | None = None, ) \
        -> list[GeneratedFile]:
    """Resolve the files for *request* without writing anything.

    Raises
    ------
    UsageError
        If no template exists for the requested object type and structure.
    """
    config = config or SvueConfig()
    cwd = Path(cwd or Path.cwd())

    registry = TemplateRegistry()
    engine = TemplateEngine(
            registry, TemplateLoader(config.templates_dir), on_missing = config.on_missing_template
            )

    selected = registry.select(request.object_type, request.structure)
    if not selected:
        supported = " or ".join(
                f"--f={s.value}" for s in (StructureType.SINGLE, StructureType.MULTI) if
                registry.select(request.object_type, s)
                )
        if not supported:
            raise UsageError(f"Improper parameters specified. No templates exist for '{request.object_type.value}'.")
        raise UsageError(
                f"Improper parameters specified. '{request.object_type.value}' supports {supported} only."
                )

    _assign_values(registry, request)
    _assign_file_names(registry, engine, request)

    folder = cwd / request.name if len(selected) > 1 else cwd
    files = [GeneratedFile(
            folder = folder, file_name = registry.output_file_name(d.name), content = engine.resolve(d.name),
            template = d.name, ) for d in selected]
    log.debug("Planned %d file(s) for %s %s", len(files), request.object_type.value, request.name)
    return files


def write_generated_files(files: list[GeneratedFile], *, overwrite: bool = False) -> list[Path]:
    """Write *files* in order and return their paths.

    Existing targets are refused before anything is written unless
    *overwrite* is set.  A failed write stops the run; files written before
    it are kept.
    """
    if not overwrite:
        existing = [f.path for f in files if f.path.exists()]
        if existing:
            raise FileSystemError(
                    f"Refusing to overwrite {', '.join(str(p) for p in existing)}. Use --overwrite to replace."
                    )

    for folder in dict.fromkeys(f.folder for f in files):
        create_folder(folder)

    written = []
    for f in files:
        written.append(write_file(f.path, f.content))
        log.info("Wrote %s", f.path)
    return written


def generate(
        request: GenerationRequest, cwd: Path | str | None = None, config: SvueConfig | None = None, *,
        overwrite: bool = False, ) -> list[Path]:
    """Plan and write the files for *request*."""
    return write_generated_files(plan_generation(request, cwd, config), overwrite = overwrite)
