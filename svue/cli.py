"""Command‑line interface for the **svue** package.

Usage::

    svue generate component my-component-name
    svue g c my-component-name --f=multi

Implementation details
----------------------
* Uses **Typer** for argument parsing.  The three positionals are
  declared optional and checked by hand so that a wrong argument count
  produces the same usage message as any other malformed invocation.
  Unknown options are collected the same way and rejected with that
  message too.
* All generation work is delegated to :func:`svue.core.plan_generation`
  and :func:`svue.core.write_generated_files`.
* Errors are :class:`svue.exceptions.SvueError` subclasses; each one is
  reported on the console and turned into exit code 1.
"""

import logging
from pathlib import Path
from typing import NoReturn, Optional

import click
import typer

from svue.config import load_config
from svue.core import plan_generation, write_generated_files
from svue.exceptions import SvueError, UsageError
from svue.manifest import detect_script_extension
from svue.registry import ObjectType, StructureType
from svue.request import GenerationRequest, parse_action, parse_object_type, parse_structure, usage_message

log = logging.getLogger(__name__)

app = typer.Typer(name = "svue", help = "Generate Vue components, interfaces, models and services.",
                  add_completion = False, )

STYLE_CHOICES = ["CSS", "SCSS", "Sass"]


def _setup_logging(debug: bool) -> None:
    """Send DEBUG logs to stderr when *debug* is set, warnings otherwise."""
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
            level = level, format = "[%(asctime)s] %(levelname)s %(name)s: %(message)s", datefmt = "%H:%M:%S", )


def _usage_exit(message: str) -> NoReturn:
    typer.echo(message)
    raise typer.Exit(code = 1)


def _prompt_style_format() -> str:
    choice = typer.prompt(
            "Choose a stylesheet format", type = click.Choice(STYLE_CHOICES, case_sensitive = False),
            default = STYLE_CHOICES[0], )
    return choice.lower()


@app.command(context_settings = {"allow_extra_args": True, "ignore_unknown_options": True})
def generate(
        ctx: typer.Context,
        action: Optional[str] = typer.Argument(None, help = "'generate' (or 'g')."),
        object_type: Optional[str] = typer.Argument(
                None, help = "component, interface, model or service (or c, i, m, s)."
                ),
        name: Optional[str] = typer.Argument(None, help = "Name of the object to generate."),
        structure: str = typer.Option("single", "--f", help = "File structure: 'single' or 'multi'."),
        style: Optional[str] = typer.Option(
                None, "--style", help = "Stylesheet format (css, scss or sass); prompted for when omitted.", ),
        overwrite: bool = typer.Option(False, "--overwrite", help = "Replace files that already exist."),
        config_path: Optional[Path] = typer.Option(None, "--config", help = "Path to a svue.config.json file."),
        debug: bool = typer.Option(False, "--debug", help = "Enable DEBUG logs."), ) -> None:
    """Generate the files for one object in the current directory."""
    _setup_logging(debug)

    if action is None or object_type is None or name is None or ctx.args:
        _usage_exit(usage_message())
    try:
        parse_action(action, object_type)
        kind = parse_object_type(action, object_type)
        mode = parse_structure(structure)
    except UsageError as exc:
        _usage_exit(str(exc))

    cwd = Path.cwd()
    try:
        cfg = load_config(config_path, cwd)
        script_extension = detect_script_extension(cwd / cfg.manifest_file)
        if style is not None:
            style_format = style.lower()
        elif kind is ObjectType.COMPONENT and mode is StructureType.MULTI:
            style_format = _prompt_style_format()
        else:
            style_format = cfg.default_style_format

        request = GenerationRequest.create(kind, name, mode, script_extension, style_format)
        files = plan_generation(request, cwd, cfg)
        write_generated_files(files, overwrite = overwrite)
    except UsageError as exc:
        _usage_exit(str(exc))
    except SvueError as exc:
        log.debug("Generation failed", exc_info = True)
        typer.echo(f"❌ {exc}", err = True)
        raise typer.Exit(code = 1)

    for f in files:
        label = f.file_name if f.folder == cwd else f"{request.name}/{f.file_name}"
        typer.echo(f"{label} has been generated successfully.")


def main() -> None:  # pragma: no cover – thin wrapper
    """Entry point used by the ``svue`` console script and ``python -m svue``."""
    app()


if __name__ == "__main__":
    main()
