"""Pick the script extension from the project's ``package.json``."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .exceptions import ManifestReadError

log = logging.getLogger(__name__)

__all__ = ["DEFAULT_SCRIPT_EXTENSION", "read_manifest", "detect_script_extension"]

DEFAULT_SCRIPT_EXTENSION = "js"
TYPED_SCRIPT_EXTENSION = "ts"


def read_manifest(manifest_path: Path | str) -> dict[str, Any]:
    """Load *manifest_path* as a JSON object.

    Raises
    ------
    ManifestReadError
        If the file is missing, unreadable or not a JSON object.
    """
    manifest_path = Path(manifest_path)
    try:
        data = json.loads(manifest_path.read_text(encoding = "utf-8"))
    except FileNotFoundError as exc:
        raise ManifestReadError(f"No manifest found at {manifest_path}") from exc
    except (OSError, json.JSONDecodeError) as exc:
        raise ManifestReadError(f"Could not parse {manifest_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ManifestReadError(f"{manifest_path} does not contain a JSON object")
    return data


def detect_script_extension(manifest_path: Path | str) -> str:
    """Return ``"ts"`` when the project depends on TypeScript, else ``"js"``.

    A missing or broken manifest is not fatal: a warning is logged and the
    untyped extension is used.
    """
    try:
        manifest = read_manifest(manifest_path)
    except ManifestReadError as exc:
        log.warning("%s; defaulting to .%s", exc, DEFAULT_SCRIPT_EXTENSION)
        return DEFAULT_SCRIPT_EXTENSION

    for section in ("dependencies", "devDependencies"):
        deps = manifest.get(section) or {}
        if isinstance(deps, dict) and "typescript" in deps:
            return TYPED_SCRIPT_EXTENSION
    return DEFAULT_SCRIPT_EXTENSION
