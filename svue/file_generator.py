"""Low‑level file‑system helpers used by the *svue* package.

The goal of this module is to provide **pure, synchronous** helpers that
create output folders and write text files.  All functions are
stateless and raise a ``FileSystemError`` (defined in
:mod:`svue.exceptions`) on failure.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .exceptions import FileSystemError

log = logging.getLogger(__name__)

__all__ = ["write_file", "create_folder", "remove_folder", ]


def write_file(
        target: Path | str, content: str, *, encoding: str = "utf-8", ) -> Path:
    """Write *content* to *target* atomically.

    The content goes to a temporary sibling file first, which is then
    moved over ``target``.  This prevents partial writes if the process
    is interrupted.

    Parameters
    ----------
    target:
        Destination file path.  Its parent directory must exist.
    content:
        Text to write.
    encoding:
        Text encoding – defaults to ``"utf-8"``.
    Returns
    -------
    Path
        The absolute path of the written file.
    """

    target = Path(target).expanduser().resolve()
    tmp = target.with_name(target.name + ".tmp")
    try:
        with tmp.open("w", encoding = encoding) as fp:
            fp.write(content)
        tmp.replace(target)
        return target
    except OSError as exc:
        tmp.unlink(missing_ok = True)
        raise FileSystemError(f"Failed to write file {target!s}: {exc}") from exc


def create_folder(folder: Path | str) -> None:
    """Create *folder* unless it already exists.

    If creation fails, anything left behind is removed before
    :class:`FileSystemError` is raised.
    """

    folder = Path(folder).expanduser().resolve()
    if folder.is_dir():
        return
    try:
        folder.mkdir()
    except OSError as exc:
        remove_folder(folder)
        raise FileSystemError(f"Failed to create folder {folder!s}: {exc}") from exc
    log.debug("Created folder %s", folder)


def remove_folder(folder: Path | str) -> None:
    """Remove *folder* if it exists and is empty; never raises."""
    folder = Path(folder)
    try:
        folder.rmdir()
    except OSError as exc:
        log.debug("Could not remove folder %s: %s", folder, exc)
