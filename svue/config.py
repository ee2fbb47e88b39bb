"""Optional per-project configuration.

Settings are read from ``svue.config.json`` in the working directory when
that file exists.  Every field has a default, so an absent file simply
means "use the defaults".
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigError

log = logging.getLogger(__name__)

__all__ = ["CONFIG_FILE_NAME", "SvueConfig", "load_config"]

CONFIG_FILE_NAME = "svue.config.json"


class SvueConfig(BaseModel):
    """Generator settings."""

    on_missing_template: Literal["empty", "error"] = Field(
            "empty", description = "Resolve a missing template to an empty string, or fail.", )
    templates_dir: Path | None = Field(
            None, description = "Directory holding template sources; the packaged templates when unset.", )
    manifest_file: str = Field("package.json", description = "Manifest consulted for the script extension.")
    default_style_format: Literal["css", "scss", "sass"] = "css"


def load_config(
        config_path: Path | str | None = None, cwd: Path | str | None = None, ) -> SvueConfig:
    """Load JSON config, tolerant to a missing default file.

    Parameters
    ----------
    config_path:
        Explicit configuration file.  It must exist.
    cwd:
        Directory searched for ``svue.config.json`` when *config_path* is
        not given.  Defaults to the current working directory.

    Returns
    -------
    SvueConfig
        Parsed configuration.  Relative ``templates_dir`` values are taken
        relative to the config file.
    """
    if config_path is None:
        cfg_file = Path(cwd or Path.cwd()) / CONFIG_FILE_NAME
        if not cfg_file.exists():
            return SvueConfig()
    else:
        cfg_file = Path(config_path)
        if not cfg_file.is_file():
            raise ConfigError(f"Config file not found: {cfg_file}")

    try:
        with cfg_file.open("r", encoding = "utf-8") as f:
            cfg = SvueConfig.model_validate(json.load(f))
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        raise ConfigError(f"Invalid config file {cfg_file}: {exc}") from exc

    if cfg.templates_dir is not None and not cfg.templates_dir.is_absolute():
        cfg = cfg.model_copy(update = {"templates_dir": cfg_file.parent / cfg.templates_dir})
    log.debug("Loaded config from %s", cfg_file)
    return cfg
