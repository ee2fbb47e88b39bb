"""Top‑level package for *svue*, the Segregate Vue file generator."""

from __future__ import annotations

from .config import SvueConfig, load_config
from .core import GeneratedFile, generate, plan_generation, write_generated_files
from .engine import TemplateEngine, TemplateLoader
from .exceptions import (ConfigError, CyclicTemplateError, FileSystemError, ManifestReadError, SvueError,
                         TemplateLookupError, UsageError, )
from .naming import format_object_name
from .registry import TEMPLATES, ObjectType, StructureType, TemplateDefinition, TemplateRegistry
from .request import GenerationRequest

# Explicitly expose the public API members
__all__ = ["generate", "plan_generation", "write_generated_files", "GeneratedFile", "GenerationRequest",
           "format_object_name", "TemplateEngine", "TemplateLoader", "TemplateRegistry", "TemplateDefinition",
           "TEMPLATES", "ObjectType", "StructureType", "SvueConfig", "load_config", "SvueError", "UsageError",
           "ConfigError", "FileSystemError", "TemplateLookupError", "ManifestReadError", "CyclicTemplateError", ]
