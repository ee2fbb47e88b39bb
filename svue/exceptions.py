"""Custom exception hierarchy for the svue package.

All public functions raise :class:`SvueError` (or a subclass) so that
callers can catch a single exception type.  This also allows the CLI to
catch every failure and print a user-friendly message.
"""


class SvueError(RuntimeError):
    """Base exception for all svue related errors."""


class UsageError(SvueError):
    """Raised when the command line does not describe a valid request."""


class ConfigError(SvueError):
    """Raised when ``svue.config.json`` cannot be read or validated."""


class FileSystemError(SvueError):
    """Raised when a folder or file cannot be created or written to."""


class TemplateLookupError(SvueError):
    """Raised when a template name or its source file does not exist."""


class ManifestReadError(SvueError):
    """Raised when the project manifest is missing or cannot be parsed."""


class CyclicTemplateError(SvueError):
    """Raised when placeholder values reference each other in a loop."""
