"""Error types raised by the manifest plugin."""

from typing import List, Optional


class ManifestPluginError(Exception):
    """Base class for all plugin errors."""
    pass


class ConfigurationError(ManifestPluginError):
    """Registry or repo configuration is incomplete or unsupported."""
    pass


class ManifestValidationError(ManifestPluginError):
    """A tag or generated image reference is not allowed."""
    pass


class TemplateError(ManifestPluginError):
    """Component template could not be parsed or rendered."""
    pass


class MalformedPlatformError(ManifestPluginError):
    """Platform string has fewer than two segments."""
    pass


class SpecWriteError(ManifestPluginError):
    """Writing a spec file, spec directory or auth file failed."""
    pass


class ExecutionError(ManifestPluginError):
    """External command could not be launched or exited non-zero."""

    def __init__(self, message: str, cmd: Optional[List[str]] = None, returncode: Optional[int] = None):
        super().__init__(message)
        self.cmd = cmd or []
        self.returncode = returncode
