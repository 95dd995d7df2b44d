"""Plugin configuration models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from manifest_plugin.models.registry import RegistryConfig
from manifest_plugin.models.repo import RepoConfig


DEFAULT_SPEC_DIR = "/root/specs"
DEFAULT_TOOL_BIN = "manifest-tool"

LOG_LEVEL_ALIASES = {
    "T": "DEBUG",
    "TRACE": "DEBUG",
    "D": "DEBUG",
    "I": "INFO",
    "W": "WARNING",
    "WARN": "WARNING",
    "E": "ERROR",
    "F": "CRITICAL",
    "FATAL": "CRITICAL",
    "P": "CRITICAL",
    "PANIC": "CRITICAL",
}


class PluginConfig(BaseModel):
    """Complete plugin configuration."""
    log_level: str = Field(default="INFO")
    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    repo: RepoConfig = Field(default_factory=RepoConfig)
    spec_dir: str = Field(default=DEFAULT_SPEC_DIR)
    tool_bin: str = Field(default=DEFAULT_TOOL_BIN)

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        level = v.upper()
        level = LOG_LEVEL_ALIASES.get(level, level)
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if level not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return level
