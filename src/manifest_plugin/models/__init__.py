"""Pydantic models for configuration and manifest specs."""

from manifest_plugin.models.config import PluginConfig
from manifest_plugin.models.manifest import (
    ComponentRenderContext,
    ManifestComponent,
    ManifestSpec,
    PlatformTriad,
)
from manifest_plugin.models.registry import RegistryConfig
from manifest_plugin.models.repo import RepoConfig

__all__ = [
    "PluginConfig",
    "RegistryConfig",
    "RepoConfig",
    "PlatformTriad",
    "ManifestComponent",
    "ManifestSpec",
    "ComponentRenderContext",
]
