"""
Manifest Plugin - publish multi-architecture manifest lists.

Builds manifest-tool spec files for every tag of a repository, one component
image per platform, and publishes them with manifest-tool.
"""

__version__ = "1.0.0"

# Re-export key components for easier access
from manifest_plugin.models.manifest import ManifestSpec
from manifest_plugin.models.registry import RegistryConfig
from manifest_plugin.models.repo import RepoConfig
from manifest_plugin.plugin import Plugin

__all__ = [
    "ManifestSpec",
    "Plugin",
    "RegistryConfig",
    "RepoConfig",
]
