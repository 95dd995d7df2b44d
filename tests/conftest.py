"""Shared fixtures."""

import pytest

from manifest_plugin.models.registry import RegistryConfig
from manifest_plugin.models.repo import RepoConfig


@pytest.fixture
def default_registry():
    """Dry-run registry with credentials."""
    return RegistryConfig(
        name="index.docker.io",
        username="test",
        password="pass",
        push_retry=1,
        dry_run=True,
    )


@pytest.fixture
def default_repo():
    """Repo publishing a single tag for two platforms."""
    return RepoConfig(
        name="/octocat/hello-world",
        tags=["latest"],
        platforms=["linux/amd64", "linux/arm64/v8"],
    )
