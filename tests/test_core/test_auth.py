"""Tests for registry auth file writing."""

import base64
import json

import pytest

from manifest_plugin.auth import write_registry_auth
from manifest_plugin.errors import SpecWriteError
from manifest_plugin.models.registry import RegistryConfig


def test_write_registry_auth(tmp_path):
    """Test docker config content."""
    path = tmp_path / ".docker" / "config.json"
    registry = RegistryConfig(name="index.docker.io", username="octocat", password="s3cret")
    
    write_registry_auth(registry, path)
    
    data = json.loads(path.read_text())
    auth = data["auths"]["index.docker.io"]["auth"]
    assert base64.b64decode(auth).decode() == "octocat:s3cret"


@pytest.mark.parametrize("registry", [
    RegistryConfig(username="octocat"),
    RegistryConfig(password="s3cret"),
    RegistryConfig(name="", username="octocat", password="s3cret"),
])
def test_skipped_without_credentials(tmp_path, registry):
    """Test nothing is written when credentials are incomplete."""
    path = tmp_path / "config.json"
    
    write_registry_auth(registry, path)
    
    assert not path.exists()


def test_write_failure(tmp_path):
    """Test filesystem errors are reported."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    registry = RegistryConfig(username="octocat", password="s3cret")
    
    with pytest.raises(SpecWriteError):
        write_registry_auth(registry, blocker / "config.json")
