"""Tests for manifest spec models."""

import pytest

from manifest_plugin.errors import MalformedPlatformError
from manifest_plugin.models.manifest import PlatformTriad, ManifestSpec


class TestPlatformTriad:
    """Test PlatformTriad parsing."""
    
    def test_two_segments(self):
        """Test platform without variant."""
        triad = PlatformTriad.parse("linux/amd64")
        
        assert triad.os == "linux"
        assert triad.architecture == "amd64"
        assert triad.variant == ""
        
    def test_three_segments(self):
        """Test platform with variant."""
        triad = PlatformTriad.parse("linux/arm/v7")
        
        assert triad.os == "linux"
        assert triad.architecture == "arm"
        assert triad.variant == "v7"
        
    @pytest.mark.parametrize("platform", ["linux", ""])
    def test_malformed(self, platform):
        """Test platforms with fewer than two segments."""
        with pytest.raises(MalformedPlatformError) as exc_info:
            PlatformTriad.parse(platform)
            
        assert "malformed platform" in str(exc_info.value)


class TestManifestSpec:
    """Test ManifestSpec model."""
    
    def test_empty_manifests_default(self):
        """Test a spec can be created without components."""
        spec = ManifestSpec(image="index.docker.io/octocat/hello-world:latest")
        
        assert spec.manifests == []
