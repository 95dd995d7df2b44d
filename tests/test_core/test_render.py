"""Tests for spec file rendering."""

from manifest_plugin.builder import build_manifest_specs
from manifest_plugin.models.manifest import ManifestComponent, ManifestSpec, PlatformTriad
from manifest_plugin.render import render_manifest_spec


EXPECTED = (
    "image: index.docker.io/octocat/hello-world:latest\n"
    "manifests:\n"
    "- image: index.docker.io/octocat/hello-world:latest-linux-amd64\n"
    "  platform:\n"
    "    os: linux\n"
    "    architecture: amd64\n"
    "- image: index.docker.io/octocat/hello-world:latest-linux-arm64-v8\n"
    "  platform:\n"
    "    os: linux\n"
    "    architecture: arm64\n"
    "    variant: v8\n"
)


def test_render_default_fixture(default_registry, default_repo):
    """Test the exact spec file layout."""
    spec = build_manifest_specs(default_registry, default_repo)[0]
    
    assert render_manifest_spec(spec) == EXPECTED.encode("utf-8")


def test_render_is_deterministic(default_registry, default_repo):
    spec = build_manifest_specs(default_registry, default_repo)[0]
    
    assert render_manifest_spec(spec) == render_manifest_spec(spec)


def test_variant_omitted_only_when_empty():
    """Test variant appears exactly for components that have one."""
    spec = ManifestSpec(
        image="registry.example.com/project/image:v1.0.0",
        manifests=[
            ManifestComponent(
                image="registry.example.com/project/image:v1.0.0-linux-arm",
                platform=PlatformTriad(os="linux", architecture="arm"),
            ),
            ManifestComponent(
                image="registry.example.com/project/image:v1.0.0-linux-arm-v7",
                platform=PlatformTriad(os="linux", architecture="arm", variant="v7"),
            ),
        ],
    )
    
    text = render_manifest_spec(spec).decode("utf-8")
    
    assert text.count("variant:") == 1
    assert "    variant: v7\n" in text
