"""Manifest list specification models."""

from typing import List
from pydantic import BaseModel, ConfigDict, Field

from manifest_plugin.errors import MalformedPlatformError


class PlatformTriad(BaseModel):
    """Target platform of a component image."""
    os: str
    architecture: str
    variant: str = ""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def parse(cls, platform: str) -> "PlatformTriad":
        """Split an ``os/arch[/variant]`` string."""
        parts = platform.split("/")
        if len(parts) < 2:
            raise MalformedPlatformError(f"malformed platform {platform}")
        if len(parts) == 2:
            parts.append("")
        return cls(os=parts[0], architecture=parts[1], variant=parts[2])


class ManifestComponent(BaseModel):
    """A platform-specific image referenced by a manifest list."""
    image: str = Field(..., description="Component image reference")
    platform: PlatformTriad

    model_config = ConfigDict(frozen=True)


class ManifestSpec(BaseModel):
    """A manifest list for a single tag, as consumed by manifest-tool."""
    image: str = Field(..., description="Top-level image reference including tag")
    manifests: List[ManifestComponent] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class ComponentRenderContext(BaseModel):
    """Fields available to the component template."""
    Repo: str
    Tag: str
    Os: str
    Arch: str
    Variant: str = ""

    model_config = ConfigDict(frozen=True)
