"""Repository configuration models."""

from typing import List
from pydantic import BaseModel, ConfigDict, Field


DEFAULT_COMPONENT_TEMPLATE = (
    "{{.Repo}}:{{.Tag}}-{{.Os}}-{{.Arch}}{{if .Variant}}-{{.Variant}}{{end}}"
)
DEFAULT_TAGS = ["latest"]
DEFAULT_PLATFORMS = ["linux/amd64", "linux/arm64/v8"]


class RepoConfig(BaseModel):
    """Repository settings for the manifest list.

    Naming rules are not enforced here; ``validate_repo`` reports them so an
    invalid configuration can still be built and inspected.
    """
    name: str = Field(default="", description="Repository name for the image")
    tags: List[str] = Field(default_factory=lambda: list(DEFAULT_TAGS))
    platforms: List[str] = Field(default_factory=lambda: list(DEFAULT_PLATFORMS))
    component_template: str = Field(
        default=DEFAULT_COMPONENT_TEMPLATE,
        description="Template used to render each component image",
    )

    model_config = ConfigDict(frozen=True, extra="ignore")
