"""Registry configuration models."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


DEFAULT_REGISTRY = "index.docker.io"


class RegistryConfig(BaseModel):
    """Destination registry settings."""
    name: str = Field(default=DEFAULT_REGISTRY, description="Registry host to publish to")
    username: Optional[str] = Field(None, description="User name for the registry")
    password: Optional[str] = Field(None, description="Password for the registry", repr=False)
    dry_run: bool = Field(default=False, description="Build specs without publishing")
    push_retry: int = Field(default=0, ge=0, description="Extra publish attempts per spec")

    model_config = ConfigDict(frozen=True, extra="ignore")
