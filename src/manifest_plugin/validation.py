"""Naming and structural validation for configuration and manifest specs."""

import logging
import re
from typing import List

from manifest_plugin.builder import build_manifest_specs
from manifest_plugin.errors import ConfigurationError, ManifestValidationError
from manifest_plugin.models.manifest import ManifestSpec
from manifest_plugin.models.registry import RegistryConfig
from manifest_plugin.models.repo import RepoConfig


logger = logging.getLogger(__name__)

# Docker tag grammar
# refs:
#  - https://docs.docker.com/engine/reference/commandline/tag/#extended-description
#  - https://github.com/distribution/distribution/blob/main/reference/regexp.go
TAG_REGEX = re.compile(r"[\w][\w.-]{0,127}", re.ASCII)

ALLOWED_PLATFORMS = frozenset({
    "linux/amd64",
    "linux/arm64",
    "linux/arm64/v8",
    "linux/arm",
    "linux/arm/v7",
})

TAG_ERROR = (
    "tag '{tag}' not allowed - see "
    "https://docs.docker.com/engine/reference/commandline/tag/#extended-description"
)


def validate_tag(tag: str) -> None:
    """Raise if a tag does not match the docker tag grammar."""
    if not TAG_REGEX.fullmatch(tag):
        raise ManifestValidationError(TAG_ERROR.format(tag=tag))


def validate_image_reference(image: str) -> None:
    """Raise unless an image reference is ``name:tag`` with a valid tag."""
    parts = image.split(":")
    if len(parts) != 2:
        raise ManifestValidationError(f"{image} not in image:tag format")
    validate_tag(parts[1])


def validate_registry(registry: RegistryConfig) -> None:
    """Verify the registry is properly configured."""
    logger.debug("validating registry plugin configuration")

    if not registry.name:
        raise ConfigurationError("no registry name provided")

    # credentials are only needed when publishing
    if not registry.dry_run:
        if not registry.username:
            raise ConfigurationError("no registry username provided")
        if not registry.password:
            raise ConfigurationError("no registry password provided")


def validate_repo(repo: RepoConfig) -> None:
    """Verify the repo is properly configured."""
    logger.debug("validating repo plugin configuration")

    if not repo.name:
        raise ConfigurationError("no repo name provided")

    if not repo.tags:
        raise ConfigurationError("no tags provided")
    for tag in repo.tags:
        validate_tag(tag)

    if not repo.platforms:
        raise ConfigurationError("no platforms provided")
    for platform in repo.platforms:
        if platform not in ALLOWED_PLATFORMS:
            raise ConfigurationError(f"unsupported platform {platform} requested")


def collect_manifest_spec_errors(spec: ManifestSpec) -> List[ManifestValidationError]:
    """Return every problem found in a manifest spec.

    Components are checked independently, so one bad component does not hide
    problems in the others.
    """
    errors: List[ManifestValidationError] = []

    if not spec.image:
        errors.append(ManifestValidationError("no top-level image provided"))
    else:
        try:
            validate_image_reference(spec.image)
        except ManifestValidationError as e:
            errors.append(e)

    if not spec.manifests:
        errors.append(ManifestValidationError("no component images provided"))

    for component in spec.manifests:
        try:
            validate_image_reference(component.image)
        except ManifestValidationError as e:
            errors.append(e)

    return errors


def validate_manifest_spec(spec: ManifestSpec) -> None:
    """Raise the first problem found in a manifest spec."""
    logger.debug(f"validating manifest spec {spec.image}")

    errors = collect_manifest_spec_errors(spec)
    if errors:
        raise errors[0]


def build_and_validate(registry: RegistryConfig, repo: RepoConfig) -> List[ManifestSpec]:
    """Validate the repo, build its manifest specs and validate each of them.

    Returns a fresh list on every call; nothing is cached.
    """
    validate_repo(repo)

    specs = build_manifest_specs(registry, repo)
    if not specs:
        raise ManifestValidationError("no manifest specs")

    for spec in specs:
        validate_manifest_spec(spec)

    return specs
