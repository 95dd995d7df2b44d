"""Expansion of registry and repo configuration into manifest specs."""

import logging
from typing import List

from manifest_plugin.models.manifest import (
    ComponentRenderContext,
    ManifestComponent,
    ManifestSpec,
    PlatformTriad,
)
from manifest_plugin.models.registry import RegistryConfig
from manifest_plugin.models.repo import RepoConfig
from manifest_plugin.utils.templates import ComponentTemplate


logger = logging.getLogger(__name__)


def build_manifest_specs(registry: RegistryConfig, repo: RepoConfig) -> List[ManifestSpec]:
    """Build one manifest spec per tag with one component per platform.

    Specs follow tag order and components follow platform order. A malformed
    platform or a template failure aborts the whole build.
    """
    template = ComponentTemplate.parse(repo.component_template)
    platforms = [PlatformTriad.parse(platform) for platform in repo.platforms]

    specs: List[ManifestSpec] = []
    for tag in repo.tags:
        components: List[ManifestComponent] = []
        for platform in platforms:
            context = ComponentRenderContext(
                Repo=repo.name,
                Tag=tag,
                Os=platform.os,
                Arch=platform.architecture,
                Variant=platform.variant,
            )
            image = template.render(context.model_dump())
            components.append(ManifestComponent(
                image=registry.name + image,
                platform=platform,
            ))

        spec = ManifestSpec(
            image=f"{registry.name}{repo.name}:{tag}",
            manifests=components,
        )
        logger.debug(f"Built manifest spec {spec.image} with {len(components)} components")
        specs.append(spec)

    return specs
