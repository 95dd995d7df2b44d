"""Command implementations for CLI."""

import json
import logging
import platform
from typing import Any, Dict

from rich.console import Console
from rich.table import Table

import manifest_plugin
from manifest_plugin.models.config import PluginConfig
from manifest_plugin.plugin import Plugin


logger = logging.getLogger(__name__)

console = Console()

PLUGIN_LINKS = {
    "code": "https://github.com/go-vela/vela-manifest-tool",
    "docs": "https://go-vela.github.io/docs/plugins/registry/pipeline/manifest-tool",
}


def version_info() -> Dict[str, Any]:
    """Version information for troubleshooting."""
    return {
        "name": "manifest-plugin",
        "version": manifest_plugin.__version__,
        "python": platform.python_version(),
        "platform": platform.platform(),
    }


def print_version():
    """Print version information as JSON."""
    console.print_json(json.dumps(version_info()))


def make_plugin(config: PluginConfig) -> Plugin:
    """Create the plugin from configuration."""
    return Plugin(
        registry=config.registry,
        repo=config.repo,
        spec_dir=config.spec_dir,
        tool_bin=config.tool_bin,
    )


def show_specs(plugin: Plugin):
    """Validate and display the manifest lists that would be published."""
    specs = plugin.validate()

    table = Table(title="Manifest Lists")
    table.add_column("Index")
    table.add_column("Manifest List", style="cyan")
    table.add_column("Component")
    table.add_column("Platform", style="green")

    for index, spec in enumerate(specs):
        for component in spec.manifests:
            triad = component.platform
            platform_str = f"{triad.os}/{triad.architecture}"
            if triad.variant:
                platform_str += f"/{triad.variant}"
            table.add_row(
                str(index),
                spec.image,
                component.image,
                platform_str,
            )

    console.print(table)


def run_plugin(config: PluginConfig, validate_only: bool = False):
    """Validate the configuration and publish the manifest lists."""
    logger.info(
        f"Manifest Tool Plugin {manifest_plugin.__version__} "
        f"(code: {PLUGIN_LINKS['code']}, docs: {PLUGIN_LINKS['docs']})"
    )

    plugin = make_plugin(config)

    if validate_only:
        show_specs(plugin)
        return

    plugin.validate()
    plugin.exec()
