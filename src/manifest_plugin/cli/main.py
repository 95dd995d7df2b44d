"""Main CLI implementation using Typer."""

from typing import Any, Dict, List, Optional

import typer
from rich.console import Console

from manifest_plugin.cli.commands import print_version, run_plugin
from manifest_plugin.config import load_config
from manifest_plugin.errors import ManifestPluginError
from manifest_plugin.utils.logging import setup_logging


# Create Typer app
app = typer.Typer(
    name="manifest-plugin",
    help="Build and publish manifest lists/image indices with manifest-tool",
    add_completion=False,
)

# Console for rich output
console = Console(stderr=True)


def _env(name: str) -> List[str]:
    return [f"PARAMETER_{name}", f"MANIFEST_TOOL_{name}"]


def _split(value: Optional[str]) -> Optional[List[str]]:
    """Split a comma separated flag value."""
    if value is None:
        return None
    return [item.strip() for item in value.split(",") if item.strip()]


def build_overrides(registry: Dict[str, Any], repo: Dict[str, Any], **settings: Any) -> Dict[str, Any]:
    """Nest flag values into the config structure, dropping unset ones."""
    overrides = {key: value for key, value in settings.items() if value is not None}
    for section, values in (("registry", registry), ("repo", repo)):
        values = {key: value for key, value in values.items() if value is not None}
        if values:
            overrides[section] = values
    return overrides


@app.callback(invoke_without_command=True)
def main_command(
    ctx: typer.Context,
    config_file: Optional[str] = typer.Option(
        None, "--config", "-c", envvar=_env("CONFIG"), help="YAML config file"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", envvar=_env("LOG_LEVEL"),
        help="Log level (trace|debug|info|warn|error|fatal|panic)",
    ),
    registry: Optional[str] = typer.Option(
        None, "--registry", envvar=_env("REGISTRY"),
        help="Docker registry name to communicate with",
    ),
    username: Optional[str] = typer.Option(
        None, "--username", envvar=_env("USERNAME") + ["DOCKER_USERNAME"],
        help="User name for communication with the registry",
    ),
    password: Optional[str] = typer.Option(
        None, "--password", envvar=_env("PASSWORD") + ["DOCKER_PASSWORD"],
        help="Password for communication with the registry",
    ),
    dry_run: Optional[bool] = typer.Option(
        None, "--dry-run/--no-dry-run", envvar=_env("DRY_RUN"),
        help="Build spec files without publishing to the registry",
    ),
    push_retry: Optional[int] = typer.Option(
        None, "--push-retry", envvar=_env("PUSH_RETRY"),
        help="Number of retries for publishing a manifest list",
    ),
    repo: Optional[str] = typer.Option(
        None, "--repo", envvar=_env("REPO"), help="Repository name for the image"
    ),
    tags: Optional[str] = typer.Option(
        None, "--tags", envvar=_env("TAGS"),
        help="Comma separated tags of the manifest list/image index",
    ),
    platforms: Optional[str] = typer.Option(
        None, "--platforms", envvar=_env("PLATFORMS"),
        help="Comma separated platforms to include in the manifest list",
    ),
    component_template: Optional[str] = typer.Option(
        None, "--component-template", envvar=_env("COMPONENT_TEMPLATE"),
        help="Template used to render each component image",
    ),
    spec_dir: Optional[str] = typer.Option(
        None, "--spec-dir", envvar=_env("SPEC_DIR"), help="Directory for spec files"
    ),
    tool_bin: Optional[str] = typer.Option(
        None, "--tool-bin", envvar=_env("TOOL_BIN"), help="manifest-tool binary"
    ),
    validate_only: bool = typer.Option(
        False, "--validate-only", help="Only validate and show the manifest lists"
    ),
):
    """Build and publish manifest lists/image indices."""
    if ctx.invoked_subcommand is not None:
        return

    overrides = build_overrides(
        registry={
            "name": registry,
            "username": username,
            "password": password,
            "dry_run": dry_run,
            "push_retry": push_retry,
        },
        repo={
            "name": repo,
            "tags": _split(tags),
            "platforms": _split(platforms),
            "component_template": component_template,
        },
        log_level=log_level,
        spec_dir=spec_dir,
        tool_bin=tool_bin,
    )

    try:
        config = load_config(config_file, overrides)
        setup_logging(config.log_level)
        run_plugin(config, validate_only=validate_only)
    except ManifestPluginError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


@app.command("version")
def version_command():
    """Show version information."""
    print_version()


def main():
    """Main entry point for CLI."""
    app()
