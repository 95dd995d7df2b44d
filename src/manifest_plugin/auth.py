"""Registry credential materialization for manifest-tool."""

import base64
import json
import logging
from pathlib import Path
from typing import Optional, Union

from manifest_plugin.errors import SpecWriteError
from manifest_plugin.models.registry import RegistryConfig


logger = logging.getLogger(__name__)

DOCKER_CONFIG_PATH = Path.home() / ".docker" / "config.json"


def docker_config(registry: RegistryConfig) -> dict:
    """Docker config content holding basic auth for the registry."""
    token = f"{registry.username}:{registry.password}".encode()
    return {
        "auths": {
            registry.name: {
                "auth": base64.b64encode(token).decode(),
            },
        },
    }


def write_registry_auth(
    registry: RegistryConfig,
    path: Optional[Union[str, Path]] = None,
) -> None:
    """Write the docker config file used by manifest-tool for authentication.

    Nothing is written unless the registry name, username and password are
    all set.
    """
    if not (registry.name and registry.username and registry.password):
        logger.debug("registry credentials not provided, skipping auth file")
        return

    config_path = Path(path) if path else DOCKER_CONFIG_PATH
    logger.debug(f"writing registry auth for {registry.name} to {config_path}")

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(docker_config(registry)))
    except OSError as e:
        raise SpecWriteError(f"failed to write registry auth file {config_path}: {e}") from e
