"""Publish orchestration for manifest lists."""

import logging
import time
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Union

from manifest_plugin.auth import write_registry_auth
from manifest_plugin.errors import ExecutionError, SpecWriteError
from manifest_plugin.models.config import DEFAULT_SPEC_DIR, DEFAULT_TOOL_BIN
from manifest_plugin.models.manifest import ManifestSpec
from manifest_plugin.models.registry import RegistryConfig
from manifest_plugin.models.repo import RepoConfig
from manifest_plugin.render import render_manifest_spec
from manifest_plugin.utils.command import CommandResult, run_command
from manifest_plugin.validation import build_and_validate, validate_registry


logger = logging.getLogger(__name__)

Runner = Callable[[List[str]], CommandResult]


class PluginState(Enum):
    """Progress of a publish run."""
    START = "start"
    AUTH_WRITTEN = "auth_written"
    DIAGNOSED = "diagnosed"
    SPECS_VALIDATED = "specs_validated"
    DIR_READY = "dir_ready"
    PUBLISHING = "publishing"
    DONE = "done"
    FAILED = "failed"


class Plugin:
    """Builds manifest specs and publishes them with manifest-tool."""

    def __init__(
        self,
        registry: RegistryConfig,
        repo: RepoConfig,
        spec_dir: Union[str, Path] = DEFAULT_SPEC_DIR,
        tool_bin: str = DEFAULT_TOOL_BIN,
        runner: Optional[Runner] = None,
        auth_writer: Optional[Callable[[], None]] = None,
        retry_delay: float = 5.0,
    ):
        """Initialize the plugin."""
        self.registry = registry
        self.repo = repo
        self.spec_dir = Path(spec_dir)
        self.tool_bin = tool_bin
        self.runner = runner or run_command
        self.auth_writer = auth_writer or (lambda: write_registry_auth(self.registry))
        self.retry_delay = retry_delay
        self.state = PluginState.START
        self.error: Optional[Exception] = None

    def version_command(self) -> List[str]:
        """Command printing the manifest-tool version."""
        return [self.tool_bin, "--version"]

    def command(self, spec_file: Union[str, Path]) -> List[str]:
        """Command publishing a manifest list from a spec file."""
        logger.debug("creating manifest-tool command from plugin configuration")
        return [self.tool_bin, "push", "from-spec", str(spec_file)]

    def spec_path(self, index: int) -> Path:
        """Path of the spec file for the spec at ``index``."""
        return self.spec_dir / f"spec_{index}.yml"

    def validate(self) -> List[ManifestSpec]:
        """Validate the configuration and return freshly built specs."""
        logger.debug("validating plugin configuration")
        validate_registry(self.registry)
        return build_and_validate(self.registry, self.repo)

    def exec(self) -> None:
        """Write auth, build specs and publish each of them in tag order."""
        logger.debug("running plugin with provided configuration")
        try:
            self._exec()
        except Exception as e:
            logger.debug(f"plugin failed in state {self.state.value}: {e}")
            self.state = PluginState.FAILED
            self.error = e
            raise

    def _exec(self) -> None:
        # create registry file for authentication
        self.auth_writer()
        self.state = PluginState.AUTH_WRITTEN

        # output the manifest-tool version for troubleshooting
        self.runner(self.version_command())
        self.state = PluginState.DIAGNOSED

        specs = build_and_validate(self.registry, self.repo)
        self.state = PluginState.SPECS_VALIDATED

        try:
            self.spec_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SpecWriteError(f"failed to create spec directory {self.spec_dir}: {e}") from e
        self.state = PluginState.DIR_READY

        self.state = PluginState.PUBLISHING
        for index, spec in enumerate(specs):
            self._process(index, spec)

        self.state = PluginState.DONE

    def _process(self, index: int, spec: ManifestSpec) -> None:
        logger.info(f"Processing manifest list/image index {spec.image}")

        data = render_manifest_spec(spec)
        logger.info(f"Rendered spec file:\n{data.decode()}")

        spec_file = self.spec_path(index)
        try:
            spec_file.write_bytes(data)
        except OSError as e:
            raise SpecWriteError(f"failed to write spec file {spec_file}: {e}") from e

        if self.registry.dry_run:
            logger.info("Not pushing manifest list/image index as dry_run is true")
            return

        self._publish(self.command(spec_file))

    def _publish(self, cmd: List[str]) -> None:
        """Run the publish command, retrying up to ``push_retry`` more times."""
        attempts = self.registry.push_retry + 1
        for attempt in range(1, attempts + 1):
            try:
                self.runner(cmd)
                return
            except ExecutionError as e:
                if attempt >= attempts:
                    raise
                logger.warning(
                    f"Publish attempt {attempt}/{attempts} failed: {e}; "
                    f"retrying in {self.retry_delay}s"
                )
                time.sleep(self.retry_delay)
