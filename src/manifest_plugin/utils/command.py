"""External command execution."""

import logging
import subprocess
from dataclasses import dataclass
from typing import List

from manifest_plugin.errors import ExecutionError


logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Result from running a command."""
    returncode: int
    stdout: str = ""
    stderr: str = ""


def run_command(
    cmd: List[str],
    check: bool = True,
    capture_output: bool = False,
    **kwargs
) -> CommandResult:
    """Run a command and wait for it to exit.

    Output goes to the plugin's own stdout/stderr unless ``capture_output``
    is set. Blocks until the process exits; there is no timeout.
    """
    logger.debug(f"Running command: {' '.join(cmd)}")

    try:
        process = subprocess.run(
            cmd,
            stdout=subprocess.PIPE if capture_output else None,
            stderr=subprocess.PIPE if capture_output else None,
            **kwargs
        )
    except OSError as e:
        raise ExecutionError(f"failed to launch {cmd[0]}: {e}", cmd=cmd) from e

    result = CommandResult(
        returncode=process.returncode,
        stdout=process.stdout.decode() if process.stdout else "",
        stderr=process.stderr.decode() if process.stderr else "",
    )

    if check and process.returncode != 0:
        raise ExecutionError(
            f"command '{' '.join(cmd)}' exited with status {process.returncode}",
            cmd=cmd,
            returncode=process.returncode,
        )

    return result
