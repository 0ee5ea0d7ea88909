"""Launch the wrapped CLI with inherited stdio and wait for it."""

from __future__ import annotations

import logging
import shutil
import subprocess

from coderouter.runner.assemble import Invocation

logger = logging.getLogger(__name__)


class SpawnError(RuntimeError):
    """The target executable could not be started."""

    def __init__(self, command: str, reason: str) -> None:
        super().__init__(f"failed to execute {command}: {reason}")
        self.command = command
        self.reason = reason


def _resolve_binary_path(command: str, path: str | None) -> str:
    """Resolve a bare command name against the child's PATH.

    Returns the original name when nothing is found so the OS error surfaces.
    """
    return shutil.which(command, path=path) or command


def exit_code_from_returncode(returncode: int) -> int:
    # subprocess reports death by signal N as -N
    if returncode < 0:
        return 128 - returncode
    return returncode


def spawn(invocation: Invocation) -> int:
    """Run ``invocation`` to completion and return its exit code.

    Ctrl-C reaches the child through the shared process group; the router
    keeps waiting so the child decides when to exit.

    Raises:
        SpawnError: If the executable is missing or cannot be executed.
    """
    binary = _resolve_binary_path(invocation.command, invocation.env.get("PATH"))
    logger.debug("Executing %s with %d args", binary, len(invocation.args))

    try:
        proc = subprocess.Popen([binary, *invocation.args], env=invocation.env)
    except OSError as exc:
        raise SpawnError(invocation.command, exc.strerror or str(exc)) from exc

    while True:
        try:
            returncode = proc.wait()
            break
        except KeyboardInterrupt:
            logger.debug("Interrupt received; still waiting for %s", binary)

    return exit_code_from_returncode(returncode)
