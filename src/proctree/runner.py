"""Running native tools and capturing their output."""

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal, Protocol

from loguru import logger

Capture = Literal["stdout", "stderr"]


@dataclass(slots=True, frozen=True)
class CommandResult:
    """Outcome of one finished native command."""

    argv: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        """Check if the command exited successfully (negative codes mean a signal)."""
        return self.returncode == 0


class Runner(Protocol):
    def __call__(self, argv: Sequence[str], capture: Capture) -> CommandResult: ...


def run_command(argv: Sequence[str], capture: Capture = "stdout") -> CommandResult:
    """
    Run a command to completion and capture one of its output streams.

    The other stream is discarded. Pipes and the process handle are released
    on every exit path by the Popen context manager.

    Raises:
        OSError: The command could not be launched.
    """
    argv = list(argv)
    logger.debug(f"Running {argv}")
    with subprocess.Popen(
        argv,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE if capture == "stdout" else subprocess.DEVNULL,
        stderr=subprocess.PIPE if capture == "stderr" else subprocess.DEVNULL,
        text=True,
        errors="replace",
    ) as proc:
        stdout, stderr = proc.communicate()

    logger.debug(f"{argv[0]} exited with code {proc.returncode}")
    return CommandResult(
        argv=argv,
        returncode=proc.returncode,
        stdout=stdout or "",
        stderr=stderr or "",
    )
