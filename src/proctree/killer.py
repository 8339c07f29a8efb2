"""Terminating processes through the platform's native tool."""

from loguru import logger

from proctree.errors import KillFailed
from proctree.models import KillOptions, KillTarget, check_target
from proctree.platform import Family, current_family
from proctree.runner import Runner, run_command


def build_kill_command(
    target: KillTarget,
    options: KillOptions | None = None,
    family: Family | None = None,
) -> list[str]:
    """
    Build the argv that terminates a process by pid (int) or name (str).

    Flags follow a fixed order per family and the target comes last:

    - windows: ``taskkill [/f] [/t] (/im NAME | /pid PID)``
    - linux: ``(killall | kill) [-9] [-I] TARGET``
    - other-posix: ``(pkill | kill) [-9] [-i] TARGET``

    ``tree`` only applies on Windows and ``ignore_case`` only to names.
    """
    check_target(target)
    if options is None:
        options = KillOptions()
    if family is None:
        family = current_family()

    by_name = isinstance(target, str)

    if family is Family.WINDOWS:
        commands = ["taskkill"]
        if options.force:
            commands.append("/f")
        if options.tree:
            commands.append("/t")
        commands.append("/im" if by_name else "/pid")
    elif family is Family.LINUX:
        commands = ["killall" if by_name else "kill"]
        if options.force:
            commands.append("-9")
        if by_name and options.ignore_case:
            commands.append("-I")
    else:
        commands = ["pkill" if by_name else "kill"]
        if options.force:
            commands.append("-9")
        if by_name and options.ignore_case:
            commands.append("-i")

    commands.append(str(target))
    return commands


class Killer:
    """Runs kill commands and reports failures as KillFailed."""

    def __init__(
        self,
        family: Family | None = None,
        runner: Runner = run_command,
    ) -> None:
        self._family = family
        self._runner = runner

    def kill(self, target: KillTarget, options: KillOptions | None = None) -> None:
        """
        Terminate a process by pid or name.

        Raises:
            KillFailed: The tool could not be launched or exited non-zero. The
                message is the tool's stderr, or the exit code if it printed
                nothing.
        """
        family = self._family if self._family is not None else current_family()
        argv = build_kill_command(target, options, family)
        try:
            result = self._runner(argv, "stderr")
        except OSError as e:
            raise KillFailed(str(e), command=argv) from e

        if not result.ok:
            message = result.stderr.strip() or f"exit with code: {result.returncode}"
            logger.debug(f"{argv} failed: {message}")
            raise KillFailed(message, command=argv, returncode=result.returncode)

        logger.debug(f"Killed {target!r} with {argv}")


def kill(
    target: KillTarget,
    options: KillOptions | None = None,
    family: Family | None = None,
) -> None:
    """Terminate a process by pid or name, raising KillFailed on failure."""
    Killer(family).kill(target, options)
