"""Platform profiles: which native tools apply to which operating system."""

import sys
from enum import Enum


class Family(Enum):
    """Operating system families with distinct process tooling."""

    WINDOWS = "windows"
    LINUX = "linux"
    OTHER_POSIX = "other-posix"


_LISTING_COMMANDS: dict[Family, tuple[str, ...]] = {
    Family.WINDOWS: ("wmic.exe", "PROCESS", "GET", "Name,ParentProcessId,ProcessId,Status"),
    Family.LINUX: ("ps", "-A", "-o", "comm,ppid,pid,stat"),
    Family.OTHER_POSIX: ("ps", "-A", "-o", "comm,ppid,pid,state"),
}


def resolve_family(system: str) -> Family:
    """
    Map an operating system identifier to its family.

    Accepts both ``sys.platform`` values ("win32", "linux", "darwin") and
    ``platform.system()`` values ("Windows", "Linux", "Darwin").
    """
    name = system.lower()
    if name.startswith("win") or name == "cygwin":
        return Family.WINDOWS
    if name.startswith("linux"):
        return Family.LINUX
    return Family.OTHER_POSIX


def current_family() -> Family:
    """Resolve the family of the running host."""
    return resolve_family(sys.platform)


def listing_command(family: Family) -> list[str]:
    """Get the argv of the native process listing tool for a family."""
    return list(_LISTING_COMMANDS[family])
