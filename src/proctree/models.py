"""Data models for proctree."""

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ProcessRecord:
    """Immutable record of one observed process."""

    command: str
    pid: int
    ppid: int  # 0 means no parent
    status: str  # raw OS status code, e.g. 'R', 'Ss', '' on Windows
    children: "tuple[ProcessRecord, ...] | None" = None


@dataclass(slots=True, frozen=True)
class KillOptions:
    """Options for terminating a process."""

    force: bool = False
    ignore_case: bool = False  # name targets only
    tree: bool = False  # windows only


KillTarget = int | str


def check_target(target: object) -> None:
    """Reject anything but a pid (int) or a name (str); bool is not a pid."""
    if isinstance(target, bool) or not isinstance(target, (int, str)):
        raise TypeError(f"Target must be a pid or a name, got {target!r}")
