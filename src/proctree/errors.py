"""Exceptions raised by proctree."""

from collections.abc import Sequence


class ProctreeError(Exception):
    """Base class for proctree errors."""


class ListingFailed(ProctreeError):
    """The native process listing tool could not be run or failed."""

    def __init__(
        self,
        message: str,
        command: Sequence[str] = (),
        returncode: int | None = None,
    ) -> None:
        super().__init__(message)
        self.command = list(command)
        self.returncode = returncode


class MalformedRow(ListingFailed):
    """A listing line does not decode into command, ppid, pid and status."""

    def __init__(self, line: str, command: Sequence[str] = ()) -> None:
        super().__init__(f"Malformed listing row: {line!r}", command=command)
        self.line = line


class KillFailed(ProctreeError):
    """The native termination tool could not be run or failed."""

    def __init__(
        self,
        message: str,
        command: Sequence[str] = (),
        returncode: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.command = list(command)
        self.returncode = returncode
