"""Listing running processes through the platform's native tool."""

from typing import Literal

from loguru import logger

from proctree.config import get_settings
from proctree.errors import ListingFailed, MalformedRow
from proctree.models import KillTarget, ProcessRecord, check_target
from proctree.platform import Family, current_family, listing_command
from proctree.runner import Runner, run_command
from proctree.tree import build_tree

MalformedPolicy = Literal["skip", "fail"]


def _to_int(token: str) -> int | None:
    try:
        return int(token)
    except ValueError:
        return None


def parse_row(line: str, family: Family) -> ProcessRecord | None:
    """
    Decode one listing row, or return None if it is malformed.

    Columns are taken from the right (ppid, pid, status) so command names
    containing spaces stay whole. On Windows the status column is usually
    blank, in which case the row ends with ppid and pid.
    """
    tokens = line.split()
    if len(tokens) >= 4:
        ppid, pid = _to_int(tokens[-3]), _to_int(tokens[-2])
        if ppid is not None and pid is not None:
            return ProcessRecord(
                command=" ".join(tokens[:-3]),
                pid=pid,
                ppid=ppid,
                status=tokens[-1],
            )
    if family is Family.WINDOWS and len(tokens) >= 3:
        ppid, pid = _to_int(tokens[-2]), _to_int(tokens[-1])
        if ppid is not None and pid is not None:
            return ProcessRecord(
                command=" ".join(tokens[:-2]),
                pid=pid,
                ppid=ppid,
                status="",
            )
    return None


def parse_listing(
    output: str,
    family: Family,
    policy: MalformedPolicy = "skip",
) -> list[ProcessRecord]:
    """
    Parse native listing output into records, in output order.

    Blank lines are dropped and the first remaining line is the header.

    Args:
        output: Decoded stdout of the listing tool.
        family: Family whose tool produced the output.
        policy: "skip" drops malformed rows with a warning, "fail" raises.

    Raises:
        MalformedRow: A row did not decode and policy is "fail".
    """
    lines = [line for line in output.splitlines() if line.strip()]
    records: list[ProcessRecord] = []
    for line in lines[1:]:
        record = parse_row(line, family)
        if record is None:
            if policy == "fail":
                raise MalformedRow(line)
            logger.warning(f"Skipping malformed listing row: {line!r}")
            continue
        records.append(record)
    return records


class ProcessLister:
    """
    Lists processes, looks them up and builds the process tree.

    The family is resolved on each call unless one is given, and the runner
    can be replaced to feed canned tool output.
    """

    def __init__(
        self,
        family: Family | None = None,
        runner: Runner = run_command,
        malformed_rows: MalformedPolicy | None = None,
    ) -> None:
        self._family = family
        self._runner = runner
        self._malformed_rows = malformed_rows

    @property
    def family(self) -> Family:
        """Get the family used for the next call."""
        return self._family if self._family is not None else current_family()

    def list_all(self) -> list[ProcessRecord]:
        """
        Get a flat snapshot of all running processes.

        Raises:
            ListingFailed: The tool could not be launched, exited non-zero, or
                produced a malformed row under the "fail" policy.
        """
        family = self.family
        argv = listing_command(family)
        try:
            result = self._runner(argv, "stdout")
        except OSError as e:
            raise ListingFailed(f"Failed to run {argv[0]}: {e}", command=argv) from e

        if not result.ok:
            raise ListingFailed(
                f"Failed to get processes: {argv[0]} exited with code {result.returncode}",
                command=argv,
                returncode=result.returncode,
            )

        policy = self._malformed_rows or get_settings().MALFORMED_ROWS
        try:
            records = parse_listing(result.stdout, family, policy)
        except MalformedRow as e:
            e.command = argv
            raise
        logger.debug(f"Listed {len(records)} processes on {family.value}")
        return records

    def get(self, target: KillTarget) -> ProcessRecord | None:
        """Get the first process matching a pid (int) or command name (str)."""
        check_target(target)
        if isinstance(target, int):
            matches = (r for r in self.list_all() if r.pid == target)
        else:
            matches = (r for r in self.list_all() if r.command == target)
        return next(matches, None)

    def get_tree(self) -> list[ProcessRecord]:
        """Get the process forest, roots in listing order."""
        return build_tree(self.list_all())


def list_all(family: Family | None = None) -> list[ProcessRecord]:
    """Get a flat snapshot of all running processes."""
    return ProcessLister(family).list_all()


def get(target: KillTarget, family: Family | None = None) -> ProcessRecord | None:
    """Get the first process matching a pid or command name, or None."""
    return ProcessLister(family).get(target)


def get_tree(family: Family | None = None) -> list[ProcessRecord]:
    """Get the process forest."""
    return ProcessLister(family).get_tree()

