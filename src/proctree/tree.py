"""Reconstructing the process hierarchy from a flat listing."""

from collections import defaultdict
from collections.abc import Iterator, Sequence
from dataclasses import replace

from loguru import logger

from proctree.config import get_settings
from proctree.models import ProcessRecord


def build_tree(
    records: Sequence[ProcessRecord],
    max_depth: int | None = None,
) -> list[ProcessRecord]:
    """
    Nest a flat listing into a forest by parent/child relation.

    Roots are records with ppid 0, records whose parent is not in the listing
    and records that are their own parent. Children keep listing order. A
    record without children has ``children is None``.

    Every input record appears exactly once in the forest. Records that are
    unreachable from a root (ppid cycles) or deeper than ``max_depth`` are
    promoted to roots.

    Args:
        records: Flat listing, in tool output order.
        max_depth: Deepest nesting to follow. Defaults to the smaller of the
            listing size and the MAX_TREE_DEPTH setting.
    """
    if max_depth is None:
        max_depth = min(len(records), get_settings().MAX_TREE_DEPTH)
    max_depth = max(1, max_depth)

    pids = {record.pid for record in records}
    by_parent: defaultdict[int, list[int]] = defaultdict(list)
    for index, record in enumerate(records):
        by_parent[record.ppid].append(index)

    roots = {
        index
        for index, record in enumerate(records)
        if record.ppid == 0 or record.ppid not in pids or record.ppid == record.pid
    }
    placed: set[int] = set()
    kids: dict[int, list[int]] = {}
    order: list[int] = []  # pre-order, parents before children

    def place(start: int) -> None:
        placed.add(start)
        stack = [(start, 1)]
        while stack:
            index, depth = stack.pop()
            order.append(index)
            if depth >= max_depth:
                continue
            children = [
                child
                for child in by_parent.get(records[index].pid, ())
                if child not in placed and child not in roots
            ]
            placed.update(children)
            kids[index] = children
            stack.extend((child, depth + 1) for child in reversed(children))

    tops = sorted(roots)
    for index in tops:
        place(index)

    promoted = 0
    for index in range(len(records)):
        if index not in placed:
            place(index)
            tops.append(index)
            promoted += 1

    if promoted:
        logger.warning(
            f"Promoted {promoted} unreachable or too deeply nested process(es) to roots"
        )

    built: dict[int, ProcessRecord] = {}
    for index in reversed(order):
        children = kids.get(index)
        built[index] = replace(
            records[index],
            children=tuple(built[child] for child in children) if children else None,
        )
    return [built[index] for index in tops]


def iter_records(forest: Sequence[ProcessRecord]) -> Iterator[ProcessRecord]:
    """Yield every record of a forest depth-first, with children stripped."""
    stack = list(reversed(forest))
    while stack:
        record = stack.pop()
        yield replace(record, children=None)
        if record.children:
            stack.extend(reversed(record.children))
