"""Breadth-first traversals over a :class:`DependencyGraph`."""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Iterable, Optional, Set

from .graph import DependencyGraph

logger = logging.getLogger(__name__)


def find_dependents(graph: DependencyGraph, seeds: Iterable[str]) -> Set[str]:
    """Return every file that transitively imports any of ``seeds``.

    Seeds are never reported, even when an import cycle leads back to them.
    """
    seed_set = set(seeds)
    visited: Set[str] = set()
    queue = deque(seed_set)

    while queue:
        current = queue.popleft()
        if current in visited:
            continue
        visited.add(current)
        for parent in graph.in_neighbors(current):
            if parent not in visited:
                queue.append(parent)

    dependents = visited - seed_set
    logger.debug("Upstream of %d seed(s): %d dependent(s)", len(seed_set), len(dependents))
    return dependents


def build_closure(
    graph: DependencyGraph,
    entries: Iterable[str],
    max_depth: int = 0,
    discover: Optional[Callable[[str], None]] = None,
) -> Set[str]:
    """Return ``entries`` plus everything they transitively import.

    ``max_depth <= 0`` means unbounded.  Otherwise files first reached at
    depth ``max_depth`` are included but not expanded.  A file keeps the
    depth of its first visit.  ``discover`` is called on a file right
    before its imports are read, so edges of files that were never
    scanned can be added on demand.
    """
    visited: Set[str] = set()
    queue = deque((entry, 0) for entry in entries)

    while queue:
        current, depth = queue.popleft()
        if current in visited:
            continue
        visited.add(current)
        if 0 < max_depth <= depth:
            continue
        if discover is not None:
            discover(current)
        for dep in graph.out_neighbors(current):
            if dep not in visited:
                queue.append((dep, depth + 1))

    logger.debug("Closure (max_depth=%d): %d file(s)", max_depth, len(visited))
    return visited
