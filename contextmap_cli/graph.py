"""Directed file-level import graph."""

from __future__ import annotations

import threading
from typing import Dict, Set


class DependencyGraph:
    """Import graph over canonical file paths.

    Edges point from an importer to the file it imports.  Forward and
    reverse adjacency are updated together under a single lock, so the
    graph can be fed from several scanning threads.  Nothing is ever
    removed: one run, one graph.
    """

    def __init__(self) -> None:
        self._nodes: Set[str] = set()
        self._edges: Dict[str, Set[str]] = {}
        self._reverse: Dict[str, Set[str]] = {}
        self._lock = threading.Lock()

    def add_node(self, node: str) -> None:
        with self._lock:
            self._nodes.add(node)

    def add_edge(self, src: str, dst: str) -> None:
        with self._lock:
            self._edges.setdefault(src, set()).add(dst)
            self._reverse.setdefault(dst, set()).add(src)
            self._nodes.add(src)
            self._nodes.add(dst)

    def out_neighbors(self, node: str) -> Set[str]:
        """Files imported by ``node`` (empty for unknown nodes)."""
        return set(self._edges.get(node, ()))

    def in_neighbors(self, node: str) -> Set[str]:
        """Files importing ``node`` (empty for unknown nodes)."""
        return set(self._reverse.get(node, ()))

    @property
    def nodes(self) -> Set[str]:
        return set(self._nodes)

    @property
    def edge_count(self) -> int:
        return sum(len(dsts) for dsts in self._edges.values())

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)
