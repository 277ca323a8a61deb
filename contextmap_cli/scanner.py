"""Directory listing and file scanning.

Scanning a file does two things: its relative imports are resolved and
recorded in the :class:`DependencyGraph`, and the keyword matcher runs
over its text.
"""

from __future__ import annotations

import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from . import config
from .errors import ScanError
from .extractor import extract_specifiers
from .graph import DependencyGraph
from .matcher import Matcher
from .models import MatchInfo
from .resolver import canonical_path, resolve_module

logger = logging.getLogger(__name__)


def list_source_files(
    root: Path,
    extensions: Sequence[str] = config.SUPPORTED_EXTENSIONS,
) -> List[str]:
    """Recursively list files under ``root`` whose suffix is in ``extensions``."""
    suffixes = tuple(extensions)
    files: List[str] = []
    for dirpath, dirnames, filenames in os.walk(canonical_path(str(root))):
        dirnames[:] = sorted(d for d in dirnames if d not in config.SKIP_DIRS)
        for name in sorted(filenames):
            if name.endswith(suffixes):
                files.append(os.path.join(dirpath, name))
    logger.debug("Found %d source file(s) under %s", len(files), root)
    return files


def read_source(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise ScanError(path, exc.strerror or str(exc)) from exc


class DependencyScanner:
    """Records each file's outgoing import edges exactly once."""

    def __init__(
        self,
        graph: DependencyGraph,
        extensions: Sequence[str] = config.SUPPORTED_EXTENSIONS,
    ) -> None:
        self.graph = graph
        self.extensions = tuple(extensions)
        self._scanned: Set[str] = set()
        self._lock = threading.Lock()

    def _claim(self, path: str) -> bool:
        with self._lock:
            if path in self._scanned:
                return False
            self._scanned.add(path)
            return True

    def is_scanned(self, path: str) -> bool:
        return path in self._scanned

    def scan_file(self, path: str, content: Optional[str] = None) -> None:
        """Resolve the imports of ``path`` and add them to the graph."""
        path = canonical_path(path)
        if not self._claim(path):
            return
        if content is None:
            content = read_source(path)
        self.graph.add_node(path)
        for spec in extract_specifiers(content):
            target = resolve_module(path, spec, self.extensions)
            if target is None:
                logger.debug("Unresolved import '%s' in %s", spec, path)
                continue
            self.graph.add_edge(path, target)

    def ensure_scanned(self, path: str) -> None:
        """Lazily discover edges for a file reached during traversal."""
        if not self.is_scanned(canonical_path(path)):
            logger.debug("Lazily scanning %s", path)
            self.scan_file(path)


def _scan_one(
    path: str,
    keyword: str,
    literal: bool,
    matcher: Matcher,
    scanner: DependencyScanner,
) -> Tuple[str, List[int]]:
    content = read_source(path)
    scanner.scan_file(path, content)
    return path, matcher.match(content, keyword, literal, path=path)


def search_files(
    files: Iterable[str],
    keyword: str,
    literal: bool,
    matcher: Matcher,
    scanner: DependencyScanner,
    workers: int = 1,
) -> List[MatchInfo]:
    """Scan every file, returning match records sorted by path."""
    paths = [canonical_path(f) for f in files]
    if workers > 1 and len(paths) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(
                pool.map(lambda p: _scan_one(p, keyword, literal, matcher, scanner), paths)
            )
    else:
        results = [_scan_one(p, keyword, literal, matcher, scanner) for p in paths]

    matches = [MatchInfo(file=path, lines=lines) for path, lines in results if lines]
    matches.sort(key=lambda m: m.file)
    logger.info(
        "Scanned %d file(s): %d match(es), %d import edge(s)",
        len(paths), len(matches), scanner.graph.edge_count,
    )
    return matches
