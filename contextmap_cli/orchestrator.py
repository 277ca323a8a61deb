"""Coordinates one ContextMap run: scan, select, expand, render."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Set

from . import config
from .errors import EmptySelectionError, InputError, NoMatchesError, RenderError
from .graph import DependencyGraph
from .matcher import Matcher, get_matcher
from .models import MatchInfo, RunOptions
from .renderer import render
from .resolver import canonical_path
from .scanner import DependencyScanner, list_source_files, search_files
from .selector import Selector
from .traversal import build_closure, find_dependents

logger = logging.getLogger(__name__)


class ContextMapper:
    """Owns the dependency graph for a single run."""

    def __init__(self, options: RunOptions, matcher: Optional[Matcher] = None):
        if not options.keyword:
            raise InputError("Keyword is required")
        if options.output not in config.OUTPUT_FORMATS:
            raise RenderError(
                f"Unknown output format '{options.output}'. "
                f"Use one of: {', '.join(config.OUTPUT_FORMATS)}"
            )
        self.options = options
        self.matcher = matcher or get_matcher(options.syntax)
        self.graph = DependencyGraph()
        self.scanner = DependencyScanner(self.graph, options.extensions)

    @property
    def root(self) -> Path:
        return Path(self.options.root)

    def _check_root(self) -> None:
        root = self.root
        if not root.is_dir():
            raise InputError(f"Root directory '{root}' does not exist")
        if not os.access(root, os.R_OK | os.X_OK):
            raise InputError(f"Root directory '{root}' is not readable")

    def scan(self) -> List[MatchInfo]:
        """Scan the root, building the graph; raise if nothing matches."""
        self._check_root()
        files = list_source_files(self.root, self.options.extensions)
        matches = search_files(
            files,
            self.options.keyword,
            self.options.literal,
            self.matcher,
            self.scanner,
            workers=self.options.jobs,
        )
        if not matches:
            raise NoMatchesError(self.options.keyword)
        return matches

    def expand(self, selected: Iterable[str]) -> Set[str]:
        """Entry files plus their (optionally upstream-extended) closure."""
        entries = [canonical_path(f) for f in selected]
        if not entries:
            raise EmptySelectionError()
        if self.options.upstream:
            parents = find_dependents(self.graph, entries)
            logger.info("Upstream expansion added %d file(s)", len(parents))
            entries = list(dict.fromkeys([*entries, *sorted(parents)]))
        return build_closure(
            self.graph,
            entries,
            self.options.depth,
            discover=self.scanner.ensure_scanned,
        )

    def render(self, files: Iterable[str]) -> str:
        return render(files, self.options.output, self.options.max_lines)

    def run(self, selector: Selector) -> str:
        matches = self.scan()
        selected: Sequence[str] = selector(matches)
        closure = self.expand(selected)
        return self.render(closure)
