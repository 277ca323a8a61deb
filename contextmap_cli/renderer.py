"""Render a final file set as Markdown or JSON."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from . import config
from .errors import RenderError
from .matcher import split_lines
from .resolver import canonical_path
from .scanner import read_source

_FENCE_LANG: Dict[str, str] = {
    ".ts": "ts",
    ".tsx": "tsx",
    ".js": "js",
    ".jsx": "jsx",
    ".mjs": "js",
    ".cjs": "js",
}


def display_path(path: str, base: Optional[str] = None) -> str:
    """``path`` relative to ``base`` when it lies below it, else unchanged."""
    base = os.path.abspath(base or os.getcwd())
    try:
        if os.path.commonpath([base, path]) == base:
            return Path(os.path.relpath(path, base)).as_posix()
    except ValueError:
        pass
    return path


def file_tree(paths: Iterable[str]) -> str:
    """Box-drawing tree of slash separated ``paths`` rooted at ``.``."""
    root: Dict[str, Dict] = {}
    for p in paths:
        node = root
        for part in p.lstrip("/").split("/"):
            node = node.setdefault(part, {})

    lines = ["."]

    def _walk(node: Dict[str, Dict], prefix: str) -> None:
        names = sorted(node)
        for i, name in enumerate(names):
            last = i == len(names) - 1
            lines.append(prefix + ("└── " if last else "├── ") + name)
            _walk(node[name], prefix + ("    " if last else "│   "))

    _walk(root, "")
    return "\n".join(lines)


def render_json(files: Iterable[str]) -> str:
    """Sorted absolute canonical paths as an indented JSON array.

    Unlike Markdown, JSON output is meant for other tools, so paths are
    never shortened relative to the working directory.
    """
    return json.dumps(sorted(canonical_path(f) for f in files), indent=2)


def render_markdown(
    files: Iterable[str],
    max_lines: int = 0,
    base: Optional[str] = None,
) -> str:
    entries = sorted((display_path(f, base), f) for f in files)
    out: List[str] = ["```text", file_tree(rel for rel, _ in entries), "```"]
    for rel, path in entries:
        lines = split_lines(read_source(path))
        if max_lines > 0:
            lines = lines[:max_lines]
        lang = _FENCE_LANG.get(os.path.splitext(path)[1].lower(), "")
        out.append(f"### {rel}")
        out.append("")
        out.append(f"```{lang}")
        out.extend(lines)
        out.append("```")
    return "\n".join(out)


def render(
    files: Iterable[str],
    fmt: str = config.DEFAULT_OUTPUT,
    max_lines: int = 0,
    base: Optional[str] = None,
) -> str:
    """Render ``files`` in ``fmt`` (``markdown`` or ``json``)."""
    if fmt == "json":
        return render_json(files)
    if fmt == "markdown":
        return render_markdown(files, max_lines, base)
    raise RenderError(
        f"Unknown output format '{fmt}'. Use one of: {', '.join(config.OUTPUT_FORMATS)}"
    )
