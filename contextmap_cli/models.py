"""Data models shared by the scanner, orchestrator and CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from . import config


@dataclass
class MatchInfo:
    file: str
    lines: List[int] = field(default_factory=list)


@dataclass
class RunOptions:
    """Already-parsed parameters for a single run."""

    keyword: str
    literal: bool = False
    output: str = config.DEFAULT_OUTPUT
    root: str = config.DEFAULT_ROOT
    max_lines: int = config.DEFAULT_MAX_LINES
    depth: int = config.DEFAULT_DEPTH
    upstream: bool = False
    select_all: bool = False
    syntax: bool = False
    jobs: int = config.DEFAULT_JOBS
    extensions: Tuple[str, ...] = config.SUPPORTED_EXTENSIONS
