"""Configuration paths and built-in defaults for ContextMap."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Set, Tuple

BASE_DIR = Path(os.environ.get("CONTEXTMAP_HOME", str(Path.home() / ".contextmap"))).expanduser()
CONFIG_FILE = BASE_DIR / "config.toml"
PROJECT_CONFIG_NAME = ".contextmap.toml"

# Order matters: the resolver tries extensions in this order.
SUPPORTED_EXTENSIONS: Tuple[str, ...] = (".ts", ".tsx", ".js", ".jsx")

SKIP_DIRS: Set[str] = {".git", ".hg", ".svn", "node_modules"}

OUTPUT_FORMATS: Tuple[str, ...] = ("markdown", "json")

DEFAULT_ROOT = "src"
DEFAULT_OUTPUT = "markdown"
DEFAULT_MAX_LINES = 0
DEFAULT_DEPTH = 0
DEFAULT_JOBS = 1

EXIT_NOTHING_TO_DO = 1
EXIT_INPUT_ERROR = 2
