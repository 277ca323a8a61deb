"""Configuration manager for ContextMap using TOML files.

Defaults are read from ``$CONTEXTMAP_HOME/config.toml`` and then from a
project-local ``.contextmap.toml`` in the working directory; the project
file wins key by key.  Only the ``[defaults]`` section is consulted::

    [defaults]
    root = "src"
    output = "markdown"
    max_lines = 0
    depth = 0
    jobs = 4
    extensions = [".ts", ".tsx", ".js", ".jsx"]
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import toml

from . import config
from .errors import ConfigError

logger = logging.getLogger(__name__)


DEFAULTS: Dict[str, Any] = {
    "root": config.DEFAULT_ROOT,
    "output": config.DEFAULT_OUTPUT,
    "max_lines": config.DEFAULT_MAX_LINES,
    "depth": config.DEFAULT_DEPTH,
    "jobs": config.DEFAULT_JOBS,
    "extensions": list(config.SUPPORTED_EXTENSIONS),
}

_INT_KEYS = ("max_lines", "depth", "jobs")


def load_full_config(path: Path) -> Dict[str, Any]:
    """Load an entire TOML file, or an empty dict if it does not exist."""
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            return toml.load(f)
    except toml.TomlDecodeError as exc:
        raise ConfigError(f"Invalid configuration in {path}: {exc}") from exc


def _section(path: Path) -> Dict[str, Any]:
    section = load_full_config(path).get("defaults", {})
    if not isinstance(section, dict):
        raise ConfigError(f"[defaults] in {path} must be a table")
    return section


def _validate(values: Dict[str, Any], source: str) -> Dict[str, Any]:
    unknown = set(values) - set(DEFAULTS)
    for key in sorted(unknown):
        logger.warning("Ignoring unknown option '%s' in %s", key, source)

    clean = {k: v for k, v in values.items() if k in DEFAULTS}
    for key in _INT_KEYS:
        if key in clean and (not isinstance(clean[key], int) or isinstance(clean[key], bool)):
            raise ConfigError(f"'{key}' in {source} must be an integer")
    if "output" in clean and clean["output"] not in config.OUTPUT_FORMATS:
        raise ConfigError(
            f"'output' in {source} must be one of: {', '.join(config.OUTPUT_FORMATS)}"
        )
    if "extensions" in clean:
        exts = clean["extensions"]
        if not isinstance(exts, list) or not exts or not all(
            isinstance(e, str) and e.startswith(".") for e in exts
        ):
            raise ConfigError(
                f"'extensions' in {source} must be a non-empty list like [\".ts\", \".js\"]"
            )
    return clean


def load_defaults(cwd: Optional[Path] = None) -> Dict[str, Any]:
    """Return run defaults merged from built-ins, home config and project config."""
    merged = dict(DEFAULTS)
    sources = [config.CONFIG_FILE, (cwd or Path.cwd()) / config.PROJECT_CONFIG_NAME]
    for path in sources:
        values = _section(path)
        if values:
            logger.debug("Loaded defaults from %s", path)
            merged.update(_validate(values, str(path)))
    merged["extensions"] = tuple(merged["extensions"])
    return merged

