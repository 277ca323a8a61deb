"""Resolution of relative module specifiers to files on disk."""

from __future__ import annotations

import os
from typing import Iterator, Optional, Sequence

from . import config


def canonical_path(path: str) -> str:
    """Absolute, normalized form used as graph node identity.

    Symlinks are not followed and case is preserved.
    """
    return os.path.normpath(os.path.abspath(path))


def candidate_paths(
    importer: str,
    specifier: str,
    extensions: Sequence[str] = config.SUPPORTED_EXTENSIONS,
) -> Iterator[str]:
    """Yield every candidate location for ``specifier`` in priority order."""
    base = os.path.normpath(os.path.join(os.path.dirname(canonical_path(importer)), specifier))
    yield base
    for ext in extensions:
        yield base + ext
    for ext in extensions:
        yield os.path.join(base, "index" + ext)


def resolve_module(
    importer: str,
    specifier: str,
    extensions: Sequence[str] = config.SUPPORTED_EXTENSIONS,
) -> Optional[str]:
    """Resolve ``specifier`` as imported from ``importer``.

    Returns the first existing regular file among :func:`candidate_paths`,
    or ``None`` when nothing matches.
    """
    for candidate in candidate_paths(importer, specifier, extensions):
        if os.path.isfile(candidate):
            return candidate
    return None
