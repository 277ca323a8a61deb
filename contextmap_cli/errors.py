"""Exception hierarchy for ContextMap.

Every error raised by the core inherits from ``ContextMapError`` so the
CLI can map it to an exit status in one place.
"""


class ContextMapError(Exception):
    """Base exception for all ContextMap errors."""


class InputError(ContextMapError):
    """A run parameter is missing or points at something unusable."""


class ScanError(ContextMapError):
    """A source file could not be read during the scan."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")


class ConfigError(ContextMapError):
    """The configuration file exists but cannot be parsed."""


class RenderError(ContextMapError):
    """The requested output format is not supported."""


class NothingToDoError(ContextMapError):
    """The run finished without producing anything to render."""


class NoMatchesError(NothingToDoError):
    """No scanned file references the keyword."""

    def __init__(self, keyword: str):
        self.keyword = keyword
        super().__init__(f"No matches found for '{keyword}'")


class EmptySelectionError(NothingToDoError):
    """The selection step returned no files."""

    def __init__(self) -> None:
        super().__init__("No files selected")
