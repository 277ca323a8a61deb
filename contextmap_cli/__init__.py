"""contextmap-cli: keyword-driven context slices of a source tree."""

__version__ = "0.3.0"
