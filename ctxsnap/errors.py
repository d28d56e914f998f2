"""Fatal error types raised by the snapshot pipeline."""

from __future__ import annotations


class CtxSnapError(RuntimeError):
    """Base class for errors that abort a snapshot run."""


class ConfigError(CtxSnapError):
    """Raised when the configuration file cannot be parsed."""


class ManifestError(CtxSnapError):
    """Raised when the project manifest is missing or is not a JSON object."""


class OutputError(CtxSnapError):
    """Raised when the composed document cannot be written to its destination."""


__all__ = ["ConfigError", "CtxSnapError", "ManifestError", "OutputError"]
