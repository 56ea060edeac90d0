"""Exceptions raised for problems that abort a whole validation run."""

from __future__ import annotations


class MdlinksError(RuntimeError):
    """Base class for fatal errors reported by the command line."""


class DiscoveryError(MdlinksError):
    """Raised when the document root cannot be listed or a file cannot be read."""


class RemoteLookupError(MdlinksError):
    """Raised when the repository remote cannot be queried."""


class ConfigError(MdlinksError):
    """Raised when the configuration file is unreadable or invalid."""


__all__ = ["ConfigError", "DiscoveryError", "MdlinksError", "RemoteLookupError"]
