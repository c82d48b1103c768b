"""Custom exceptions for orgtree."""


class OrgtreeError(Exception):
    """Base exception for orgtree operations."""


class MatchFailure(OrgtreeError):
    """The headline grammar could not be constructed."""


class ConfigurationError(OrgtreeError, ValueError):
    """Invalid parser configuration, such as a malformed keyword list."""
