"""Exceptions for create-rescript-config."""


class ScaffoldError(Exception):
    """Base exception for scaffolding operations."""
    pass


class NodeNotFoundError(ScaffoldError):
    """Node.js is not installed or not in PATH."""
    pass


class NodeVersionError(ScaffoldError):
    """Installed Node.js is older than the supported minimum."""

    def __init__(self, message: str, found: str, minimum: str):
        super().__init__(message)
        self.found = found
        self.minimum = minimum
