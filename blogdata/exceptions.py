"""Errors raised by the blog data layer.

Parse failures while loading a folder are not represented here: bad files are
logged and skipped. A lookup that finds nothing returns None, not an error.
"""

from pathlib import Path
from typing import Optional


class BlogDataError(Exception):
    """Base exception for all blog data errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class EntityNotLoadedError(BlogDataError):
    """Raised when a collection cache is still absent after loading it."""

    def __init__(self, entity_type: str):
        super().__init__(
            message=f"{entity_type} cache is not loaded",
            details={"entity_type": entity_type},
        )


class SaveIOError(BlogDataError):
    """Raised when an entity file cannot be written."""

    def __init__(self, path: Path, reason: Optional[str] = None):
        self.path = path
        message = f"Could not write {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message=message, details={"path": str(path), "reason": reason})


class ConfigurationError(BlogDataError):
    """Raised when storage settings are missing or invalid."""


class InvalidEntityIdError(BlogDataError):
    """Raised when an ID cannot be used as a file name inside its folder."""

    def __init__(self, entity_type: str, entity_id: str):
        super().__init__(
            message=f"Invalid {entity_type} ID: {entity_id!r}",
            details={"entity_type": entity_type, "id": entity_id},
        )
