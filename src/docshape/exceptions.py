"""
Exceptions raised by docshape.
"""

from typing import Any, Optional, Sequence


class DocShapeError(Exception):
    """Base class for all docshape errors."""


class MalformedDocumentError(DocShapeError):
    """A top-level corpus element is not an object."""

    def __init__(self, index: int, value: Any):
        self.index = index
        self.value = value
        super().__init__(
            f"Document #{index} is not an object (got {type(value).__name__})"
        )


class UnsupportedTypeError(DocShapeError, TypeError):
    """A value does not map onto any of the JSON type tags."""

    def __init__(self, value: Any, path: Optional[Sequence[str]] = None):
        self.value = value
        self.path = tuple(path) if path is not None else None
        where = f" at '{'.'.join(self.path)}'" if self.path else ""
        super().__init__(f"Unsupported type {type(value).__name__}{where}")


class SourceError(DocShapeError):
    """Documents could not be retrieved from a source."""


class ConfigError(DocShapeError, ValueError):
    """Invalid configuration value."""
