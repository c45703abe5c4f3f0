from __future__ import annotations

from typing import Optional, Sequence, Tuple


class SchemaBuilderError(ValueError):
    """Base class for recoverable failures reported by the field tree store."""

    def __init__(self, message: str, path: Optional[Sequence[int]] = None):
        super().__init__(message)
        self.path: Optional[Tuple[int, ...]] = tuple(path) if path is not None else None


class PathNotFound(SchemaBuilderError):
    """An index along the path is out of range or crosses a non-nested field."""


class InvalidPath(SchemaBuilderError):
    """A non-empty path was required but the root path was given."""


class InvalidAttribute(SchemaBuilderError):
    def __init__(self, key, path: Optional[Sequence[int]] = None):
        super().__init__(f"Field attribute {key!r} cannot be updated (expected 'name' or 'kind').", path)
        self.key = key


class InvalidKind(SchemaBuilderError):
    def __init__(self, value, path: Optional[Sequence[int]] = None):
        super().__init__(f"Unknown field kind {value!r} (expected string, number or nested).", path)
        self.value = value
