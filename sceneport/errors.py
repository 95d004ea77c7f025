"""Exceptions raised by the scene conversion pipeline.

Every failure is terminal for the conversion that raised it: there is no
partial output.  Dangling references between records are not errors and
never surface here.
"""

from __future__ import annotations

from pathlib import Path


class SceneExportError(Exception):
    """Base class for all sceneport errors."""


class ParseError(SceneExportError):
    """Raised when the source text is not a well-formed Unity YAML scene."""


class MissingFieldError(SceneExportError):
    """Raised when a required key is absent from a document."""

    def __init__(self, field: str, handle: int | None = None) -> None:
        self.field = field
        self.handle = handle
        where = f" in document &{handle}" if handle is not None else ""
        super().__init__(f"Missing required field '{field}'{where}")


class FieldParseError(SceneExportError):
    """Raised when a scalar cannot be converted to the expected number type."""

    def __init__(
        self,
        field: str,
        handle: int | None,
        value: object,
        expected: str = "float",
    ) -> None:
        self.field = field
        self.handle = handle
        self.value = value
        self.expected = expected
        where = f" in document &{handle}" if handle is not None else ""
        super().__init__(
            f"Field '{field}'{where} is not a valid {expected}: {value!r}"
        )


class SourceNotFoundError(SceneExportError):
    """Raised when the scene file to export does not exist."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"File not found: {self.path}")
