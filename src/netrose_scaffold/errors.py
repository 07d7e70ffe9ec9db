"""Failures raised while generating a scaffold."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from netrose_scaffold.specs import TemplateSpec


class ScaffoldError(Exception):
    """
    Base class for every scaffolding failure.

    Attributes:
        spec: The template spec being processed when the failure happened, if any.
        path: The filesystem path involved in the failure, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        spec: TemplateSpec | None = None,
        path: Path | None = None,
    ) -> None:
        super().__init__(message)
        self.spec = spec
        self.path = path

    def __str__(self) -> str:
        message = super().__str__()
        if self.spec is not None:
            message = f"[{self.spec.output_base_name}] {message}"
        return message


class TemplateNotFound(ScaffoldError):
    """A template identifier could not be resolved by the loader."""

    def __init__(
        self,
        key: str,
        *,
        spec: TemplateSpec | None = None,
        path: Path | None = None,
    ) -> None:
        where = f" (looked in {path})" if path is not None else ""
        super().__init__(f"Template '{key}' not found{where}.", spec=spec, path=path)
        self.key = key


class TemplateUnreadable(ScaffoldError):
    """A template exists but could not be read or is not valid UTF-8."""

    def __init__(
        self,
        key: str,
        *,
        spec: TemplateSpec | None = None,
        path: Path | None = None,
        reason: str | None = None,
    ) -> None:
        where = f" at {path}" if path is not None else ""
        suffix = f": {reason}" if reason else "."
        super().__init__(f"Template '{key}'{where} could not be read{suffix}", spec=spec, path=path)
        self.key = key


class OutputAlreadyExists(ScaffoldError):
    """The destination file exists and overwriting was not requested."""

    def __init__(self, path: Path, *, spec: TemplateSpec | None = None) -> None:
        super().__init__(
            f"'{path}' already exists. Remove it or pass --overwrite.", spec=spec, path=path
        )


class DirectoryCreationFailed(ScaffoldError):
    """An intermediate directory could not be created."""

    def __init__(
        self, path: Path, *, spec: TemplateSpec | None = None, reason: str | None = None
    ) -> None:
        suffix = f": {reason}" if reason else "."
        super().__init__(f"Could not create directory '{path}'{suffix}", spec=spec, path=path)


class WriteFailed(ScaffoldError):
    """The rendered content could not be written to its destination."""

    def __init__(
        self, path: Path, *, spec: TemplateSpec | None = None, reason: str | None = None
    ) -> None:
        suffix = f": {reason}" if reason else "."
        super().__init__(f"Could not write '{path}'{suffix}", spec=spec, path=path)
