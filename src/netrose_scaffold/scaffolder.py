"""Turns a boilerplate kind into files on disk."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from netrose_scaffold._types import BoilerplateKind
from netrose_scaffold.errors import (
    DirectoryCreationFailed,
    OutputAlreadyExists,
    ScaffoldError,
    WriteFailed,
)
from netrose_scaffold.loaders import PackageTemplateLoader, TemplateLoader
from netrose_scaffold.rendering import render_template
from netrose_scaffold.specs import TemplateSpec, specs_for

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = "cs"


@dataclass(frozen=True)
class PlannedFile:
    """A template spec resolved against a project root."""

    spec: TemplateSpec
    destination: Path


def plan(
    kind: BoilerplateKind,
    project_root: Path,
    *,
    extension: str = DEFAULT_EXTENSION,
) -> list[PlannedFile]:
    """Compute the destination of every file of ``kind`` without touching the filesystem."""
    root = Path(project_root)
    suffix = f".{extension.lstrip('.')}" if extension else ""
    return [
        PlannedFile(
            spec=spec,
            destination=root.joinpath(
                *spec.output_subdirectory, f"{spec.output_base_name}{suffix}"
            ),
        )
        for spec in specs_for(kind)
    ]


def _ensure_directory(directory: Path, spec: TemplateSpec) -> None:
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationFailed(directory, spec=spec, reason=exc.strerror) from exc


def _write(destination: Path, content: str, spec: TemplateSpec, overwrite: bool) -> None:
    mode = "w" if overwrite else "x"
    try:
        with destination.open(mode, encoding="utf-8", newline="") as f:
            f.write(content)
    except FileExistsError:
        raise OutputAlreadyExists(destination, spec=spec) from None
    except OSError as exc:
        raise WriteFailed(destination, spec=spec, reason=exc.strerror) from exc


def generate(
    kind: BoilerplateKind,
    project_root: Path,
    *,
    substitutions: Mapping[str, str] | None = None,
    overwrite: bool = False,
    loader: TemplateLoader | None = None,
    extension: str = DEFAULT_EXTENSION,
) -> list[Path]:
    """
    Render every template of ``kind`` under ``project_root``.

    Files are written in declaration order (client first, then models). The first
    failure aborts the run; files written before it are left on disk.

    Args:
        kind: Which boilerplate to generate.
        project_root: Base directory of the game project.
        substitutions: Placeholder values applied to every template.
        overwrite: Replace destination files that already exist.
        loader: Template source. Defaults to the bundled templates.
        extension: Extension of the generated files.

    Returns:
        The written paths, in order.

    Raises:
        TemplateNotFound: A template could not be resolved.
        TemplateUnreadable: A template could not be read as UTF-8 text.
        OutputAlreadyExists: A destination exists and ``overwrite`` is false.
        DirectoryCreationFailed: An intermediate directory could not be created.
        WriteFailed: A destination could not be written.
    """
    if loader is None:
        loader = PackageTemplateLoader()

    logger.info("Generating %s boilerplate under %s", kind.value, project_root)

    written: list[Path] = []
    for planned in plan(kind, project_root, extension=extension):
        spec = planned.spec
        try:
            template = loader.load(spec.source_key)
        except ScaffoldError as exc:
            exc.spec = spec
            raise

        content = render_template(template, substitutions)

        _ensure_directory(planned.destination.parent, spec)
        _write(planned.destination, content, spec, overwrite)

        logger.debug("Wrote %s", planned.destination)
        written.append(planned.destination)

    return written
