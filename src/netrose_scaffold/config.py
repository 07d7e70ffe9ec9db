"""Configuration for a scaffolding run."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from netrose_scaffold.loaders import (
    ChainTemplateLoader,
    DirectoryTemplateLoader,
    PackageTemplateLoader,
    TemplateLoader,
)
from netrose_scaffold.scaffolder import DEFAULT_EXTENSION

ROOT_ENVVAR = "NETROSE_SCAFFOLD_ROOT"
TEMPLATES_ENVVAR = "NETROSE_SCAFFOLD_TEMPLATES"


@dataclass(kw_only=True)
class ScaffoldConfig:
    """
    Settings of one scaffolding run.

    Attributes:
        project_root: Directory under which the ``Scripts/...`` tree is created.
        overwrite: Replace output files that already exist.
        extension: Extension of the generated files.
        templates_dir: Directory whose templates take precedence over the bundled ones.
        substitutions: Placeholder values applied to every template.
        dry_run: Only report the planned files.
    """

    project_root: Path = field(default_factory=Path.cwd)
    overwrite: bool = False
    extension: str = DEFAULT_EXTENSION
    templates_dir: Path | None = None
    substitutions: dict[str, str] = field(default_factory=dict)
    dry_run: bool = False

    def loader(self) -> TemplateLoader:
        """Template source: ``templates_dir`` first when set, then the bundled templates."""
        if self.templates_dir is not None:
            return ChainTemplateLoader(
                (DirectoryTemplateLoader(self.templates_dir), PackageTemplateLoader())
            )
        return PackageTemplateLoader()


def parse_substitutions(pairs: Iterable[str]) -> dict[str, str]:
    """
    Parse ``KEY=VALUE`` strings into a substitution map.

    Only the first ``=`` splits, so values may contain ``=``. Later pairs win.

    Raises:
        ValueError: A pair has no ``=`` or an empty key.
    """
    substitutions: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got {pair!r}.")
        substitutions[key] = value
    return substitutions
