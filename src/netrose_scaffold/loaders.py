"""Template loaders: resolve a template identifier to its text."""

from __future__ import annotations

import importlib.resources as ilr
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Protocol

from netrose_scaffold.errors import TemplateNotFound, TemplateUnreadable

logger = logging.getLogger(__name__)

TEMPLATES_PACKAGE = "netrose_scaffold.templates"
TEMPLATE_SUFFIX = ".txt"


class TemplateLoader(Protocol):
    """
    Protocol for template sources.

    ``load`` raises ``TemplateNotFound`` for unknown keys and ``TemplateUnreadable``
    when a template exists but cannot be read as UTF-8 text.
    """

    def load(self, key: str) -> str: ...


def _decode(key: str, data: bytes, path: Path | None) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise TemplateUnreadable(key, path=path, reason=str(exc)) from exc


class PackageTemplateLoader:
    """Loads templates bundled as package data, e.g. ``Scope.cs`` -> ``Scope.cs.txt``."""

    def __init__(self, package: str = TEMPLATES_PACKAGE) -> None:
        self.package = package

    def load(self, key: str) -> str:
        resource = ilr.files(self.package).joinpath(f"{key}{TEMPLATE_SUFFIX}")
        if not resource.is_file():
            raise TemplateNotFound(key)
        logger.debug("Loading template %s from package %s", key, self.package)
        path = Path(str(resource))
        try:
            # bytes keep line endings untouched
            data = resource.read_bytes()
        except OSError as exc:
            raise TemplateUnreadable(key, path=path, reason=exc.strerror) from exc
        return _decode(key, data, path)


class DirectoryTemplateLoader:
    """Loads templates from a directory on disk, using the same naming as the bundled ones."""

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def load(self, key: str) -> str:
        path = self.directory / f"{key}{TEMPLATE_SUFFIX}"
        if not path.is_file():
            raise TemplateNotFound(key, path=self.directory)
        logger.debug("Loading template %s from %s", key, path)
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise TemplateUnreadable(key, path=path, reason=exc.strerror) from exc
        return _decode(key, data, path)


class MappingTemplateLoader:
    """Serves templates from an in-memory ``{key: text}`` mapping."""

    def __init__(self, templates: Mapping[str, str]) -> None:
        self.templates = dict(templates)

    def load(self, key: str) -> str:
        try:
            return self.templates[key]
        except KeyError:
            raise TemplateNotFound(key) from None


class ChainTemplateLoader:
    """
    Tries each loader in turn and returns the first template found.

    Only ``TemplateNotFound`` moves on to the next loader; an unreadable template
    stops the lookup so a broken override never silently falls back.
    """

    def __init__(self, loaders: Iterable[TemplateLoader]) -> None:
        self.loaders = tuple(loaders)

    def load(self, key: str) -> str:
        for loader in self.loaders:
            try:
                return loader.load(key)
            except TemplateNotFound:
                continue
        raise TemplateNotFound(key)
