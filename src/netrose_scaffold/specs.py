"""Static template tables for each boilerplate kind."""

from __future__ import annotations

from dataclasses import dataclass

from netrose_scaffold._types import BoilerplateKind

EXTERNAL_ROOT: tuple[str, ...] = ("Scripts", "Server", "Authoring", "Behaviours", "External")
CLIENT_DIR: tuple[str, ...] = (*EXTERNAL_ROOT, "Client")
MODELS_DIR: tuple[str, ...] = (*EXTERNAL_ROOT, "Models")


@dataclass(frozen=True)
class TemplateSpec:
    """
    One generated file: which template to render and where to put it.

    Attributes:
        source_key: Template identifier understood by a template loader.
        output_base_name: File name of the output, without extension.
        output_subdirectory: Path segments below the project root.
    """

    source_key: str
    output_base_name: str
    output_subdirectory: tuple[str, ...]


def _client(name: str) -> TemplateSpec:
    return TemplateSpec(f"{name}.cs", name, CLIENT_DIR)


def _model(name: str) -> TemplateSpec:
    return TemplateSpec(f"{name}.cs", name, MODELS_DIR)


_SHARED_MODELS: tuple[TemplateSpec, ...] = (_model("Scope"), _model("Map"), _model("Position"))

BOILERPLATES: dict[BoilerplateKind, tuple[TemplateSpec, ...]] = {
    BoilerplateKind.SINGLE_ACCOUNT: (
        _client("SingleCharAccountAPIClient"),
        _model("SingleCharAccount"),
        *_SHARED_MODELS,
    ),
    BoilerplateKind.MULTI_ACCOUNT: (
        _client("MultiCharAccountAPIClient"),
        _model("MultiCharAccount"),
        _model("Character"),
        *_SHARED_MODELS,
    ),
}


def specs_for(kind: BoilerplateKind) -> tuple[TemplateSpec, ...]:
    """Return the ordered template specs of a boilerplate kind."""
    return BOILERPLATES[kind]
