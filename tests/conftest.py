"""Shared fixtures for the netrose-scaffold test suite."""

from pathlib import Path

import pytest

from netrose_scaffold.loaders import MappingTemplateLoader
from netrose_scaffold.specs import BOILERPLATES


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "proj"
    root.mkdir()
    return root


@pytest.fixture
def fake_templates() -> dict[str, str]:
    """One template per source key, each naming its key and holding a placeholder."""
    keys = {spec.source_key for specs in BOILERPLATES.values() for spec in specs}
    return {key: f"// {key}\nnamespace #NAMESPACE#;\n" for key in keys}


@pytest.fixture
def fake_loader(fake_templates: dict[str, str]) -> MappingTemplateLoader:
    return MappingTemplateLoader(fake_templates)
