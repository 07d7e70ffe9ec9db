"""Unit tests for template loaders."""

from __future__ import annotations

from pathlib import Path

import pytest

from netrose_scaffold.errors import ScaffoldError, TemplateNotFound, TemplateUnreadable
from netrose_scaffold.loaders import (
    ChainTemplateLoader,
    DirectoryTemplateLoader,
    MappingTemplateLoader,
    PackageTemplateLoader,
)
from netrose_scaffold.specs import BOILERPLATES


class TestPackageTemplateLoader:
    @pytest.mark.parametrize(
        "key", sorted({s.source_key for specs in BOILERPLATES.values() for s in specs})
    )
    def test_every_bundled_template_loads(self, key: str) -> None:
        text = PackageTemplateLoader().load(key)
        assert text.strip()

    def test_bundled_model_declares_its_class(self) -> None:
        text = PackageTemplateLoader().load("Character.cs")
        assert "public class Character" in text

    def test_missing_key_raises(self) -> None:
        with pytest.raises(TemplateNotFound) as info:
            PackageTemplateLoader().load("Nope.cs")
        assert info.value.key == "Nope.cs"
        assert isinstance(info.value, ScaffoldError)


class TestDirectoryTemplateLoader:
    def test_loads_txt_file(self, tmp_path: Path) -> None:
        (tmp_path / "Scope.cs.txt").write_text("custom scope", encoding="utf-8")
        assert DirectoryTemplateLoader(tmp_path).load("Scope.cs") == "custom scope"

    def test_preserves_line_endings(self, tmp_path: Path) -> None:
        (tmp_path / "Map.cs.txt").write_bytes(b"a\r\nb\n")
        assert DirectoryTemplateLoader(tmp_path).load("Map.cs") == "a\r\nb\n"

    def test_missing_file_raises_with_directory(self, tmp_path: Path) -> None:
        with pytest.raises(TemplateNotFound) as info:
            DirectoryTemplateLoader(tmp_path).load("Map.cs")
        assert info.value.path == tmp_path

    def test_non_utf8_file_raises_unreadable(self, tmp_path: Path) -> None:
        path = tmp_path / "Scope.cs.txt"
        path.write_bytes(b"\xff\xfe bad")

        with pytest.raises(TemplateUnreadable) as info:
            DirectoryTemplateLoader(tmp_path).load("Scope.cs")

        assert info.value.key == "Scope.cs"
        assert info.value.path == path
        assert isinstance(info.value, ScaffoldError)
        assert isinstance(info.value.__cause__, UnicodeDecodeError)

    def test_read_error_raises_unreadable(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "Map.cs.txt").write_text("map", encoding="utf-8")

        def fail(self: Path) -> bytes:
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(Path, "read_bytes", fail)

        with pytest.raises(TemplateUnreadable, match="Permission denied") as info:
            DirectoryTemplateLoader(tmp_path).load("Map.cs")

        assert isinstance(info.value.__cause__, PermissionError)


class TestMappingTemplateLoader:
    def test_returns_mapping_value(self) -> None:
        assert MappingTemplateLoader({"k": "v"}).load("k") == "v"

    def test_missing_key_raises(self) -> None:
        with pytest.raises(TemplateNotFound):
            MappingTemplateLoader({}).load("k")


class TestChainTemplateLoader:
    def test_first_loader_wins(self) -> None:
        chain = ChainTemplateLoader(
            (MappingTemplateLoader({"k": "first"}), MappingTemplateLoader({"k": "second"}))
        )
        assert chain.load("k") == "first"

    def test_falls_back_on_missing(self) -> None:
        chain = ChainTemplateLoader(
            (MappingTemplateLoader({}), MappingTemplateLoader({"k": "second"}))
        )
        assert chain.load("k") == "second"

    def test_missing_everywhere_raises(self) -> None:
        chain = ChainTemplateLoader((MappingTemplateLoader({}), MappingTemplateLoader({})))
        with pytest.raises(TemplateNotFound):
            chain.load("k")

    def test_unreadable_override_does_not_fall_back(self, tmp_path: Path) -> None:
        (tmp_path / "Scope.cs.txt").write_bytes(b"\xff")
        chain = ChainTemplateLoader((DirectoryTemplateLoader(tmp_path), PackageTemplateLoader()))

        with pytest.raises(TemplateUnreadable):
            chain.load("Scope.cs")
