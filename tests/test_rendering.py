"""Unit tests for placeholder substitution."""

from __future__ import annotations

from netrose_scaffold.rendering import placeholder, render_template


class TestPlaceholder:
    def test_wraps_key_in_hashes(self) -> None:
        assert placeholder("NAMESPACE") == "#NAMESPACE#"


class TestRenderTemplate:
    def test_empty_map_is_identity(self) -> None:
        text = "line one\r\nline #TWO#\n\ttabbed\n"
        assert render_template(text, {}) == text
        assert render_template(text) == text

    def test_replaces_every_occurrence(self) -> None:
        text = "#NAME# and #NAME# again"
        assert render_template(text, {"NAME": "Foo"}) == "Foo and Foo again"

    def test_leaves_unrelated_text(self) -> None:
        text = "namespace #NS# { class NAME {} } // #NS"
        assert render_template(text, {"NS": "Game"}) == "namespace Game { class NAME {} } // #NS"

    def test_unknown_placeholders_left_verbatim(self) -> None:
        text = "#KNOWN# #UNKNOWN#"
        assert render_template(text, {"KNOWN": "x"}) == "x #UNKNOWN#"

    def test_no_recursive_expansion(self) -> None:
        text = "#A# #B#"
        result = render_template(text, {"A": "#B#", "B": "b"})
        assert result == "#B# b"

    def test_longer_key_wins_on_overlap(self) -> None:
        text = "#AB#"
        assert render_template(text, {"A": "1", "AB": "2"}) == "2"

    def test_regex_characters_in_key(self) -> None:
        text = "#a.b# #axb#"
        assert render_template(text, {"a.b": "ok"}) == "ok #axb#"

    def test_value_with_backslashes(self) -> None:
        assert render_template("#P#", {"P": r"C:\new\dir"}) == r"C:\new\dir"
