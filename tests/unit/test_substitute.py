"""Unit tests for token substitution helpers."""

from markupsafe import Markup

from r2resize.renderers.substitute import (
    as_html,
    css_declaration,
    join_styles,
    substitute_tokens,
)


class TestSubstituteTokens:
    """Tests for substitute_tokens."""

    def test_replaces_every_occurrence(self) -> None:
        """Test that all occurrences of a token are replaced."""
        text = "a { color: sib53lver; border-color: sib53lver; }"

        result = substitute_tokens(text, {"sib53lver": "#123456"})

        assert result == "a { color: #123456; border-color: #123456; }"

    def test_none_leaves_token(self) -> None:
        """Test that a None value leaves the token in place."""
        result = substitute_tokens("width: lws50x73;", {"lws50x73": None})

        assert result == "width: lws50x73;"

    def test_applied_in_order(self) -> None:
        """Test that later replacements see earlier output."""
        result = substitute_tokens("AAA", {"AAA": "BBB", "BBB": "CCC"})

        assert result == "CCC"

    def test_literal_match(self) -> None:
        """Test that dots in tokens are literal, not wildcards."""
        text = "height: line.height; line-height: 1;"

        result = substitute_tokens(text, {"line.height": "7px"})

        assert result == "height: 7px; line-height: 1;"

    def test_non_string_values(self) -> None:
        """Test that numbers are converted to strings."""
        assert substitute_tokens("x = N;", {"N": 3}) == "x = 3;"


class TestHelpers:
    """Tests for the small markup helpers."""

    def test_as_html_returns_markup(self) -> None:
        """Test that as_html tags text as trusted."""
        result = as_html("<b>x</b>")

        assert isinstance(result, Markup)
        assert str(result) == "<b>x</b>"

    def test_css_declaration(self) -> None:
        """Test declaration formatting."""
        assert css_declaration("color", "red") == "color:red;"
        assert css_declaration("color", "red", terminate=False) == "color:red"
        assert css_declaration("color", None) == ""

    def test_join_styles_skips_empty(self) -> None:
        """Test that empty declarations are dropped."""
        assert join_styles("color:red;", "", None, "width:1px;") == "color:red; width:1px;"
        assert join_styles() == ""
