"""Tests for tree-sitter parsing."""

import pytest

from fixtures.sources import CLASS_NAME_ATTRIBUTE, TYPESCRIPT_MODULE
from tw_prefixer.exceptions import SourceParseError
from tw_prefixer.syntax.parser import (
    TSX,
    TYPESCRIPT,
    get_language,
    language_for_path,
    parse_source,
)


class TestLanguageForPath:
    """Tests for language_for_path function."""

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("src/App.tsx", TSX),
            ("src/App.jsx", TSX),
            ("src/app.js", TSX),
            ("src/util.ts", TYPESCRIPT),
            ("src/util.MTS", TYPESCRIPT),
            ("src/util.ts?v=123", TYPESCRIPT),
            ("src/README", TSX),
        ],
    )
    def test_grammar_selection(self, path, expected):
        """Test grammar choice by suffix."""
        assert language_for_path(path) == expected


class TestGetLanguage:
    """Tests for get_language function."""

    def test_is_cached(self):
        """Test that languages are built once."""
        assert get_language(TSX) is get_language(TSX)

    def test_unknown_language(self):
        """Test that unknown grammar names are rejected."""
        with pytest.raises(ValueError, match="Unsupported language"):
            get_language("python")


class TestParseSource:
    """Tests for parse_source function."""

    def test_parses_jsx(self):
        """Test that JSX parses cleanly."""
        tree = parse_source(CLASS_NAME_ATTRIBUTE.encode("utf-8"))
        assert not tree.root_node.has_error

    def test_parses_type_assertions_as_typescript(self):
        """Test that angle-bracket casts parse with the TS grammar."""
        tree = parse_source(TYPESCRIPT_MODULE.encode("utf-8"), TYPESCRIPT)
        assert not tree.root_node.has_error

    def test_syntax_error_raises(self):
        """Test that broken source raises with a position."""
        with pytest.raises(SourceParseError) as exc_info:
            parse_source(b"const x = {;\n", file_id="broken.tsx")

        error = exc_info.value
        assert error.file_id == "broken.tsx"
        assert error.line is not None and error.line >= 1
        assert error.column is not None and error.column >= 1
        assert "broken.tsx" in str(error)
