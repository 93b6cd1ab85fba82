"""Tests for variant splitting."""

import pytest

from tw_prefixer.core.variants import join_variants, split_variants


class TestSplitVariants:
    """Tests for split_variants function."""

    def test_plain_utility(self):
        """Test that a token without modifiers is a single segment."""
        assert split_variants("bg-red-500") == ["bg-red-500"]

    def test_modifier_chain(self):
        """Test that modifiers are returned in order before the root."""
        assert split_variants("md:hover:bg-red-500") == ["md", "hover", "bg-red-500"]

    def test_colons_inside_brackets(self):
        """Test that colons inside arbitrary variants are not split points."""
        assert split_variants("data-[state=open]:hover:[&>*]:bg-red-500") == [
            "data-[state=open]",
            "hover",
            "[&>*]",
            "bg-red-500",
        ]
        assert split_variants("[&:hover]:underline") == ["[&:hover]", "underline"]

    def test_colons_inside_quotes(self):
        """Test that colons inside quoted spans are not split points."""
        assert split_variants("before:content-['a:b']") == [
            "before",
            "content-['a:b']",
        ]
        assert split_variants("x-'a:b':y") == ["x-'a:b'", "y"]

    def test_escaped_quote_does_not_close_span(self):
        """Test that a backslash-escaped quote keeps the quote span open."""
        assert split_variants("'a\\':b':c") == ["'a\\':b'", "c"]

    def test_empty_segments_are_kept(self):
        """Test that empty segments between separators are preserved."""
        assert split_variants("a::b") == ["a", "", "b"]

    def test_empty_trailing_buffer_is_dropped(self):
        """Test that a trailing separator does not produce an empty root."""
        assert split_variants("hover:") == ["hover"]
        assert split_variants("") == []

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("[a:b", ["[a:b"]),
            ("]a:b", ["]a", "b"]),
            ("'a:b", ["'a:b"]),
            ("[[a]:b", ["[[a]:b"]),
        ],
    )
    def test_unbalanced_input_never_raises(self, token, expected):
        """Test best-effort segmentation of unbalanced brackets and quotes."""
        assert split_variants(token) == expected

    def test_round_trip(self):
        """Test that joining the segments reproduces the token."""
        tokens = [
            "flex",
            "sm:flex",
            "group-hover:focus:!text-white",
            "data-[state=open]:bg-red-500",
            "supports-[display:grid]:grid",
        ]
        for token in tokens:
            assert join_variants(split_variants(token)) == token
