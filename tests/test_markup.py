# FILE: tests/test_markup.py
"""
Tests for the CriticMarkup preview of pending replacements.
"""

from betwixt.markup import _build_critic_markup, preview_replacements
from betwixt.scan import scan


class TestBuildCriticMarkup:
    """Tests for the markup generation helper."""

    def test_deletion(self):
        assert _build_critic_markup("old", "") == "{--old--}"

    def test_insertion(self):
        assert _build_critic_markup("", "new") == "{++new++}"

    def test_modification(self):
        assert _build_critic_markup("old", "new") == "{--old--}{++new++}"

    def test_unchanged(self):
        assert _build_critic_markup("same", "same") == "same"

    def test_both_empty(self):
        assert _build_critic_markup("", "") == ""


class TestPreviewReplacements:
    def test_preserved_delimiters_stay_outside_markup(self):
        text = "a [old] b"
        result = preview_replacements(text, scan(text, "[", "]"), "new")

        assert result == "a [{--old--}{++new++}] b"

    def test_stripped_delimiters_are_deleted(self):
        text = "a [old] b"
        result = preview_replacements(text, scan(text, "[", "]"), "new", preserve_delimiters=False)

        assert result == "a {--[old]--}{++new++} b"

    def test_empty_interior_shows_insertion(self):
        text = "a [] b"

        assert preview_replacements(text, scan(text, "[", "]"), "new") == "a [{++new++}] b"

    def test_empty_replacement_shows_deletion(self):
        text = "a [old] b"

        assert preview_replacements(text, scan(text, "[", "]"), "") == "a [{--old--}] b"

    def test_multiple_matches(self):
        text = "<1>-<2>"

        assert preview_replacements(text, scan(text, "<", ">"), "#") == "<{--1--}{++#++}>-<{--2--}{++#++}>"

    def test_no_matches_returns_text(self):
        text = "plain"

        assert preview_replacements(text, [], "new") is text

    def test_preview_tagged_document(self, tagged_text):
        matches = scan(tagged_text, "<", ">")
        result = preview_replacements(tagged_text, matches, "redacted")

        assert result == (
            "Name: <{--alice--}{++redacted++}> "
            "Email: <{--alice@example.com--}{++redacted++}> Note: <unterminated"
        )
