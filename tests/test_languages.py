"""Tests for grammar lookup."""

import unittest
from unittest import mock

from tree_selector import languages
from tree_selector.errors import GrammarNotFoundError
from tree_selector.languages import language_for_path, load_language


class TestLanguageForPath(unittest.TestCase):

    def test_known_extensions(self):
        assert language_for_path("src/index.js") == "javascript"
        assert language_for_path("lib/mod.MJS") == "javascript"
        assert language_for_path("app.tsx") == "tsx"
        assert language_for_path("tool.py") == "python"

    def test_unknown_extension(self):
        assert language_for_path("notes.txt") is None
        assert language_for_path("Makefile") is None


class TestLoadLanguage(unittest.TestCase):

    def test_missing_grammar(self):
        with self.assertRaises(GrammarNotFoundError) as cm:
            load_language("no-such-language")
        assert "tree-sitter-no-such-language" in str(cm.exception)

    def test_missing_grammar_is_import_error(self):
        with self.assertRaises(ImportError):
            load_language("no_such_language")

    def test_cache_ignores_name_spelling(self):
        """Spellings of one grammar name share a single loaded language."""
        grammar = mock.Mock()
        grammar.language.return_value = "pointer"
        with mock.patch.object(languages.importlib, "import_module", return_value=grammar) as imp, \
                mock.patch.object(languages.tree_sitter, "Language", side_effect=lambda ptr: object()):
            try:
                first = load_language("Fake-Lang")
                second = load_language("fake_lang")
                third = load_language("FAKE_LANG")
            finally:
                languages._language_cache.pop("fake_lang", None)

        assert first is second is third
        imp.assert_called_once_with("tree_sitter_fake_lang")
        grammar.language.assert_called_once_with()


if __name__ == "__main__":
    unittest.main()
