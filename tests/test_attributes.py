"""Tests for attribute selector comparisons."""

import unittest

from tree_selector.selector.attributes import match_attribute


class TestExistence(unittest.TestCase):
    """Without an operator only truthiness counts."""

    def test_present(self):
        assert match_attribute("x", None)
        assert match_attribute(3, None)

    def test_absent_or_empty(self):
        assert not match_attribute(None, None)
        assert not match_attribute("", None)
        assert not match_attribute(0, None)


class TestCaseHandling(unittest.TestCase):
    """Comparisons ignore case unless the s flag is given."""

    def test_default_is_case_insensitive(self):
        assert match_attribute("require", "=", "Require")
        assert match_attribute("REQUIRE", "=", "require")

    def test_i_flag(self):
        assert match_attribute("Todo", "*=", "TODO", "i")
        assert match_attribute("Todo", "*=", "TODO", "I")

    def test_s_flag(self):
        assert not match_attribute("require", "=", "Require", "s")
        assert match_attribute("Require", "=", "Require", "S")


class TestOperators(unittest.TestCase):

    def test_equals(self):
        assert match_attribute("abc", "=", "abc")
        assert not match_attribute("abcd", "=", "abc")

    def test_whitespace_list(self):
        """~= matches whole space-separated words only."""
        assert match_attribute("foo bar", "~=", "foo")
        assert match_attribute("foo bar", "~=", "bar")
        assert not match_attribute("foobar", "~=", "foo")

    def test_hyphen_prefix(self):
        assert match_attribute("en", "|=", "en")
        assert match_attribute("en-US", "|=", "en")
        assert not match_attribute("english", "|=", "en")

    def test_prefix_suffix_substring(self):
        assert match_attribute("node:path", "^=", "node:")
        assert not match_attribute("node:path", "^=", "path")
        assert match_attribute("index.js", "$=", ".js")
        assert not match_attribute("index.ts", "$=", ".js")
        assert match_attribute("// todo: fix", "*=", "todo")
        assert not match_attribute("// fixme", "*=", "todo")

    def test_unknown_operator(self):
        with self.assertLogs("tree_selector.selector.attributes", "WARNING"):
            assert not match_attribute("a", "!=", "b")


class TestValueTypes(unittest.TestCase):

    def test_numbers_compare_numerically(self):
        assert match_attribute(0, "=", "0")
        assert not match_attribute(1, "=", "0")
        assert match_attribute(3, "=", "3px")

    def test_unparsable_number_literal(self):
        assert not match_attribute(3, "=", "three")

    def test_number_with_text_operator(self):
        assert match_attribute(120, "^=", "12")
        assert match_attribute(120, "$=", "20")

    def test_number_case_sensitive(self):
        assert match_attribute(7, "=", "7", "s")

    def test_non_scalar_values_fail(self):
        assert not match_attribute(None, "=", "x")
        assert not match_attribute(True, "=", "true")
        assert not match_attribute(["x"], "=", "x")


if __name__ == "__main__":
    unittest.main()
