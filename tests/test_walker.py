"""Tests for the selector walker."""

import unittest

from tree_selector.selector import (
    AttributeToken, ClassToken, CombinatorToken, IdToken, PseudoClassToken,
    PseudoElementToken, SelectorWalker,
)
from tests.fakes import FakeTree, n


def assignment():
    # x = 1;  ->  (assignment (identifier) "=" (number) ";")
    root = n("assignment",
             n("identifier", text="x"),
             n("=", text="=", named=False),
             n("number", text="1"),
             n(";", text=";", named=False))
    FakeTree(root)
    return root


class TestSimpleTokens(unittest.TestCase):

    def test_past_last_token_returns_node(self):
        node = assignment()
        assert SelectorWalker([ClassToken("assignment")]).walk(node, 1) == [node]

    def test_class_mismatch(self):
        walker = SelectorWalker([ClassToken("assignment"), ClassToken("call")])
        assert walker.walk(assignment(), 1) is None

    def test_id_moves_to_related_node(self):
        node = assignment()
        walker = SelectorWalker([ClassToken("identifier"), IdToken("parent")])
        assert walker.walk(node.children[0], 1) == [node]

    def test_id_without_target(self):
        walker = SelectorWalker([ClassToken("assignment"), IdToken("parent")])
        assert walker.walk(assignment(), 1) is None

    def test_attribute_keeps_node(self):
        node = assignment()
        walker = SelectorWalker([ClassToken("assignment"), AttributeToken("childCount", "=", "4")])
        assert walker.walk(node, 1) == [node]

    def test_unknown_property_is_branch_failure(self):
        walker = SelectorWalker([ClassToken("assignment"), AttributeToken("colour", "=", "red")])
        with self.assertLogs("tree_selector.selector.walker", "WARNING"):
            assert walker.walk(assignment(), 1) is None

    def test_unknown_token_type(self):
        walker = SelectorWalker([ClassToken("assignment"), object()])
        with self.assertLogs("tree_selector.selector.walker", "WARNING") as cm:
            assert walker.walk(assignment(), 1) is None
        assert "didn't match any known type" in cm.output[0]


class TestPseudoTokens(unittest.TestCase):

    def test_pseudo_class_navigates(self):
        node = assignment()
        walker = SelectorWalker([ClassToken("assignment"), PseudoClassToken("namedChild", "1")])
        assert walker.walk(node, 1) == [node.children[2]]

    def test_pseudo_class_out_of_range(self):
        walker = SelectorWalker([ClassToken("assignment"), PseudoClassToken("child", "9")])
        assert walker.walk(assignment(), 1) is None

    def test_unknown_pseudo_class(self):
        walker = SelectorWalker([ClassToken("assignment"), PseudoClassToken("nthChild", "1")])
        with self.assertLogs("tree_selector.selector.walker", "WARNING"):
            assert walker.walk(assignment(), 1) is None

    def test_pseudo_class_needs_integer(self):
        walker = SelectorWalker([ClassToken("assignment"), PseudoClassToken("child", "odd")])
        with self.assertLogs("tree_selector.selector.walker", "WARNING"):
            assert walker.walk(assignment(), 1) is None

    def test_pseudo_element_extracts_value(self):
        walker = SelectorWalker([ClassToken("number"), PseudoElementToken("text")])
        assert walker.walk(assignment().children[2], 1) == ["1"]

    def test_pseudo_element_zero_is_a_value(self):
        walker = SelectorWalker([ClassToken("number"), PseudoElementToken("childCount")])
        assert walker.walk(assignment().children[2], 1) == [0]

    def test_pseudo_element_must_be_last(self):
        walker = SelectorWalker([
            ClassToken("number"), PseudoElementToken("text"), ClassToken("number"),
        ])
        assert walker.walk(assignment().children[2], 1) is None


class TestCombinators(unittest.TestCase):

    def test_next_sibling_skips_anonymous_nodes(self):
        node = assignment()
        walker = SelectorWalker([ClassToken("identifier"), CombinatorToken("+"), ClassToken("number")])
        assert walker.walk(node.children[0], 1) == [node.children[2]]

    def test_subsequent_sibling_looks_backwards(self):
        node = assignment()
        walker = SelectorWalker([ClassToken("number"), CombinatorToken("~"), ClassToken("identifier")])
        assert walker.walk(node.children[2], 1) == [node.children[0]]
        assert walker.walk(node.children[0], 1) is None

    def test_child_combinator_collects_in_order(self):
        a1 = n("a", text="1")
        a2 = n("a", text="2")
        root = n("root", a1, n("b", text="x"), a2)
        walker = SelectorWalker([ClassToken("root"), CombinatorToken(">"), ClassToken("a")])
        assert walker.walk(root, 1) == [a1, a2]

    def test_child_combinator_without_matches_fails(self):
        root = n("root", n("b", text="x"))
        walker = SelectorWalker([ClassToken("root"), CombinatorToken(">"), ClassToken("a")])
        assert walker.walk(root, 1) is None

    def test_descendant_results_are_flat(self):
        """Nested descendant combinators still produce one flat list."""
        leaf1 = n("leaf", text="1")
        leaf2 = n("leaf", text="2")
        root = n("root", n("mid", leaf1), n("mid", leaf2))
        walker = SelectorWalker([
            ClassToken("root"), CombinatorToken(" "), ClassToken("mid"),
            CombinatorToken(" "), ClassToken("leaf"), PseudoElementToken("text"),
        ])
        assert walker.walk(root, 1) == ["1", "2"]

    def test_descendant_without_matches_fails(self):
        root = n("root", n("mid", text="1"))
        walker = SelectorWalker([ClassToken("root"), CombinatorToken(" "), ClassToken("leaf")])
        assert walker.walk(root, 1) is None

    def test_unsupported_combinator(self):
        walker = SelectorWalker([ClassToken("assignment"), CombinatorToken("||"), ClassToken("number")])
        with self.assertLogs("tree_selector.selector.walker", "WARNING") as cm:
            assert walker.walk(assignment(), 1) is None
        assert "Unsupported combinator" in cm.output[0]


class TestVerbose(unittest.TestCase):

    def test_verbose_traces_each_step(self):
        walker = SelectorWalker([ClassToken("assignment"), PseudoElementToken("childCount")], verbose=True)
        with self.assertLogs("tree_selector.selector.walker", "DEBUG") as cm:
            assert walker.walk(assignment(), 1) == [4]
        assert any("Walking token 1" in line for line in cm.output)


if __name__ == "__main__":
    unittest.main()
