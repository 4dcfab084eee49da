"""Unit tests for routing rules.

Tests for the capture helpers and the order of the special page and
legacy query rule lists.
"""

import sys
import unittest
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent / "src"
sys.path.insert(0, str(src_path))

from wikiroute.core.models import ArticleDiffCompare, ArticleHistory, Search
from wikiroute.routing.rules import (
    LEGACY_QUERY_RULES,
    SPECIAL_PAGE_RULES,
    QueryRule,
    match_history,
    match_mobilediff_compare,
    match_mobilediff_single,
    parse_int,
)


class TestCaptureHelpers(unittest.TestCase):
    """Test suite for pattern capture helpers."""

    def test_parse_int(self):
        """Test strict integer parsing."""
        self.assertEqual(parse_int("42"), 42)
        self.assertEqual(parse_int("-3"), -3)
        self.assertEqual(parse_int("+7"), 7)
        for value in [None, "", " 4", "4.0", "1_000", "abc", "٣"]:
            with self.subTest(value=value):
                self.assertIsNone(parse_int(value))

    def test_match_mobilediff_compare(self):
        """Test two-revision capture."""
        self.assertEqual(match_mobilediff_compare("MobileDiff/100...200"), (100, 200))
        self.assertEqual(match_mobilediff_compare("mobilediff/1...2"), (1, 2))
        self.assertIsNone(match_mobilediff_compare("MobileDiff/100"))
        self.assertIsNone(match_mobilediff_compare("MobileDiff/abc...2"))

    def test_match_mobilediff_single(self):
        """Test single revision capture, which also matches compare titles."""
        self.assertEqual(match_mobilediff_single("MobileDiff/100"), 100)
        self.assertEqual(match_mobilediff_single("MobileDiff/100...200"), 100)
        self.assertIsNone(match_mobilediff_single("Diff/100"))

    def test_match_history(self):
        """Test history title capture and normalization."""
        self.assertEqual(match_history("History/Albert_Einstein"), "Albert Einstein")
        self.assertEqual(match_history("history/Café"), "Café")
        self.assertEqual(match_history("History/100%25_Pure"), "100%25 Pure")
        self.assertIsNone(match_history("History/"))
        self.assertIsNone(match_history("Random"))


class TestRuleOrder(unittest.TestCase):
    """Test suite for the order of rule lists."""

    def test_special_page_rule_order(self):
        """Test that compare is tried before single."""
        names = [rule.name for rule in SPECIAL_PAGE_RULES]
        self.assertEqual(names, ["mobilediff_compare", "mobilediff_single", "history"])

    def test_legacy_query_rule_order(self):
        """Test the precedence of index.php query rules."""
        names = [rule.name for rule in LEGACY_QUERY_RULES]
        self.assertEqual(names, [
            "search",
            "paged_history",
            "history",
            "revision_compare",
            "diff_prev",
            "diff_next",
            "single_revision",
        ])

    def test_rules_after_search_require_title(self):
        """Test that every rule except search needs a title."""
        for rule in LEGACY_QUERY_RULES[1:]:
            with self.subTest(rule=rule.name):
                self.assertIn("title", rule.required_params)


class TestQueryRules(unittest.TestCase):
    """Test suite for individual query rules."""

    def setUp(self):
        """Set up test fixtures."""
        self.url = "https://en.wikipedia.org/w/index.php"
        self.rules = {rule.name: rule for rule in LEGACY_QUERY_RULES}

    def test_missing_required_param_declines(self):
        """Test that rules decline when a required parameter is absent."""
        rule = QueryRule(name="t", required_params=("a", "b"), build=lambda url, params: Search(url))
        self.assertIsNone(rule.apply(self.url, {"a": "1"}))
        self.assertEqual(rule.apply(self.url, {"a": "1", "b": "2"}), Search(self.url))

    def test_search(self):
        """Test that the search term is carried through."""
        self.assertEqual(
            self.rules["search"].apply(self.url, {"search": "cats"}),
            Search(self.url, term="cats"),
        )

    def test_paged_history_matches_history(self):
        """Test that paged history gives the same destination as history."""
        params = {"title": "Cat", "action": "history", "limit": "50", "dir": "prev"}
        expected = ArticleHistory(self.url, article_title="Cat")
        self.assertEqual(self.rules["paged_history"].apply(self.url, params), expected)
        self.assertEqual(self.rules["history"].apply(self.url, params), expected)

    def test_history_requires_history_action(self):
        """Test that other actions are not history."""
        params = {"title": "Cat", "action": "edit"}
        self.assertIsNone(self.rules["history"].apply(self.url, params))

    def test_revision_compare(self):
        """Test that oldid is the older revision and diff the newer one."""
        params = {"title": "Cat", "type": "revision", "diff": "200", "oldid": "100"}
        self.assertEqual(
            self.rules["revision_compare"].apply(self.url, params),
            ArticleDiffCompare(self.url, from_rev_id=100, to_rev_id=200),
        )

    def test_revision_compare_requires_integers(self):
        """Test that non-numeric revisions decline."""
        params = {"title": "Cat", "type": "revision", "diff": "cur", "oldid": "100"}
        self.assertIsNone(self.rules["revision_compare"].apply(self.url, params))


if __name__ == "__main__":
    unittest.main()
