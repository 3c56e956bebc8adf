"""Unit tests for fuzzy menu matching."""
from types import SimpleNamespace

import pytest

from jarvis.services.menu.base import MenuItem
from jarvis.services.ordering.matcher import fuzzy_match_item, token_overlap_score
from jarvis.services.ordering.models import MatchTier


def make_menu(*names):
    """Menu items with the given names, in order."""
    return [MenuItem(name=name, price=10, quantity=5) for name in names]


class TestMatchTiers:
    """Test each matching tier and their order."""

    def test_exact_beats_partial(self):
        """An exact name wins even when a longer name also contains the query."""
        for menu in (make_menu("Tea", "Masala Tea"), make_menu("Masala Tea", "Tea")):
            result = fuzzy_match_item("tea", menu)

            assert result.resolved
            assert result.item.name == "Tea"
            assert result.tier == MatchTier.EXACT

    def test_exact_match_is_case_insensitive(self):
        """Case does not matter for exact matches."""
        result = fuzzy_match_item("  TEA ", make_menu("Masala Tea", "Tea"))

        assert result.item.name == "Tea"
        assert result.tier == MatchTier.EXACT

    def test_prefix_beats_contains(self):
        """A name starting with the query wins over one merely containing it."""
        result = fuzzy_match_item("veg", make_menu("Paneer Veg Roll", "Veg Momos"))

        assert result.item.name == "Veg Momos"
        assert result.tier == MatchTier.PREFIX

    def test_contains(self):
        """A name containing the query matches."""
        result = fuzzy_match_item("momos", make_menu("Samosa", "Veg Momos"))

        assert result.item.name == "Veg Momos"
        assert result.tier == MatchTier.CONTAINS

    def test_reverse_contains(self):
        """An over-specified query containing a menu name matches that item."""
        result = fuzzy_match_item("extra spicy veg momos", make_menu("Samosa", "Veg Momos"))

        assert result.item.name == "Veg Momos"
        assert result.tier == MatchTier.REVERSE_CONTAINS

    def test_first_item_wins_within_a_tier(self):
        """Within one tier the first item in menu order is returned."""
        result = fuzzy_match_item("dosa", make_menu("Plain Dosa", "Masala Dosa"))

        assert result.item.name == "Plain Dosa"


class TestTokenOverlap:
    """Test the token-overlap tier."""

    def test_overlap_above_threshold_matches(self):
        """'masala dosa' shares one of two tokens with 'Plain Dosa' (0.5)."""
        result = fuzzy_match_item("masala dosa", make_menu("Plain Dosa"))

        assert result.resolved
        assert result.item.name == "Plain Dosa"
        assert result.tier == MatchTier.TOKEN_OVERLAP
        assert result.score == pytest.approx(0.5)

    def test_no_overlap_is_unresolved(self):
        """A query sharing nothing with the menu is unresolved."""
        result = fuzzy_match_item("pizza", make_menu("Plain Dosa"))

        assert not result.resolved
        assert result.item is None
        assert result.tier is None

    def test_overlap_below_threshold_is_unresolved(self):
        """One of three tokens (0.33) is not enough."""
        result = fuzzy_match_item("paneer butter masala", make_menu("Masala Dosa"))

        assert not result.resolved

    def test_ties_keep_first_item(self):
        """Equal scores keep the item that appears first on the menu."""
        result = fuzzy_match_item("masala dosa", make_menu("Masala Tea", "Plain Dosa"))

        assert result.item.name == "Masala Tea"
        assert result.score == pytest.approx(0.5)

    def test_best_score_wins(self):
        """The highest-scoring item is chosen across the whole menu."""
        result = fuzzy_match_item(
            "cheese masala dosa", make_menu("Plain Dosa", "Masala Dosa Combo")
        )

        assert result.item.name == "Masala Dosa Combo"
        assert result.score == pytest.approx(2 / 3)

    def test_token_overlap_score(self):
        """Partial tokens count when one contains the other."""
        assert token_overlap_score("masala dosa", "Plain Dosa") == pytest.approx(0.5)
        assert token_overlap_score("momo", "Veg Momos") == pytest.approx(0.5)
        assert token_overlap_score("pizza", "Plain Dosa") == 0.0
        assert token_overlap_score("", "Plain Dosa") == 0.0


class TestUnresolved:
    """Test explicit no-match results."""

    def test_empty_menu(self):
        """Nothing matches an empty menu."""
        result = fuzzy_match_item("tea", [])

        assert not result.resolved
        assert result.query == "tea"

    def test_blank_query(self):
        """A blank name never matches."""
        assert not fuzzy_match_item("   ", make_menu("Tea")).resolved

    def test_any_object_with_a_name(self):
        """The matcher only reads the name attribute."""
        menu = [SimpleNamespace(name="Cold Coffee", id="c1"), SimpleNamespace(name="Tea", id="t1")]

        result = fuzzy_match_item("coffee", menu)

        assert result.item.id == "c1"
