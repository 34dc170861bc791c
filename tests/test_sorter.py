"""Tests for name sorting."""

import pytest

from insurance.catalog.store import Policy
from insurance.query.sorter import DEFAULT_SORT_ORDER, sort_by_name


def _names(policies):
    return [p.name for p in policies]


def _catalog():
    return [
        Policy(1, "Home Basic"),
        Policy(2, "Auto Plus"),
        Policy(3, None),
        Policy(4, "Home Plus"),
        Policy(5, "Auto Plus"),
    ]


class TestSortByName:
    def test_default_token_is_the_literal_aesc(self):
        assert DEFAULT_SORT_ORDER == "aesc"

    def test_default_sorts_ascending(self):
        assert _names(sort_by_name(_catalog())) == [
            None, "Auto Plus", "Auto Plus", "Home Basic", "Home Plus",
        ]

    @pytest.mark.parametrize("token", ["desc", "DESC", "Desc"])
    def test_desc_is_case_insensitive(self, token):
        assert _names(sort_by_name(_catalog(), token)) == [
            None, "Home Plus", "Home Basic", "Auto Plus", "Auto Plus",
        ]

    @pytest.mark.parametrize("token", ["asc", "aesc", "descending", "", None])
    def test_any_other_token_sorts_ascending(self, token):
        assert sort_by_name(_catalog(), token) == sort_by_name(_catalog(), "asc")

    def test_ties_keep_incoming_order(self):
        asc = [p.id for p in sort_by_name(_catalog(), "asc") if p.name == "Auto Plus"]
        desc = [p.id for p in sort_by_name(_catalog(), "desc") if p.name == "Auto Plus"]
        assert asc == [2, 5]
        assert desc == [2, 5]

    def test_sorting_is_idempotent(self):
        once = sort_by_name(_catalog(), "desc")
        assert sort_by_name(once, "desc") == once

    def test_reversed_ascending_equals_descending_for_named(self):
        named = [Policy(1, "b"), Policy(2, "c"), Policy(3, "a")]
        asc = sort_by_name(named, "asc")
        assert list(reversed(asc)) == sort_by_name(named, "desc")

    def test_comparison_is_case_sensitive(self):
        out = sort_by_name([Policy(1, "apple"), Policy(2, "Banana")])
        assert _names(out) == ["Banana", "apple"]

    def test_input_is_not_mutated(self):
        source = _catalog()
        sort_by_name(source, "desc")
        assert [p.id for p in source] == [1, 2, 3, 4, 5]
