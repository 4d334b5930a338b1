"""Tests for allow/deny policies."""

import pytest

from wordlists import compile_policy, filter_lists
from wordlists.policy import AcceptAll, parse_policy

LISTS = {"foo": None, "bar": None, "baz": None}


class TestCompile:
    def test_empty_policy_accepts_everything(self):
        matcher = compile_policy([])
        assert isinstance(matcher, AcceptAll)
        for name in ("", "foo", "anything at all"):
            assert matcher(name)

    def test_blank_and_lone_negation_are_ignored(self):
        assert isinstance(compile_policy(["", "  ", "!"]), AcceptAll)

    def test_rules_keep_their_order(self):
        patterns = ["a", "!b", "c*", "!d*", "e?", "!f?"]
        assert compile_policy(patterns).rules() == patterns

    @pytest.mark.parametrize(
        "name, accepted",
        [
            ("a", True),
            ("A", True),
            ("b", False),
            ("B", False),
            ("c", True),
            ("cat", True),
            ("d", False),
            ("dog", False),
            ("ex", True),
            ("e", True),  # falls through to the default policy
            ("exe", True),
            ("fx", False),
            ("f", True),
            ("fxx", True),
            ("zzz", True),
        ],
    )
    def test_first_matching_rule_wins(self, name, accepted):
        matcher = compile_policy(["a", "!b", "c*", "!d*", "e?", "!f?"])
        assert matcher(name) is accepted

    def test_earlier_rule_overrides_later_ones(self):
        assert compile_policy(["a", "!a"])("a")
        assert not compile_policy(["!a", "a"])("a")

    def test_literal_characters_are_escaped(self):
        matcher = compile_policy(["!a.b", "!(x)+"])
        assert matcher("axb")
        assert not matcher("a.b")
        assert not matcher("(x)+")
        assert matcher("xx")

    def test_globs_are_anchored(self):
        matcher = compile_policy(["!ba"])
        assert matcher("bar")
        assert matcher("aba")
        assert not matcher("ba")

    def test_policy_string(self):
        matcher = compile_policy("  bar   !* ")
        assert matcher("bar")
        assert not matcher("foo")
        assert parse_policy(None) == []


class TestFilter:
    def test_default_policy(self):
        assert filter_lists(LISTS, compile_policy([])) == LISTS

    def test_fallback_to_default_policy(self):
        assert filter_lists(LISTS, compile_policy(["!qux"])) == LISTS

    def test_explicitly_accept_anything(self):
        assert filter_lists(LISTS, compile_policy(["*"])) == LISTS

    def test_reject_by_default(self):
        assert filter_lists(LISTS, compile_policy(["bar", "!*"])) == {"bar": None}

    def test_partial_blacklist(self):
        assert filter_lists(LISTS, compile_policy(["!ba?"])) == {"foo": None}

    def test_blacklist(self):
        assert filter_lists(LISTS, compile_policy(["!*", "foo"])) == {}

    def test_keeps_locations_and_order(self):
        lists = {"b": "/x/b.txt", "a": "/y/a.txt", "c": "/z/c.txt"}
        result = filter_lists(lists, compile_policy(["!c"]))
        assert list(result.items()) == [("b", "/x/b.txt"), ("a", "/y/a.txt")]
