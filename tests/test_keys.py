"""Tests for the key namespace."""

import pytest

from shmenu_lib.script.keys import (
    ancestor_keys,
    child_key,
    is_root_key,
    name_from_key,
    normalize_token,
    parent_key,
)


class TestParentKey:

    def test_strips_last_segment(self):
        assert parent_key("deploy.production.web") == "deploy.production"

    def test_one_level_below_root(self):
        assert parent_key("deploy.staging") == "deploy"

    def test_root_has_no_parent(self):
        with pytest.raises(ValueError, match="no parent"):
            parent_key("deploy")


class TestNameFromKey:

    def test_last_segment(self):
        assert name_from_key("deploy.production.web") == "web"

    def test_root(self):
        assert name_from_key("deploy") == "deploy"


class TestChildKey:

    def test_appends_token(self):
        assert child_key("deploy", "staging") == "deploy.staging"

    def test_whitespace_is_normalized(self):
        assert child_key("git", "remote branch") == "git.remote_branch"

    def test_runs_of_whitespace_collapse(self):
        assert normalize_token("one   two\tthree") == "one_two_three"

    @pytest.mark.parametrize("key", [
        "deploy.staging",
        "deploy.production.web",
        "git.remote_branch",
    ])
    def test_round_trip(self, key):
        assert child_key(parent_key(key), name_from_key(key)) == key


class TestAncestors:

    def test_walks_up_to_root(self):
        assert list(ancestor_keys("a.b.c")) == ["a.b.c", "a.b", "a"]

    def test_root_only(self):
        assert list(ancestor_keys("a")) == ["a"]

    def test_is_root_key(self):
        assert is_root_key("a")
        assert not is_root_key("a.b")
