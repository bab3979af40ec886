"""
Tests for scope encoding and decoding.
"""

import pytest

from tokenauth.auth.scope import Scope


SCOPE_STR = "a:r:w|p:r:w|we:w:r:edit:something"

SCOPE_ARR = [
    "admin:read",
    "admin:write",
    "posts:read",
    "posts:write",
    "web:write",
    "web:read",
    "web:edit",
    "web:something",
]

VALID_SCOPE = ["admin:read", "admin:write"]


@pytest.fixture
def basic_scope():
    return Scope()


@pytest.fixture
def scope():
    return Scope({
        "read": "r",
        "write": "w",
        "admin": "a",
        "posts": "p",
        "web": "we",
    })


class TestScopeCreate:
    """Test building scope strings"""

    def test_create(self, basic_scope, scope):
        """Rules are abbreviated and merged per resource"""
        assert basic_scope.create(["a:read"]) == "a:r"
        assert scope.create([]) == ""
        assert scope.create(SCOPE_ARR) == SCOPE_STR

    def test_create_with_merged_permissions(self, scope):
        """Rules that already carry several permissions are accepted"""
        assert scope.create([
            "admin:read",
            "admin:write",
            "posts:read:write",
            "web:write",
            "web:read",
            "web:edit:something",
        ]) == SCOPE_STR

    def test_custom_table(self):
        """Custom abbreviations extend the read/write defaults"""
        assert Scope({"admin": "a"}).create(VALID_SCOPE) == "a:r:w"

    def test_non_adjacent_resources_are_not_merged(self):
        """Only consecutive rules for a resource share a group"""
        scope = Scope({"admin": "a"})
        rules = ["admin:read", "posts:read", "admin:write"]

        assert scope.create(rules) == "a:r|posts:r|a:w"
        assert scope.parse(scope.create(rules)) == rules

    def test_unknown_names_pass_through(self, basic_scope):
        assert basic_scope.create(["posts:publish"]) == "posts:publish"


class TestScopeParse:
    """Test reading scope strings"""

    def test_parse(self, basic_scope, scope):
        """Groups expand to one rule per permission"""
        assert basic_scope.parse("a:w") == ["a:write"]
        assert scope.parse("") == []
        assert scope.parse(SCOPE_STR) == SCOPE_ARR

    def test_parse_without_permissions(self, scope):
        """Groups without a permission segment produce no rules"""
        assert scope.parse("invalidstring") == []
        assert scope.parse("invalid|string") == []

    def test_parse_none(self, scope):
        assert scope.parse(None) == []

    def test_round_trip(self):
        """parse(create(rules)) returns rules grouped by resource"""
        scope = Scope({"admin": "a"})
        assert scope.parse(scope.create(VALID_SCOPE)) == VALID_SCOPE
        assert scope.parse("a:r:w") == VALID_SCOPE


class TestScopeHas:
    """Test permission checks"""

    def test_has(self, scope):
        assert scope.has([], VALID_SCOPE) is False
        assert scope.has(SCOPE_ARR, "xxx") is False
        assert scope.has(SCOPE_ARR, VALID_SCOPE) is True
        assert scope.has(SCOPE_ARR, "web:edit") is True

    def test_has_any_of_list(self, scope):
        """A list of permissions matches when any one is present"""
        assert scope.has(["admin:read"], ["posts:write", "admin:read"]) is True
        assert scope.has(["admin:read"], ["posts:write", "admin:write"]) is False

    def test_has_on_parsed_scope(self):
        scope = Scope()
        parsed = scope.parse(scope.create(["admin:read", "admin:write"]))

        assert scope.has(parsed, "admin:read") is True
        assert scope.has([], "x") is False
