"""Tests for path resolution and wildcard matching."""

import pytest

from resroute import PathPattern, mask_path, resolve_true_path


class TestResolveTruePath:
    def test_no_prefix_returns_path_unchanged(self) -> None:
        assert resolve_true_path("items/%/thing") == "items/%/thing"
        assert resolve_true_path("items/%/thing", None) == "items/%/thing"

    def test_empty_prefix_returns_path_unchanged(self) -> None:
        assert resolve_true_path("/items/%/thing", "") == "/items/%/thing"

    def test_prefix_slashes_normalized(self) -> None:
        assert resolve_true_path("items/%/thing", "/api/") == "api/items/%/thing"

    def test_leading_slash_stripped_from_path(self) -> None:
        assert resolve_true_path("/items", "api") == "api/items"

    def test_whitespace_trimmed(self) -> None:
        assert resolve_true_path("  /items/%  ", " /api/ ") == "api/items/%"

    def test_nested_prefix(self) -> None:
        assert resolve_true_path("items", "//api/v2//") == "api/v2/items"

    def test_not_idempotent_with_prefix(self) -> None:
        once = resolve_true_path("items", "api")
        assert resolve_true_path(once, "api") == "api/api/items"


class TestMaskPath:
    def test_wildcard_becomes_segment_pattern(self) -> None:
        assert mask_path("items/%/thing") == "^items/[^/]+/thing$"

    def test_no_wildcards(self) -> None:
        assert mask_path("status") == "^status$"


class TestPathPattern:
    def test_single_wildcard_match(self) -> None:
        p = PathPattern("items/%/thing")
        assert p.matches("items/42/thing") is True
        assert p.arguments_for("items/42/thing") == ("42",)

    def test_extra_segment_rejected(self) -> None:
        p = PathPattern("items/%/thing")
        assert p.matches("items/42/43/thing") is False

    def test_empty_segment_rejected(self) -> None:
        p = PathPattern("items/%/thing")
        assert p.matches("items//thing") is False

    def test_substring_does_not_match(self) -> None:
        p = PathPattern("items/%/thing")
        assert p.matches("api/items/42/thing") is False
        assert p.matches("items/42/thing/more") is False

    def test_trailing_slash_does_not_match(self) -> None:
        p = PathPattern("items/%")
        assert p.matches("items/42/") is False

    def test_trailing_newline_does_not_match(self) -> None:
        p = PathPattern("items/%/thing")
        assert p.matches("items/42/thing\n") is False
        assert p.arguments_for("items/42/thing\n") == ()

    def test_raw_pattern_matches_itself(self) -> None:
        p = PathPattern("items/%/thing")
        assert p.matches("items/%/thing") is True
        assert p.arguments_for("items/%/thing") == ("%",)

    def test_no_wildcards_matches_only_itself(self) -> None:
        p = PathPattern("status")
        assert p.matches("status") is True
        assert p.matches("status/1") is False
        assert p.matches("statuses") is False
        assert p.arguments_for("status") == ()
        assert p.arguments_for("other") == ()

    def test_multiple_wildcards_preserve_order(self) -> None:
        p = PathPattern("a/%/b/%")
        assert p.arg_indexes == (1, 3)
        assert p.arguments_for("a/1/b/2") == ("1", "2")

    def test_adjacent_wildcards(self) -> None:
        p = PathPattern("%/%")
        assert p.arguments_for("x/y") == ("x", "y")
        assert p.matches("x") is False

    def test_non_match_yields_no_arguments(self) -> None:
        p = PathPattern("items/%/thing")
        assert p.arguments_for("totally/unrelated") == ()

    def test_partial_percent_is_literal(self) -> None:
        p = PathPattern("a%b/%")
        assert p.arg_indexes == (1,)
        assert p.matches("a%b/1") is True
        assert p.matches("axb/1") is False

    @pytest.mark.parametrize(
        ("path", "literal", "lookalike"),
        [
            ("v1.0/%", "v1.0/x", "v1x0/x"),
            ("a+/%", "a+/x", "aa/x"),
            ("(x)/%", "(x)/y", "x/y"),
            ("[ab]/%", "[ab]/y", "a/y"),
        ],
    )
    def test_metacharacters_are_literal(
        self, path: str, literal: str, lookalike: str
    ) -> None:
        p = PathPattern(path)
        assert p.matches(literal) is True
        assert p.matches(lookalike) is False

    def test_unicode_argument(self) -> None:
        p = PathPattern("items/%/thing")
        assert p.arguments_for("items/café/thing") == ("café",)

    def test_non_string_never_matches(self) -> None:
        p = PathPattern("items/%")
        assert p.matches(None) is False  # type: ignore[arg-type]
        assert p.arguments_for(42) == ()  # type: ignore[arg-type]

    def test_queries_are_repeatable(self) -> None:
        p = PathPattern("items/%/thing")
        first = (p.matches("items/7/thing"), p.arguments_for("items/7/thing"))
        second = (p.matches("items/7/thing"), p.arguments_for("items/7/thing"))
        assert first == second == (True, ("7",))
        assert p == PathPattern("items/%/thing")
