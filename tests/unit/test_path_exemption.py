"""Tests for ignorePaths file exemption."""

from __future__ import annotations

import pytest

from brandplan.lint.path_exemption import (
    UNKNOWN_FILENAMES,
    glob_match,
    is_exempt,
    is_unknown_filename,
    normalize_path,
)


class TestGlobMatch:
    @pytest.mark.parametrize(
        ("path", "pattern"),
        [
            ("/project/components/ui/button.tsx", "**/components/ui/**"),
            ("/project/src/components/ui/card.tsx", "src/components/ui/**"),
            ("/project/src/test.ignore.tsx", "**/*.ignore.tsx"),
            ("/project/src/button.shadcn.tsx", "**/*.shadcn.tsx"),
            ("src/app/page.tsx", "src/**"),
            ("src/app/page.tsx", "./src/**/*.tsx"),
            ("/project/app/page.tsx", "/project/**"),
            ("/a/b.tsx", "*.tsx"),
            ("components/ui/x.tsx", "components/ui/[xy].tsx"),
        ],
    )
    def test_matches(self, path: str, pattern: str):
        assert glob_match(path, pattern)

    @pytest.mark.parametrize(
        ("path", "pattern"),
        [
            ("/project/components/Button.tsx", "**/components/ui/**"),
            ("/project/src/pages/index.tsx", "src/components/ui/**"),
            ("/project/other/x.tsx", "/other/**"),
            ("/project/src/app/page.tsx", "src/*.tsx"),
            ("/project/src/page.jsx", "**/*.tsx"),
        ],
    )
    def test_does_not_match(self, path: str, pattern: str):
        assert not glob_match(path, pattern)

    def test_double_star_matches_zero_segments(self):
        assert glob_match("components/ui/x.tsx", "components/**/ui/x.tsx")

    def test_single_star_stays_in_segment(self):
        assert not glob_match("src/a/b.tsx", "src/*")


class TestIsExempt:
    def test_empty_patterns_never_exempt(self):
        assert not is_exempt("/project/components/ui/button.tsx", [])

    @pytest.mark.parametrize("filename", sorted(UNKNOWN_FILENAMES) + [None])
    def test_unknown_filename_never_exempt(self, filename: str | None):
        assert not is_exempt(filename, ["**/*"])

    def test_matching_path(self):
        assert is_exempt("/project/components/ui/button.tsx", ["**/components/ui/**"])

    def test_any_pattern_matches(self):
        assert is_exempt("/p/src/x.shadcn.tsx", ["**/ui/**", "**/*.shadcn.tsx"])

    def test_windows_separators(self):
        assert is_exempt("C:\\project\\components\\ui\\button.tsx", ["**/components/ui/**"])

    def test_custom_matcher(self):
        calls: list[tuple[str, list[str]]] = []

        def matcher(path, patterns):
            calls.append((path, list(patterns)))
            return True

        assert is_exempt("a\\b.tsx", ["x"], matcher=matcher)
        assert calls == [("a/b.tsx", ["x"])]


class TestHelpers:
    def test_normalize_path(self):
        assert normalize_path("a\\b\\c.tsx") == "a/b/c.tsx"

    def test_is_unknown_filename(self):
        assert is_unknown_filename("<input>")
        assert is_unknown_filename("  ")
        assert not is_unknown_filename("input.tsx")
