# tests/test_filter.py
import fnmatch

import pytest

from codequill.core.filter import PathSpecMatcher, filter_files
from codequill.core.patterns import normalize_pattern

TRACKED = ["index.js", "temp.log", "server/db.lock", "docs/guide.md"]

def normalized(*raw):
    return [normalize_pattern(p) for p in raw]

def test_ignore_file_scenario():
    result = filter_files(TRACKED, normalized("*.log", "*.lock", "docs/"))
    assert result.included == ["index.js"]
    assert result.excluded == ["temp.log", "server/db.lock", "docs/guide.md"]
    assert result.excluded_count == 3

def test_cli_directory_scenario():
    result = filter_files(TRACKED, normalized("server/"))
    assert result.included == ["index.js", "temp.log", "docs/guide.md"]

def test_no_patterns_is_identity():
    result = filter_files(TRACKED, [])
    assert result.included == TRACKED
    assert result.included is not TRACKED
    assert result.excluded_count == 0

@pytest.mark.parametrize("patterns", [
    [],
    ["*.log"],
    ["docs/", "index.js"],
    ["*"],
    ["nothing-matches-this"],
])
def test_included_plus_excluded_is_everything(patterns):
    result = filter_files(TRACKED, normalized(*patterns))
    assert len(result.included) + result.excluded_count == len(TRACKED)

def test_filtering_is_idempotent():
    patterns = normalized("*.lock", "docs/")
    once = filter_files(TRACKED, patterns)
    twice = filter_files(once.included, patterns)
    assert twice.included == once.included

def test_pattern_order_does_not_change_decision():
    a = filter_files(TRACKED, normalized("*.log", "docs/"))
    b = filter_files(TRACKED, normalized("docs/", "*.log"))
    assert a.included == b.included

# --- Matching semantics ---

def test_single_star_stays_within_segment():
    matcher = PathSpecMatcher()
    assert matcher.matches("src/app.js", "src/*.js")
    assert not matcher.matches("src/lib/app.js", "src/*.js")
    assert matcher.matches("src/lib/app.js", "src/**/*.js")

def test_bare_name_matches_at_any_depth():
    result = filter_files(["a.tmp", "x/y/z.tmp", "keep.txt"], normalized("*.tmp"))
    assert result.included == ["keep.txt"]

def test_bare_name_matches_only_that_name():
    tracked = ["index.js", "node_modules", "node_modules/test.js", "test.tmp"]
    result = filter_files(tracked, normalized("node_modules", "*.tmp"))
    assert result.included == ["index.js", "node_modules/test.js"]

def test_only_trailing_slash_hides_a_subtree():
    tracked = ["docs/guide.md", "src/lib/a.js", "src/main.js"]
    assert filter_files(tracked, normalized("docs")).included == tracked
    assert filter_files(tracked, normalized("src/lib")).included == tracked
    assert filter_files(tracked, normalized("src/lib/")).included == ["docs/guide.md", "src/main.js"]

def test_anchored_path_matches_exactly():
    tracked = ["src/main.js", "src/main.js.map", "src/main.jsx"]
    result = filter_files(tracked, normalized("src/main.js"))
    assert result.included == ["src/main.js.map", "src/main.jsx"]

def test_untranslatable_pattern_matches_nothing():
    tracked = ["foo", "a/b", "keep.txt"]
    result = filter_files(tracked, normalized("foo\\", "a/b\\", "*.txt"))
    assert result.included == ["foo", "a/b"]
    assert PathSpecMatcher().matches("foo\\", "**/foo\\") is False

def test_path_with_separator_is_anchored_to_root():
    tracked = ["src/main.js", "lib/src/main.js"]
    result = filter_files(tracked, normalized("src/main.js"))
    assert result.included == ["lib/src/main.js"]

def test_dotfiles_are_matched_by_wildcards():
    tracked = [".env", ".github/workflows/ci.yml", "app.py"]
    assert filter_files(tracked, normalized("*.yml")).included == [".env", "app.py"]
    assert filter_files(tracked, normalized(".github/")).included == [".env", "app.py"]
    assert filter_files(tracked, normalized("*")).included == []

def test_matching_is_case_sensitive():
    result = filter_files(["temp.log", "TEMP.LOG"], normalized("*.log"))
    assert result.included == ["TEMP.LOG"]

def test_custom_matcher_is_used():
    class FnmatchMatcher:
        def __init__(self):
            self.calls = []

        def matches(self, path, pattern):
            self.calls.append((path, pattern))
            return fnmatch.fnmatchcase(path, pattern)

    matcher = FnmatchMatcher()
    result = filter_files(["a.txt", "b.md"], ["*.md"], matcher=matcher)
    assert result.included == ["a.txt"]
    assert ("b.md", "*.md") in matcher.calls
