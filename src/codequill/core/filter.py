# src/codequill/core/filter.py
import logging
import re
from typing import Dict, Optional, Pattern, Protocol, Sequence

from pathspec.patterns import GitWildMatchPattern

from codequill.models import FilterResult

logger = logging.getLogger(__name__)

# gitwildmatch lets a pattern also match everything below it; plain globs do not
_SUBTREE_SUFFIX = re.compile(r"\(\?:(?:\(\?P<\w+>/\)|/)\.\*\)\?\$$")


class GlobMatcher(Protocol):
    """
    Anything that can answer "does this glob match this path".
    `*` must stay within one path segment, `**` may span several,
    and dotfiles are matched like any other name.
    """
    def matches(self, path: str, pattern: str) -> bool: ...


class PathSpecMatcher:
    """
    GlobMatcher built on pathspec's gitwildmatch translation.

    The translated regex is cut back to plain glob semantics: a pattern
    matches the path it names, and only a trailing `**` reaches into a
    subtree. A pattern pathspec cannot translate matches nothing.
    """

    def __init__(self):
        self._compiled: Dict[str, Optional[Pattern[str]]] = {}

    def _compile(self, pattern: str) -> Optional[Pattern[str]]:
        if pattern in self._compiled:
            return self._compiled[pattern]

        try:
            regex, _ = GitWildMatchPattern.pattern_to_regex(pattern)
        except ValueError as e:
            logger.debug("Ignoring untranslatable pattern %r: %s", pattern, e)
            regex = None

        compiled = re.compile(_SUBTREE_SUFFIX.sub("$", regex)) if regex else None
        self._compiled[pattern] = compiled
        return compiled

    def matches(self, path: str, pattern: str) -> bool:
        compiled = self._compile(pattern)
        return compiled is not None and compiled.match(path) is not None


def filter_files(
    tracked: Sequence[str],
    patterns: Sequence[str],
    matcher: Optional[GlobMatcher] = None,
) -> FilterResult:
    """
    Splits tracked paths into included and excluded, preserving their order.
    A path is excluded as soon as any pattern matches it.
    """
    if not patterns:
        return FilterResult(included=list(tracked), excluded=[])

    matcher = matcher or PathSpecMatcher()
    included = []
    excluded = []
    for path in tracked:
        if any(matcher.matches(path, pattern) for pattern in patterns):
            logger.debug("Excluding %s", path)
            excluded.append(path)
        else:
            included.append(path)

    return FilterResult(included=included, excluded=excluded)
