# src/codequill/core/patterns.py
import logging
from enum import Enum
from pathlib import Path
from typing import List, Optional

from codequill.config import IGNORE_FILENAME
from codequill.errors import IgnoreFileReadError

logger = logging.getLogger(__name__)


class PatternKind(Enum):
    """How an ignore-style pattern is rewritten into a plain glob."""
    DIRECTORY = "directory"          # "build/"      -> "build/**"
    BARE_NAME = "bare_name"          # "*.log"       -> "**/*.log"
    ANCHORED_PATH = "anchored_path"  # "src/main.js" -> "src/main.js"


def classify_pattern(pattern: str) -> PatternKind:
    """Classifies an already trimmed pattern."""
    if pattern.endswith("/"):
        return PatternKind.DIRECTORY
    if "/" not in pattern:
        return PatternKind.BARE_NAME
    return PatternKind.ANCHORED_PATH


_REWRITES = {
    PatternKind.DIRECTORY: lambda p: p + "**",
    PatternKind.BARE_NAME: lambda p: "**/" + p,
    PatternKind.ANCHORED_PATH: lambda p: p,
}


def normalize_pattern(raw: str) -> str:
    """
    Converts one ignore-file style pattern into a glob for a non-anchored matcher.

    A trailing slash hides the whole subtree, a pattern without any slash
    matches at any depth, and anything else is a path relative to the
    project root. Never fails; degenerate input yields a degenerate glob.
    """
    pattern = raw.strip()
    return _REWRITES[classify_pattern(pattern)](pattern)


def read_ignore_file(project_dir: Path) -> Optional[str]:
    """
    Returns the text of the project's ignore-file, or None if it does not exist.
    Any other failure to read it raises IgnoreFileReadError.
    """
    ignore_file = project_dir / IGNORE_FILENAME
    try:
        return ignore_file.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        logger.debug("No %s in %s", IGNORE_FILENAME, project_dir)
        return None
    except OSError as e:
        raise IgnoreFileReadError(ignore_file, str(e)) from e


def parse_ignore_lines(content: str) -> List[str]:
    """Keeps every line that is neither blank nor a '#' comment, in file order."""
    patterns = []
    for line in content.split("\n"):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        patterns.append(stripped)
    return patterns


def split_cli_patterns(cli_list: Optional[str]) -> List[str]:
    if not cli_list:
        return []
    return [token.strip() for token in cli_list.split(",") if token.strip()]


def collect_patterns(ignore_content: Optional[str], cli_list: Optional[str]) -> List[str]:
    """Ignore-file patterns first, then CLI patterns, each source in its own order."""
    from_file = parse_ignore_lines(ignore_content) if ignore_content is not None else []
    from_cli = split_cli_patterns(cli_list)
    logger.debug("Collected %d pattern(s) from file, %d from CLI", len(from_file), len(from_cli))
    return from_file + from_cli


def load_patterns(project_dir: Path, cli_list: Optional[str]) -> List[str]:
    """Reads, merges and normalizes every ignore pattern that applies to project_dir."""
    raw_patterns = collect_patterns(read_ignore_file(project_dir), cli_list)
    return [normalize_pattern(p) for p in raw_patterns]
