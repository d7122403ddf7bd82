# src/codequill/models.py
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

@dataclass(frozen=True)
class FilterResult:
    """Partition of the tracked files into included and excluded paths."""
    included: List[str]
    excluded: List[str] = field(default_factory=list)

    @property
    def excluded_count(self) -> int:
        return len(self.excluded)

@dataclass(frozen=True)
class BundleEntry:
    """Immutable pairing of a tracked path with its decoded text."""
    rel_path: str
    content: str
    token_count: Optional[int] = None

    def render(self) -> str:
        return f"{self.rel_path}\n{self.content}"

@dataclass(frozen=True)
class BundleResult:
    output_file: Path
    entries: List[BundleEntry]
    skipped: List[str]
    excluded_count: int
