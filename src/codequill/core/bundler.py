# src/codequill/core/bundler.py
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple, Union

from codequill.config import DEFAULT_READ_WORKERS, ENTRY_SEPARATOR
from codequill.core.filter import GlobMatcher, filter_files
from codequill.core.git import list_tracked_files
from codequill.core.patterns import load_patterns
from codequill.errors import CodequillError, FileReadError, OutputWriteError
from codequill.models import BundleEntry, BundleResult
from codequill.reporter import NullReporter, Reporter
from codequill.utils.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


def resolve_output_path(project_dir: Path, output: Union[str, Path]) -> Path:
    """Relative output paths are taken from the project directory, not the CWD."""
    output_path = Path(output)
    if output_path.is_absolute():
        return output_path
    return (project_dir / output_path).resolve()


def read_entry(project_dir: Path, rel_path: str, count_tokens: bool = False) -> BundleEntry:
    try:
        content = (project_dir / rel_path).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise FileReadError(rel_path, str(e)) from e
    tokens = Tokenizer.count(content) if count_tokens else None
    return BundleEntry(rel_path=rel_path, content=content, token_count=tokens)


def read_entries(
    project_dir: Path,
    rel_paths: Sequence[str],
    reporter: Optional[Reporter] = None,
    workers: int = DEFAULT_READ_WORKERS,
    count_tokens: bool = False,
) -> Tuple[List[BundleEntry], List[str]]:
    """
    Reads every path concurrently and returns (entries, skipped).
    Entries keep the order of rel_paths whatever order the reads finish in.
    An unreadable file is reported and skipped, never fatal.
    """
    reporter = reporter or NullReporter()

    def _attempt(rel_path: str) -> Union[BundleEntry, FileReadError]:
        try:
            return read_entry(project_dir, rel_path, count_tokens)
        except FileReadError as e:
            return e

    with ThreadPoolExecutor(max_workers=max(1, workers)) as pool:
        outcomes = list(pool.map(_attempt, rel_paths))

    entries: List[BundleEntry] = []
    skipped: List[str] = []
    for outcome in outcomes:
        if isinstance(outcome, FileReadError):
            logger.debug("Read failed: %s", outcome)
            reporter.warn(f"Skipping unreadable file: {outcome.rel_path}")
            skipped.append(outcome.rel_path)
        else:
            entries.append(outcome)
    return entries, skipped


def concatenate(entries: Sequence[BundleEntry]) -> str:
    return ENTRY_SEPARATOR.join(entry.render() for entry in entries)


def write_bundle(output_file: Path, text: str) -> None:
    try:
        with open(output_file, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        raise OutputWriteError(output_file, str(e), e) from e


def bundle(
    project_dir: Union[str, Path],
    output: Union[str, Path],
    cli_ignore: Optional[str] = "",
    *,
    reporter: Optional[Reporter] = None,
    list_files: Callable[[Path], List[str]] = list_tracked_files,
    matcher: Optional[GlobMatcher] = None,
    workers: int = DEFAULT_READ_WORKERS,
    count_tokens: bool = False,
) -> Optional[BundleResult]:
    """
    Bundles the git-tracked files of project_dir into a single text file.

    Steps run strictly in order: list tracked files, load and normalize
    ignore patterns, filter, read, concatenate, write. Returns None
    without writing anything when git tracks no files. Fatal errors
    propagate as CodequillError subclasses.
    """
    reporter = reporter or NullReporter()
    project_dir = Path(project_dir).resolve()
    output_file = resolve_output_path(project_dir, output)

    try:
        reporter.start("Scanning git repository for tracked files...")
        tracked = list_files(project_dir)
        if not tracked:
            reporter.warn("No git-tracked files found.")
            return None
        reporter.succeed(f"Found {len(tracked)} tracked files.")

        reporter.start("Applying ignore rules...")
        patterns = load_patterns(project_dir, cli_ignore)
        if not patterns:
            reporter.info("No custom ignore rules to apply.")

        result = filter_files(tracked, patterns, matcher)
        if result.excluded_count > 0:
            reporter.succeed(
                f"Applied ignore rules. {result.excluded_count} file(s) will be excluded."
            )

        reporter.start(f"Reading {len(result.included)} files and crafting the prompt...")
        entries, skipped = read_entries(
            project_dir, result.included, reporter, workers, count_tokens
        )

        write_bundle(output_file, concatenate(entries))
    except CodequillError:
        reporter.fail("A critical error occurred.")
        raise

    reporter.succeed("Successfully crafted the context file!")
    return BundleResult(
        output_file=output_file,
        entries=entries,
        skipped=skipped,
        excluded_count=result.excluded_count,
    )
