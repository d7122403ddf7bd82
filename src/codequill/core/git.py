# src/codequill/core/git.py
import logging
import subprocess
from pathlib import Path
from typing import List

from codequill.config import NOT_A_REPO_MARKER
from codequill.errors import NotARepositoryError, VcsExecutionError

logger = logging.getLogger(__name__)


def parse_file_list(output: str) -> List[str]:
    """Splits `git ls-files` output into paths, dropping blank lines."""
    return [line for line in output.split("\n") if line.strip()]


def list_tracked_files(project_dir: Path) -> List[str]:
    """
    Returns the project-relative paths git tracks in project_dir,
    minus anything excluded by the standard git ignore files.
    """
    cmd = ["git", "-C", str(project_dir), "-c", "core.quotePath=false",
           "ls-files", "--exclude-standard"]
    logger.debug("Running: %s", " ".join(cmd))
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, encoding="utf-8")
    except OSError as e:
        raise VcsExecutionError(f"Could not run git: {e}") from e

    if proc.returncode != 0:
        stderr = proc.stderr or ""
        if NOT_A_REPO_MARKER in stderr:
            raise NotARepositoryError(
                "This is not a git repository. CodeQuill requires a git-tracked project."
            )
        detail = stderr.strip() or f"exit status {proc.returncode}"
        raise VcsExecutionError(f"git ls-files failed: {detail}")

    return parse_file_list(proc.stdout)
