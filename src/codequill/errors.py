# src/codequill/errors.py
"""Error taxonomy for codequill.

Everything except FileReadError is fatal for a run and reaches the CLI
unchanged. FileReadError is recovered per file inside the bundler.
"""
from pathlib import Path
from typing import Optional


class CodequillError(Exception): ...
class NotARepositoryError(CodequillError): ...
class VcsExecutionError(CodequillError): ...


class IgnoreFileReadError(CodequillError):
    def __init__(self, path: Path, reason: str):
        super().__init__(reason)
        self.path = path


class FileReadError(CodequillError):
    def __init__(self, rel_path: str, reason: str):
        super().__init__(f"{rel_path}: {reason}")
        self.rel_path = rel_path
        self.reason = reason


class OutputWriteError(CodequillError):
    def __init__(self, path: Path, reason: str, cause: Optional[BaseException] = None):
        super().__init__(reason)
        self.path = path
        self.cause = cause
