# src/codequill/reporter.py
import sys
from typing import Protocol


class Reporter(Protocol):
    """Receives progress events from the bundling pipeline."""
    def start(self, message: str) -> None: ...
    def succeed(self, message: str) -> None: ...
    def info(self, message: str) -> None: ...
    def warn(self, message: str) -> None: ...
    def fail(self, message: str) -> None: ...


class NullReporter:
    def start(self, message: str) -> None:
        pass

    def succeed(self, message: str) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def warn(self, message: str) -> None:
        pass

    def fail(self, message: str) -> None:
        pass


class ConsoleReporter:
    """Plain line-oriented terminal output."""

    def start(self, message: str) -> None:
        print(f"  ... {message}")

    def succeed(self, message: str) -> None:
        print(f"  [OK] {message}")

    def info(self, message: str) -> None:
        print(f"  [i] {message}")

    def warn(self, message: str) -> None:
        print(f"  > [Warning] {message}", file=sys.stderr)

    def fail(self, message: str) -> None:
        print(f"  [FAIL] {message}", file=sys.stderr)
