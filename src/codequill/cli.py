# src/codequill/cli.py
import sys
import argparse
import logging
from pathlib import Path
from typing import List, Optional

# Module imports
from codequill.config import DEFAULT_OUTPUT, __version__
from codequill.core.bundler import bundle, resolve_output_path
from codequill.errors import CodequillError
from codequill.models import BundleResult
from codequill.reporter import ConsoleReporter

TOP_FILES = 5

def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog="codequill",
        description="A tool to bundle git-tracked files into a single prompt file for LLMs."
    )
    parser.add_argument("project_dir", metavar="project-dir", type=str, nargs="?", default=".",
                        help="The source project directory to scan")
    parser.add_argument("-o", "--output", type=str, default=DEFAULT_OUTPUT,
                        help=f"The name of the output file (default: {DEFAULT_OUTPUT})")
    parser.add_argument("-i", "--ignore", type=str, default="",
                        help="Comma-separated list of files/patterns to ignore")
    parser.add_argument("-t", "--tokens", action="store_true",
                        help="Report an estimated token count for the bundle")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}",
                        help="Output the current version")
    return parser

def print_token_report(result: BundleResult):
    ranked = sorted(result.entries, key=lambda e: e.token_count or 0, reverse=True)
    total_tokens = sum(e.token_count or 0 for e in result.entries)

    print(f"\n--- Top {TOP_FILES} Largest Files (Est. Tokens) ---")
    print(f"{'Rank':<5} | {'Tokens':<10} | {'File Path'}")
    print("-" * 60)
    for i, entry in enumerate(ranked[:TOP_FILES]):
        print(f"{i+1:<5} | {entry.token_count or 0:<10} | {entry.rel_path}")
    print("-" * 60)
    print(f"Total files: {len(result.entries)}")
    print(f"Total tokens: {total_tokens}")
    print("-" * 60)

def main(argv: Optional[List[str]] = None):
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args(argv)

        if args.verbose:
            logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

        root_dir = Path(args.project_dir).resolve()
        if not root_dir.is_dir():
            print(f"Error: Invalid directory '{root_dir}'", file=sys.stderr)
            sys.exit(1)

        output_file = resolve_output_path(root_dir, args.output)

        print("--- codequill ---")
        print(f"Source Directory: {root_dir}")
        print(f"Output File:      {output_file}\n")

        # 2. Bundle
        try:
            result = bundle(
                root_dir,
                output_file,
                args.ignore,
                reporter=ConsoleReporter(),
                count_tokens=args.tokens,
            )
        except CodequillError as e:
            print(f"\nError: {e}", file=sys.stderr)
            sys.exit(1)

        if result is None:
            return

        # 3. Stats
        if args.tokens:
            print_token_report(result)

        print(f"\nDone! Your prompt is ready at: {result.output_file}")

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
