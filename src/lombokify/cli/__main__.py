"""
Main Entry Point for lombokify CLI.

Parses arguments and dispatches to the rewrite handler in
`lombokify.cli.commands`. Exactly one positional argument, the root path, is
accepted; anything else prints usage to stderr and stops.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.markup import escape

from lombokify import __version__
from lombokify.cli import commands
from lombokify.core.errors import LombokifyConfigError
from lombokify.utils.console import log_error


def build_parser() -> argparse.ArgumentParser:
  parser = argparse.ArgumentParser(
    prog="lombokify",
    description="lombokify: Replace Java boilerplate with Lombok annotations, in place",
  )
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("path", type=Path, help="Root directory to rewrite (or a single file)")
  parser.add_argument("--workers", type=int, default=None, help="Number of worker threads (default: executor decides)")
  parser.add_argument(
    "--include",
    nargs="+",
    default=None,
    help="Glob patterns for file names to process (default: every regular file)",
  )
  parser.add_argument(
    "--dry-run",
    action="store_true",
    default=None,
    help="Report what would change without writing files",
  )
  return parser


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = build_parser()
  args = parser.parse_args(argv)

  try:
    return commands.handle_rewrite(args.path, args.workers, args.include, args.dry_run)
  except LombokifyConfigError as e:
    log_error(escape(str(e)))
    return 1


if __name__ == "__main__":
  sys.exit(main())
