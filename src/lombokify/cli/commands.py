"""
CLI Command Handlers Facade.

Re-exports the handlers from `lombokify.cli.handlers` so the entry point and
tests can patch a single module.
"""

from lombokify.cli.handlers.rewrite import (
  handle_rewrite,
  discover_files,
  _rewrite_single_file,
  _print_batch_summary,
)

__all__ = [
  "_print_batch_summary",
  "_rewrite_single_file",
  "discover_files",
  "handle_rewrite",
]
