from .rewrite import handle_rewrite, discover_files, run_batch, _rewrite_single_file, _print_batch_summary

__all__ = [
  "_print_batch_summary",
  "_rewrite_single_file",
  "discover_files",
  "handle_rewrite",
  "run_batch",
]
