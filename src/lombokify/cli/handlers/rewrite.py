"""
Rewrite Command Handler.

Implements the file driver behind the `lombokify` command:
1. Configuration loading (pyproject.toml + CLI overrides).
2. Discovery of regular files under the root path.
3. Parallel per-file rewriting via a thread pool.
4. Write-back and a batch summary.

Files are independent: a failure on one (I/O, decoding, parse error) is logged
with its path and traceback and never stops the others.
"""

import concurrent.futures
from pathlib import Path
from typing import Dict, List, Optional

from rich.markup import escape
from rich.table import Table

from lombokify.config import RuntimeConfig
from lombokify.core.conversion_result import RewriteResult
from lombokify.core.engine import LombokEngine
from lombokify.utils.console import console, log_error, log_info, log_success, log_warning


def handle_rewrite(
  root: Path,
  workers: Optional[int] = None,
  include: Optional[List[str]] = None,
  dry_run: Optional[bool] = None,
) -> int:
  """
  Handles the rewrite command execution.

  Args:
      root: Directory to walk, or a single file.
      workers: Override for the thread pool size.
      include: Override for the file name glob patterns.
      dry_run: If True, report what would change without writing.

  Returns:
      int: Exit code (0 if every file was processed, 1 otherwise).
  """
  if not root.exists():
    log_error(f"Input not found: {escape(str(root))}")
    return 1

  config = RuntimeConfig.load(
    workers=workers,
    include=include,
    dry_run=dry_run,
    search_path=root if root.is_dir() else root.parent,
  )

  files = discover_files(root, config)
  if not files:
    log_warning(f"No files found in {escape(str(root))}")
    return 0

  results = run_batch(files, config)
  _print_batch_summary(results, config.dry_run)

  return 0 if all(r.success for r in results.values()) else 1


def discover_files(root: Path, config: RuntimeConfig) -> List[Path]:
  """
  Lists the regular files to process.

  Args:
      root: A directory (walked recursively) or a single file (taken as-is).
      config: Supplies the include patterns.

  Returns:
      List[Path]: Matching files, sorted for a stable submission order.
  """
  if root.is_file():
    return [root]
  return sorted(p for p in root.rglob("*") if p.is_file() and config.matches(p))


def run_batch(files: List[Path], config: RuntimeConfig) -> Dict[str, RewriteResult]:
  """
  Rewrites files in parallel. Completion order is not guaranteed.

  Returns:
      Dict[str, RewriteResult]: Results keyed by file path.
  """
  engine = LombokEngine(config=config)
  results: Dict[str, RewriteResult] = {}

  with concurrent.futures.ThreadPoolExecutor(max_workers=config.workers) as executor:
    futures = {executor.submit(_rewrite_single_file, path, engine, config.dry_run): path for path in files}
    for future in concurrent.futures.as_completed(futures):
      results[str(futures[future])] = future.result()

  return results


def _rewrite_single_file(path: Path, engine: LombokEngine, dry_run: bool = False) -> RewriteResult:
  """
  Reads, rewrites and writes back a single file.

  The file's newline convention is preserved by reading and writing with
  newline translation disabled. A file whose rewrite is unchanged is not
  written.

  Args:
      path: File to process.
      engine: Shared engine.
      dry_run: If True, never write.

  Returns:
      RewriteResult: Outcome for this file; failures are captured, not raised.
  """
  log_info(f">>> [path]{escape(str(path))}[/path]")
  try:
    with open(path, "rt", encoding="utf-8", newline="") as f:
      code = f.read()

    result = engine.run(code)
    if not result.success:
      log_error(f"Failed to parse [path]{escape(str(path))}[/path]: {escape('; '.join(result.errors))}")
      return result

    if result.changed and not dry_run:
      with open(path, "wt", encoding="utf-8", newline="") as f:
        f.write(result.code)

    return result
  except (OSError, UnicodeError) as e:
    log_error(f"I/O failure on [path]{escape(str(path))}[/path]: {escape(str(e))}", exc_info=True)
    return RewriteResult(success=False, errors=[str(e)])
  except Exception as e:
    log_error(f"Failed to rewrite [path]{escape(str(path))}[/path]: {escape(str(e))}", exc_info=True)
    return RewriteResult(success=False, errors=[str(e)])


def _print_batch_summary(results: Dict[str, RewriteResult], dry_run: bool = False) -> None:
  """
  Renders a summary of the batch to the console.

  Args:
      results: Dictionary mapping file paths to rewrite results.
      dry_run: Words the summary as a forecast when True.
  """
  total = len(results)
  failures = {name: r for name, r in results.items() if not r.success}
  changed = sum(1 for r in results.values() if r.success and r.changed)
  removed = sum(r.removed_count for r in results.values() if r.success)

  verb = "would be rewritten" if dry_run else "rewritten"
  if not failures:
    log_success(f"Batch Complete: {changed}/{total} files {verb}, {removed} members replaced.")
    return

  table = Table(title="Rewrite Report")
  table.add_column("File", style="cyan")
  table.add_column("Issues", style="red")
  for filename in sorted(failures):
    res = failures[filename]
    table.add_row(escape(filename), escape("; ".join(res.errors)) if res.errors else "Unknown Error")

  console.print(table)
  console.print(f"\n[bold]Summary:[/bold] {changed} {verb}, {len(failures)} failed, {total} total.")
