"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console capture so tests can assert on rendered log output.
- Small helpers for writing Java fixtures to disk.
"""

import io
import sys
import textwrap
from pathlib import Path

import pytest
from rich.console import Console

# Add src to path so we can import 'lombokify' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from lombokify.utils.console import reset_console, set_console  # noqa: E402


@pytest.fixture
def captured_console():
  """
  Redirects the global console (and logging) into a string buffer.

  Yields:
      io.StringIO: The buffer receiving all console output.
  """
  buffer = io.StringIO()
  set_console(Console(file=buffer, width=400, force_terminal=False, color_system=None))
  yield buffer
  reset_console()


@pytest.fixture
def java_file(tmp_path):
  """
  Factory writing dedented Java source to a file under tmp_path.
  """

  def _write(name: str, code: str) -> Path:
    path = tmp_path / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(code).lstrip("\n"), encoding="utf-8")
    return path

  return _write
