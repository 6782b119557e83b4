"""
Exception hierarchy for lombokify.

All errors raised deliberately by the package derive from `LombokifyError`
so callers at the file boundary can tell them apart from unexpected crashes.
"""

from typing import Optional


class LombokifyError(Exception):
  """Base class for every error raised by lombokify."""


class ParseError(LombokifyError):
  """
  Raised when source text is not valid Java.

  Attributes:
      line (Optional[int]): 1-based line of the first syntax error, if known.
      column (Optional[int]): 1-based column of the first syntax error, if known.
  """

  def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
    self.line = line
    self.column = column
    if line is not None:
      message = f"{message} (line {line}, column {column})"
    super().__init__(message)


class LombokifyConfigError(LombokifyError, ValueError):
  """Raised when the `[tool.lombokify]` settings cannot be validated."""
