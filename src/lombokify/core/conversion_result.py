"""
Data structures representing the output of a rewrite.

This module defines the `RewriteResult` Pydantic model, which encapsulates
the rewritten code, any errors encountered, and a per-type report of what was
replaced.
"""

from typing import List

from pydantic import BaseModel, Field


class TypeReport(BaseModel):
  """
  What happened to one type declaration.
  """

  name: str = Field(description="Simple name of the type.")
  kind: str = Field(default="class", description="class, interface or enum.")
  markers: List[str] = Field(default_factory=list, description="Markers implied by matched members.")
  removed: List[str] = Field(default_factory=list, description="Names of the deleted members.")


class RewriteResult(BaseModel):
  """
  Container for the results of rewriting one source file.
  """

  code: str = Field(default="", description="The rewritten source code.")
  errors: List[str] = Field(default_factory=list, description="List of error messages encountered.")
  success: bool = Field(default=True, description="True if the source parsed and was rewritten.")
  changed: bool = Field(default=False, description="True if the output differs from the input.")
  types: List[TypeReport] = Field(default_factory=list, description="Per-type rewrite report.")

  @property
  def has_errors(self) -> bool:
    """
    Check if the result contains any error messages.

    Returns:
        True if one or more errors are present.
    """
    return len(self.errors) > 0

  @property
  def removed_count(self) -> int:
    return sum(len(t.removed) for t in self.types)
