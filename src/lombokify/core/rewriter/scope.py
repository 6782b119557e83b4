"""
Per-Type Scope Accumulator.

Collects the distinct markers and imports implied by the matched members of a
single type declaration during one pass over its direct members.
"""

from typing import Dict, List

from lombokify.core.rewriter.classifiers import Match


class ScopeAccumulator:
  """
  Ordered, de-duplicated marker and import sets for one type.

  Insertion order is kept only so output is deterministic.
  """

  def __init__(self) -> None:
    self._markers: Dict[str, None] = {}
    self._imports: Dict[str, None] = {}

  def record(self, match: Match) -> None:
    self._markers.setdefault(match.marker, None)
    self._imports.setdefault(match.import_name, None)

  @property
  def markers(self) -> List[str]:
    return list(self._markers)

  @property
  def imports(self) -> List[str]:
    return list(self._imports)
