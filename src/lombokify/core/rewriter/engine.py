"""
Scoped Rewrite Engine.

Walks a `SyntaxTree` depth-first. For every type declaration it:

1.  Opens a fresh `ScopeAccumulator`.
2.  Classifies each direct constructor and method, recording matches.
3.  Recurses into nested types, which get their own accumulator.
4.  Removes the matched members in a separate edit pass.
5.  Attaches the accumulated markers to the type and the imports to the file.

Nested types share only the file-level import set with their parent; their
markers and deletions stay with them.
"""

import logging
from typing import List

from lombokify.core.conversion_result import TypeReport
from lombokify.core.rewriter.classifiers import classify_member
from lombokify.core.rewriter.scope import ScopeAccumulator
from lombokify.core.syntax.nodes import MemberNode, SyntaxTree, TypeDeclaration
from lombokify.enums import MemberKind

logger = logging.getLogger(__name__)


class LombokRewriter:
  """
  Replaces boilerplate members with Lombok markers, in place.

  The rewriter holds no per-file state; one instance may serve many trees.
  """

  def rewrite(self, tree: SyntaxTree) -> List[TypeReport]:
    """
    Rewrites every type in the tree.

    Args:
        tree (SyntaxTree): The parsed compilation unit. Mutated in place.

    Returns:
        List[TypeReport]: One report per visited type, outer types first.
    """
    reports: List[TypeReport] = []
    for decl in tree.types:
      self._visit_type(decl, tree, reports)
    return reports

  def _visit_type(self, decl: TypeDeclaration, tree: SyntaxTree, reports: List[TypeReport]) -> None:
    report = TypeReport(name=decl.name, kind=decl.kind.value)
    reports.append(report)

    scope = ScopeAccumulator()
    field_count = decl.field_count
    matched: List[MemberNode] = []

    for member in decl.members:
      if member.kind == MemberKind.NESTED_TYPE:
        if member.nested is not None:
          self._visit_type(member.nested, tree, reports)
        continue

      match = classify_member(member, field_count)
      if match is None:
        continue

      logger.debug(f"{decl.name}.{member.name}: matched {match.marker}")
      scope.record(match)
      matched.append(member)

    for member in matched:
      decl.remove_member(member)

    for marker in scope.markers:
      decl.add_marker(marker)
    for import_name in scope.imports:
      tree.add_import(import_name)

    report.markers = scope.markers
    report.removed = [m.name or "" for m in matched]
