"""
Syntax Tree Package.

Parsing Java text into the rewriter's node model (`parser`), the model itself
(`nodes`), and printing it back with the original formatting (`printer`).
"""

from lombokify.core.syntax.nodes import (
  Expression,
  ImportDeclaration,
  MemberNode,
  Parameter,
  Statement,
  SyntaxTree,
  TypeDeclaration,
)
from lombokify.core.syntax.parser import JavaParser, parse_source
from lombokify.core.syntax.printer import print_tree

__all__ = [
  "Expression",
  "ImportDeclaration",
  "JavaParser",
  "MemberNode",
  "Parameter",
  "Statement",
  "SyntaxTree",
  "TypeDeclaration",
  "parse_source",
  "print_tree",
]
