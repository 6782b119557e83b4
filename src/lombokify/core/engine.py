"""
Orchestration Engine for one source file.

`LombokEngine` drives a single rewrite:

1.  **Parse**: Java text -> `SyntaxTree` (tree-sitter).
2.  **Rewrite**: `LombokRewriter` removes boilerplate and requests markers
    and imports.
3.  **Print**: the tree is printed back, preserving every untouched byte.

Parse failures are reported in the returned `RewriteResult` instead of being
raised, so batch callers can keep going.
"""

from typing import Optional

from lombokify.config import RuntimeConfig
from lombokify.core.conversion_result import RewriteResult
from lombokify.core.errors import ParseError
from lombokify.core.rewriter import LombokRewriter
from lombokify.core.syntax import JavaParser, SyntaxTree, print_tree


class LombokEngine:
  """
  The main rewrite unit.

  Holds configuration only. Every call to `run` builds its own parser and
  tree, so one engine can be shared by worker threads.
  """

  def __init__(self, config: Optional[RuntimeConfig] = None):
    """
    Initializes the Engine.

    Args:
        config (RuntimeConfig, optional): The runtime configuration object.
    """
    self.config = config or RuntimeConfig()
    self.rewriter = LombokRewriter()

  def parse(self, code: str) -> SyntaxTree:
    """
    Parses Java source into a `SyntaxTree`.

    Raises:
        ParseError: If the input is not valid Java.
    """
    return JavaParser().parse(code)

  def to_source(self, tree: SyntaxTree) -> str:
    return print_tree(tree)

  def run(self, code: str) -> RewriteResult:
    """
    Parses, rewrites and prints one source string.

    Args:
        code (str): Java source text.

    Returns:
        RewriteResult: The rewritten code or the parse error.
    """
    try:
      tree = self.parse(code)
    except ParseError as e:
      return RewriteResult(code=code, success=False, errors=[str(e)])

    reports = self.rewriter.rewrite(tree)
    output = self.to_source(tree) if tree.is_modified else code

    return RewriteResult(code=output, changed=output != code, types=reports)
