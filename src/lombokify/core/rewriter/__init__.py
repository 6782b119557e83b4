"""
Rewriter Package.

- ``classifiers``: boilerplate predicates over single members.
- ``scope``: the per-type marker/import accumulator.
- ``engine``: the depth-first traversal that applies both to a tree.
"""

from lombokify.core.rewriter.classifiers import Match, classify_member
from lombokify.core.rewriter.engine import LombokRewriter
from lombokify.core.rewriter.scope import ScopeAccumulator

__all__ = ["LombokRewriter", "Match", "ScopeAccumulator", "classify_member"]
