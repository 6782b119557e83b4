"""
Lexically Preserving Printer.

Renders a `SyntaxTree` back to text by splicing its recorded edits into the
original source bytes. Regions that were not edited are copied verbatim, so
formatting, whitespace and comments outside deleted members survive as-is.

Edits:
1.  **Member removal**: the member's byte span (plus a directly preceding
    Javadoc). When the member occupies whole lines the lines are removed, and
    a blank line above is collapsed if it would double up with the next one.
2.  **Marker attachment**: ``@Name`` lines inserted at the start of the type
    declaration, reusing its indentation.
3.  **Import insertion**: ``import x.Y;`` lines after the last import line,
    after the package line, or else above the first declaration (below any
    leading header comment). Imports precede markers inserted at the same
    offset.
"""

from typing import List, Optional, Tuple

from lombokify.core.syntax.nodes import MemberNode, SyntaxTree, TypeDeclaration

Edit = Tuple[int, int, bytes]


def print_tree(tree: SyntaxTree) -> str:
  """
  Prints the tree, applying all removals, markers and imports.

  Args:
      tree (SyntaxTree): A parsed (and possibly rewritten) tree.

  Returns:
      str: The resulting source text.
  """
  edits: List[Edit] = []

  # Goes first so it stays above a marker inserted at the same offset
  import_edit = _import_edit(tree)
  if import_edit is not None:
    edits.append(import_edit)

  for decl in tree.iter_types():
    for member in decl.removed:
      start, end = _removal_span(tree.source, member)
      edits.append((start, end, b""))
    if decl.markers:
      edits.append((decl.start, decl.start, _marker_text(decl, tree.newline)))

  return _apply(tree.source, edits).decode("utf-8")


def _apply(source: bytes, edits: List[Edit]) -> bytes:
  out = []
  cursor = 0
  # Stable: edits at one offset keep their list order
  for start, end, replacement in sorted(edits, key=lambda e: (e[0], e[1])):
    # Overlapping removals merge
    if start < cursor:
      start = cursor
    out.append(source[cursor:start])
    out.append(replacement)
    cursor = max(cursor, end)
  out.append(source[cursor:])
  return b"".join(out)


def _marker_text(decl: TypeDeclaration, newline: str) -> bytes:
  if decl.indent is None:
    separator = " "
  else:
    separator = newline + decl.indent
  return "".join(f"@{name}{separator}" for name in decl.markers).encode("utf-8")


def _import_edit(tree: SyntaxTree) -> Optional[Edit]:
  if not tree.added_imports:
    return None

  nl = tree.newline
  lines = [f"import {name};" for name in tree.added_imports]

  if tree.imports:
    pos = _line_end(tree.source, max(i.end for i in tree.imports))
    text = "".join(nl + line for line in lines)
  elif tree.package_end is not None:
    pos = _line_end(tree.source, tree.package_end)
    text = nl + nl + nl.join(lines)
    if not _next_line_blank(tree.source, pos):
      text += nl
  else:
    pos = tree.header_end
    text = nl.join(lines) + nl + nl
    if pos > 0 and not _previous_line_blank(tree.source, pos):
      text = nl + text

  return pos, pos, text.encode("utf-8")


def _line_end(source: bytes, offset: int) -> int:
  """
  Offset of the terminator ending the line that contains ``offset``.

  Only whitespace or a line comment may be skipped; if code follows on the
  same line, ``offset`` itself is returned.
  """
  eol = source.find(b"\n", offset)
  if eol == -1:
    eol = len(source)
  rest = source[offset:eol].strip()
  if rest and not rest.startswith(b"//"):
    return offset
  if eol > offset and source[eol - 1 : eol] == b"\r":
    return eol - 1
  return eol


def _next_line_blank(source: bytes, line_end: int) -> bool:
  eol = source.find(b"\n", line_end)
  if eol == -1:
    return True
  next_eol = source.find(b"\n", eol + 1)
  return not source[eol + 1 : next_eol if next_eol != -1 else len(source)].strip()


def _previous_line_blank(source: bytes, line_start: int) -> bool:
  prev_start = source.rfind(b"\n", 0, line_start - 1) + 1
  return not source[prev_start:line_start].strip()


def _removal_span(source: bytes, member: MemberNode) -> Tuple[int, int]:
  """
  Computes the byte range deleted for a removed member.

  Returns:
      Tuple[int, int]: Half-open ``[start, end)`` range.
  """
  start = member.doc_start if member.doc_start is not None else member.start
  end = member.end

  line_start = source.rfind(b"\n", 0, start) + 1
  owns_line_start = not source[line_start:start].strip()

  p = end
  while p < len(source) and source[p : p + 1] in (b" ", b"\t"):
    p += 1

  line_end: Optional[int] = None
  if p == len(source):
    line_end = p
  elif source.startswith(b"\r\n", p):
    line_end = p + 2
  elif source[p : p + 1] == b"\n":
    line_end = p + 1

  if not owns_line_start or line_end is None:
    # Shares a line with other code; drop the member and trailing blanks only
    return start, p

  start, end = line_start, line_end
  if line_start > 0:
    prev_start = source.rfind(b"\n", 0, line_start - 1) + 1
    prev_line = source[prev_start:line_start]
    next_nl = source.find(b"\n", end)
    next_line = source[end : next_nl if next_nl != -1 else len(source)].strip()
    if not prev_line.strip() and (not next_line or next_line.startswith(b"}")):
      start = prev_start

  return start, end
