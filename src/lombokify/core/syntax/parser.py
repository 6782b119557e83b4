"""
Java Parser.

Builds a `SyntaxTree` from Java source using tree-sitter and the
`tree-sitter-java` grammar. Only the shape the rewriter needs is lifted into
the model; everything else stays in the original bytes, which is what makes
the printer lexically preserving.
"""

from typing import List, Optional

import tree_sitter_java
from tree_sitter import Language, Node, Parser

from lombokify.core.errors import ParseError
from lombokify.core.syntax.nodes import (
  Expression,
  ImportDeclaration,
  MemberNode,
  Parameter,
  Statement,
  SyntaxTree,
  TypeDeclaration,
)
from lombokify.enums import ExpressionKind, MemberKind, StatementKind, TypeKind

JAVA_LANGUAGE = Language(tree_sitter_java.language())

_COMMENT_TYPES = {"comment", "line_comment", "block_comment"}

_TYPE_KINDS = {
  "class_declaration": TypeKind.CLASS,
  "interface_declaration": TypeKind.INTERFACE,
  "enum_declaration": TypeKind.ENUM,
}

# Interface constants are fields too
_FIELD_TYPES = {"field_declaration", "constant_declaration"}

_ANNOTATION_TYPES = {"marker_annotation", "annotation"}

_STATEMENT_KINDS = {
  "return_statement": StatementKind.RETURN,
  "expression_statement": StatementKind.EXPRESSION,
  "local_variable_declaration": StatementKind.LOCAL_VARIABLE,
}

_EXPRESSION_KINDS = {
  "identifier": ExpressionKind.NAME,
  "field_access": ExpressionKind.FIELD_ACCESS,
  "assignment_expression": ExpressionKind.ASSIGNMENT,
  "method_invocation": ExpressionKind.METHOD_CALL,
  "this": ExpressionKind.THIS,
  "true": ExpressionKind.LITERAL,
  "false": ExpressionKind.LITERAL,
}


def parse_source(code: str) -> SyntaxTree:
  """
  Parses Java source text into a `SyntaxTree`.

  Args:
      code (str): Java source.

  Returns:
      SyntaxTree: The compilation unit model.

  Raises:
      ParseError: If the source contains a syntax error.
  """
  return JavaParser().parse(code)


class JavaParser:
  """
  Converts tree-sitter parse trees into the rewriter's node model.

  A tree-sitter `Parser` is not shared across threads, so each instance owns
  its own; create one per worker or per file.
  """

  def __init__(self) -> None:
    self._parser = Parser(JAVA_LANGUAGE)
    self._source = b""

  def parse(self, code: str) -> SyntaxTree:
    self._source = code.encode("utf-8")
    ts_tree = self._parser.parse(self._source)
    root = ts_tree.root_node

    if root.has_error:
      bad = _first_error(root)
      if bad is not None:
        row, col = bad.start_point
        raise ParseError("Invalid Java source", line=row + 1, column=col + 1)
      raise ParseError("Invalid Java source")

    tree = SyntaxTree(source=self._source, newline="\r\n" if b"\r\n" in self._source else "\n")

    tree.header_end = self._header_end(root)

    for child in root.named_children:
      if child.type == "package_declaration":
        tree.package_end = child.end_byte
      elif child.type == "import_declaration":
        tree.imports.append(self._build_import(child))
      elif child.type in _TYPE_KINDS:
        tree.types.append(self._build_type(child))

    return tree

  def _text(self, node: Optional[Node]) -> str:
    if node is None:
      return ""
    return self._source[node.start_byte : node.end_byte].decode("utf-8")

  def _header_end(self, root: Node) -> int:
    """
    Finds the line start of the first declaration, or of its Javadoc.

    Other leading comments (license headers) are skipped so they stay first.
    """
    doc: Optional[Node] = None
    for child in root.named_children:
      if child.type in _COMMENT_TYPES:
        doc = child if self._text(child).startswith("/**") else None
        continue
      anchor = child.start_byte
      if doc is not None and not self._source[doc.end_byte : child.start_byte].strip():
        anchor = doc.start_byte
      return self._source.rfind(b"\n", 0, anchor) + 1
    return 0

  def _build_import(self, node: Node) -> ImportDeclaration:
    name = ""
    static = False
    wildcard = False
    for child in node.children:
      if child.type == "static":
        static = True
      elif child.type == "asterisk":
        wildcard = True
      elif child.type in ("identifier", "scoped_identifier"):
        name = self._text(child)
    return ImportDeclaration(name=name, start=node.start_byte, end=node.end_byte, static=static, wildcard=wildcard)

  def _build_type(self, node: Node) -> TypeDeclaration:
    decl = TypeDeclaration(
      kind=_TYPE_KINDS[node.type],
      name=self._text(node.child_by_field_name("name")),
      start=node.start_byte,
      end=node.end_byte,
      indent=self._line_indent(node.start_byte),
      existing_markers=self._annotations(node),
    )

    body = node.child_by_field_name("body")
    if body is None:
      return decl

    if decl.kind == TypeKind.ENUM:
      # Members follow the constant list, after the ';'
      candidates: List[Node] = []
      for child in body.named_children:
        if child.type == "enum_body_declarations":
          candidates.extend(child.named_children)
    else:
      candidates = list(body.named_children)

    doc: Optional[Node] = None
    for child in candidates:
      if child.type in _COMMENT_TYPES:
        doc = child if self._text(child).startswith("/**") else None
        continue
      doc_start = None
      if doc is not None and not self._source[doc.end_byte : child.start_byte].strip():
        doc_start = doc.start_byte
      decl.members.append(self._build_member(child, doc_start))
      doc = None

    return decl

  def _build_member(self, node: Node, doc_start: Optional[int]) -> MemberNode:
    kind = MemberKind.OTHER
    name: Optional[str] = None
    member = MemberNode(kind=kind, name=name, start=node.start_byte, end=node.end_byte, doc_start=doc_start)

    if node.type in _FIELD_TYPES:
      member.kind = MemberKind.FIELD
      declarator = node.child_by_field_name("declarator")
      if declarator is not None:
        member.name = self._text(declarator.child_by_field_name("name"))

    elif node.type in ("constructor_declaration", "method_declaration"):
      member.kind = MemberKind.CONSTRUCTOR if node.type == "constructor_declaration" else MemberKind.METHOD
      member.name = self._text(node.child_by_field_name("name"))
      member.parameters = self._parameters(node.child_by_field_name("parameters"))
      member.annotations = self._annotations(node)
      body = node.child_by_field_name("body")
      if body is not None:
        member.body = self._statements(body)

    elif node.type in _TYPE_KINDS:
      member.kind = MemberKind.NESTED_TYPE
      member.nested = self._build_type(node)
      member.name = member.nested.name

    return member

  def _annotations(self, node: Node) -> List[str]:
    names = []
    for child in node.children:
      if child.type != "modifiers":
        continue
      for mod in child.children:
        if mod.type in _ANNOTATION_TYPES:
          names.append(self._text(mod.child_by_field_name("name")))
    return names

  def _parameters(self, node: Optional[Node]) -> List[Parameter]:
    if node is None:
      return []

    params = []
    for child in node.named_children:
      if child.type == "formal_parameter":
        params.append(
          Parameter(
            name=self._text(child.child_by_field_name("name")),
            type_name=self._text(child.child_by_field_name("type")),
          )
        )
      elif child.type == "spread_parameter":
        name = ""
        type_name = ""
        for part in child.named_children:
          if part.type == "variable_declarator":
            name = self._text(part.child_by_field_name("name"))
          elif part.type != "modifiers" and part.type not in _COMMENT_TYPES and not type_name:
            type_name = self._text(part)
          elif part.type == "identifier":
            name = self._text(part)
        params.append(Parameter(name=name, type_name=type_name, varargs=True))
      # receiver_parameter (`Foo this`) is not a real parameter
    return params

  def _statements(self, block: Node) -> List[Statement]:
    statements = []
    for child in block.children:
      if child.type in _COMMENT_TYPES or child.type in ("{", "}"):
        continue
      if not child.is_named:
        if child.type == ";":
          statements.append(Statement(kind=StatementKind.EMPTY))
        continue
      statements.append(self._build_statement(child))
    return statements

  def _build_statement(self, node: Node) -> Statement:
    kind = _STATEMENT_KINDS.get(node.type, StatementKind.OTHER)
    if kind in (StatementKind.RETURN, StatementKind.EXPRESSION):
      for child in node.named_children:
        if child.type not in _COMMENT_TYPES:
          return Statement(kind=kind, expression=self._build_expression(child))
    return Statement(kind=kind)

  def _build_expression(self, node: Node) -> Expression:
    kind = _EXPRESSION_KINDS.get(node.type)
    if kind is None:
      kind = ExpressionKind.LITERAL if node.type.endswith("_literal") else ExpressionKind.OTHER
    return Expression(kind=kind, text=self._text(node))

  def _line_indent(self, offset: int) -> Optional[str]:
    line_start = self._source.rfind(b"\n", 0, offset) + 1
    prefix = self._source[line_start:offset]
    if prefix.strip():
      return None
    return prefix.decode("utf-8")


def _first_error(node: Node) -> Optional[Node]:
  """Finds the first ERROR or MISSING node in document order."""
  if node.type == "ERROR" or node.is_missing:
    return node
  for child in node.children:
    if child.has_error or child.type == "ERROR" or child.is_missing:
      found = _first_error(child)
      if found is not None:
        return found
  return None
