"""
Syntax Tree Model.

A deliberately small, mutable model of a Java compilation unit: just enough
structure for the boilerplate classifiers to inspect members, and for the
printer to splice edits back into the original bytes.

Every node keeps the byte span it was parsed from. Nodes are never rewritten
in place; instead the tree records edit requests (removed members, attached
markers, added imports) which `lombokify.core.syntax.printer` renders on top
of the untouched source.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from lombokify.enums import ExpressionKind, MemberKind, StatementKind, TypeKind


@dataclass
class Expression:
  kind: ExpressionKind
  text: str


@dataclass
class Statement:
  kind: StatementKind
  expression: Optional[Expression] = None


@dataclass
class Parameter:
  name: str
  type_name: str
  varargs: bool = False


@dataclass
class MemberNode:
  """
  A direct member of a type body.

  Tagged by `kind`. Constructors and methods fill in `parameters`,
  `annotations` and `body` (None for abstract or interface methods);
  nested types carry their own `TypeDeclaration` in `nested`.

  Attributes:
      start (int): Byte offset where the member begins (modifiers included).
      end (int): Byte offset just past the member.
      doc_start (Optional[int]): Start of a Javadoc comment directly above
          the member, which belongs to it when the member is deleted.
  """

  kind: MemberKind
  name: Optional[str]
  start: int
  end: int
  parameters: List[Parameter] = field(default_factory=list)
  annotations: List[str] = field(default_factory=list)
  body: Optional[List[Statement]] = None
  nested: Optional["TypeDeclaration"] = None
  doc_start: Optional[int] = None

  @property
  def parameter_count(self) -> int:
    return len(self.parameters)


@dataclass
class TypeDeclaration:
  """
  A class, interface or enum declaration.

  The three kinds share one capability set: ordered members, a direct field
  count, and idempotent marker attachment.

  Attributes:
      indent (Optional[str]): Whitespace preceding the declaration on its line,
          or None when other code precedes it on the same line.
      existing_markers (List[str]): Annotation names already written on the
          declaration in the source.
      markers (List[str]): Markers attached during this run, in attach order.
      removed (List[MemberNode]): Members deleted during this run.
  """

  kind: TypeKind
  name: str
  start: int
  end: int
  indent: Optional[str] = None
  members: List[MemberNode] = field(default_factory=list)
  existing_markers: List[str] = field(default_factory=list)
  markers: List[str] = field(default_factory=list)
  removed: List[MemberNode] = field(default_factory=list)

  @property
  def field_count(self) -> int:
    """
    Number of field declarations directly on this type.

    A single declaration statement (``int a, b;``) counts once. Members of
    nested types are not counted.
    """
    return sum(1 for m in self.members if m.kind == MemberKind.FIELD)

  def has_marker(self, name: str) -> bool:
    """
    Checks whether a marker is already present, written or attached.

    ``@lombok.Getter`` in the source satisfies the marker ``Getter``.
    """
    if name in self.markers:
      return True
    for written in self.existing_markers:
      if written == name or written.rsplit(".", 1)[-1] == name:
        return True
    return False

  def add_marker(self, name: str) -> bool:
    """
    Attaches a marker annotation. A marker already present is a no-op.

    Returns:
        bool: True if the marker was newly attached.
    """
    if self.has_marker(name):
      return False
    self.markers.append(name)
    return True

  def remove_member(self, member: MemberNode) -> None:
    """
    Deletes a direct member from this type.

    Raises:
        ValueError: If the member does not belong to this type.
    """
    self.members.remove(member)
    self.removed.append(member)

  def nested_types(self) -> List["TypeDeclaration"]:
    return [m.nested for m in self.members if m.kind == MemberKind.NESTED_TYPE and m.nested is not None]


@dataclass
class ImportDeclaration:
  name: str
  start: int
  end: int
  static: bool = False
  wildcard: bool = False


@dataclass
class SyntaxTree:
  """
  Root of a parsed compilation unit.

  Attributes:
      source (bytes): The original UTF-8 encoded text.
      newline (str): Line terminator used by the file (``\\n`` or ``\\r\\n``).
      package_end (Optional[int]): Byte offset past the package declaration.
      header_end (int): Start of the line where imports go when the file has
          neither a package nor imports; leading header comments stay above it.
      imports (List[ImportDeclaration]): Imports written in the source.
      types (List[TypeDeclaration]): Top-level type declarations.
      added_imports (List[str]): Imports requested during this run.
  """

  source: bytes
  newline: str = "\n"
  package_end: Optional[int] = None
  header_end: int = 0
  imports: List[ImportDeclaration] = field(default_factory=list)
  types: List[TypeDeclaration] = field(default_factory=list)
  added_imports: List[str] = field(default_factory=list)

  def has_import(self, name: str) -> bool:
    if name in self.added_imports:
      return True
    return any(i.name == name and not i.static and not i.wildcard for i in self.imports)

  def add_import(self, name: str) -> bool:
    """
    Requests a single-type import. Duplicates collapse to one.

    Returns:
        bool: True if the import was newly added.
    """
    if self.has_import(name):
      return False
    self.added_imports.append(name)
    return True

  def iter_types(self) -> Iterator[TypeDeclaration]:
    """Yields every type declaration depth-first, outer types first."""
    stack = list(reversed(self.types))
    while stack:
      decl = stack.pop()
      yield decl
      stack.extend(reversed(decl.nested_types()))

  @property
  def is_modified(self) -> bool:
    if self.added_imports:
      return True
    return any(t.markers or t.removed for t in self.iter_types())
