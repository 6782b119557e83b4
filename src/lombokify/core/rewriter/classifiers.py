"""
Boilerplate Pattern Classifiers.

Stateless predicates over a single member. Each decides, from syntactic shape
alone, whether the member is boilerplate that a Lombok annotation on the
enclosing type can replace.

Known looseness, kept on purpose:
- Getter/Setter ignore parameter count, so ``getName(int x) { return name; }``
  matches.
- AllArgsConstructor compares counts only; parameter names and types are not
  aligned with the fields.
"""

from dataclasses import dataclass
from typing import Optional

from lombokify.core.syntax.nodes import MemberNode
from lombokify.enums import BoilerplateMarker, ExpressionKind, MemberKind, StatementKind


@dataclass(frozen=True)
class Match:
  """A positive classification: the marker to attach and the import it needs."""

  marker: str
  import_name: str

  @classmethod
  def of(cls, marker: BoilerplateMarker) -> "Match":
    return cls(marker=marker.value, import_name=marker.import_name)


def is_no_args_constructor(member: MemberNode) -> bool:
  return member.kind == MemberKind.CONSTRUCTOR and member.parameter_count == 0


def is_all_args_constructor(member: MemberNode, field_count: int) -> bool:
  return member.kind == MemberKind.CONSTRUCTOR and member.parameter_count == field_count


def is_getter(member: MemberNode) -> bool:
  """
  ``get*``/``is*`` method whose body is a single ``return name;`` or
  ``return a.b;``.
  """
  if member.kind != MemberKind.METHOD or not member.name:
    return False
  if not (member.name.startswith("get") or member.name.startswith("is")):
    return False
  if member.body is None or len(member.body) != 1:
    return False

  statement = member.body[0]
  if statement.kind != StatementKind.RETURN or statement.expression is None:
    return False
  return statement.expression.kind in (ExpressionKind.NAME, ExpressionKind.FIELD_ACCESS)


def is_setter(member: MemberNode) -> bool:
  """``set*`` method whose body is a single assignment statement."""
  if member.kind != MemberKind.METHOD or not member.name:
    return False
  if not member.name.startswith("set"):
    return False
  if member.body is None or len(member.body) != 1:
    return False

  statement = member.body[0]
  return (
    statement.kind == StatementKind.EXPRESSION
    and statement.expression is not None
    and statement.expression.kind == ExpressionKind.ASSIGNMENT
  )


def is_to_string(member: MemberNode) -> bool:
  """``toString`` carrying exactly one annotation, ``@Override``. Body shape is irrelevant."""
  return (
    member.kind == MemberKind.METHOD
    and member.name == "toString"
    and len(member.annotations) == 1
    and member.annotations[0] == "Override"
  )


def classify_constructor(member: MemberNode, field_count: int) -> Optional[Match]:
  """
  Classifies a constructor. No-args is checked before all-args.

  Args:
      member: The constructor member.
      field_count: Field declarations directly on the enclosing type.

  Returns:
      Optional[Match]: The match, or None to keep the constructor.
  """
  if is_no_args_constructor(member):
    return Match.of(BoilerplateMarker.NO_ARGS_CONSTRUCTOR)
  if is_all_args_constructor(member, field_count):
    return Match.of(BoilerplateMarker.ALL_ARGS_CONSTRUCTOR)
  return None


def classify_method(member: MemberNode) -> Optional[Match]:
  """Classifies a method in the order getter, setter, toString. First match wins."""
  if is_getter(member):
    return Match.of(BoilerplateMarker.GETTER)
  if is_setter(member):
    return Match.of(BoilerplateMarker.SETTER)
  if is_to_string(member):
    return Match.of(BoilerplateMarker.TO_STRING)
  return None


def classify_member(member: MemberNode, field_count: int) -> Optional[Match]:
  """
  Dispatches on member kind. Fields, nested types and other members never match.
  """
  if member.kind == MemberKind.CONSTRUCTOR:
    return classify_constructor(member, field_count)
  if member.kind == MemberKind.METHOD:
    return classify_method(member)
  return None
