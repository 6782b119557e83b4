"""
Enumerations for lombokify.

This module defines the tags used across the codebase to classify syntax
nodes and to name the Lombok markers the rewriter can emit.
"""

from enum import Enum


class BoilerplateMarker(str, Enum):
  """
  Lombok annotations that replace recognized boilerplate members.

  The value is the simple annotation name written on the type declaration.
  """

  NO_ARGS_CONSTRUCTOR = "NoArgsConstructor"
  ALL_ARGS_CONSTRUCTOR = "AllArgsConstructor"
  GETTER = "Getter"
  SETTER = "Setter"
  TO_STRING = "ToString"

  @property
  def import_name(self) -> str:
    """
    Fully qualified import identifier for the annotation.

    Returns:
        str: e.g. ``lombok.Getter``.
    """
    return f"lombok.{self.value}"


class TypeKind(str, Enum):
  """
  Type declarations the rewriter descends into.
  """

  CLASS = "class"
  INTERFACE = "interface"
  ENUM = "enum"


class MemberKind(str, Enum):
  """
  Tag for the members found directly inside a type body.
  """

  FIELD = "field"
  CONSTRUCTOR = "constructor"
  METHOD = "method"
  NESTED_TYPE = "nested_type"
  # Initializer blocks, records, annotation types, stray semicolons
  OTHER = "other"


class StatementKind(str, Enum):
  """
  Coarse statement shapes inside a method or constructor body.
  """

  RETURN = "return"
  EXPRESSION = "expression"
  LOCAL_VARIABLE = "local_variable"
  EMPTY = "empty"
  OTHER = "other"


class ExpressionKind(str, Enum):
  """
  Coarse expression shapes, enough to tell trivial accessors apart.
  """

  NAME = "name"  # foo
  FIELD_ACCESS = "field_access"  # this.foo, a.b
  ASSIGNMENT = "assignment"  # a = b, a += b
  METHOD_CALL = "method_call"
  LITERAL = "literal"
  THIS = "this"
  OTHER = "other"
