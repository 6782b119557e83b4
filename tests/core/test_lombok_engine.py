"""
Tests for the LombokEngine orchestration (parse -> rewrite -> print).
"""

from lombokify import LombokEngine, ParseError, rewrite
from lombokify.core.conversion_result import RewriteResult

import pytest

GETTER_SRC = "class A {\n  int x;\n  int getX() { return x; }\n}\n"


def test_run_success_reports_changes():
  result = LombokEngine().run(GETTER_SRC)

  assert isinstance(result, RewriteResult)
  assert result.success
  assert not result.has_errors
  assert result.changed
  assert result.removed_count == 1
  assert result.types[0].name == "A"
  assert result.types[0].kind == "class"
  assert "@Getter\nclass A {" in result.code


def test_run_without_matches_returns_input():
  code = "class A {\n  int x;\n}\n"
  result = LombokEngine().run(code)

  assert result.success
  assert not result.changed
  assert result.code == code
  assert result.removed_count == 0


def test_run_parse_error_is_captured():
  code = "class A { int x = ; }"
  result = LombokEngine().run(code)

  assert not result.success
  assert result.has_errors
  assert "Invalid Java source" in result.errors[0]
  # Original text is carried through untouched
  assert result.code == code


def test_rewrite_helper_raises_on_parse_error():
  with pytest.raises(ParseError):
    rewrite("class {")


def test_rewritten_output_parses_again():
  once = LombokEngine().run(GETTER_SRC)
  assert once.code.startswith("import lombok.Getter;\n\n@Getter\nclass A {")

  again = LombokEngine().run(once.code)
  assert again.success
  assert not again.changed
  assert again.code == once.code
