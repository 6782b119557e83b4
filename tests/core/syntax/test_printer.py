"""
Tests for the Lexically Preserving Printer.

Verifies:
1. An unedited tree prints back byte-for-byte.
2. Member removal takes whole lines, Javadoc included.
3. Marker placement and indentation.
4. Import placement after imports, after the package, or at the top.
"""

import textwrap

from lombokify.core.syntax import parse_source, print_tree


def _src(code: str) -> str:
  return textwrap.dedent(code).lstrip("\n")


def test_roundtrip_without_edits_is_identical():
  code = _src(
    """
    // header comment
    package a.b;

    import java.util.List;   // trailing

    /**
     * Doc.
     */
    public class   Odd   {
    \tint x ;  /* keep */
        int getX() {    return x ;  }
    }
    """
  )
  assert print_tree(parse_source(code)) == code


def test_roundtrip_preserves_crlf_and_unicode():
  code = "class Cafe {\r\n  String s = \"ü\";\r\n}\r\n"
  assert print_tree(parse_source(code)) == code


def test_remove_member_with_javadoc():
  tree = parse_source(
    _src(
      """
      class A {
          int x;

          /**
           * Returns x.
           */
          int getX() {
              return x;
          }

          void keep() {}
      }
      """
    )
  )
  decl = tree.types[0]
  decl.remove_member(decl.members[1])

  assert print_tree(tree) == _src(
    """
    class A {
        int x;

        void keep() {}
    }
    """
  )


def test_remove_inline_member():
  tree = parse_source("class A { A() {} int x; }")
  decl = tree.types[0]
  decl.remove_member(decl.members[0])
  assert print_tree(tree) == "class A { int x; }"


def test_marker_uses_declaration_indent():
  tree = parse_source(
    _src(
      """
      class Outer {
          /** Inner doc. */
          static class Inner {}
      }
      """
    )
  )
  inner = tree.types[0].members[0].nested
  inner.add_marker("Getter")
  inner.add_marker("Setter")
  inner.add_marker("Getter")

  assert print_tree(tree) == _src(
    """
    class Outer {
        /** Inner doc. */
        @Getter
        @Setter
        static class Inner {}
    }
    """
  )


def test_existing_marker_is_not_duplicated():
  tree = parse_source("@lombok.Getter\nclass A {}\n")
  assert tree.types[0].add_marker("Getter") is False
  assert print_tree(tree) == "@lombok.Getter\nclass A {}\n"


def test_import_after_existing_imports():
  tree = parse_source("package p;\n\nimport java.util.List;\nimport java.util.Map;\n\nclass A {}\n")
  tree.add_import("lombok.Getter")
  tree.add_import("lombok.Setter")
  tree.add_import("lombok.Getter")

  assert print_tree(tree) == (
    "package p;\n\nimport java.util.List;\nimport java.util.Map;\nimport lombok.Getter;\nimport lombok.Setter;\n\nclass A {}\n"
  )


def test_import_after_package():
  tree = parse_source("package p;\n\nclass A {}\n")
  tree.add_import("lombok.Getter")
  assert print_tree(tree) == "package p;\n\nimport lombok.Getter;\n\nclass A {}\n"


def test_import_at_top_without_package():
  tree = parse_source("class A {}\n")
  tree.add_import("lombok.Getter")
  assert print_tree(tree) == "import lombok.Getter;\n\nclass A {}\n"


def test_existing_import_is_not_duplicated():
  tree = parse_source("import lombok.Getter;\nclass A {}\n")
  assert tree.add_import("lombok.Getter") is False
  assert print_tree(tree) == "import lombok.Getter;\nclass A {}\n"


def test_import_and_marker_on_type_at_offset_zero():
  tree = parse_source("class A {}\n")
  tree.types[0].add_marker("Getter")
  tree.add_import("lombok.Getter")

  out = print_tree(tree)
  assert out == "import lombok.Getter;\n\n@Getter\nclass A {}\n"
  parse_source(out)


def test_import_below_leading_header_comment():
  tree = parse_source("// License\nclass A {}\n")
  tree.types[0].add_marker("Getter")
  tree.add_import("lombok.Getter")

  assert print_tree(tree) == "// License\n\nimport lombok.Getter;\n\n@Getter\nclass A {}\n"


def test_import_above_type_javadoc():
  tree = parse_source("/* License */\n\n/** Doc. */\nclass A {}\n")
  tree.types[0].add_marker("Getter")
  tree.add_import("lombok.Getter")

  assert print_tree(tree) == "/* License */\n\nimport lombok.Getter;\n\n/** Doc. */\n@Getter\nclass A {}\n"


def test_import_after_package_without_blank_line():
  tree = parse_source("package p;\ninterface I {}\n")
  tree.add_import("lombok.Getter")
  assert print_tree(tree) == "package p;\n\nimport lombok.Getter;\n\ninterface I {}\n"


def test_import_after_package_line_comment():
  tree = parse_source("package p; // pkg\n\nclass A {}\n")
  tree.add_import("lombok.Getter")
  assert print_tree(tree) == "package p; // pkg\n\nimport lombok.Getter;\n\nclass A {}\n"
