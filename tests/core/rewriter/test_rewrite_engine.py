"""
Tests for the Scoped Rewrite Engine.

Covers the end-to-end behaviour on parsed sources:
- Removal of matched members and marker/import injection.
- Untouched code for anything that does not match.
- Scoping of nested types.
- Idempotence.
"""

import textwrap

import pytest

from lombokify import rewrite
from lombokify.core.rewriter import LombokRewriter
from lombokify.core.syntax import parse_source, print_tree


def _src(code: str) -> str:
  return textwrap.dedent(code).lstrip("\n")


NO_ARGS = _src(
  """
  package demo;

  public class Empty {
      private int a;

      public Empty() {
      }

      public void run() {
          System.out.println(a);
      }
  }
  """
)

ALL_ARGS = _src(
  """
  class Point {
    private int a;
    private int b;

    Point(int a, int b) {
      this.a = a;
      this.b = b;
    }
  }
  """
)

GETTERS = _src(
  """
  import java.util.List;

  public class Person {
      private String name;

      public String getName() {
          return name;
      }

      public String getName(int x) {
          return name;
      }
  }
  """
)

TO_STRING = _src(
  """
  public class Person {
      private String name;
      private int age;

      @Override
      public String toString() {
          return "Person{" +
              "name=" + name +
              ", age=" + age +
              "}";
      }
  }
  """
)

PARTIAL_CTOR = _src(
  """
  public class Triple {
      private int a;
      private int b;
      private int c;

      public Triple(int a) {
          this.a = a;
      }
  }
  """
)

NESTED = _src(
  """
  public class Outer {
      private int a;

      public int getA() {
          return a;
      }

      static class Inner {
          private String b;

          public void setB(String b) {
              this.b = b;
          }
      }
  }
  """
)

ENUM = _src(
  """
  public enum Color {
      RED(1), GREEN(2);

      private final int code;

      Color(int code) {
          this.code = code;
      }

      public int getCode() {
          return code;
      }
  }
  """
)

MIXED = _src(
  """
  package shop;

  import java.util.Objects;

  /**
   * An order line.
   */
  public class Line {
      private String sku;
      private int qty;

      public Line() {}

      public Line(String sku, int qty) {
          this.sku = sku;
          this.qty = qty;
      }

      public String getSku() {
          return sku;
      }

      public void setSku(String sku) {
          this.sku = sku;
      }

      public boolean isEmpty() {
          return qty == 0;
      }

      // Keep me exactly as written
      public int total(int price) {
          return   qty * price;   // no rounding
      }

      @Override
      public String toString() {
          return sku + "x" + qty;
      }
  }
  """
)


def test_scenario_no_args_constructor():
  assert rewrite(NO_ARGS) == _src(
    """
    package demo;

    import lombok.NoArgsConstructor;

    @NoArgsConstructor
    public class Empty {
        private int a;

        public void run() {
            System.out.println(a);
        }
    }
    """
  )


def test_scenario_no_args_constructor_without_package():
  code = "public class Empty {\n    public Empty() {\n    }\n}\n"
  assert rewrite(code) == (
    "import lombok.NoArgsConstructor;\n\n@NoArgsConstructor\npublic class Empty {\n}\n"
  )


def test_license_header_stays_first():
  code = _src(
    """
    // Copyright Example Corp.

    public class Empty {
        public Empty() {}
    }
    """
  )
  assert rewrite(code) == _src(
    """
    // Copyright Example Corp.

    import lombok.NoArgsConstructor;

    @NoArgsConstructor
    public class Empty {
    }
    """
  )


def test_scenario_all_args_constructor():
  assert rewrite(ALL_ARGS) == _src(
    """
    import lombok.AllArgsConstructor;

    @AllArgsConstructor
    class Point {
      private int a;
      private int b;
    }
    """
  )


def test_scenario_getters_regardless_of_arity():
  assert rewrite(GETTERS) == _src(
    """
    import java.util.List;
    import lombok.Getter;

    @Getter
    public class Person {
        private String name;
    }
    """
  )


def test_scenario_to_string_ignores_body_shape():
  assert rewrite(TO_STRING) == _src(
    """
    import lombok.ToString;

    @ToString
    public class Person {
        private String name;
        private int age;
    }
    """
  )


def test_scenario_partial_constructor_untouched():
  assert rewrite(PARTIAL_CTOR) == PARTIAL_CTOR


def test_nested_types_have_own_scope():
  assert rewrite(NESTED) == _src(
    """
    import lombok.Setter;
    import lombok.Getter;

    @Getter
    public class Outer {
        private int a;

        @Setter
        static class Inner {
            private String b;
        }
    }
    """
  )


def test_enum_constructor_and_getter():
  assert rewrite(ENUM) == _src(
    """
    import lombok.AllArgsConstructor;
    import lombok.Getter;

    @AllArgsConstructor
    @Getter
    public enum Color {
        RED(1), GREEN(2);

        private final int code;
    }
    """
  )


def test_mixed_members():
  assert rewrite(MIXED) == _src(
    """
    package shop;

    import java.util.Objects;
    import lombok.NoArgsConstructor;
    import lombok.AllArgsConstructor;
    import lombok.Getter;
    import lombok.Setter;
    import lombok.ToString;

    /**
     * An order line.
     */
    @NoArgsConstructor
    @AllArgsConstructor
    @Getter
    @Setter
    @ToString
    public class Line {
        private String sku;
        private int qty;

        public boolean isEmpty() {
            return qty == 0;
        }

        // Keep me exactly as written
        public int total(int price) {
            return   qty * price;   // no rounding
        }
    }
    """
  )


def test_existing_marker_and_import_are_reused():
  code = _src(
    """
    import lombok.Getter;

    @Getter
    public class A {
        private int x;

        public int getX() {
            return x;
        }
    }
    """
  )
  assert rewrite(code) == _src(
    """
    import lombok.Getter;

    @Getter
    public class A {
        private int x;
    }
    """
  )


def test_both_constructor_markers():
  code = _src(
    """
    class P {
        int a;
        int b;
        P() {}
        P(int a, int b) { this.a = a; this.b = b; }
    }
    """
  )
  out = rewrite(code)
  assert "@NoArgsConstructor\n@AllArgsConstructor\nclass P {" in out
  assert "P(" not in out


def test_crlf_sources_stay_crlf():
  code = "class A {\r\n  A() {}\r\n}\r\n"
  out = rewrite(code)
  assert out == "import lombok.NoArgsConstructor;\r\n\r\n@NoArgsConstructor\r\nclass A {\r\n}\r\n"


def test_rewriter_reports_per_type():
  tree = parse_source(NESTED)
  reports = LombokRewriter().rewrite(tree)

  assert [r.name for r in reports] == ["Outer", "Inner"]
  assert reports[0].markers == ["Getter"]
  assert reports[0].removed == ["getA"]
  assert reports[1].markers == ["Setter"]
  assert reports[1].removed == ["setB"]
  assert tree.added_imports == ["lombok.Setter", "lombok.Getter"]


def test_import_set_is_minimal():
  tree = parse_source(GETTERS)
  LombokRewriter().rewrite(tree)
  out = print_tree(tree)
  assert out.count("import lombok.Getter;") == 1
  assert [line for line in out.splitlines() if line.startswith("import lombok")] == ["import lombok.Getter;"]


@pytest.mark.parametrize("code", [NO_ARGS, ALL_ARGS, GETTERS, TO_STRING, PARTIAL_CTOR, NESTED, ENUM, MIXED])
def test_rewrite_is_idempotent(code):
  once = rewrite(code)
  assert rewrite(once) == once


def test_file_without_boilerplate_is_unchanged():
  code = _src(
    """
    package x;

    public interface Service {
        String name();

        default String describe() {
            return "svc:" + name();
        }
    }
    """
  )
  assert rewrite(code) == code
