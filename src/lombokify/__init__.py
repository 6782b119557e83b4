"""
lombokify Package.

A heuristic Java source rewriter: it finds boilerplate members (trivial
getters and setters, no-args and all-args constructors, ``@Override
toString``), deletes them, and annotates the enclosing type with the
equivalent Lombok marker, leaving every other byte of the file untouched.

Usage
-----

Simple String Conversion
^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import lombokify
    code = "class A { int a; int getA() { return a; } }"
    print(lombokify.rewrite(code))
    # import lombok.Getter;
    #
    # @Getter
    # class A { int a; }

Advanced Usage (Engine)
^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from lombokify import LombokEngine

    res = LombokEngine().run(code)
    if res.success:
        print(res.code)
    else:
        print(f"Errors: {res.errors}")
"""

from lombokify.config import RuntimeConfig
from lombokify.core.engine import LombokEngine, RewriteResult
from lombokify.core.errors import LombokifyError, ParseError

__version__ = "0.1.0"


def rewrite(code: str) -> str:
  """
  Rewrites a string of Java source.

  This is a convenience wrapper around `LombokEngine`. For directories use the
  ``lombokify`` command.

  Args:
      code (str): The Java source to rewrite.

  Returns:
      str: The rewritten source.

  Raises:
      ParseError: If the source is not valid Java.
  """
  engine = LombokEngine()
  tree = engine.parse(code)
  engine.rewriter.rewrite(tree)
  return engine.to_source(tree)


__all__ = [
  "LombokEngine",
  "LombokifyError",
  "ParseError",
  "RewriteResult",
  "RuntimeConfig",
  "rewrite",
  "__version__",
]
