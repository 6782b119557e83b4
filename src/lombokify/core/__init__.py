"""
Core Package.

Contains the rewrite logic:
- Syntax tree model, Java parser and lexically preserving printer
- Boilerplate classifiers and the scoped rewrite engine
- The per-file orchestration engine
"""
