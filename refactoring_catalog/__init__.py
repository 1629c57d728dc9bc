"""refactoring_catalog — worked refactoring examples and the harness that runs them.

Each example file holds a chain of behaviorally equivalent Before/RefactorN
variants and registers a Tests entry point under a namespace derived from its
path. The harness finds example files by convention, loads them, and runs
each entry point in sorted path order.

Usage:
    python -m refactoring_catalog                                  # Everything
    python -m refactoring_catalog first_set_of_refactorings/split_phase.py
"""
