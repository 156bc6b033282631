"""Domain models and error types.

Why:
- Pure, strict data structures (Pydantic v2) live here.
- The domain knows nothing about the CLI, files or logging setup: only the
  concepts of the problem (shapes, tokens, numbers, results).
"""
