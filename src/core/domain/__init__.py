"""Domain models and entities.

Why:
- Pure, strict data structures (Pydantic v2) and identifier parsing live here.
- The domain knows nothing about HTTP or the CLI: only registry concepts.
"""
