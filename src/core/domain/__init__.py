"""Domain models and entities.

Why:
- Pure, strict data structures (Pydantic v2) and closed enumerations live here.
- The domain knows nothing about the CLI, files or the environment.
"""
