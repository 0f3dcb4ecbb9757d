"""
KB Notes Backend — Application Package Initializer
===================================================

What: Marks the `kbnotes` directory as a Python package.
Why:  Enables module imports like `from kbnotes.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend keeps the same layered split for a much smaller domain:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │    Services (catalog + dispatch)    │  ← id/name fallback, not-found rules
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy stub + Pydantic
    ├─────────────────────────────────────┤
    │        Database (SQLite stub)       │  ← created at startup, never read
    └─────────────────────────────────────┘

    Folders and notes live in an immutable in-memory catalog built once at
    startup. The database only receives an empty `folders` table.
"""

__version__ = "1.0.0"
