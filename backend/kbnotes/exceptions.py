"""
KB Notes Backend — Custom Exception Hierarchy
==============================================

What:  Defines application-specific exceptions for the few error scenarios
       the service has.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return the `{"error": {"code", "message"}}` envelope.
Who:   Raised by services and the database layer; caught by global handlers.

Exception Hierarchy:
    KBNotesError (base)
    ├── NotFoundError   → 404 Not Found
    ├── DatabaseError   → 500 Internal Server Error (logged at startup)
    └── CatalogError    → raised while building the app (bad catalog file)
"""

from typing import Any, Dict, Optional


class KBNotesError(Exception):
    """
    Base exception for all KB Notes application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(KBNotesError):
    """
    Raised when a requested folder or note does not exist.

    The message is returned verbatim to the client, e.g.
    "Folder ID 999 not found" or "Note ID 2 not found".
    """

    status_code = 404

    def __init__(
        self,
        message: str = "Not found",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(KBNotesError):
    """
    Raised when the SQLite stub cannot be opened or initialized.

    The server keeps running on its in-memory catalog when this happens;
    details stay in the server log.
    """

    def __init__(
        self,
        message: str = "Could not access database",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class CatalogError(KBNotesError):
    """Raised when a configured catalog file is missing or malformed."""

    def __init__(
        self,
        message: str = "Could not load the note catalog",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
