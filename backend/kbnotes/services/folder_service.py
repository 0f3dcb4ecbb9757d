"""
KB Notes Backend — Folder Service (Lookup Dispatch)
====================================================

What:  Resolves the `{id-or-name}` and `{noteId}` path segments against the
       catalog and converts misses into NotFoundError.
Why:   Keeps the id/name fallback rule and the exact error messages out of
       the route handlers.
How:   The folder segment is parsed as an integer first; when that fails it
       is treated as a folder name. A non-numeric segment is never an error
       by itself.

Not-found messages (returned verbatim to clients):
    No folders
    Folder ID {raw} not found     (numeric folder segment)
    Folder {name} not found       (non-numeric folder segment)
    Note ID {raw} not found
"""

import logging
import re
from typing import Optional, Sequence

from kbnotes.exceptions import NotFoundError
from kbnotes.schemas.folder import Folder, Note
from kbnotes.services.catalog import NoteCatalog

logger = logging.getLogger(__name__)

# Optional sign followed by ASCII digits only; no whitespace or underscores
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Signed 64-bit range; larger numbers are treated as names
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


def parse_int(raw: str) -> Optional[int]:
    """Return the integer value of a path segment, or None if it is not one."""
    if _INTEGER_RE.fullmatch(raw) is None:
        return None
    value = int(raw)
    if not INT_MIN <= value <= INT_MAX:
        return None
    return value


class FolderService:
    """
    Request-facing lookups over a NoteCatalog.

    Stateless apart from the catalog it wraps; one instance is created per
    request by the `get_folder_service` dependency.
    """

    def __init__(self, catalog: NoteCatalog):
        self.catalog = catalog

    def list_folders(self) -> Sequence[Folder]:
        return self.catalog.list_folders()

    def get_folder(self, ref: str) -> Folder:
        """
        Resolve a folder by id, falling back to name.

        Raises:
            NotFoundError: No folder with that id (numeric ref) or name.
        """
        folder_id = parse_int(ref)
        if folder_id is None:
            return self._folder_by_name(ref)

        folder = self.catalog.folder_by_id(folder_id)
        if folder is None:
            raise NotFoundError(message=f"Folder ID {ref} not found")
        return folder

    def list_notes(self, ref: str) -> Sequence[Note]:
        """
        Notes of the folder identified by id or name.

        A folder whose database key has no notes collection is reported
        the same way as a missing folder.
        """
        folder_id = parse_int(ref)
        if folder_id is None:
            return self._notes_by_name(ref)

        notes = self.catalog.notes_for_folder_id(folder_id)
        if notes is None:
            raise NotFoundError(message=f"Folder ID {ref} not found")
        return notes

    def get_note(self, ref: str, note_ref: str) -> Note:
        """
        A single note inside the folder identified by id or name.

        The folder is resolved first, so a missing folder wins over a
        missing note. A non-numeric note id can never match.
        """
        folder_id = parse_int(ref)
        note_id = parse_int(note_ref)

        if folder_id is None:
            notes = self._notes_by_name(ref)
            note = next((n for n in notes if n.id == note_id), None)
        else:
            if self.catalog.notes_for_folder_id(folder_id) is None:
                raise NotFoundError(message=f"Folder ID {ref} not found")
            note = None if note_id is None else self.catalog.note_by_id(folder_id, note_id)

        if note is None:
            raise NotFoundError(message=f"Note ID {note_ref} not found")
        return note

    def _folder_by_name(self, name: str) -> Folder:
        logger.debug("Folder ref %r is not numeric, resolving by name", name)
        folder = self.catalog.folder_by_name(name)
        if folder is None:
            raise NotFoundError(message=f"Folder {name} not found")
        return folder

    def _notes_by_name(self, name: str) -> Sequence[Note]:
        notes = self.catalog.notes_for_folder(self._folder_by_name(name))
        if notes is None:
            raise NotFoundError(message=f"Folder {name} not found")
        return notes
