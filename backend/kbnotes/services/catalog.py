"""
KB Notes Backend — Note Catalog (Folder/Note Resolver)
=======================================================

What:  Immutable container for the folders and the notes-by-key mapping,
       with the lookup helpers the routes rely on.
Why:   All data is fixed at startup; keeping it in one read-only object
       (held on `app.state`) replaces module-level globals and lets tests
       build their own catalogs.
How:   Linear scans over small tuples. Lookups return None when absent;
       turning "absent" into a 404 is FolderService's job.
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence, Tuple

from kbnotes.exceptions import NotFoundError
from kbnotes.schemas.folder import Folder, Note


class NoteCatalog:
    """
    Read-only folders and notes.

    Invariant (not enforced): every folder's database key has an entry in
    `notes`. A folder whose key is missing simply has no notes to serve.
    """

    def __init__(
        self,
        folders: Iterable[Folder] = (),
        notes: Optional[Mapping[str, Iterable[Note]]] = None,
    ):
        self._folders: Tuple[Folder, ...] = tuple(folders)
        self._notes: Mapping[str, Tuple[Note, ...]] = MappingProxyType(
            {key: tuple(items) for key, items in (notes or {}).items()}
        )

    @property
    def folders(self) -> Tuple[Folder, ...]:
        return self._folders

    @property
    def notes(self) -> Mapping[str, Tuple[Note, ...]]:
        return self._notes

    def list_folders(self) -> Sequence[Folder]:
        """
        All folders, in seed order.

        Raises:
            NotFoundError: The catalog holds no folders. An empty list is
                reported as "not found", never as an empty success.
        """
        if not self._folders:
            raise NotFoundError(message="No folders")
        return self._folders

    def folder_by_id(self, folder_id: int) -> Optional[Folder]:
        for folder in self._folders:
            if folder.id == folder_id:
                return folder
        return None

    def folder_by_name(self, name: str) -> Optional[Folder]:
        for folder in self._folders:
            if folder.name == name:
                return folder
        return None

    def notes_for_folder(self, folder: Folder) -> Optional[Sequence[Note]]:
        """Notes stored under the folder's database key, or None if the key is unknown."""
        return self._notes.get(folder.database)

    def notes_for_folder_id(self, folder_id: int) -> Optional[Sequence[Note]]:
        folder = self.folder_by_id(folder_id)
        if folder is None:
            return None
        return self.notes_for_folder(folder)

    def note_by_id(self, folder_id: int, note_id: int) -> Optional[Note]:
        notes = self.notes_for_folder_id(folder_id)
        if notes is None:
            return None
        for note in notes:
            if note.id == note_id:
                return note
        return None

    def __repr__(self) -> str:
        return f"<NoteCatalog(folders={len(self._folders)}, collections={len(self._notes)})>"
