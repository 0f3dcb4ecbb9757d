"""
KB Notes Backend — Folder SQLAlchemy Model
===========================================

What:  ORM model for the `folders` table in the local SQLite file.
Why:   Reserves the on-disk shape of a folder row. The table is created at
       startup and stays empty; folders are served from the in-memory catalog.

Table:
    CREATE TABLE IF NOT EXISTS folders (
      id INTEGER NOT NULL PRIMARY KEY,
      name STRING NOT NULL,
      dbase TEXT
    );
"""

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from kbnotes.database import Base


class FolderRecord(Base):
    """A folder row: numeric id, display name and the key of its notes collection."""

    __tablename__ = "folders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)

    # Key of the notes collection this folder points at
    dbase: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<FolderRecord(id={self.id}, name='{self.name}', dbase='{self.dbase}')>"
