"""
KB Notes Backend — Folder & Note Schemas
=========================================

What:  Pydantic models for the two resources the API serves.
Why:   They are both the in-memory catalog entries and the API contract,
       so the JSON field names (`dbase`, `data`) are declared as aliases.
How:   Models are frozen: the catalog is built once and never mutated.

JSON shapes:
    Folder: {"id": 1, "name": "Raspberry_Pi", "dbase": "pi_kb"}
    Note:   {"id": 1, "title": "Bash", "data": "IyMgR2V0IHRoZSBob3N0bmFtZQ..."}
"""

import base64
import binascii
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Folder(BaseModel):
    """
    What:  A named grouping that references a notes collection by key.
    Who:   Returned by GET /folders and GET /folders/{id-or-name}.
    """
    id: int = Field(description="Numeric folder identifier")
    name: str = Field(description="Folder name, usable in place of the id in URLs")
    database: str = Field(
        alias="dbase",
        description="Key of the notes collection belonging to this folder",
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Note(BaseModel):
    """
    What:  A titled markdown document, stored base64-encoded.
    Who:   Returned by GET /folders/{id}/notes and GET /folders/{id}/notes/{noteId}.

    Input may carry `markdown` (plain text) instead of `data`; it is encoded
    on construction so catalog files can be written by hand.
    """
    id: int = Field(description="Note identifier, unique within its folder")
    title: str = Field(description="Note title")
    markdown_data: str = Field(
        alias="data",
        description="Base64-encoded markdown body",
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def encode_plain_markdown(cls, values: Any) -> Any:
        if isinstance(values, dict) and "markdown" in values:
            values = dict(values)
            values["data"] = encode_markdown(values.pop("markdown"))
        return values

    @field_validator("markdown_data")
    @classmethod
    def validate_base64(cls, v: str) -> str:
        """Rejects bodies that are not valid standard base64."""
        try:
            base64.b64decode(v, validate=True)
        except (binascii.Error, ValueError):
            raise ValueError("Note data must be base64-encoded")
        return v

    @classmethod
    def from_markdown(cls, id: int, title: str, text: str) -> "Note":
        """Build a note from plain markdown text."""
        return cls(id=id, title=title, markdown_data=encode_markdown(text))

    @property
    def markdown(self) -> str:
        """The decoded markdown body."""
        return base64.b64decode(self.markdown_data).decode("utf-8")


def encode_markdown(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")
