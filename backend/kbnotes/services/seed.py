"""
KB Notes Backend — Catalog Seed
================================

What:  Builds the catalog the service starts with.
How:   Either the built-in knowledge-base seed, or a JSON document named by
       the CATALOG_FILE setting (validated with the same schemas the API
       serves).

Catalog file format:
    {
      "folders": [{"id": 1, "name": "Raspberry_Pi", "dbase": "pi_kb"}],
      "notes": {"pi_kb": [{"id": 1, "title": "Bash", "markdown": "## ..."}]}
    }
    Each note carries either `data` (base64) or `markdown` (plain text).
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from kbnotes.exceptions import CatalogError
from kbnotes.schemas.folder import Folder, Note
from kbnotes.services.catalog import NoteCatalog

logger = logging.getLogger(__name__)

HOSTNAME_NOTE = "## Get the hostname\n\n```\nhostname\n```\n"


class CatalogDocument(BaseModel):
    """On-disk shape of a catalog file."""
    folders: List[Folder] = Field(default_factory=list)
    notes: Dict[str, List[Note]] = Field(default_factory=dict)


def default_catalog() -> NoteCatalog:
    """The built-in Raspberry Pi knowledge base: one folder, one note."""
    return NoteCatalog(
        folders=[Folder(id=1, name="Raspberry_Pi", database="pi_kb")],
        notes={"pi_kb": [Note.from_markdown(1, "Bash", HOSTNAME_NOTE)]},
    )


def load_catalog(path: str) -> NoteCatalog:
    """
    Read and validate a catalog file.

    Raises:
        CatalogError: The file cannot be read or does not match the format.
    """
    catalog_path = Path(path)
    try:
        raw = catalog_path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogError(
            message=f"Could not read catalog file {path}",
            context={"path": path, "error_type": type(e).__name__},
        ) from e

    try:
        document = CatalogDocument.model_validate_json(raw)
    except PydanticValidationError as e:
        raise CatalogError(
            message=f"Invalid catalog file {path}",
            context={"path": path, "errors": e.errors(include_url=False)},
        ) from e

    missing = [f.database for f in document.folders if f.database not in document.notes]
    if missing:
        # Allowed: those folders just answer "not found" for their notes
        logger.warning("Catalog %s has folders without notes: %s", path, ", ".join(missing))

    logger.info(
        "Loaded catalog %s: %d folders, %d note collections",
        path, len(document.folders), len(document.notes),
    )
    return NoteCatalog(folders=document.folders, notes=document.notes)


def build_catalog(catalog_file: Optional[str] = None) -> NoteCatalog:
    """Catalog from `catalog_file` when given, otherwise the built-in seed."""
    if catalog_file:
        return load_catalog(catalog_file)
    return default_catalog()
