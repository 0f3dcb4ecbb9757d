"""
KB Notes Backend — Folder & Note Route Handlers
================================================

What:  The four read-only endpoints of the API.
How:   Each handler delegates to FolderService and wraps the result in a
       data envelope; NotFoundError is rendered by the global handler.

Routes:
    GET /folders                           → all folders
    GET /folders/{id-or-name}              → one folder
    GET /folders/{id-or-name}/notes        → notes of a folder
    GET /folders/{id-or-name}/notes/{id}   → one note
"""

from typing import List

from fastapi import APIRouter, Depends

from kbnotes.dependencies import get_folder_service
from kbnotes.schemas.envelope import DataEnvelope, ErrorResponse
from kbnotes.schemas.folder import Folder, Note
from kbnotes.services.folder_service import FolderService

router = APIRouter(prefix="/folders", tags=["Folders"])

NOT_FOUND = {404: {"description": "Folder or note not found", "model": ErrorResponse}}


@router.get(
    "",
    response_model=DataEnvelope[List[Folder]],
    responses=NOT_FOUND,
    summary="List folders",
    description="Returns every folder. An empty catalog answers 404 'No folders'.",
)
async def list_folders(
    service: FolderService = Depends(get_folder_service),
) -> DataEnvelope[List[Folder]]:
    return DataEnvelope[List[Folder]](data=list(service.list_folders()))


@router.get(
    "/{folder_ref}",
    response_model=DataEnvelope[Folder],
    responses=NOT_FOUND,
    summary="Get a folder by ID or name",
    description=(
        "A numeric segment is looked up as a folder ID; anything else is "
        "looked up as a folder name."
    ),
)
async def get_folder(
    folder_ref: str,
    service: FolderService = Depends(get_folder_service),
) -> DataEnvelope[Folder]:
    return DataEnvelope[Folder](data=service.get_folder(folder_ref))


@router.get(
    "/{folder_ref}/notes",
    response_model=DataEnvelope[List[Note]],
    responses=NOT_FOUND,
    summary="List the notes of a folder",
)
async def list_notes(
    folder_ref: str,
    service: FolderService = Depends(get_folder_service),
) -> DataEnvelope[List[Note]]:
    return DataEnvelope[List[Note]](data=list(service.list_notes(folder_ref)))


@router.get(
    "/{folder_ref}/notes/{note_ref}",
    response_model=DataEnvelope[Note],
    responses=NOT_FOUND,
    summary="Get a note",
    description="Note bodies are returned base64-encoded in the `data` field.",
)
async def get_note(
    folder_ref: str,
    note_ref: str,
    service: FolderService = Depends(get_folder_service),
) -> DataEnvelope[Note]:
    return DataEnvelope[Note](data=service.get_note(folder_ref, note_ref))
