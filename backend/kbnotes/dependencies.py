"""
KB Notes Backend — FastAPI Dependencies
========================================

What:  Hands the catalog (stored on `app.state` by create_app) to route handlers.
Who:   Injected into route handlers via FastAPI's Depends() system.
"""

from fastapi import Depends, Request

from kbnotes.services.catalog import NoteCatalog
from kbnotes.services.folder_service import FolderService


def get_catalog(request: Request) -> NoteCatalog:
    return request.app.state.catalog


def get_folder_service(catalog: NoteCatalog = Depends(get_catalog)) -> FolderService:
    """
    Example usage in a route:
        @router.get("/folders")
        async def list_folders(service: FolderService = Depends(get_folder_service)):
            return DataEnvelope(data=list(service.list_folders()))
    """
    return FolderService(catalog)
