"""Service health endpoint."""

import os
from fastapi import APIRouter, Depends

from ..services.photo_search import PhotoSearchService
from .deps import get_search_service

router = APIRouter(prefix="/system", tags=["system"])


@router.get("/health")
async def health(service: PhotoSearchService = Depends(get_search_service)):
    folder = service.folder
    readable = folder.is_dir() and os.access(str(folder), os.R_OK | os.X_OK)
    return {
        "status": "ok" if readable else "degraded",
        "photos_folder": str(folder),
        "folder_readable": readable,
        "relay_url": service.dispatcher.relay_url,
    }
