"""Search API endpoint."""

from typing import Optional
from fastapi import APIRouter, Depends, Query

from ..models.search import SearchCriteria, SearchResponse
from ..services.photo_search import PhotoSearchService
from .deps import get_search_service

router = APIRouter(tags=["search"])


@router.get("/search", response_model=SearchResponse)
async def search_photos(
    query: Optional[str] = None,
    min: Optional[str] = None,
    max: Optional[str] = None,
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    service: PhotoSearchService = Depends(get_search_service),
):
    criteria = SearchCriteria.from_params(query, min, max, start_date, end_date)
    photos = await service.search(criteria)
    return SearchResponse(photos=photos)
