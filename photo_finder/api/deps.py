"""Request-scoped access to the configured service."""

from fastapi import Request

from ..services.photo_search import PhotoSearchService


def get_search_service(request: Request) -> PhotoSearchService:
    return request.app.state.search_service
