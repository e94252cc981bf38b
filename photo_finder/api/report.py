"""Report delivery API endpoint."""

from fastapi import APIRouter, Depends

from ..errors import DeliveryError
from ..models.report import ReportRequest
from ..models.search import SearchCriteria
from ..services.photo_search import PhotoSearchService
from .deps import get_search_service

router = APIRouter(tags=["report"])


@router.post("/send-report")
async def send_report(
    request: ReportRequest,
    service: PhotoSearchService = Depends(get_search_service),
):
    criteria = SearchCriteria.from_params(
        request.query, request.min, request.max, request.start_date, request.end_date,
    )
    result = await service.generate_and_deliver(criteria, request.to or "")
    if not result.success:
        raise DeliveryError(details=result.error_detail)
    return {"message": "Report sent successfully.", "mailResponse": result.relay_response}
