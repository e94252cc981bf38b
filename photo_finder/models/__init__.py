"""Data models."""

from .common import ALLOWED_EXTENSIONS, DateRange, FileEntry, NumericRange
from .search import SearchCriteria, SearchResponse
from .report import DeliveryRequest, DeliveryResult, ReportArtifact, ReportRequest

__all__ = [
    "ALLOWED_EXTENSIONS",
    "DateRange",
    "FileEntry",
    "NumericRange",
    "SearchCriteria",
    "SearchResponse",
    "DeliveryRequest",
    "DeliveryResult",
    "ReportArtifact",
    "ReportRequest",
]
