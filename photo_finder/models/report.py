"""Report generation and delivery models."""

import logging
from pathlib import Path
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

logger = logging.getLogger(__name__)


class ReportRequest(BaseModel):
    """Body of POST /send-report; mirrors the search query parameters plus ``to``."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    query: Optional[str] = None
    min: Optional[str] = None
    max: Optional[str] = None
    start_date: Optional[str] = Field(default=None, alias="startDate")
    end_date: Optional[str] = Field(default=None, alias="endDate")
    to: Optional[str] = None


class ReportArtifact(BaseModel):
    path: Path
    page_content: list[str] = Field(default_factory=list)

    _discarded: bool = PrivateAttr(default=False)

    @property
    def discarded(self) -> bool:
        return self._discarded

    def read_bytes(self) -> bytes:
        return self.path.read_bytes()

    def discard(self) -> None:
        """Delete the file. Safe to call repeatedly; only the first call unlinks."""
        if self._discarded:
            return
        self._discarded = True
        try:
            self.path.unlink()
        except FileNotFoundError:
            logger.warning(f"Report artifact already gone: {self.path}")
        except OSError as e:
            logger.warning(f"Cannot remove report artifact {self.path}: {e}")


class DeliveryRequest(BaseModel):
    recipient: str
    subject_tag: str
    body_text: str
    attachment: ReportArtifact


class DeliveryResult(BaseModel):
    success: bool
    relay_response: Optional[Any] = None
    error_detail: Optional[str] = None
