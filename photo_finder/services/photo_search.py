"""Search and report pipelines over the photos folder."""

import logging
from functools import partial
from pathlib import Path

from ..delivery.relay import RelayDispatcher
from ..errors import CriteriaValidationError, NoMatchesError
from ..models.report import DeliveryRequest, DeliveryResult
from ..models.search import SearchCriteria
from ..reports.generator import ReportGenerator
from ..scanners.folder import FolderScanner
from ..scanners.metadata import resolve_created
from .criteria_filter import filter_entries

logger = logging.getLogger(__name__)


class PhotoSearchService:
    """One instance per app; holds configuration only, no per-request state."""

    def __init__(
        self,
        folder: Path,
        generator: ReportGenerator,
        dispatcher: RelayDispatcher,
        subject_tag: str = "photo-report",
    ):
        self.folder = Path(folder)
        self.generator = generator
        self.dispatcher = dispatcher
        self.subject_tag = subject_tag

    async def search(self, criteria: SearchCriteria) -> list[str]:
        entries = await FolderScanner(self.folder).list_entries()
        resolver = partial(resolve_created, folder=self.folder)
        return await filter_entries(entries, criteria, resolver)

    async def generate_and_deliver(self, criteria: SearchCriteria, recipient: str) -> DeliveryResult:
        """Search, render the matches to a PDF and hand it to the relay.

        A failed delivery is returned, not raised: the search itself
        succeeded and the caller decides how to report it.
        """
        recipient = (recipient or "").strip()
        if not recipient:
            raise CriteriaValidationError("Recipient email ('to') is required.")

        match_set = await self.search(criteria)
        if not match_set:
            raise NoMatchesError()

        artifact = await self.generator.generate(match_set, criteria)
        try:
            request = DeliveryRequest(
                recipient=recipient,
                subject_tag=self.subject_tag,
                body_text=self.describe(criteria, len(match_set)),
                attachment=artifact,
            )
            result = await self.dispatcher.deliver(request)
        finally:
            artifact.discard()
        logger.info(
            f"Report delivery to {recipient}: "
            f"{'sent' if result.success else 'failed'} ({len(match_set)} photos)"
        )
        return result

    @staticmethod
    def describe(criteria: SearchCriteria, count: int) -> str:
        noun = "photo" if count == 1 else "photos"
        return (
            f"Attached is the list of {count} {noun} matching your search "
            f"({criteria.describe()})."
        )
