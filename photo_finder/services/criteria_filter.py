"""Centralized search filtering logic."""

import logging
from typing import Awaitable, Callable, Optional

from ..models.common import ALLOWED_EXTENSIONS, DateRange, FileEntry, NumericRange
from ..models.search import SearchCriteria

logger = logging.getLogger(__name__)

Resolver = Callable[[list[FileEntry]], Awaitable[list[FileEntry]]]


async def filter_entries(
    entries: list[FileEntry],
    criteria: SearchCriteria,
    resolver: Optional[Resolver] = None,
) -> list[str]:
    """Apply every active predicate, cheapest first, and return matched names.

    The date predicate is the only one needing I/O, so creation times are
    resolved only for entries that survived the other predicates and only
    when a date range is set. Listing order is kept.
    """
    candidates = [
        e for e in entries
        if matches_extension(e)
        and matches_text(e, criteria.text_query)
        and matches_numeric_range(e, criteria.numeric_range)
    ]

    if criteria.date_range is not None and candidates:
        if resolver is None:
            raise ValueError("A resolver is required when a date range is set")
        candidates = await resolver(candidates)
        candidates = [e for e in candidates if matches_date_range(e, criteria.date_range)]

    logger.debug(f"{len(candidates)}/{len(entries)} entries matched ({criteria.describe()})")
    return [e.name for e in candidates]


def matches_extension(entry: FileEntry) -> bool:
    return entry.extension.lower() in ALLOWED_EXTENSIONS and entry.name.lower().endswith(
        f".{entry.extension.lower()}"
    )


def matches_text(entry: FileEntry, text_query: str) -> bool:
    query = text_query.strip().lower()
    if not query:
        return True
    return query in entry.name.lower()


def matches_numeric_range(entry: FileEntry, numeric_range: Optional[NumericRange]) -> bool:
    """Inclusive on both ends; entries without digits never match an active range."""
    if numeric_range is None:
        return True
    if entry.numeric_token is None:
        return False
    return numeric_range.min <= entry.numeric_token <= numeric_range.max


def matches_date_range(entry: FileEntry, date_range: Optional[DateRange]) -> bool:
    """Compare the local creation day as YYYY-MM-DD text, inclusive on both ends."""
    if date_range is None:
        return True
    day = entry.created_day
    if day is None:
        raise ValueError(f"Creation time of {entry.name} has not been resolved")
    return date_range.start <= day <= date_range.end
