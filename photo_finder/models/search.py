"""Search-related models."""

import re
from typing import Optional
from pydantic import BaseModel, Field

from ..errors import CriteriaValidationError
from .common import DateRange, NumericRange

_INTEGER = re.compile(r"[+-]?[0-9]+")


class SearchCriteria(BaseModel):
    text_query: str = ""
    numeric_range: Optional[NumericRange] = None
    date_range: Optional[DateRange] = None

    @classmethod
    def from_params(
        cls,
        query: Optional[str] = None,
        min: Optional[str] = None,
        max: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> "SearchCriteria":
        """Build criteria from raw request strings.

        A range is only active when both of its bounds are present and
        non-blank; a lone bound is ignored. Numeric bounds must be base-10
        integers. Dates are kept verbatim (trimmed) and compared as
        ``YYYY-MM-DD`` text.
        """
        numeric_range = None
        low, high = _present(min), _present(max)
        if low is not None and high is not None:
            numeric_range = NumericRange(
                min=_parse_bound("min", low), max=_parse_bound("max", high),
            )

        date_range = None
        start, end = _present(start_date), _present(end_date)
        if start is not None and end is not None:
            date_range = DateRange(start=start, end=end)

        return cls(
            text_query=(query or "").strip(),
            numeric_range=numeric_range,
            date_range=date_range,
        )

    def describe(self) -> str:
        parts = [f'query "{self.text_query}"' if self.text_query else "all photos"]
        if self.numeric_range:
            parts.append(f"numbers {self.numeric_range.min}-{self.numeric_range.max}")
        if self.date_range:
            parts.append(f"created {self.date_range.start} to {self.date_range.end}")
        return ", ".join(parts)


class SearchResponse(BaseModel):
    photos: list[str] = Field(default_factory=list)


def _present(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _parse_bound(label: str, value: str) -> int:
    if not _INTEGER.fullmatch(value):
        raise CriteriaValidationError(f"'{label}' must be an integer, got '{value}'.")
    return int(value)
