"""Core shared models."""

import re
from datetime import datetime
from typing import Optional
from pydantic import BaseModel

ALLOWED_EXTENSIONS = ("jpg", "png")

_DIGIT_RUN = re.compile(r"[0-9]+")


class FileEntry(BaseModel):
    name: str
    extension: str
    numeric_token: Optional[int] = None
    created_at: Optional[datetime] = None  # local time, filled on demand

    @classmethod
    def from_name(cls, name: str) -> Optional["FileEntry"]:
        """Classify a listed name; returns None unless it ends in .jpg/.png."""
        lowered = name.lower()
        for ext in ALLOWED_EXTENSIONS:
            if lowered.endswith(f".{ext}"):
                return cls(name=name, extension=ext, numeric_token=numeric_token(name))
        return None

    @property
    def created_day(self) -> Optional[str]:
        if self.created_at is None:
            return None
        return self.created_at.strftime("%Y-%m-%d")


class NumericRange(BaseModel):
    min: int
    max: int


class DateRange(BaseModel):
    # Canonical YYYY-MM-DD strings, compared as text.
    start: str
    end: str


def numeric_token(name: str) -> Optional[int]:
    """First contiguous run of digits in ``name``."""
    match = _DIGIT_RUN.search(name)
    return int(match.group()) if match else None
