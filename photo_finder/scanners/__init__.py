"""Photo folder scanning."""

from .folder import FolderScanner
from .metadata import resolve_created

__all__ = [
    "FolderScanner",
    "resolve_created",
]
