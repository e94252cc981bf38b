"""Flat photo folder scanner."""

import asyncio
import logging
import os
from pathlib import Path

from ..errors import FolderScanError
from ..models.common import FileEntry

logger = logging.getLogger(__name__)


class FolderScanner:
    """List a single directory and keep the .jpg/.png entries."""

    def __init__(self, folder: Path):
        self.folder = Path(folder)

    async def list_entries(self) -> list[FileEntry]:
        names = await asyncio.to_thread(self._read_names)
        entries = []
        for name in names:
            entry = FileEntry.from_name(name)
            if entry is not None:
                entries.append(entry)
        logger.debug(f"[{self.folder}] {len(names)} listed, {len(entries)} photos")
        return entries

    def _read_names(self) -> list[str]:
        try:
            # Byte-wise name order, matching what a sorted readdir returns
            return sorted(os.listdir(self.folder))
        except OSError as e:
            raise FolderScanError(details=f"Cannot read {self.folder}: {e}") from e
