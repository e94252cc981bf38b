"""Creation-time lookups for candidate entries."""

import asyncio
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Callable

from ..errors import MetadataResolveError
from ..models.common import FileEntry

logger = logging.getLogger(__name__)


async def resolve_created(
    entries: list[FileEntry],
    folder: Path,
    stat: Callable[[Path], os.stat_result] = os.stat,
) -> list[FileEntry]:
    """Fill ``created_at`` for every unresolved entry.

    One stat per entry, all in flight at once. Every lookup is awaited before
    returning; if any failed, the first failure (in entry order) is raised and
    no entry is updated.

    Platforms without ``st_birthtime`` (Linux) fall back to ``st_ctime``, the
    inode change time, which also moves on rename or chmod.
    """
    pending = [entry for entry in entries if entry.created_at is None]
    if not pending:
        return entries

    outcomes = await asyncio.gather(
        *(asyncio.to_thread(_created_at, Path(folder) / entry.name, stat) for entry in pending),
        return_exceptions=True,
    )

    for entry, outcome in zip(pending, outcomes):
        if isinstance(outcome, BaseException):
            raise MetadataResolveError(
                details=f"Cannot stat {entry.name}: {outcome}",
            ) from outcome

    for entry, created in zip(pending, outcomes):
        entry.created_at = created
    logger.debug(f"Resolved creation time for {len(pending)} entries")
    return entries


def _created_at(path: Path, stat: Callable[[Path], os.stat_result]) -> datetime:
    st = stat(path)
    ts = getattr(st, "st_birthtime", None)
    if ts is None:
        ts = st.st_ctime
    return datetime.fromtimestamp(ts)
