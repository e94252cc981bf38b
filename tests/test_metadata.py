import asyncio
from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from photo_finder.errors import MetadataResolveError
from photo_finder.models.common import FileEntry
from photo_finder.scanners.metadata import resolve_created

FOLDER = Path("/photos")


def _fake_stat(times: dict[str, datetime], failing: set = frozenset()):
    seen = []

    def stat(path):
        seen.append(Path(path).name)
        if Path(path).name in failing:
            raise PermissionError(13, "Permission denied", str(path))
        return SimpleNamespace(st_ctime=times[Path(path).name].timestamp())

    stat.seen = seen
    return stat


def test_populates_created_at_for_every_entry():
    times = {"a_1.jpg": datetime(2024, 1, 2, 3, 4, 5), "b_2.png": datetime(2023, 12, 31, 23, 0)}
    entries = [FileEntry.from_name(n) for n in times]
    result = asyncio.run(resolve_created(entries, FOLDER, stat=_fake_stat(times)))
    assert result is entries
    assert [e.created_day for e in result] == ["2024-01-02", "2023-12-31"]


def test_prefers_birthtime_when_available():
    birth = datetime(2020, 6, 1, 12, 0)
    changed = datetime(2024, 6, 1, 12, 0)

    def stat(path):
        return SimpleNamespace(st_birthtime=birth.timestamp(), st_ctime=changed.timestamp())

    entries = [FileEntry.from_name("x.jpg")]
    asyncio.run(resolve_created(entries, FOLDER, stat=stat))
    assert entries[0].created_at == birth


def test_already_resolved_entries_are_not_looked_up_again():
    times = {"a.jpg": datetime(2024, 1, 1), "b.jpg": datetime(2024, 2, 2)}
    entries = [FileEntry.from_name(n) for n in times]
    entries[0].created_at = datetime(1999, 1, 1)
    stat = _fake_stat(times)
    asyncio.run(resolve_created(entries, FOLDER, stat=stat))
    assert stat.seen == ["b.jpg"]
    assert entries[0].created_at == datetime(1999, 1, 1)


def test_any_failure_fails_the_whole_batch():
    times = {"a.jpg": datetime(2024, 1, 1), "b.jpg": datetime(2024, 1, 1), "c.jpg": datetime(2024, 1, 1)}
    entries = [FileEntry.from_name(n) for n in times]
    stat = _fake_stat(times, failing={"b.jpg"})
    with pytest.raises(MetadataResolveError) as exc_info:
        asyncio.run(resolve_created(entries, FOLDER, stat=stat))
    assert "b.jpg" in exc_info.value.details
    assert sorted(stat.seen) == ["a.jpg", "b.jpg", "c.jpg"]
    assert all(e.created_at is None for e in entries)


def test_missing_file_on_disk(tmp_path):
    entries = [FileEntry.from_name("gone.jpg")]
    with pytest.raises(MetadataResolveError):
        asyncio.run(resolve_created(entries, tmp_path))


def test_real_file_resolves(tmp_path):
    (tmp_path / "real.png").write_bytes(b"x")
    entries = [FileEntry.from_name("real.png")]
    asyncio.run(resolve_created(entries, tmp_path))
    assert entries[0].created_at is not None
    assert entries[0].created_day <= datetime.now().strftime("%Y-%m-%d")
