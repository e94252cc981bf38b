import json
from pathlib import Path

import httpx
import pytest

from photo_finder.config import Settings
from photo_finder.delivery.relay import RelayDispatcher
from photo_finder.reports.generator import ReportGenerator
from photo_finder.services.photo_search import PhotoSearchService

RELAY_URL = "http://relay.test/api/mail/send"

SCENARIO_NAMES = ["vacation_12.jpg", "vacation_99.png", "notes.txt", "trip_5.jpg"]


class FakeRelay:
    """Records uploads and answers with a canned response."""

    def __init__(self, status_code: int = 200, payload=None, error: Exception = None):
        self.status_code = status_code
        self.payload = payload if payload is not None else {"id": "msg-1", "status": "queued"}
        self.error = error
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=json.dumps(self.payload).encode(),
                              headers={"content-type": "application/json"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def photo_folder(tmp_path: Path) -> Path:
    folder = tmp_path / "images"
    folder.mkdir()
    for name in SCENARIO_NAMES:
        (folder / name).write_bytes(b"data")
    return folder


@pytest.fixture
def report_dir(tmp_path: Path) -> Path:
    folder = tmp_path / "reports"
    folder.mkdir()
    return folder


@pytest.fixture
def relay() -> FakeRelay:
    return FakeRelay()


@pytest.fixture
def make_service(photo_folder, report_dir):
    def _make(relay: FakeRelay, folder: Path = None) -> PhotoSearchService:
        return PhotoSearchService(
            folder=folder or photo_folder,
            generator=ReportGenerator(report_dir),
            dispatcher=RelayDispatcher(RELAY_URL, transport=relay.transport),
            subject_tag="photo-report",
        )
    return _make


@pytest.fixture
def settings(photo_folder, report_dir) -> Settings:
    return Settings(photos_folder=photo_folder, report_dir=report_dir, relay_url=RELAY_URL)


@pytest.fixture
def make_relay():
    return FakeRelay
