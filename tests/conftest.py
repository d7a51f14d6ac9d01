"""Pytest configuration and shared fixtures."""

from datetime import datetime
from pathlib import Path

import pytest

from events.domain import Attendee
from events.services import EventService
from events.stores import FileEventStore

NOW = datetime(2026, 10, 19, 12, 0)


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "events.json"


@pytest.fixture
def store(data_file: Path) -> FileEventStore:
    return FileEventStore(data_file)


@pytest.fixture
def service(store: FileEventStore) -> EventService:
    return EventService(store, clock=lambda: NOW)


@pytest.fixture
def attendee() -> Attendee:
    return Attendee(name="Ana", email="ana@example.com", city="Recife")
