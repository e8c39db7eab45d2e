"""Pytest configuration and shared fixtures."""

import pytest
from pathlib import Path

from hot_prospects.models import Prospect
from hot_prospects.persistence.file_storage import ProspectFileStorage
from hot_prospects.store import ProspectStore


@pytest.fixture
def storage_path(tmp_path) -> Path:
    """Location of the persisted prospect file for one test."""
    return tmp_path / "data" / "SavedData"


@pytest.fixture
def storage(storage_path) -> ProspectFileStorage:
    """File storage without fsync to keep tests fast."""
    return ProspectFileStorage(storage_path, fsync=False)


@pytest.fixture
def store(storage) -> ProspectStore:
    """Empty store backed by a temporary file."""
    return ProspectStore(storage)


@pytest.fixture
def paul() -> Prospect:
    """The prospect encoded in the simulated scanner payload."""
    return Prospect(name="Paul Hudson", email_address="paul@hackingwithswift.com")


@pytest.fixture
def sample_prospects() -> list[Prospect]:
    """A small mixed collection in insertion order."""
    return [
        Prospect(name="Paul Hudson", email_address="paul@hackingwithswift.com"),
        Prospect(name="Ada Lovelace", email_address="ada@example.com", is_contacted=True),
        Prospect(name="Grace Hopper", email_address="grace@example.com"),
        Prospect(name="Alan Turing", email_address="alan@example.com", is_contacted=True),
    ]
