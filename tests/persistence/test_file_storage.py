"""Tests for atomic single-file storage."""

import stat
from unittest.mock import patch

import pytest

from hot_prospects.config.defaults import StorageParams
from hot_prospects.errors import PersistenceError, StorageNotFoundError
from hot_prospects.persistence.file_storage import ProspectFileStorage


class TestProspectFileStorage:
    """Test ProspectFileStorage class."""

    def test_from_params_expands_home(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        params = StorageParams(directory="~/prospects", file_name="SavedData")

        storage = ProspectFileStorage.from_params(params)

        assert storage.path == tmp_path / "prospects" / "SavedData"
        assert storage.file_mode == 0o600
        assert storage.fsync is True

    def test_read_missing_file(self, storage):
        assert storage.exists() is False

        with pytest.raises(StorageNotFoundError) as exc_info:
            storage.read_bytes()

        assert exc_info.value.operation == "read"
        assert isinstance(exc_info.value, PersistenceError)

    def test_read_other_os_error(self, storage, storage_path):
        # A directory at the target path cannot be read as a file
        storage_path.mkdir(parents=True)

        with pytest.raises(PersistenceError) as exc_info:
            storage.read_bytes()

        assert not isinstance(exc_info.value, StorageNotFoundError)

    def test_write_creates_directory_and_file(self, storage, storage_path):
        written = storage.write_bytes_atomic(b'{"version": 1, "prospects": []}')

        assert written == len(b'{"version": 1, "prospects": []}')
        assert storage_path.read_bytes() == b'{"version": 1, "prospects": []}'
        assert storage.read_bytes() == b'{"version": 1, "prospects": []}'

    def test_write_applies_file_mode(self, storage, storage_path):
        storage.write_bytes_atomic(b"[]")

        assert stat.S_IMODE(storage_path.stat().st_mode) == 0o600

    def test_write_replaces_previous_content(self, storage, storage_path):
        storage.write_bytes_atomic(b"first")
        storage.write_bytes_atomic(b"second")

        assert storage_path.read_bytes() == b"second"

    def test_no_temporary_files_left_behind(self, storage, storage_path):
        storage.write_bytes_atomic(b"[]")
        storage.write_bytes_atomic(b"[]")

        assert sorted(p.name for p in storage_path.parent.iterdir()) == ["SavedData"]

    def test_failed_replace_keeps_previous_file(self, storage, storage_path):
        """A crash between temp write and rename leaves the old document intact."""
        storage.write_bytes_atomic(b"old")

        with patch("hot_prospects.persistence.file_storage.os.replace",
                   side_effect=OSError("disk full")):
            with pytest.raises(PersistenceError) as exc_info:
                storage.write_bytes_atomic(b"new")

        assert exc_info.value.operation == "write"
        assert storage_path.read_bytes() == b"old"
        assert sorted(p.name for p in storage_path.parent.iterdir()) == ["SavedData"]

    def test_failed_write_never_truncates_target(self, storage, storage_path):
        storage.write_bytes_atomic(b"old")

        with patch("hot_prospects.persistence.file_storage.os.fsync",
                   side_effect=OSError("I/O error")):
            fsync_storage = ProspectFileStorage(storage_path, fsync=True)
            with pytest.raises(PersistenceError):
                fsync_storage.write_bytes_atomic(b"new")

        assert storage_path.read_bytes() == b"old"

    def test_fsync_enabled_write(self, storage_path):
        storage = ProspectFileStorage(storage_path, fsync=True)

        storage.write_bytes_atomic(b"[]")

        assert storage_path.read_bytes() == b"[]"

    def test_quarantine_moves_file(self, storage, storage_path):
        storage.write_bytes_atomic(b"garbage")

        moved = storage.quarantine(reason="unreadable")

        assert moved is not None
        assert moved.parent == storage_path.parent
        assert moved.name.startswith("SavedData.unreadable-")
        assert moved.read_bytes() == b"garbage"
        assert storage.exists() is False

    def test_quarantine_without_file(self, storage):
        assert storage.quarantine() is None
