"""
Prospect store: the single source of truth for the prospect list.

Every mutation runs under one lock in three steps: update the in-memory list,
notify observers, persist the whole collection. A failed persist is logged and
reported through ``SaveResult``; the in-memory change is kept.
"""

import threading
import time
from dataclasses import replace
from typing import Callable, Optional, Union

from ..errors import (
    CorruptStoreDataError,
    PersistenceError,
    ProspectNotFoundError,
    StorageNotFoundError,
)
from ..logging.config import get_store_logger, log_store_mutation
from ..models import Prospect, ProspectCollection
from ..persistence.codec import decode_prospects, encode_prospects
from ..persistence.file_storage import ProspectFileStorage
from .events import ChangeKind, SaveResult, StoreChange, StoreObserver


def _toggled(prospect: Prospect) -> Prospect:
    """Flip the contacted flag. Only the store calls this."""
    return replace(prospect, is_contacted=not prospect.is_contacted)


class ProspectStore:
    """Owns the prospect collection, persists it, and publishes changes."""

    def __init__(
        self,
        storage: ProspectFileStorage,
        pretty: bool = False,
        quarantine_unreadable: bool = True
    ):
        self.storage = storage
        self.pretty = pretty
        self.quarantine_unreadable = quarantine_unreadable
        self.logger = get_store_logger(__name__)
        self._lock = threading.RLock()
        self._observers: list[StoreObserver] = []
        self.save_count = 0
        self.last_save_result: Optional[SaveResult] = None

        self._people: list[Prospect] = list(self.load())

    def load(self) -> ProspectCollection:
        """
        Read the full collection from storage.

        Missing, unreadable, corrupt or newer-schema data all yield an empty
        collection. Nothing is partially recovered.

        Returns:
            The stored collection, or an empty tuple
        """
        with self._lock:
            try:
                data = self.storage.read_bytes()
            except StorageNotFoundError:
                self.logger.info("No stored prospects, starting empty")
                return ()
            except PersistenceError as e:
                self.logger.warning("Failed to read stored prospects, starting empty", error=str(e))
                if self.quarantine_unreadable:
                    self.storage.quarantine(reason="unreadable")
                return ()

            try:
                prospects = decode_prospects(data)
            except CorruptStoreDataError as e:
                self.logger.warning(
                    "Stored prospects are unreadable, starting empty",
                    error=str(e),
                    error_type=type(e).__name__
                )
                if self.quarantine_unreadable:
                    self.storage.quarantine(reason="unreadable")
                return ()

            self.logger.info("Loaded prospects", count=len(prospects))
            return prospects

    def snapshot(self) -> ProspectCollection:
        """Return the current collection as an immutable tuple."""
        with self._lock:
            return tuple(self._people)

    def get(self, prospect_id: str) -> Optional[Prospect]:
        """Return the stored record with this id, or None."""
        with self._lock:
            for prospect in self._people:
                if prospect.id == prospect_id:
                    return prospect
            return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._people)

    def add(self, prospect: Prospect) -> SaveResult:
        """
        Append a prospect and persist.

        No validation is performed and duplicates are allowed.

        Args:
            prospect: Record to append at the end of the collection

        Returns:
            Outcome of the persist that followed the append
        """
        if not isinstance(prospect, Prospect):
            raise TypeError(f"Expected Prospect, got {type(prospect).__name__}")

        with self._lock:
            self._people.append(prospect)
            log_store_mutation(self.logger, "added", prospect.id, len(self._people))
            self._notify(StoreChange(ChangeKind.ADDED, prospect, tuple(self._people)))
            return self._save()

    def toggle(self, prospect: Union[Prospect, str]) -> SaveResult:
        """
        Flip ``is_contacted`` on the stored record and persist.

        The authoritative record is looked up by id, so a stale copy of a
        prospect toggles the current stored state. When several records share
        an id the first one is toggled.

        Args:
            prospect: A Prospect or a prospect id

        Returns:
            Outcome of the persist that followed the toggle

        Raises:
            ProspectNotFoundError: If no stored record has this id
        """
        prospect_id = prospect.id if isinstance(prospect, Prospect) else prospect

        with self._lock:
            index = self._index_of(prospect_id)
            updated = _toggled(self._people[index])
            self._people[index] = updated
            log_store_mutation(
                self.logger, "toggled", prospect_id, len(self._people),
                context={"is_contacted": updated.is_contacted}
            )
            self._notify(StoreChange(ChangeKind.TOGGLED, updated, tuple(self._people)))
            return self._save()

    def subscribe(self, observer: StoreObserver) -> Callable[[], None]:
        """
        Register an observer for change events.

        Returns:
            A callable that unsubscribes the observer
        """
        with self._lock:
            self._observers.append(observer)
        return lambda: self.unsubscribe(observer)

    def unsubscribe(self, observer: StoreObserver) -> None:
        """Remove an observer; unknown observers are ignored."""
        with self._lock:
            if observer in self._observers:
                self._observers.remove(observer)

    def _index_of(self, prospect_id: str) -> int:
        for index, prospect in enumerate(self._people):
            if prospect.id == prospect_id:
                return index
        raise ProspectNotFoundError(prospect_id)

    def _notify(self, change: StoreChange) -> None:
        for observer in list(self._observers):
            try:
                observer(change)
            except Exception as e:
                self.logger.error(
                    "Store observer failed",
                    change_kind=change.kind.value,
                    prospect_id=change.prospect.id,
                    error=str(e)
                )

    def _save(self) -> SaveResult:
        """Persist the whole collection. Must be called with the lock held."""
        self.save_count += 1
        start_time = time.monotonic()

        try:
            data = encode_prospects(tuple(self._people), pretty=self.pretty)
            bytes_written = self.storage.write_bytes_atomic(data)
        except PersistenceError as e:
            self.logger.error(
                "Saving prospects failed",
                operation=e.operation,
                path=str(self.storage.path),
                count=len(self._people),
                error=str(e)
            )
            result = SaveResult(
                success=False,
                path=str(self.storage.path),
                duration_ms=int((time.monotonic() - start_time) * 1000),
                error=e
            )
        else:
            result = SaveResult(
                success=True,
                path=str(self.storage.path),
                bytes_written=bytes_written,
                duration_ms=int((time.monotonic() - start_time) * 1000)
            )
            self.logger.debug(
                "Prospects saved",
                count=len(self._people),
                bytes_written=bytes_written,
                duration_ms=result.duration_ms
            )

        self.last_save_result = result
        return result
