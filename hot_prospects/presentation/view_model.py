"""
Headless list view model.

Mirrors one prospect list screen: a filtered, sorted set of rows with swipe
actions, a sort dialog, and a scanner sheet. Rows are rebuilt from store
snapshots whenever the store publishes a change.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

import structlog

from ..errors import ProspectNotFoundError
from ..models import Prospect, ProspectCollection
from ..notifications import ReminderRequest, ReminderScheduler
from ..scanning import ScanIngestor, ScanResult
from ..store import ProspectStore, SaveResult, StoreChange
from .filters import FilterType, SortType, filter_and_sort

logger = structlog.get_logger(__name__)


class RowActionKind(str, Enum):
    """Swipe actions offered on a row."""
    MARK_CONTACTED = "mark_contacted"
    MARK_UNCONTACTED = "mark_uncontacted"
    REMIND = "remind"


@dataclass(frozen=True)
class RowAction:
    kind: RowActionKind
    label: str
    icon: str
    tint: str


MARK_CONTACTED = RowAction(
    RowActionKind.MARK_CONTACTED, "Mark Contacted",
    "person.crop.circle.fill.badge.checkmark", "green"
)
MARK_UNCONTACTED = RowAction(
    RowActionKind.MARK_UNCONTACTED, "Mark Uncontacted",
    "person.crop.circle.badge.xmark", "red"
)
REMIND_ME = RowAction(RowActionKind.REMIND, "Remind Me", "bell", "blue")


@dataclass(frozen=True)
class ProspectRow:
    """Display data for one prospect."""
    prospect_id: str
    name: str
    email_address: str
    is_contacted: bool
    icon: str
    tint: str
    actions: tuple[RowAction, ...]

    @classmethod
    def from_prospect(cls, prospect: Prospect) -> "ProspectRow":
        if prospect.is_contacted:
            icon, tint, actions = "person.fill.checkmark", "green", (MARK_UNCONTACTED,)
        else:
            icon, tint, actions = "person.fill.xmark", "red", (MARK_CONTACTED, REMIND_ME)
        return cls(
            prospect_id=prospect.id,
            name=prospect.name,
            email_address=prospect.email_address,
            is_contacted=prospect.is_contacted,
            icon=icon,
            tint=tint,
            actions=actions,
        )


class ProspectListViewModel:
    """View model for one filtered prospect list."""

    def __init__(
        self,
        store: ProspectStore,
        filter_type: FilterType = FilterType.NONE,
        scheduler: Optional[ReminderScheduler] = None,
        ingestor: Optional[ScanIngestor] = None,
        sort_type: SortType = SortType.RECENT,
        on_change: Optional[Callable[["ProspectListViewModel"], None]] = None
    ):
        self.store = store
        self.filter_type = filter_type
        self.sort_type = sort_type
        self.scheduler = scheduler
        self.ingestor = ingestor
        self.on_change = on_change
        self.is_showing_scanner = False
        self.revision = 0
        self._rows: Optional[tuple[ProspectRow, ...]] = None
        self._unsubscribe = store.subscribe(self._handle_store_change)

    @property
    def title(self) -> str:
        return self.filter_type.title

    @property
    def sort_options(self) -> list[tuple[SortType, str]]:
        """Choices for the "Sort prospects by" dialog."""
        return [(sort_type, sort_type.label) for sort_type in SortType]

    @property
    def prospects(self) -> ProspectCollection:
        """Filtered and sorted prospects from the latest snapshot."""
        return filter_and_sort(self.store.snapshot(), self.filter_type, self.sort_type)

    @property
    def rows(self) -> tuple[ProspectRow, ...]:
        if self._rows is None:
            self._rows = tuple(ProspectRow.from_prospect(p) for p in self.prospects)
        return self._rows

    def set_sort(self, sort_type: SortType) -> None:
        if sort_type != self.sort_type:
            self.sort_type = sort_type
            self._invalidate()

    def perform(self, prospect_id: str, kind: RowActionKind):
        """
        Dispatch a swipe action.

        A mark action on a prospect already in the requested state is a no-op
        and returns None without writing.
        """
        if kind == RowActionKind.REMIND:
            return self.remind(prospect_id)

        prospect = self.store.get(prospect_id)
        if prospect is None:
            raise ProspectNotFoundError(prospect_id)
        if prospect.is_contacted == (kind == RowActionKind.MARK_CONTACTED):
            logger.debug("Prospect already in requested state", prospect_id=prospect_id, action=kind.value)
            return None
        return self.toggle(prospect_id)

    def toggle(self, prospect_id: str) -> SaveResult:
        """Mark a prospect contacted or uncontacted."""
        return self.store.toggle(prospect_id)

    def remind(self, prospect_id: str) -> Optional[ReminderRequest]:
        """Schedule a reminder for a prospect shown in this list."""
        if self.scheduler is None:
            logger.warning("No reminder scheduler configured", prospect_id=prospect_id)
            return None

        prospect = self.store.get(prospect_id)
        if prospect is None:
            raise ProspectNotFoundError(prospect_id)
        return self.scheduler.schedule(prospect)

    def present_scanner(self) -> None:
        self.is_showing_scanner = True

    def handle_scan(self, result: ScanResult) -> Optional[Prospect]:
        """Dismiss the scanner sheet and ingest its result."""
        self.is_showing_scanner = False
        if self.ingestor is None:
            logger.warning("No scan ingestor configured")
            return None
        return self.ingestor.handle_scan(result)

    def close(self) -> None:
        """Stop observing the store."""
        self._unsubscribe()

    def _handle_store_change(self, change: StoreChange) -> None:
        self._invalidate()

    def _invalidate(self) -> None:
        self._rows = None
        self.revision += 1
        if self.on_change is not None:
            self.on_change(self)
