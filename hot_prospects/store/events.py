"""Change events and save outcomes published by the prospect store."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from ..models import Prospect, ProspectCollection


class ChangeKind(str, Enum):
    """Kinds of store mutation."""
    ADDED = "added"
    TOGGLED = "toggled"


@dataclass(frozen=True)
class StoreChange:
    """Published to observers synchronously, before the write starts."""
    kind: ChangeKind
    prospect: Prospect              # Record as it looks after the mutation
    snapshot: ProspectCollection    # Full collection after the mutation


@dataclass(frozen=True)
class SaveResult:
    """Result of one full-collection persist."""
    success: bool
    path: str
    bytes_written: int = 0
    duration_ms: Optional[int] = None
    error: Optional[Exception] = None


StoreObserver = Callable[[StoreChange], None]
