"""
Prospect store module.

Owns the prospect collection, persists it on every mutation and publishes
change events to observers.
"""

from .events import ChangeKind, SaveResult, StoreChange, StoreObserver
from .prospect_store import ProspectStore

__all__ = ["ChangeKind", "SaveResult", "StoreChange", "StoreObserver", "ProspectStore"]
