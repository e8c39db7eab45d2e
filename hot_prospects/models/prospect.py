"""
Prospect data model.

A Prospect is an immutable public view of one scanned contact. Everyone can
read ``is_contacted``; only the store produces a record with the flag flipped,
by replacing its own authoritative copy.
"""

import uuid
from dataclasses import dataclass, field

DEFAULT_NAME = "Anonymous"


def new_prospect_id() -> str:
    """Generate a fresh opaque prospect identifier."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Prospect:
    """A scanned contact with a contacted/uncontacted status."""
    name: str = DEFAULT_NAME
    email_address: str = ""
    is_contacted: bool = False
    id: str = field(default_factory=new_prospect_id)

    def __post_init__(self):
        if not self.id:
            raise ValueError("Prospect id must be a non-empty string")

    @property
    def status_label(self) -> str:
        """Human readable contact status."""
        return "contacted" if self.is_contacted else "uncontacted"


# Insertion order is meaningful: it is the "recent" sort order.
ProspectCollection = tuple[Prospect, ...]
