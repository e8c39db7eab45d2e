"""
Data models module.

Immutable prospect records shared by the store, the presenters and the
scan ingestor.
"""

from .prospect import DEFAULT_NAME, Prospect, ProspectCollection, new_prospect_id

__all__ = ["DEFAULT_NAME", "Prospect", "ProspectCollection", "new_prospect_id"]
