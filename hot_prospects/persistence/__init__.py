"""
Persistence module.

Encodes the full prospect collection as one JSON document and stores it in a
single file replaced atomically on every save.
"""

from .codec import SCHEMA_VERSION, decode_prospects, encode_prospects
from .file_storage import ProspectFileStorage

__all__ = ["SCHEMA_VERSION", "decode_prospects", "encode_prospects", "ProspectFileStorage"]
