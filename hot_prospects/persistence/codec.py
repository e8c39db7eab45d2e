"""
Wire codec for the persisted prospect list.

The whole collection is encoded as one JSON document:

    {"version": 1, "prospects": [{"id": ..., "name": ..., "emailAddress": ...,
                                  "isContacted": ...}, ...]}

A bare JSON array of the same records (no version field) is read as schema
version 0.
"""

from typing import Any

import orjson

from ..errors import CorruptStoreDataError, PersistenceError, UnsupportedSchemaVersionError
from ..models import Prospect, ProspectCollection

SCHEMA_VERSION = 1
LEGACY_SCHEMA_VERSION = 0

_RECORD_FIELDS = {
    "id": str,
    "name": str,
    "emailAddress": str,
    "isContacted": bool,
}


def prospect_to_record(prospect: Prospect) -> dict[str, Any]:
    """Convert a Prospect into its persisted record layout."""
    return {
        "id": prospect.id,
        "name": prospect.name,
        "emailAddress": prospect.email_address,
        "isContacted": prospect.is_contacted,
    }


def record_to_prospect(record: Any, index: int = 0) -> Prospect:
    """
    Convert one persisted record into a Prospect.

    Args:
        record: Decoded JSON value for a single record
        index: Position of the record in the stored array (for error context)

    Returns:
        The decoded Prospect

    Raises:
        CorruptStoreDataError: If a field is missing or has the wrong type
    """
    if not isinstance(record, dict):
        raise CorruptStoreDataError(
            f"Record {index} is not an object",
            record_index=index
        )

    for field_name, field_type in _RECORD_FIELDS.items():
        if field_name not in record:
            raise CorruptStoreDataError(
                f"Record {index} is missing '{field_name}'",
                record_index=index,
                field=field_name
            )
        if not isinstance(record[field_name], field_type):
            raise CorruptStoreDataError(
                f"Record {index} field '{field_name}' must be {field_type.__name__}",
                record_index=index,
                field=field_name
            )

    # Ids are opaque non-empty strings
    if not record["id"]:
        raise CorruptStoreDataError(
            f"Record {index} has an empty id",
            record_index=index,
            field="id"
        )

    return Prospect(
        id=record["id"],
        name=record["name"],
        email_address=record["emailAddress"],
        is_contacted=record["isContacted"],
    )


def encode_prospects(prospects: ProspectCollection, pretty: bool = False) -> bytes:
    """Serialize the entire collection as one versioned JSON document."""
    document = {
        "version": SCHEMA_VERSION,
        "prospects": [prospect_to_record(p) for p in prospects],
    }
    option = orjson.OPT_INDENT_2 if pretty else 0
    try:
        return orjson.dumps(document, option=option)
    except orjson.JSONEncodeError as e:
        raise PersistenceError(f"Failed to encode prospects: {e}", operation="encode") from e


def decode_prospects(data: bytes) -> ProspectCollection:
    """
    Decode a persisted document back into a collection.

    Raises:
        CorruptStoreDataError: If the document cannot be parsed or a record is invalid
        UnsupportedSchemaVersionError: If the document was written by a newer schema
    """
    try:
        document = orjson.loads(data)
    except orjson.JSONDecodeError as e:
        raise CorruptStoreDataError(f"Stored data is not valid JSON: {e}") from e

    if isinstance(document, list):
        records = document
    elif isinstance(document, dict):
        version = document.get("version")
        if not isinstance(version, int) or isinstance(version, bool):
            raise CorruptStoreDataError("Stored document has no integer 'version'", field="version")
        if version > SCHEMA_VERSION:
            raise UnsupportedSchemaVersionError(
                f"Stored schema version {version} is newer than supported {SCHEMA_VERSION}",
                found_version=version,
                supported_version=SCHEMA_VERSION
            )
        if version < LEGACY_SCHEMA_VERSION:
            raise CorruptStoreDataError(f"Invalid schema version {version}", field="version")
        records = document.get("prospects")
        if not isinstance(records, list):
            raise CorruptStoreDataError("Stored document has no 'prospects' array", field="prospects")
    else:
        raise CorruptStoreDataError(
            f"Stored document must be an object or array, got {type(document).__name__}"
        )

    return tuple(record_to_prospect(record, index) for index, record in enumerate(records))
