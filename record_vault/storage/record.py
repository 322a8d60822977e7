# ==============================================
# Record (Data Class)
# ==============================================
#
# PURPOSE:
#   The single entity kept in the vault, plus the explicit
#   mapping between a Record and its MongoDB document.
#
# WHY THIS FILE EXISTS:
#   The store never hands raw documents to the rest of the
#   system. Every document read from MongoDB passes through
#   Record.from_document(), which checks the fields the vault
#   relies on (id, non-empty name, both timestamps).
#
# CLASS: Record (dataclass)
# -------------------------
#   Attributes:
#   -----------
#   - id: str                   → 24-hex ObjectId string (document "_id")
#   - name: str                 → Trimmed, never empty
#   - details: str | None       → Trimmed, None when not given
#   - created_at: datetime      → Aware UTC, set once  (document "createdAt")
#   - updated_at: datetime      → Aware UTC, refreshed (document "updatedAt")
#
#   Methods:
#   --------
#   - to_document() -> dict              → MongoDB document
#   - from_document(doc) -> Record       (classmethod) → Validated mapping
#   - to_dict() -> dict                  → JSON-safe form used by backups
#
# FUNCTIONS:
# ----------
# - utc_now() -> datetime       → Current UTC time at MongoDB precision (ms)
# - to_mongo_precision(dt)      → Truncate to milliseconds, force UTC
# - isoformat_utc(dt) -> str    → "2026-10-18T13:21:05.123Z"
#
# ==============================================

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from bson import ObjectId

from record_vault.errors import RecordMappingError


def to_mongo_precision(value: datetime) -> datetime:
    """
    Normalise a datetime the way MongoDB stores it.

    BSON dates carry milliseconds, so microseconds are truncated.
    Naive datetimes are taken to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.replace(microsecond=(value.microsecond // 1000) * 1000)


def utc_now() -> datetime:
    return to_mongo_precision(datetime.now(timezone.utc))


def isoformat_utc(value: datetime) -> str:
    value = to_mongo_precision(value)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class Record:
    """
    A "name + details" entry in the vault.

    Instances are produced by RecordStore only; callers treat
    them as read-only snapshots of the stored document.
    """

    id: str
    name: str
    details: Optional[str]
    created_at: datetime
    updated_at: datetime

    def to_document(self) -> Dict[str, Any]:
        """
        Serialize to the MongoDB document shape.

        Returns:
            Document with "_id" as an ObjectId and camelCase timestamps
        """
        return {
            "_id": ObjectId(self.id),
            "name": self.name,
            "details": self.details,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Record":
        """
        Build a Record from a stored document, checking the contract.

        Args:
            doc: Document as returned by pymongo

        Returns:
            A Record instance

        Raises:
            RecordMappingError: The document is missing a required
                                field or a field has the wrong type.
        """
        if not isinstance(doc, dict):
            raise RecordMappingError(f"Expected a document, got {type(doc).__name__}")

        missing = [key for key in ("_id", "name", "createdAt", "updatedAt") if key not in doc]
        if missing:
            raise RecordMappingError(f"Document is missing fields: {', '.join(missing)}")

        name = doc["name"]
        if not isinstance(name, str) or not name.strip():
            raise RecordMappingError(f"Document {doc['_id']} has an empty name")

        details = doc.get("details")
        if details is not None and not isinstance(details, str):
            raise RecordMappingError(f"Document {doc['_id']} has non-string details")

        for key in ("createdAt", "updatedAt"):
            if not isinstance(doc[key], datetime):
                raise RecordMappingError(f"Document {doc['_id']} has an invalid {key}")

        return cls(
            id=str(doc["_id"]),
            name=name,
            details=details or None,
            created_at=to_mongo_precision(doc["createdAt"]),
            updated_at=to_mongo_precision(doc["updatedAt"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe dictionary with every field, as written to backups."""
        return {
            "_id": self.id,
            "name": self.name,
            "details": self.details,
            "createdAt": isoformat_utc(self.created_at),
            "updatedAt": isoformat_utc(self.updated_at),
        }
