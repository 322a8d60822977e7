# ==============================================
# RecordStore
# ==============================================
#
# PURPOSE:
#   Typed CRUD + query access to the records collection.
#   The only component that mutates persistent state.
#   Owns id assignment (ObjectId) and both timestamps.
#
# CLASS: RecordStore
# ------------------
#   Stateful — holds a reference to a pymongo Collection
#   (or a mongomock Collection in tests).
#
#   Constructor:
#   ------------
#   - __init__(collection)
#
#   Methods:
#   --------
#   - create(name, details=None) -> Record
#   - find_by_id(record_id) -> Record
#   - update(record_id, name=None, details=None) -> Record
#   - delete(record_id) -> Record
#   - list_all(sort=None) -> list[Record]
#   - find(query, sort=None) -> list[Record]
#   - count() -> int
#   - ensure_indexes() -> None
#
#   Id handling:
#   ------------
#   Every method taking a record_id validates the format first
#   and raises InvalidIdError without touching the database.
#   A well-formed id with no document raises NotFoundError.
#
# ==============================================

from typing import Any, Dict, List, Optional, Sequence, Tuple

from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument

from record_vault.errors import InvalidIdError, NotFoundError, ValidationError
from record_vault.storage.record import Record, utc_now

# Natural order of the vault: oldest first, insertion order for equal timestamps.
CREATION_ORDER: List[Tuple[str, int]] = [("createdAt", ASCENDING), ("_id", ASCENDING)]


def clean_text(value: Optional[str]) -> Optional[str]:
    """Trim operator input; empty or missing input becomes None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_record_id(record_id: Any) -> ObjectId:
    """
    Convert a caller-supplied id to an ObjectId.

    Raises:
        InvalidIdError: Not a 24-character hex string.
    """
    if isinstance(record_id, ObjectId):
        return record_id
    if not isinstance(record_id, str):
        raise InvalidIdError(record_id)
    candidate = record_id.strip()
    if len(candidate) != 24 or not ObjectId.is_valid(candidate):
        raise InvalidIdError(record_id)
    return ObjectId(candidate)


class RecordStore:
    def __init__(self, collection):
        self.collection = collection

    def ensure_indexes(self) -> None:
        # Supports the creation-order scans used by list/export/backup/statistics.
        self.collection.create_index([("createdAt", ASCENDING)])
        self.collection.create_index([("name", ASCENDING)])

    def create(self, name: str, details: Optional[str] = None) -> Record:
        """
        Insert a new record.

        Args:
            name: Record name; must not be blank
            details: Optional free-form details

        Returns:
            The stored Record with id and timestamps assigned

        Raises:
            ValidationError: name is empty after trimming
        """
        name = clean_text(name)
        if name is None:
            raise ValidationError("Name is required.")

        now = utc_now()
        record = Record(
            id=str(ObjectId()),
            name=name,
            details=clean_text(details),
            created_at=now,
            updated_at=now,
        )
        self.collection.insert_one(record.to_document())
        return record

    def find_by_id(self, record_id: str) -> Record:
        oid = parse_record_id(record_id)
        doc = self.collection.find_one({"_id": oid})
        if doc is None:
            raise NotFoundError(record_id)
        return Record.from_document(doc)

    def update(
        self,
        record_id: str,
        name: Optional[str] = None,
        details: Optional[str] = None,
    ) -> Record:
        """
        Apply the non-empty fields to an existing record.

        Fields left empty keep their stored value. updatedAt is
        refreshed only when at least one field actually changes.

        Returns:
            The record as stored after the update

        Raises:
            InvalidIdError: record_id is malformed
            NotFoundError: no record with that id
        """
        current = self.find_by_id(record_id)

        changes: Dict[str, Any] = {}
        name = clean_text(name)
        if name is not None and name != current.name:
            changes["name"] = name
        details = clean_text(details)
        if details is not None and details != current.details:
            changes["details"] = details

        if not changes:
            return current

        # updatedAt never moves backwards, even if the clock does.
        changes["updatedAt"] = max(utc_now(), current.updated_at)
        doc = self.collection.find_one_and_update(
            {"_id": ObjectId(current.id)},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            # Deleted by another writer between the read and the update.
            raise NotFoundError(record_id)
        return Record.from_document(doc)

    def delete(self, record_id: str) -> Record:
        oid = parse_record_id(record_id)
        doc = self.collection.find_one_and_delete({"_id": oid})
        if doc is None:
            raise NotFoundError(record_id)
        return Record.from_document(doc)

    def find(
        self,
        query: Dict[str, Any],
        sort: Optional[Sequence[Tuple[str, int]]] = None,
    ) -> List[Record]:
        # Query documents matching filter, materialised as a list.
        cursor = self.collection.find(query).sort(list(sort or CREATION_ORDER))
        return [Record.from_document(doc) for doc in cursor]

    def list_all(self, sort: Optional[Sequence[Tuple[str, int]]] = None) -> List[Record]:
        return self.find({}, sort)

    def count(self) -> int:
        return self.collection.count_documents({})
