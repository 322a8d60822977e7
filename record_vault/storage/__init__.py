# ==============================================
# STORAGE (MongoDB)
# ==============================================
#
# This package handles all database operations:
# owning the connection, mapping documents to records,
# and the record CRUD/query surface.
#
# Modules:
# --------
# - mongo_client.py    → MongoDB connection lifecycle
# - record.py          → Record dataclass + document mapping
# - record_store.py    → CRUD and queries over the records collection
#
# ==============================================

from .mongo_client import MongoConnection
from .record import Record
from .record_store import CREATION_ORDER, RecordStore, parse_record_id

__all__ = [
    "MongoConnection",
    "Record",
    "RecordStore",
    "CREATION_ORDER",
    "parse_record_id",
]
