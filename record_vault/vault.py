# ==============================================
# Vault — Controller
# ==============================================
#
# PURPOSE:
#   This is the MAIN CLASS that ties the components together.
#   Drivers (the CLI shell, tests, scripts) interact with this
#   class only. Everything else is internal.
#
# HOW IT CONNECTS THE COMPONENTS:
#
#   ┌──────────────────────────────────────────────────────────┐
#   │                         Vault                            │
#   │                                                          │
#   │   add / update / delete        list / search / sort      │
#   │          │                             │                 │
#   │          ▼                             ▼                 │
#   │   ┌──────────────┐            ┌──────────────────┐       │
#   │   │ RecordStore  │◄───────────│   QueryEngine    │       │
#   │   └──────┬───────┘            └──────────────────┘       │
#   │          │ list_all() snapshot (read-only)               │
#   │          ▼                                               │
#   │   ┌──────────────┐  ┌──────────────┐  ┌──────────────┐   │
#   │   │ BackupWriter │  │ ExportWriter │  │  Statistics  │   │
#   │   │ (after add / │  │  (export)    │  │   (stats)    │   │
#   │   │   delete)    │  │              │  │              │   │
#   │   └──────────────┘  └──────────────┘  └──────────────┘   │
#   └──────────────────────────────────────────────────────────┘
#
#
# CLASS: Vault
# ------------
#
#   Constructor:
#   ------------
#   - __init__(store, backup_writer, export_writer, connection=None)
#       All collaborators are passed in; nothing global.
#
#   - Vault.open(config: AppConfig | None = None, client_factory=None) -> Vault
#       1. Load config (from .env or passed in)
#       2. Connect to MongoDB (fatal on failure)
#       3. Build RecordStore, BackupWriter, ExportWriter
#       4. Ensure indexes and the backups directory exist
#
#   Public Methods (one per menu action):
#   -------------------------------------
#   - add_record(name, details=None) -> OperationResult
#   - update_record(record_id, new_name=None, new_details=None) -> OperationResult
#   - delete_record(record_id, confirmed) -> OperationResult
#   - list_records() -> OperationResult
#   - search_records(mode, term) -> OperationResult
#   - sort_records(field, direction) -> OperationResult
#   - export_data() -> OperationResult
#   - view_statistics() -> OperationResult
#   - close() -> None
#
#   Every public operation returns an OperationResult; errors
#   from lower components never escape these methods.
#
#   BACKUP FAILURES:
#   ----------------
#   Add/Delete commit to MongoDB first, then write the backup.
#   If the backup fails the change is NOT rolled back: the result
#   is an error that says the change was saved, and it still
#   carries the affected record.
#
# ==============================================

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pymongo.errors import PyMongoError

from record_vault.analysis.vault_statistics import compute_statistics
from record_vault.config import AppConfig, get_config
from record_vault.errors import ValidationError, VaultError
from record_vault.formatting import record_lines, records_lines, statistics_lines
from record_vault.persistence.backup_writer import BackupWriter
from record_vault.persistence.export_writer import ExportWriter
from record_vault.query.query_engine import QueryEngine
from record_vault.storage.mongo_client import MongoConnection
from record_vault.storage.record import Record
from record_vault.storage.record_store import RecordStore


SUCCESS = "success"
ERROR = "error"
CANCELLED = "cancelled"


@dataclass
class OperationResult:
    """
    Outcome of one vault operation.

    status is "success", "error" or "cancelled". lines holds the
    display text for the records or statistics; data carries any
    operation-specific payload (backup path, statistics dict, ...).
    """

    status: str
    message: str
    records: List[Record] = field(default_factory=list)
    lines: List[str] = field(default_factory=list)
    error: Optional[VaultError] = None
    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == SUCCESS

    @classmethod
    def failure(cls, error: Exception, message: Optional[str] = None, **kwargs) -> "OperationResult":
        vault_error = error if isinstance(error, VaultError) else VaultError(str(error))
        return cls(status=ERROR, message=message or str(error), error=vault_error, **kwargs)


class Vault:
    """
    Record vault controller.

    Sequences store mutations and their backups, and converts
    every lower-level failure into an OperationResult.
    """

    def __init__(
        self,
        store: RecordStore,
        backup_writer: BackupWriter,
        export_writer: ExportWriter,
        connection: Optional[MongoConnection] = None,
    ):
        self._store = store
        self._query_engine = QueryEngine(store)
        self._backup_writer = backup_writer
        self._export_writer = export_writer
        self._connection = connection

        # Backups must have somewhere to go before the first mutation.
        self._backup_writer.ensure_directory()

    @classmethod
    def open(cls, config: Optional[AppConfig] = None, client_factory=None) -> "Vault":
        """
        Connect to MongoDB and assemble a ready-to-use vault.

        Args:
            config: Application configuration. If None, loads from environment.
            client_factory: Alternative MongoClient class (tests use mongomock)

        Raises:
            ConfigurationError: Required settings are missing
            StoreUnavailableError: MongoDB cannot be reached
            BackupWriteError: The backups directory cannot be created
        """
        config = config or get_config()

        if client_factory is None:
            connection = MongoConnection(config.mongo)
        else:
            connection = MongoConnection(config.mongo, client_factory=client_factory)
        connection.connect()

        try:
            store = RecordStore(connection.collection())
            store.ensure_indexes()
            vault = cls(
                store=store,
                backup_writer=BackupWriter(config.vault.backups_dir),
                export_writer=ExportWriter(config.vault.export_file),
                connection=connection,
            )
        except (VaultError, PyMongoError):
            connection.disconnect()
            raise

        print(f"✓ Vault ready (backups: {config.vault.backups_dir}, export: {config.vault.export_file})")
        return vault

    @property
    def store(self) -> RecordStore:
        return self._store

    @property
    def backup_writer(self) -> BackupWriter:
        return self._backup_writer

    @property
    def export_writer(self) -> ExportWriter:
        return self._export_writer

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_record(self, name: str, details: Optional[str] = None) -> OperationResult:
        """
        Create a record, then write a backup of the whole vault.

        Args:
            name: Required record name
            details: Optional details

        Returns:
            success with the new record, or error
        """
        if not (name or "").strip():
            return OperationResult.failure(ValidationError("Name is required. Aborting add operation."))

        try:
            record = self._store.create(name, details)
        except (VaultError, PyMongoError) as e:
            return OperationResult.failure(e)

        result = OperationResult(
            status=SUCCESS,
            message="Record added successfully.",
            records=[record],
            lines=record_lines(record, 1),
        )
        return self._backup_after(result)

    def update_record(
        self,
        record_id: str,
        new_name: Optional[str] = None,
        new_details: Optional[str] = None,
    ) -> OperationResult:
        """Apply the non-empty new values. No backup is written for updates."""
        try:
            record = self._store.update(record_id, name=new_name, details=new_details)
        except (VaultError, PyMongoError) as e:
            return OperationResult.failure(e)

        return OperationResult(
            status=SUCCESS,
            message="Record updated successfully.",
            records=[record],
            lines=record_lines(record, 1),
        )

    def delete_record(self, record_id: str, confirmed: bool) -> OperationResult:
        """
        Permanently delete a record, then write a backup.

        Args:
            record_id: Id of the record to delete
            confirmed: Must be True; the caller asks the operator first

        Returns:
            cancelled (no store call), success with the deleted record, or error
        """
        if not confirmed:
            return OperationResult(status=CANCELLED, message="Delete operation cancelled.")

        try:
            record = self._store.delete(record_id)
        except (VaultError, PyMongoError) as e:
            return OperationResult.failure(e)

        result = OperationResult(
            status=SUCCESS,
            message="Record deleted successfully.",
            records=[record],
        )
        return self._backup_after(result)

    def _backup_after(self, result: OperationResult) -> OperationResult:
        # The mutation has already committed; a failed backup is reported, not undone.
        try:
            path = self._backup_writer.write_backup(self._store.list_all())
        except (VaultError, PyMongoError) as e:
            print(f"✗ Backup failed: {e}")
            return OperationResult.failure(
                e,
                message=f"{result.message} Backup failed: {e}",
                records=result.records,
                lines=result.lines,
                data={"committed": True},
            )

        result.data["backup_path"] = str(path)
        return result

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list_records(self) -> OperationResult:
        try:
            records = self._store.list_all()
        except (VaultError, PyMongoError) as e:
            return OperationResult.failure(e)

        message = "All Records:" if records else "No records available."
        return OperationResult(SUCCESS, message, records=records, lines=records_lines(records))

    def search_records(self, mode, term: str) -> OperationResult:
        """
        Search by name substring or by exact id.

        Args:
            mode: SearchMode, "name" or "id"
            term: Search term or record id
        """
        try:
            records = self._query_engine.search(mode, term)
        except (VaultError, PyMongoError) as e:
            return OperationResult.failure(e)

        message = "Search Results:" if records else "No records found."
        return OperationResult(SUCCESS, message, records=records, lines=records_lines(records))

    def sort_records(self, field, direction) -> OperationResult:
        try:
            records = self._query_engine.sort(field, direction)
        except (VaultError, PyMongoError) as e:
            return OperationResult.failure(e)

        message = "Sorted Records:" if records else "No records to sort."
        return OperationResult(SUCCESS, message, records=records, lines=records_lines(records))

    def export_data(self) -> OperationResult:
        try:
            records = self._store.list_all()
            path = self._export_writer.write_export(records)
        except (VaultError, PyMongoError) as e:
            return OperationResult.failure(e)

        return OperationResult(
            status=SUCCESS,
            message=f"Data exported successfully to {path.name}.",
            records=records,
            data={"export_path": str(path)},
        )

    def view_statistics(self) -> OperationResult:
        # One snapshot, so all figures describe the same data.
        try:
            stats = compute_statistics(self._store.list_all())
        except (VaultError, PyMongoError) as e:
            return OperationResult.failure(e)

        return OperationResult(
            status=SUCCESS,
            message="Vault statistics computed.",
            lines=statistics_lines(stats),
            data={"statistics": stats},
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Close the MongoDB connection. Later calls do nothing."""
        if self._connection is not None:
            self._connection.disconnect()
            self._connection = None

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False  # Don't suppress exceptions
