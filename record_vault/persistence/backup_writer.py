import json
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Sequence

from record_vault.errors import BackupWriteError
from record_vault.storage.record import Record


# ==============================================
# BackupWriter
# ==============================================
#
# PURPOSE:
#   Write a full JSON snapshot of the vault to a new, uniquely
#   named file after every Add and Delete.
#
# WHAT IS WRITTEN:
#   One pretty-printed JSON array per file, one element per
#   record in creation order, every field included:
#     [{"_id": ..., "name": ..., "details": ...,
#       "createdAt": ..., "updatedAt": ...}, ...]
#
# FILE NAMES:
#   backups/backup_2026-10-18-13-21-05.json
#   UTC, second granularity, ':' and 'T' replaced by '-'.
#   A second backup within the same second gets a suffix
#   (backup_2026-10-18-13-21-05_1.json) instead of replacing
#   the first one. Backups are never rotated or deleted.
#
# CLASS: BackupWriter
# -------------------
#   Stateful — holds the backups directory.
#
#   Constructor:
#   ------------
#   - __init__(backups_dir: str = "backups/")
#       Does NOT touch the filesystem; call ensure_directory().
#
class BackupWriter:
    """Writes timestamped full-snapshot backups of the vault."""

    def __init__(self, backups_dir: str = "backups/"):
        self.backups_dir = Path(backups_dir)

#   Methods:
#   --------
#   - ensure_directory() -> None
#       Create the backups directory (and parents). Idempotent.
#
#   - write_backup(records, now=None) -> Path
#       Serialize records to a new backup file. Return its path.
#       Raises BackupWriteError on any filesystem failure.
#
#   - list_backups() -> list[Path]
#       Existing backup files, oldest name first.
#
    def ensure_directory(self) -> None:
        """
        Create the backups directory if it does not exist yet.

        Raises:
            BackupWriteError: The directory cannot be created
        """
        try:
            self.backups_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise BackupWriteError(self.backups_dir, e) from e

    @staticmethod
    def backup_timestamp(now: datetime) -> str:
        """
        Filesystem-safe, second-granularity UTC timestamp.

        Args:
            now: Moment of the backup (naive values are taken as UTC)

        Returns:
            e.g. "2026-10-18-13-21-05"
        """
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        stamp = now.astimezone(timezone.utc).replace(tzinfo=None).isoformat(timespec="seconds")
        return stamp.replace(":", "-").replace("T", "-")

    def write_backup(self, records: Sequence[Record], now: Optional[datetime] = None) -> Path:
        """
        Write a full snapshot to a new backup file.

        Args:
            records: Every live record, in creation order
            now: Timestamp for the file name (defaults to current UTC time)

        Returns:
            Path of the file that was created

        Raises:
            BackupWriteError: The file could not be created or written
        """
        stamp = self.backup_timestamp(now or datetime.now(timezone.utc))
        payload = json.dumps([record.to_dict() for record in records], indent=2, ensure_ascii=False)

        suffix = 0
        while True:
            name = f"backup_{stamp}.json" if suffix == 0 else f"backup_{stamp}_{suffix}.json"
            path = self.backups_dir / name
            try:
                # "x" never replaces an earlier backup
                with open(path, "x", encoding="utf-8") as f:
                    f.write(payload)
            except FileExistsError:
                suffix += 1
                continue
            except OSError as e:
                raise BackupWriteError(path, e) from e
            break

        print(f"✓ Backup created: {path.name}")
        return path

    def list_backups(self) -> List[Path]:
        if not self.backups_dir.exists():
            return []
        return sorted(self.backups_dir.glob("backup_*.json"))
