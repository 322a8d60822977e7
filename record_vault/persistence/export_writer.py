# ==============================================
# ExportWriter
# ==============================================
#
# PURPOSE:
#   Write the human-readable "current state" report of the vault.
#   There is exactly one export file; every export overwrites it.
#
# FILE FORMAT (UTF-8):
# --------------------
#   Export Timestamp: 2026-10-18 15:21:05
#   Total Records: 2
#   File: export.txt
#   ------------------------------
#
#   #1
#   ID: 65f0c0ffee...
#   Name: Router
#   Details: Home WiFi
#   Created: 2026-10-18 15:20:00
#   Updated: 2026-10-18 15:20:00
#
#   #2
#   ...
#
# ==============================================

from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Sequence

from record_vault.errors import ExportWriteError
from record_vault.formatting import format_date, record_lines
from record_vault.storage.record import Record

SEPARATOR = "-" * 30


class ExportWriter:
    """Overwrites the single export report with the vault's current records."""

    def __init__(self, export_path: str = "export.txt"):
        self.export_path = Path(export_path)

    def render(self, records: Sequence[Record], now: datetime) -> str:
        header = [
            f"Export Timestamp: {format_date(now)}",
            f"Total Records: {len(records)}",
            f"File: {self.export_path.name}",
            SEPARATOR,
        ]
        lines: List[str] = []
        for index, record in enumerate(records, start=1):
            lines.extend(record_lines(record, index))
            lines.append("")
        return "\n".join(header) + "\n\n" + "\n".join(lines)

    def write_export(self, records: Sequence[Record], now: Optional[datetime] = None) -> Path:
        """
        Write the report, replacing any previous export.

        Args:
            records: Every live record, in creation order
            now: Export timestamp (defaults to current time)

        Returns:
            Path of the export file

        Raises:
            ExportWriteError: The file could not be written
        """
        content = self.render(records, now or datetime.now(timezone.utc))
        try:
            self.export_path.parent.mkdir(parents=True, exist_ok=True)
            self.export_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise ExportWriteError(self.export_path, e) from e

        print(f"✓ Data exported successfully to {self.export_path.name}.")
        return self.export_path
