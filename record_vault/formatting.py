# ==============================================
# Formatting
# ==============================================
#
# PURPOSE:
#   Turn records and statistics into the text lines shown to
#   the operator and written to the export report. Shared by
#   list / search / sort display and by ExportWriter so every
#   surface renders a record the same way.
#
# FUNCTIONS:
# ----------
# - format_date(value) -> str
#     Local time "YYYY-MM-DD HH:MM:SS", or "N/A" for None.
#
# - record_lines(record, index) -> list[str]
#     The 6-line block: "#n", ID, Name, Details, Created, Updated.
#
# - records_lines(records) -> list[str]
#     Blocks for a sequence, numbered from 1, blank-line separated.
#
# - statistics_lines(stats) -> list[str]
#
# ==============================================

from datetime import datetime
from typing import List, Optional, Sequence

from record_vault.analysis.vault_statistics import VaultStatistics
from record_vault.storage.record import Record

NOT_AVAILABLE = "N/A"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_date(value: Optional[datetime]) -> str:
    if value is None:
        return NOT_AVAILABLE
    return value.astimezone().strftime(DATE_FORMAT)


def record_lines(record: Record, index: int) -> List[str]:
    return [
        f"#{index}",
        f"ID: {record.id}",
        f"Name: {record.name}",
        f"Details: {record.details or NOT_AVAILABLE}",
        f"Created: {format_date(record.created_at)}",
        f"Updated: {format_date(record.updated_at)}",
    ]


def records_lines(records: Sequence[Record]) -> List[str]:
    lines: List[str] = []
    for index, record in enumerate(records, start=1):
        if lines:
            lines.append("")
        lines.extend(record_lines(record, index))
    return lines


def statistics_lines(stats: VaultStatistics) -> List[str]:
    longest = stats.longest_name or NOT_AVAILABLE
    return [
        "==== Vault Statistics ====",
        f"Total Records: {stats.total_records}",
        f"Last Modification: {format_date(stats.last_modified)}",
        f"Longest Name: {longest} ({stats.longest_name_length} characters)",
        f"Earliest Record Date: {format_date(stats.earliest_created)}",
        f"Latest Record Date: {format_date(stats.latest_created)}",
    ]
