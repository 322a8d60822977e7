# ==============================================
# VaultStatistics
# ==============================================
#
# PURPOSE:
#   Aggregate facts about the vault, derived from ONE snapshot
#   of the store so that every number describes the same data.
#
# CLASS: VaultStatistics (dataclass)
# ----------------------------------
#   Attributes:
#   -----------
#   - total_records: int
#   - last_modified: datetime | None     → Max updated_at
#   - earliest_created: datetime | None  → Min created_at
#   - latest_created: datetime | None    → Max created_at
#   - longest_name: str | None           → Longest name by code points
#   - longest_name_length: int           → 0 when the vault is empty
#
#   Methods:
#   --------
#   - to_dict() -> dict   → JSON-safe, None kept as None
#
# FUNCTION:
# ---------
# - compute_statistics(records: list[Record]) -> VaultStatistics
#     records must be in creation order; a tie on name length
#     is won by the first record in that order.
#
# ==============================================

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from record_vault.storage.record import Record, isoformat_utc


@dataclass
class VaultStatistics:
    total_records: int = 0
    last_modified: Optional[datetime] = None
    earliest_created: Optional[datetime] = None
    latest_created: Optional[datetime] = None
    longest_name: Optional[str] = None
    longest_name_length: int = 0

    @property
    def is_empty(self) -> bool:
        return self.total_records == 0

    def to_dict(self) -> Dict[str, Any]:
        def _iso(value):
            return isoformat_utc(value) if value else None

        return {
            "total_records": self.total_records,
            "last_modified": _iso(self.last_modified),
            "earliest_created": _iso(self.earliest_created),
            "latest_created": _iso(self.latest_created),
            "longest_name": self.longest_name,
            "longest_name_length": self.longest_name_length,
        }


def compute_statistics(records: Sequence[Record]) -> VaultStatistics:
    """
    Derive vault statistics from a creation-ordered snapshot.

    Args:
        records: Every live record, oldest first

    Returns:
        VaultStatistics; an empty snapshot yields count 0 and
        None for every other fact.
    """
    if not records:
        return VaultStatistics()

    longest = records[0]
    for record in records[1:]:
        # Strictly longer only, so the earliest record keeps a tie.
        if len(record.name) > len(longest.name):
            longest = record

    return VaultStatistics(
        total_records=len(records),
        last_modified=max(record.updated_at for record in records),
        earliest_created=min(record.created_at for record in records),
        latest_created=max(record.created_at for record in records),
        longest_name=longest.name,
        longest_name_length=len(longest.name),
    )
