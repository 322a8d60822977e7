# ==============================================
# PERSISTENCE (Backup + Export artifacts)
# ==============================================
#
# This package writes the vault's file artifacts. Neither
# writer touches the store; they serialize records they
# are handed.
#
# Modules:
# --------
# - backup_writer.py  → Timestamped JSON snapshots after Add/Delete
# - export_writer.py  → Overwritten human-readable report
#
# ==============================================

from .backup_writer import BackupWriter
from .export_writer import ExportWriter

__all__ = ["BackupWriter", "ExportWriter"]
