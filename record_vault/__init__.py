# ==============================================
# Record Vault
# ==============================================
#
# Package Structure:
#
# record_vault/
# ├── storage/       # MongoDB connection, Record mapping, RecordStore
# ├── query/         # Search / sort selections and QueryEngine
# ├── analysis/      # Vault statistics
# ├── persistence/   # Backup (JSON snapshots) + export (text report)
# ├── config.py      # Configuration management
# ├── errors.py      # Exception hierarchy
# ├── formatting.py  # Operator-facing text rendering
# ├── vault.py       # Vault controller (public operations)
# └── cli.py         # Interactive command line entry point
#
# ==============================================

__version__ = "0.1.0"
