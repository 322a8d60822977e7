# ==============================================
# Errors
# ==============================================
#
# PURPOSE:
#   Typed failures raised by the vault components.
#   The Vault controller catches every VaultError and turns it
#   into an "error" OperationResult, so a single failed operation
#   never ends the operator's session.
#
# HIERARCHY:
# ----------
#   VaultError
#   ├── ValidationError          → Empty required input
#   │   └── InvalidSelectionError → Unknown search mode / sort field / direction
#   ├── InvalidIdError           → Malformed record id (no query attempted)
#   ├── NotFoundError            → Well-formed id, no live record
#   ├── RecordMappingError       → Stored document breaks the record contract
#   ├── ConfigurationError       → Missing / malformed setting (fatal)
#   ├── StoreUnavailableError    → Cannot reach MongoDB at startup (fatal)
#   └── IOFailure                → Filesystem write failed
#       ├── BackupWriteError
#       └── ExportWriteError
#
# ==============================================


class VaultError(Exception):
    """Base class for every error raised by the record vault."""


class ValidationError(VaultError):
    """Caller-supplied input is empty or otherwise unusable."""


class InvalidSelectionError(ValidationError):
    """A menu-style selection (search mode, sort field, direction) is not recognised."""

    def __init__(self, kind: str, value):
        self.kind = kind
        self.value = value
        super().__init__(f"Invalid {kind} selection: {value!r}")


class InvalidIdError(VaultError):
    """The record id is not in the format the store accepts."""

    def __init__(self, record_id):
        self.record_id = record_id
        super().__init__("Invalid ID format.")


class NotFoundError(VaultError):
    """No live record matches a well-formed id."""

    def __init__(self, record_id):
        self.record_id = record_id
        super().__init__("Record not found.")


class RecordMappingError(VaultError):
    """A document read from the store cannot be mapped to a Record."""


class ConfigurationError(VaultError):
    """Required configuration is missing or malformed."""


class StoreUnavailableError(VaultError):
    """The persistent store could not be reached."""


class IOFailure(VaultError):
    """A backup or export artifact could not be written."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not write {path}: {reason}")


class BackupWriteError(IOFailure):
    pass


class ExportWriteError(IOFailure):
    pass
