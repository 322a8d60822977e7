# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# This file contains shared fixtures for all tests.
#
# FIXTURES:
# ---------
# - mongo_client       → In-memory mongomock client (tz_aware)
# - records_collection → Fresh "records" collection per test
# - store              → RecordStore over that collection
# - backup_writer      → BackupWriter writing under tmp_path/backups
# - export_writer      → ExportWriter writing tmp_path/export.txt
# - vault              → Vault wired to all of the above
# - app_config         → AppConfig pointing artifacts at tmp_path
#
# NOTES:
# ------
# - No running MongoDB is needed; mongomock stands in for it
# - Use tmp_path for backup and export files
# ==============================================

import mongomock
import pytest

from record_vault.config import AppConfig, MongoConfig, VaultConfig, reset_config
from record_vault.persistence import BackupWriter, ExportWriter
from record_vault.storage import RecordStore
from record_vault.vault import Vault


@pytest.fixture(autouse=True)
def fresh_config():
    """Never leak the cached configuration between tests."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def mongo_client():
    client = mongomock.MongoClient(tz_aware=True)
    yield client
    client.close()


@pytest.fixture
def records_collection(mongo_client):
    return mongo_client["vault_test"]["records"]


@pytest.fixture
def store(records_collection):
    record_store = RecordStore(records_collection)
    record_store.ensure_indexes()
    return record_store


@pytest.fixture
def backups_dir(tmp_path):
    return tmp_path / "backups"


@pytest.fixture
def export_path(tmp_path):
    return tmp_path / "export.txt"


@pytest.fixture
def backup_writer(backups_dir):
    return BackupWriter(str(backups_dir))


@pytest.fixture
def export_writer(export_path):
    return ExportWriter(str(export_path))


@pytest.fixture
def vault(store, backup_writer, export_writer):
    return Vault(store=store, backup_writer=backup_writer, export_writer=export_writer)


@pytest.fixture
def app_config(tmp_path):
    return AppConfig(
        mongo=MongoConfig(uri="mongodb://localhost:27017/vault_test"),
        vault=VaultConfig(
            backups_dir=str(tmp_path / "backups"),
            export_file=str(tmp_path / "export.txt"),
        ),
    )
