# ==============================================
# Tests for the Backup/Export Writers
# ==============================================

import json
from datetime import datetime, timezone

import pytest

from record_vault.errors import BackupWriteError, ExportWriteError, IOFailure
from record_vault.persistence import BackupWriter, ExportWriter

FIXED_NOW = datetime(2026, 10, 18, 13, 21, 5, 987000, tzinfo=timezone.utc)


class TestBackupWriter:
    def test_ensure_directory_is_idempotent(self, tmp_path):
        writer = BackupWriter(str(tmp_path / "nested" / "backups"))
        writer.ensure_directory()
        writer.ensure_directory()
        assert (tmp_path / "nested" / "backups").is_dir()

    def test_timestamp_is_filesystem_safe(self):
        assert BackupWriter.backup_timestamp(FIXED_NOW) == "2026-10-18-13-21-05"

    def test_naive_timestamp_taken_as_utc(self):
        naive = datetime(2026, 10, 18, 13, 21, 5)
        assert BackupWriter.backup_timestamp(naive) == "2026-10-18-13-21-05"

    def test_writes_full_snapshot(self, store, backup_writer):
        first = store.create("Router", "Home WiFi")
        second = store.create("Passport")
        backup_writer.ensure_directory()

        path = backup_writer.write_backup(store.list_all(), now=FIXED_NOW)

        assert path.name == "backup_2026-10-18-13-21-05.json"
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == [first.to_dict(), second.to_dict()]
        assert set(data[0]) == {"_id", "name", "details", "createdAt", "updatedAt"}

    def test_pretty_printed(self, store, backup_writer):
        store.create("Router")
        backup_writer.ensure_directory()
        path = backup_writer.write_backup(store.list_all(), now=FIXED_NOW)
        assert path.read_text(encoding="utf-8").startswith("[\n  {")

    def test_same_second_never_overwrites(self, backup_writer):
        backup_writer.ensure_directory()
        first = backup_writer.write_backup([], now=FIXED_NOW)
        second = backup_writer.write_backup([], now=FIXED_NOW)
        third = backup_writer.write_backup([], now=FIXED_NOW)
        assert first.name == "backup_2026-10-18-13-21-05.json"
        assert second.name == "backup_2026-10-18-13-21-05_1.json"
        assert third.name == "backup_2026-10-18-13-21-05_2.json"
        assert backup_writer.list_backups() == [first, second, third]

    def test_empty_snapshot(self, backup_writer):
        backup_writer.ensure_directory()
        path = backup_writer.write_backup([], now=FIXED_NOW)
        assert json.loads(path.read_text(encoding="utf-8")) == []

    def test_missing_directory_raises(self, tmp_path):
        writer = BackupWriter(str(tmp_path / "never-created"))
        with pytest.raises(BackupWriteError):
            writer.write_backup([], now=FIXED_NOW)

    def test_directory_blocked_by_file(self, tmp_path):
        blocker = tmp_path / "blocked"
        blocker.write_text("not a directory")
        writer = BackupWriter(str(blocker / "backups"))
        with pytest.raises(BackupWriteError) as excinfo:
            writer.ensure_directory()
        assert isinstance(excinfo.value, IOFailure)

    def test_list_backups_without_directory(self, tmp_path):
        assert BackupWriter(str(tmp_path / "none")).list_backups() == []


class TestExportWriter:
    def test_header_and_blocks(self, store, export_writer, export_path):
        first = store.create("Router", "Home WiFi")
        store.create("Passport")

        path = export_writer.write_export(store.list_all(), now=FIXED_NOW)

        assert path == export_path
        lines = path.read_text(encoding="utf-8").split("\n")
        assert lines[0].startswith("Export Timestamp: ")
        assert lines[1] == "Total Records: 2"
        assert lines[2] == "File: export.txt"
        assert lines[3] == "-" * 30
        assert lines[4] == ""
        assert lines[5:11] == [
            "#1",
            f"ID: {first.id}",
            "Name: Router",
            "Details: Home WiFi",
            lines[9],
            lines[10],
        ]
        assert lines[9].startswith("Created: ")
        assert lines[10].startswith("Updated: ")
        assert lines[11] == ""
        assert lines[12] == "#2"
        assert lines[15] == "Details: N/A"

    def test_empty_vault(self, export_writer):
        path = export_writer.write_export([], now=FIXED_NOW)
        content = path.read_text(encoding="utf-8")
        assert "Total Records: 0" in content
        assert content.endswith("-" * 30 + "\n\n")

    def test_overwrites_previous_export(self, store, export_writer, tmp_path):
        store.create("Router")
        export_writer.write_export(store.list_all(), now=FIXED_NOW)
        store.create("Passport")
        export_writer.write_export(store.list_all(), now=FIXED_NOW)

        assert [p.name for p in tmp_path.iterdir() if p.is_file()] == ["export.txt"]
        content = (tmp_path / "export.txt").read_text(encoding="utf-8")
        assert "Total Records: 2" in content
        assert "Name: Passport" in content

    def test_utf8_content(self, store, export_writer):
        store.create("Café", "naïve")
        path = export_writer.write_export(store.list_all(), now=FIXED_NOW)
        assert "Name: Café" in path.read_text(encoding="utf-8")

    def test_write_failure(self, tmp_path):
        blocker = tmp_path / "blocked"
        blocker.write_text("not a directory")
        writer = ExportWriter(str(blocker / "export.txt"))
        with pytest.raises(ExportWriteError):
            writer.write_export([], now=FIXED_NOW)
