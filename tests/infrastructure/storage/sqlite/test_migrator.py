"""Unit tests for database migrator."""

from pathlib import Path

import aiosqlite
import pytest

from goldbook.infrastructure.storage.sqlite.migrations.migrator import (
    LEDGER_TABLES,
    MigrationInfo,
    create_backup,
    discover_migrations,
    get_applied_migrations,
    get_migration_status,
    initialize_database,
    restore_backup,
    verify_schema_integrity,
)


class TestMigrationInfo:
    def test_from_file_parses_filename(self, tmp_path: Path):
        migration_file = tmp_path / "v001_initial_schema.sql"
        migration_file.write_text("-- Test migration\nSELECT 1;")

        info = MigrationInfo.from_file(migration_file)

        assert info.version == "001"
        assert info.name == "initial_schema"
        assert info.path == migration_file
        assert len(info.checksum) == 16

    def test_different_content_different_checksum(self, tmp_path: Path):
        (tmp_path / "v001_a.sql").write_text("SELECT 1;")
        (tmp_path / "v002_b.sql").write_text("SELECT 2;")

        first, second = discover_migrations(tmp_path)
        assert first.checksum != second.checksum

    def test_invalid_filename(self, tmp_path: Path):
        bad = tmp_path / "initial.sql"
        bad.write_text("SELECT 1;")
        with pytest.raises(ValueError):
            MigrationInfo.from_file(bad)


class TestDiscoverMigrations:
    def test_bundled_migrations(self):
        migrations = discover_migrations()
        assert migrations[0].version == "001"
        assert migrations[0].name == "ledger_records"

    def test_sorted_and_skips_bad_names(self, tmp_path: Path):
        (tmp_path / "v002_second.sql").write_text("SELECT 2;")
        (tmp_path / "v001_first.sql").write_text("SELECT 1;")
        (tmp_path / "vXYZ_bad.sql").write_text("SELECT 3;")

        assert [m.version for m in discover_migrations(tmp_path)] == ["001", "002"]


class TestInitializeDatabase:
    async def test_creates_ledger_tables(self, temp_db_path: Path):
        results = await initialize_database(temp_db_path, create_backup_before=False)

        assert [r.success for r in results] == [True]
        checks = await verify_schema_integrity(temp_db_path)
        assert all(check["status"] == "PASS" for check in checks)

    async def test_is_idempotent(self, temp_db_path: Path):
        await initialize_database(temp_db_path, create_backup_before=False)
        assert await initialize_database(temp_db_path) == []

    async def test_records_applied_versions(self, temp_db_path: Path):
        await initialize_database(temp_db_path, create_backup_before=False)
        async with aiosqlite.connect(temp_db_path) as conn:
            applied = await get_applied_migrations(conn)
        assert list(applied) == ["001"]

    async def test_stops_at_failed_migration(self, tmp_path: Path, temp_db_path: Path):
        migrations = tmp_path / "migrations"
        migrations.mkdir()
        (migrations / "v001_ok.sql").write_text(
            "CREATE TABLE schema_migrations (version TEXT PRIMARY KEY, name TEXT, "
            "checksum TEXT, execution_time_ms INTEGER, applied_at TEXT);"
            "CREATE TABLE a (id INTEGER);"
        )
        (migrations / "v002_broken.sql").write_text("CREATE TABLE oops (;")
        (migrations / "v003_never.sql").write_text("CREATE TABLE b (id INTEGER);")

        results = await initialize_database(
            temp_db_path, create_backup_before=False, migrations_dir=migrations
        )

        assert [(r.version, r.success) for r in results] == [("001", True), ("002", False)]
        assert results[1].error

    async def test_migration_status(self, temp_db_path: Path):
        before = await get_migration_status(temp_db_path)
        assert before["exists"] is False
        assert before["pending_migrations"] == ["001"]

        await initialize_database(temp_db_path, create_backup_before=False)
        after = await get_migration_status(temp_db_path)
        assert after["current_version"] == "001"
        assert after["pending_migrations"] == []

    async def test_missing_tables_fail_verification(self, temp_db_path: Path):
        async with aiosqlite.connect(temp_db_path) as conn:
            await conn.execute("CREATE TABLE invoices (id TEXT)")
            await conn.commit()

        checks = {c["check"]: c for c in await verify_schema_integrity(temp_db_path)}
        assert checks["ledger_tables"]["status"] == "FAIL"
        assert "traders" in checks["ledger_tables"]["missing"]
        assert len(checks["ledger_tables"]["missing"]) == len(LEDGER_TABLES) - 1


def test_backup_and_restore(tmp_path: Path):
    db = tmp_path / "ledger.db"
    db.write_bytes(b"original")

    backup = create_backup(db)
    db.write_bytes(b"changed")
    restore_backup(db, backup)

    assert db.read_bytes() == b"original"
    assert backup.exists()
