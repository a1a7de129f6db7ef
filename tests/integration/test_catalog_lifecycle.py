# ABOUTME: Integration tests for the full catalog lifecycle through CatalogService.
# ABOUTME: Import, edit, delete, clear, and the action trail across separate connections.

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from kindlebooks.core.service import CatalogService
from kindlebooks.db.catalog import LibraryCatalog
from kindlebooks.db.connection import open_library


class TestCatalogLifecycle:
    """End-to-end service workflow on a real database file."""

    def test_full_lifecycle(self, service: CatalogService, sample_index: Path) -> None:
        """import -> search -> edit -> delete -> clear, logging each step."""
        added = service.import_from_file(sample_index)
        service.record_action("Import", f"Imported file: {sample_index.name}")
        assert added == 5

        [dune] = service.query("Dune")
        assert dune.name == "./FictionDune.mobi"

        assert service.update_book(dune.id, "./Fiction/Dune.epub")
        service.record_action("Edit Book", f"ID: {dune.id}")
        edited = service.get_book(dune.id)
        assert edited is not None
        assert edited.kind == "epub"

        assert service.delete_book(dune.id)
        service.record_action("Delete Book", f"Deleted ID: {dune.id}")
        assert len(service.query()) == 4

        service.clear_all_books()
        service.record_action("Clear DB", "Cleared all books")
        assert service.query() == []

        actions = [entry.action for entry in service.list_logs()]
        assert actions == ["Clear DB", "Delete Book", "Edit Book", "Import"]

    def test_repeated_import_duplicates_rows(
        self, service: CatalogService, sample_index: Path
    ) -> None:
        """Imports are additive; importing twice catalogs every entry twice."""
        service.import_from_file(sample_index)
        service.import_from_file(sample_index)
        assert len(service.query()) == 10
        assert [r.id for r in service.query()][:1] == [10]

    def test_data_visible_to_new_service(self, db_path: Path, sample_index: Path) -> None:
        CatalogService(db_path).import_from_file(sample_index)
        assert len(CatalogService(db_path).query()) == 5

    def test_data_visible_to_raw_catalog(self, db_path: Path, sample_index: Path) -> None:
        CatalogService(db_path).import_from_file(sample_index)
        conn = open_library(db_path)
        try:
            assert LibraryCatalog(conn).count() == 5
        finally:
            conn.close()


class TestBackgroundWorker:
    """Operations may run off the caller's thread."""

    def test_import_in_worker_thread(self, service: CatalogService, sample_index: Path) -> None:
        with ThreadPoolExecutor(max_workers=1) as pool:
            added = pool.submit(service.import_from_file, sample_index).result()
            rows = pool.submit(service.query).result()

        assert added == 5
        assert len(rows) == 5
        assert len(service.query()) == 5
