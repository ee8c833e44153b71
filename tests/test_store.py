"""Tests for LocationStore."""

import sqlite3

import pytest

from spotfinder import store as store_module
from spotfinder.seed import GTA_LOCATIONS, RESERVED_LOCATIONS
from spotfinder.store import (
    Location,
    LocationConflict,
    LocationNotFound,
    LocationStore,
    LocationStoreError,
)

SEEDED_COUNT = len(GTA_LOCATIONS) + len(RESERVED_LOCATIONS)


class TestSeeding:
    def test_reopen_does_not_reseed(self, db_path):
        with LocationStore.open(db_path) as first:
            assert first.count() == SEEDED_COUNT
        with LocationStore.open(db_path) as second:
            assert second.count() == SEEDED_COUNT

    def test_list_all_matches_catalog(self, store):
        names = [loc.name for loc in store.list_all()]
        expected = {name for name, _, _ in GTA_LOCATIONS + RESERVED_LOCATIONS}

        assert len(names) == len(set(names))
        assert set(names) == expected

    def test_reserved_records_stored(self, store):
        for name, lat, lon in RESERVED_LOCATIONS:
            loc = store.query_by_name(name)
            assert (loc.name, loc.latitude, loc.longitude) == (name, lat, lon)

    def test_seed_disabled(self, empty_store):
        assert empty_store.count() == 0
        assert empty_store.list_all() == []

    def test_emptied_store_stays_empty_on_reopen(self, db_path):
        with LocationStore.open(db_path) as s:
            for loc in s.list_all():
                s.delete(loc.name)
        with LocationStore.open(db_path) as s:
            assert s.count() == 0


class TestQueryByName:
    def test_case_insensitive(self, empty_store):
        empty_store.add("Toronto", 43.65, -79.35)

        loc = empty_store.query_by_name("TORONTO")

        assert loc.name == "Toronto"
        assert loc.latitude == 43.65
        assert loc.longitude == -79.35

    def test_not_found(self, store):
        assert store.query_by_name("Atlantis") is None

    def test_exact_not_substring(self, store):
        assert store.query_by_name("Toron") is None
        assert store.query_by_name("Toronto ") is None

    def test_coords_snippet(self, store):
        assert store.query_by_name("testtown1").coords == "Lat 43.9990, Lon -79.1110"


class TestAdd:
    def test_add_returns_record(self, empty_store):
        loc = empty_store.add("Home", 43.1, -79.2)

        assert isinstance(loc, Location)
        assert loc.id > 0
        assert empty_store.query_by_name("home") == loc

    def test_duplicate_name_conflicts(self, store):
        with pytest.raises(LocationConflict):
            store.add("Toronto", 1.0, 2.0)

        loc = store.query_by_name("Toronto")
        assert (loc.latitude, loc.longitude) == (43.6510, -79.3470)
        assert store.count() == SEEDED_COUNT

    def test_uniqueness_is_case_sensitive(self, empty_store):
        empty_store.add("Toronto", 43.65, -79.35)
        empty_store.add("toronto", 10.0, 20.0)

        assert empty_store.count() == 2

    def test_no_coordinate_validation(self, empty_store):
        loc = empty_store.add("Nowhere", 123.0, -500.0)
        assert empty_store.query_by_name("Nowhere") == loc

    def test_ids_not_reused(self, empty_store):
        first = empty_store.add("A", 1.0, 1.0)
        empty_store.delete("A")
        second = empty_store.add("A", 1.0, 1.0)

        assert second.id > first.id


class TestUpdatePartial:
    def test_latitude_only(self, store):
        updated = store.update_partial("UpdateMeCity", latitude=44.0)

        assert (updated.name, updated.latitude, updated.longitude) == ("UpdateMeCity", 44.0, -79.555)
        assert store.query_by_name("UpdateMeCity") == updated

    def test_rename_and_move(self, store):
        before = store.query_by_name("UpdateMeCity")

        updated = store.update_partial("updatemecity", "Renamed", 1.5, 2.5)

        assert updated == Location(before.id, "Renamed", 1.5, 2.5)
        assert store.query_by_name("UpdateMeCity") is None
        assert store.query_by_name("renamed") == updated

    def test_blank_name_keeps_current(self, store):
        updated = store.update_partial("UPDATEMECITY", "   ", None, -80.0)

        assert updated.name == "UpdateMeCity"
        assert updated.latitude == 43.555
        assert updated.longitude == -80.0

    def test_zero_coordinates_override(self, store):
        updated = store.update_partial("UpdateMeCity", latitude=0.0, longitude=0.0)
        assert (updated.latitude, updated.longitude) == (0.0, 0.0)

    def test_not_found(self, store):
        with pytest.raises(LocationNotFound):
            store.update_partial("Atlantis", latitude=1.0)
        assert store.count() == SEEDED_COUNT

    def test_rename_collision(self, store):
        with pytest.raises(LocationConflict):
            store.update_partial("UpdateMeCity", "TestTown1", 1.0, 1.0)

        assert store.query_by_name("UpdateMeCity").latitude == 43.555
        assert store.query_by_name("TestTown1").latitude == 43.999

    def test_rename_onto_case_variant_of_other_record(self, store):
        # Uniqueness is exact, so a case variant of another name is accepted
        updated = store.update_partial("UpdateMeCity", "testtown1")

        assert updated.name == "testtown1"
        assert store.count() == SEEDED_COUNT
        names = {loc.name for loc in store.list_all()}
        assert {"TestTown1", "testtown1"} <= names
        assert "UpdateMeCity" not in names
        assert store.query_by_name("TESTTOWN1").name in {"TestTown1", "testtown1"}
        assert store.delete("testtown1") == 1
        assert store.query_by_name("TestTown1").latitude == 43.999

    def test_rename_to_own_name_different_case(self, store):
        updated = store.update_partial("UpdateMeCity", "UPDATEMECITY")

        assert updated.name == "UPDATEMECITY"
        assert store.count() == SEEDED_COUNT


class TestDelete:
    def test_wrong_case_deletes_nothing(self, store):
        assert store.delete("updatemecity") == 0
        assert store.query_by_name("UpdateMeCity") is not None

    def test_exact_case_deletes(self, store):
        assert store.delete("UpdateMeCity") == 1
        assert store.query_by_name("UpdateMeCity") is None
        assert store.count() == SEEDED_COUNT - 1

    def test_missing(self, store):
        assert store.delete("Atlantis") == 0


class TestSchemaVersion:
    def test_version_recorded(self, store, db_path):
        con = sqlite3.connect(db_path)
        try:
            assert con.execute("PRAGMA user_version").fetchone()[0] == store_module.SCHEMA_VERSION
        finally:
            con.close()

    def test_upgrade_drops_and_reseeds(self, db_path, monkeypatch):
        with LocationStore.open(db_path) as s:
            s.add("Custom", 1.0, 1.0)
            s.delete("Toronto")

        monkeypatch.setattr(store_module, "SCHEMA_VERSION", store_module.SCHEMA_VERSION + 1)
        with LocationStore.open(db_path) as s:
            assert s.query_by_name("Custom") is None
            assert s.query_by_name("Toronto") is not None
            assert s.count() == SEEDED_COUNT

    def test_downgrade_refused(self, db_path):
        con = sqlite3.connect(db_path)
        con.execute("PRAGMA user_version = 99")
        con.close()

        with pytest.raises(LocationStoreError):
            LocationStore.open(db_path)

    def test_context_manager_closes(self, db_path):
        with LocationStore.open(db_path, seed=False) as s:
            pass
        assert s.closed
        with pytest.raises(sqlite3.ProgrammingError):
            s.count()
