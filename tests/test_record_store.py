# ==============================================
# Tests for RecordStore
# ==============================================

import pytest
from bson import ObjectId
from pymongo import DESCENDING

from record_vault.errors import InvalidIdError, NotFoundError, ValidationError
from record_vault.storage.record_store import clean_text, parse_record_id


class TestHelpers:
    def test_clean_text(self):
        assert clean_text("  Router ") == "Router"
        assert clean_text("   ") is None
        assert clean_text(None) is None

    def test_parse_record_id_accepts_hex(self):
        oid = ObjectId()
        assert parse_record_id(str(oid)) == oid
        assert parse_record_id(f"  {oid}  ") == oid

    @pytest.mark.parametrize("bad", ["", "123", "not-an-object-id", "z" * 24, "abcdefghijkl", None, 42])
    def test_parse_record_id_rejects(self, bad):
        with pytest.raises(InvalidIdError):
            parse_record_id(bad)


class TestCreate:
    def test_assigns_id_and_timestamps(self, store):
        record = store.create("Router", "Home WiFi")
        assert ObjectId.is_valid(record.id)
        assert record.name == "Router"
        assert record.details == "Home WiFi"
        assert record.created_at == record.updated_at

    def test_ids_are_unique(self, store):
        ids = {store.create(f"record {i}").id for i in range(20)}
        assert len(ids) == 20

    def test_trims_input(self, store):
        record = store.create("  Router  ", "  Home WiFi ")
        assert record.name == "Router"
        assert record.details == "Home WiFi"

    def test_blank_details_stored_as_none(self, store):
        record = store.create("Router", "   ")
        assert record.details is None
        assert store.find_by_id(record.id).details is None

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_empty_name_rejected(self, store, name):
        with pytest.raises(ValidationError):
            store.create(name)
        assert store.count() == 0

    def test_persisted_record_matches_returned(self, store):
        record = store.create("Router", "Home WiFi")
        assert store.find_by_id(record.id) == record


class TestFindById:
    def test_not_found(self, store):
        with pytest.raises(NotFoundError):
            store.find_by_id(str(ObjectId()))

    def test_invalid_id_checked_before_query(self, store, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("store was queried")

        monkeypatch.setattr(store.collection, "find_one", fail)
        with pytest.raises(InvalidIdError):
            store.find_by_id("bogus")


class TestUpdate:
    def test_updates_name(self, store):
        original = store.create("Router", "Home WiFi")
        updated = store.update(original.id, name="X")
        assert updated.name == "X"
        assert updated.details == "Home WiFi"
        assert updated.created_at == original.created_at
        assert updated.updated_at >= original.updated_at
        assert store.find_by_id(original.id) == updated

    def test_updates_details_only(self, store):
        original = store.create("Router", "Home WiFi")
        updated = store.update(original.id, details="Office WiFi")
        assert updated.name == "Router"
        assert updated.details == "Office WiFi"

    def test_empty_fields_are_ignored(self, store):
        original = store.create("Router", "Home WiFi")
        updated = store.update(original.id, name="  ", details="")
        assert updated == original

    def test_unchanged_values_keep_timestamp(self, store):
        original = store.create("Router", "Home WiFi")
        updated = store.update(original.id, name="Router")
        assert updated.updated_at == original.updated_at

    def test_created_at_never_after_updated_at(self, store):
        record = store.create("Router")
        for i in range(5):
            record = store.update(record.id, name=f"Router {i}")
            assert record.created_at <= record.updated_at

    def test_missing_record(self, store):
        with pytest.raises(NotFoundError):
            store.update(str(ObjectId()), name="X")

    def test_invalid_id(self, store):
        with pytest.raises(InvalidIdError):
            store.update("nope", name="X")


class TestDelete:
    def test_delete_then_find(self, store):
        record = store.create("Router")
        deleted = store.delete(record.id)
        assert deleted == record
        with pytest.raises(NotFoundError):
            store.find_by_id(record.id)
        assert store.count() == 0

    def test_delete_twice(self, store):
        record = store.create("Router")
        store.delete(record.id)
        with pytest.raises(NotFoundError):
            store.delete(record.id)

    def test_invalid_id(self, store):
        with pytest.raises(InvalidIdError):
            store.delete("12345")


class TestListing:
    def test_list_all_is_insertion_order(self, store):
        names = [f"record {i}" for i in range(10)]
        for name in names:
            store.create(name)
        assert [record.name for record in store.list_all()] == names

    def test_list_all_is_re_enumerable(self, store):
        store.create("a")
        store.create("b")
        records = store.list_all()
        assert [r.name for r in records] == [r.name for r in records]

    def test_list_all_custom_order(self, store):
        for name in ["a", "b", "c"]:
            store.create(name)
        records = store.list_all([("createdAt", DESCENDING), ("_id", DESCENDING)])
        assert [r.name for r in records] == ["c", "b", "a"]

    def test_count(self, store):
        assert store.count() == 0
        store.create("a")
        store.create("b")
        assert store.count() == 2

    def test_empty_collection(self, store):
        assert store.list_all() == []
