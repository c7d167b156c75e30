"""Tests for the configuration record stores.

Every test in the contract classes runs against both the in-memory and
the SQLite store (see the ``store`` fixture).  SQL-only behaviour
(transactions, persistence across store instances) is covered at the
bottom.
"""

from __future__ import annotations

import threading
from datetime import timezone

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from pomoconfig.database import SqlConfigStore, TimerConfigRow, session_scope
from pomoconfig.timer_config import DEFAULTS, InMemoryConfigStore


CUSTOM = {
    "work_duration": 40,
    "short_break_duration": 8,
    "long_break_duration": 25,
    "cycles_before_long_break": 6,
    "advanced_config_active": True,
}


# ═══════════════════════════════════════════════════════════════════════
#  GET
# ═══════════════════════════════════════════════════════════════════════


class TestGet:

    def test_empty_store_does_not_exist(self, store):
        assert store.exists() is False

    def test_get_creates_default(self, store, ids):
        record = store.get()
        assert record.values == DEFAULTS
        assert record.customized is False
        assert record.id == ids.issued[0]
        assert record.date_created == record.date_modified
        assert store.exists() is True

    def test_get_is_idempotent(self, store, ids):
        first = store.get()
        second = store.get()
        assert first == second
        assert len(ids.issued) == 1

    def test_timestamps_are_utc_aware(self, store):
        record = store.get()
        assert record.date_created.tzinfo is not None
        assert record.date_created.utcoffset() == timezone.utc.utcoffset(None)

    def test_exists_does_not_create(self, store, ids):
        store.exists()
        store.exists()
        assert ids.issued == []


# ═══════════════════════════════════════════════════════════════════════
#  UPDATE
# ═══════════════════════════════════════════════════════════════════════


class TestUpdate:

    def test_update_on_empty_store_creates_then_merges(self, store, ids):
        record = store.update({"work_duration": 45}, customized=True)
        assert record.id == ids.issued[0]
        assert record.work_duration == 45
        assert record.short_break_duration == DEFAULTS.short_break_duration
        assert record.customized is True
        assert record.date_modified > record.date_created

    def test_update_keeps_id_and_created(self, store):
        original = store.get()
        updated = store.update(CUSTOM, customized=True)
        assert updated.id == original.id
        assert updated.date_created == original.date_created
        assert updated.date_modified > original.date_modified

    def test_merge_is_field_by_field(self, store):
        store.update(CUSTOM, customized=True)
        record = store.update({"work_duration": 10}, customized=True)
        assert record.work_duration == 10
        assert record.long_break_duration == 25
        assert record.cycles_before_long_break == 6
        assert record.advanced_config_active is True

    def test_read_after_write(self, store):
        store.update(CUSTOM, customized=True)
        record = store.get()
        for name, value in CUSTOM.items():
            assert getattr(record, name) == value
        assert record.customized is True

    @pytest.mark.parametrize("key", ["customized", "id", "date_created", "bogus"])
    def test_non_editable_keys_are_rejected(self, store, key):
        store.get()
        with pytest.raises(KeyError):
            store.update({key: True}, customized=False)
        assert store.get().values == DEFAULTS

    def test_previously_returned_record_is_unchanged(self, store):
        before = store.get()
        store.update(CUSTOM, customized=True)
        assert before.values == DEFAULTS


# ═══════════════════════════════════════════════════════════════════════
#  RESET / CLEAR
# ═══════════════════════════════════════════════════════════════════════


class TestReset:

    def test_reset_replaces_record(self, store):
        original = store.update(CUSTOM, customized=True)
        record = store.reset()
        assert record.id != original.id
        assert record.values == DEFAULTS
        assert record.customized is False
        assert record.date_created == record.date_modified
        assert record.date_created > original.date_modified

    def test_reset_on_empty_store(self, store):
        record = store.reset()
        assert record.values == DEFAULTS
        assert store.exists()

    def test_repeated_resets_get_fresh_ids(self, store):
        first = store.reset()
        second = store.reset()
        assert first.id != second.id
        assert second.date_created > first.date_created
        assert store.get() == second

    def test_clear(self, store, ids):
        store.get()
        store.clear()
        assert store.exists() is False
        record = store.get()
        assert record.id == ids.issued[-1]
        assert len(ids.issued) == 2


# ═══════════════════════════════════════════════════════════════════════
#  ISOLATION & CONCURRENCY
# ═══════════════════════════════════════════════════════════════════════


class TestIsolation:

    def test_independent_memory_stores(self):
        a = InMemoryConfigStore()
        b = InMemoryConfigStore()
        a.update({"work_duration": 50}, customized=True)
        assert b.get().work_duration == DEFAULTS.work_duration

    def test_concurrent_first_reads_create_one_record(self, store):
        results = []

        def read():
            results.append(store.get().id)

        threads = [threading.Thread(target=read) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(set(results)) == 1


# ═══════════════════════════════════════════════════════════════════════
#  SQL STORE SPECIFICS
# ═══════════════════════════════════════════════════════════════════════


class TestSqlStore:

    def test_single_row_after_many_operations(self, sql_store, session_factory):
        sql_store.get()
        sql_store.update(CUSTOM, customized=True)
        sql_store.reset()
        sql_store.reset()
        with session_scope(session_factory) as session:
            count = session.scalar(select(func.count()).select_from(TimerConfigRow))
        assert count == 1

    def test_record_survives_new_store_instance(self, sql_store, session_factory):
        saved = sql_store.update(CUSTOM, customized=True)
        reopened = SqlConfigStore(session_factory)
        assert reopened.get() == saved

    def test_failed_update_rolls_back(self, session_factory, ids):
        def broken_clock():
            raise SQLAlchemyError("clock exploded")

        healthy = SqlConfigStore(session_factory, id_factory=ids)
        before = healthy.update(CUSTOM, customized=True)

        broken = SqlConfigStore(session_factory, clock=broken_clock)
        with pytest.raises(SQLAlchemyError):
            broken.update({"work_duration": 5}, customized=True)
        assert healthy.get() == before

    def test_failed_first_update_leaves_store_empty(self, session_factory, clock):
        def broken_ids():
            raise RuntimeError("no ids today")

        store = SqlConfigStore(session_factory, clock=clock, id_factory=broken_ids)
        with pytest.raises(RuntimeError):
            store.update(CUSTOM, customized=True)
        assert store.exists() is False

    def test_repr(self, sql_store, session_factory):
        sql_store.get()
        with session_scope(session_factory) as session:
            row = session.scalars(select(TimerConfigRow)).one()
            assert "customized=False" in repr(row)
