"""
Integration tests for infrastructure/db/sqlite_workout_store.py

Runs against a real SQLite file under tmp_path.
"""
import sqlite3
from datetime import date

import pytest

from application.exceptions import StoreError
from application.use_cases import CommitOutcome, DraftSession
from domain.calendar import AppCalendar
from domain.models import SetRecord, WorkoutRecord
from domain.units import WeightUnit
from infrastructure.db import SqliteWorkoutStore, open_workout_store

from tests.fakes import make_record

D1 = date(2024, 1, 1)
D2 = date(2024, 1, 8)


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "trainlog.sqlite3"


@pytest.fixture
def store(db_path):
    store = SqliteWorkoutStore(db_path)
    yield store
    store.close()


@pytest.mark.integration
class TestSqliteWorkoutStore:
    def test_insert_save_find(self, store):
        store.insert(make_record(D1, [("squat", 100, 5), ("bench_press", 80, 8)]))
        store.save()

        record = store.find_by_date(D1)
        assert record.date == D1
        assert [(s.exercise_id, s.weight, s.reps) for s in record.sets] == [
            ("squat", 100.0, 5),
            ("bench_press", 80.0, 8),
        ]

    def test_missing_date_is_none(self, store):
        assert store.find_by_date(D1) is None

    def test_update_replaces_sets(self, store):
        store.insert(make_record(D1, [("squat", 100, 5)]))
        store.save()
        store.update(make_record(D1, [("deadlift", 140, 3)]))
        store.save()
        assert [s.exercise_id for s in store.find_by_date(D1).sets] == ["deadlift"]

    def test_update_without_record_raises(self, store):
        with pytest.raises(StoreError):
            store.update(make_record(D1, [("squat", 100, 5)]))

    def test_duplicate_insert_raises(self, store):
        store.insert(make_record(D1, [("squat", 100, 5)]))
        store.save()
        with pytest.raises(StoreError):
            store.insert(make_record(D1, [("squat", 100, 5)]))

    def test_delete_cascades_sets(self, store):
        store.insert(make_record(D1, [("squat", 100, 5)]))
        store.save()
        store.delete(store.find_by_date(D1))
        store.save()
        assert store.find_by_date(D1) is None
        assert store.all_records() == []

    def test_rollback_discards_staged_writes(self, store):
        store.insert(make_record(D1, [("squat", 100, 5)]))
        store.rollback()
        assert store.find_by_date(D1) is None

    def test_unbindable_reps_raise_store_error(self, store):
        oversized = SetRecord.model_construct(exercise_id="squat", weight=100.0, reps=10**20)
        with pytest.raises(StoreError):
            store.insert(WorkoutRecord(date=D1, sets=[oversized]))
        store.rollback()
        assert store.find_by_date(D1) is None

    def test_saved_writes_survive_reopen(self, store, db_path):
        store.insert(make_record(D1, [("squat", 100, 5)]))
        store.save()
        store.close()

        reopened = SqliteWorkoutStore(db_path)
        try:
            assert reopened.find_by_date(D1) is not None
        finally:
            reopened.close()

    def test_all_records_ascending(self, store):
        store.insert(make_record(D2, [("squat", 110, 5)]))
        store.insert(make_record(D1, [("squat", 100, 5)]))
        store.insert(make_record(date(2024, 1, 5), []))
        store.save()

        records = store.all_records()
        assert [r.date for r in records] == [D1, date(2024, 1, 5), D2]
        assert records[1].sets == []


@pytest.mark.integration
class TestOpenWorkoutStore:
    def test_creates_parent_directory(self, tmp_path):
        store = open_workout_store(tmp_path / "nested" / "log.sqlite3")
        try:
            assert store.all_records() == []
        finally:
            store.close()

    def test_corrupt_file_is_recreated(self, db_path):
        db_path.write_bytes(b"this is not a sqlite database" * 100)
        wal = db_path.with_name(db_path.name + "-wal")
        wal.write_bytes(b"junk")

        store = open_workout_store(db_path)
        try:
            assert store.all_records() == []
            assert not wal.exists()
            with sqlite3.connect(db_path) as conn:
                tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master")}
            assert "workouts" in tables
        finally:
            store.close()

    def test_memory_store(self):
        store = open_workout_store(":memory:")
        try:
            assert store.path == ":memory:"
            assert store.all_records() == []
        finally:
            store.close()


@pytest.mark.integration
class TestDraftSessionWithSqlite:
    """The draft engine end to end against the real store."""

    def test_commit_and_cold_reload(self, db_path):
        calendar = AppCalendar()
        store = open_workout_store(db_path)
        session = DraftSession(calendar, initial_date=D1)
        session.sync(D1, store, WeightUnit.KG)
        entry = session.append_exercise("squat", initial_set_count=1)
        session.update_set_row(entry.id, entry.sets[0].id, "100", "5")
        assert session.commit(store, WeightUnit.KG).outcome == CommitOutcome.INSERTED
        store.close()

        store = open_workout_store(db_path)
        try:
            fresh = DraftSession(calendar, initial_date=D1)
            fresh.sync(D1, store, WeightUnit.KG)
            row = fresh.draft_exercises[0].sets[0]
            assert (row.weight_text, row.reps_text) == ("100", "5")

            fresh.start_new_workout()
            assert fresh.commit(store, WeightUnit.KG).outcome == CommitOutcome.DELETED
            assert store.find_by_date(D1) is None
        finally:
            store.close()

    def test_oversized_reps_are_not_committed(self, db_path):
        store = open_workout_store(db_path)
        try:
            session = DraftSession(AppCalendar(), initial_date=D1)
            session.sync(D1, store, WeightUnit.KG)
            entry = session.append_exercise("squat", initial_set_count=1)
            row_id = entry.sets[0].id
            session.update_set_row(entry.id, row_id, "100", "99999999999999999999")

            assert not session.has_committable_content
            result = session.commit(store, WeightUnit.KG)
            assert result.success
            assert result.outcome == CommitOutcome.NOOP
            assert store.find_by_date(D1) is None

            session.update_set_row(entry.id, row_id, "100", "5")
            assert session.commit(store, WeightUnit.KG).outcome == CommitOutcome.INSERTED
        finally:
            store.close()
