"""Tests for the personalization store."""

import threading

import pytest

from dreamboard.analysis.history import HistoryEntry, PersonalizationStore
from dreamboard.models.vocab import Category, Emotion


def _entry(title: str) -> HistoryEntry:
    return HistoryEntry(
        dream_id=None,
        title=title,
        categories=(Category.CAREER_BUSINESS,),
        emotions=(Emotion.AMBITION,),
    )


def test_record_and_snapshot(store):
    store.record("u1", _entry("a"))
    store.record("u1", _entry("b"))
    assert [e.title for e in store.snapshot("u1")] == ["a", "b"]
    assert store.snapshot("nobody") == []


def test_oldest_entries_evicted(store):
    for i in range(8):
        store.record("u1", _entry(str(i)))
    assert [e.title for e in store.snapshot("u1")] == ["3", "4", "5", "6", "7"]


def test_snapshot_is_a_copy(store):
    store.record("u1", _entry("a"))
    store.snapshot("u1").clear()
    assert len(store.snapshot("u1")) == 1


def test_success_recommendations_by_frequency(store):
    store.mark_successful("u1", ["morning routine", "accountability"])
    store.mark_successful("u1", ["accountability", "small steps"])
    store.mark_successful("u1", ["accountability", "small steps"])
    assert store.success_recommendations("u1", limit=2) == ["accountability", "small steps"]


def test_success_factors_are_bounded(store):
    store.mark_successful("u1", [f"factor {i}" for i in range(4)])
    store.mark_successful("u1", [f"factor {i}" for i in range(4, 9)])
    factors = store.success_factors("u1")
    assert len(factors) == store.limit
    assert factors == [f"factor {i}" for i in range(4, 9)]


def test_clear(store):
    store.record("u1", _entry("a"))
    store.mark_successful("u1", ["x"])
    store.clear()
    assert store.snapshot("u1") == []
    assert store.success_factors("u1") == []


def test_invalid_limit():
    with pytest.raises(ValueError):
        PersonalizationStore(limit=0)


def test_concurrent_records_are_all_kept():
    store = PersonalizationStore(limit=1000)

    def worker():
        for i in range(100):
            store.record("shared", _entry(str(i)))

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(store.snapshot("shared")) == 400
