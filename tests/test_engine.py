"""Tests for the PriceSet -> TwapAccumulator pipeline."""

import pytest

from twap_from_file.core import EraseEvent, InsertEvent, TwapEngine
from twap_from_file.data import EventFileSource


def test_first_event_has_no_average(engine):
    assert engine.process(InsertEvent(1000, 1, 10.0)) is None


def test_process_returns_running_average(engine):
    assert engine.process(InsertEvent(0, 1, 10.0)) is None
    assert engine.process(InsertEvent(10, 2, 20.0)) == 10.0
    assert engine.process(EraseEvent(30, 2)) == pytest.approx((10 * 10 + 20 * 20) / 30)
    assert engine.book.max_price() == 10.0


def test_empty_book_period_is_excluded(engine):
    engine.process(InsertEvent(0, 1, 10.0))
    assert engine.process(EraseEvent(10, 1)) == 10.0
    assert engine.process(InsertEvent(20, 2, 20.0)) == 10.0
    assert engine.accumulator.total_time == 10


def test_run_yields_only_defined_averages(engine, sample_file):
    averages = list(engine.run(EventFileSource(sample_file)))

    assert averages == pytest.approx([10.0, 10.5, 76 / 7, 11.0, 10.75])
    assert engine.stats.events_processed == 6
    assert engine.stats.averages_emitted == 5


def test_stats_count_ignored_operations(engine):
    events = [
        InsertEvent(0, 1, 10.0),
        InsertEvent(5, 1, 99.0),   # duplicate id
        EraseEvent(6, 42),         # unknown id
        InsertEvent(4, 2, 11.0),   # time goes backwards
        EraseEvent(10, 1),
    ]
    list(engine.run(events))

    stats = engine.stats.to_dict()
    assert stats['events_processed'] == 5
    assert stats['inserts'] == 3
    assert stats['erases'] == 2
    assert stats['duplicate_inserts'] == 1
    assert stats['unknown_erases'] == 1
    assert stats['out_of_order'] == 1


def test_out_of_order_event_still_changes_book(engine):
    engine.process(InsertEvent(0, 1, 10.0))
    engine.process(InsertEvent(10, 2, 20.0))
    engine.process(InsertEvent(5, 3, 30.0))

    # book applies the order, the sample itself is dropped
    assert engine.book.max_price() == 30.0
    assert engine.accumulator.last_time == 10
    assert engine.accumulator.last_price == 20.0

    # 20.0 held until t=20
    assert engine.process(InsertEvent(20, 4, 1.0)) == pytest.approx(15.0)


def test_replay_is_deterministic(sample_file):
    events = list(EventFileSource(sample_file))
    first = list(TwapEngine().run(events))
    second = list(TwapEngine().run(events))
    assert first == second


def test_late_event_after_empty_book_is_dropped(engine):
    """Backward time is dropped even when the book was empty before it."""
    outputs = [
        engine.process(InsertEvent(0, 1, 10.0)),
        engine.process(EraseEvent(10, 1)),
        engine.process(InsertEvent(5, 2, 20.0)),
        engine.process(InsertEvent(15, 3, 5.0)),
    ]

    assert outputs == [None, 10.0, 10.0, 10.0]
    assert engine.stats.out_of_order == 1
    assert engine.accumulator.total_time == 10
