"""Tests for the bounded comparison history."""
import threading

import pytest

from farm_scenario.history import COLUMNS, ComparisonHistory, ComparisonRecord
from farm_scenario.simulation import run_simulation


def _record(label, profit=0.0):
    return ComparisonRecord(label, 1.0, profit, 2.0, "low", 3.0, 4.0)


class TestComparisonHistory:
    def test_default_capacity(self, history):
        assert history.capacity == 5

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            ComparisonHistory(capacity=0)

    def test_fifo_eviction(self, history):
        for i in range(8):
            history.append(_record(f"r{i}"))
        assert len(history) == 5
        assert [r.label for r in history.snapshot()] == ["r3", "r4", "r5", "r6", "r7"]

    def test_record_from_result(self, history, defaults):
        result = run_simulation(defaults)
        rec = history.record(result)
        assert rec.label == "Scenario 1"
        assert rec.to_dict() == {
            "label": "Scenario 1",
            "yield": result.expected_yield,
            "profit": result.profit,
            "cost": result.total_cost,
            "risk_level": "low",
            "water_usage": result.water_usage,
            "environmental_impact": result.environmental_impact,
        }

    def test_labels_stay_unique_after_eviction(self, history, defaults):
        result = run_simulation(defaults)
        for _ in range(7):
            history.record(result)
        assert [r.label for r in history] == [f"Scenario {n}" for n in range(3, 8)]

    def test_clear_restarts_labels(self, history, defaults):
        result = run_simulation(defaults)
        history.record(result)
        history.record(result)
        history.clear()
        assert len(history) == 0
        assert history.record(result).label == "Scenario 1"

    def test_snapshot_is_read_only_copy(self, history):
        history.append(_record("a"))
        snap = history.snapshot()
        history.append(_record("b"))
        assert isinstance(snap, tuple)
        assert len(snap) == 1

    def test_to_frame(self, history):
        history.append(_record("a", profit=10))
        history.append(_record("b", profit=-5))
        df = history.to_frame()
        assert list(df.columns) == COLUMNS
        assert df["profit"].tolist() == [10, -5]

    def test_empty_frame_has_columns(self, history):
        assert list(history.to_frame().columns) == COLUMNS

    def test_concurrent_appends_respect_capacity(self, history):
        def worker(n):
            for i in range(50):
                history.append(_record(f"{n}-{i}"))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(history) == 5
