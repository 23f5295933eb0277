"""
Tests for the operation counters.
"""

import pytest

from rlebw.instrumentation import MEMORY, NUM_COUNTERS, RUNS, Counters, bump


class TestCounters:
    def test_starts_at_zero(self):
        counters = Counters()
        assert len(counters) == NUM_COUNTERS
        assert all(counters.count(i) == 0 for i in range(NUM_COUNTERS))

    def test_increment_and_reset(self):
        counters = Counters()
        counters.increment(RUNS)
        counters.increment(MEMORY, 40)
        assert counters.count(RUNS) == 1
        assert counters.count(MEMORY) == 40
        counters.reset()
        assert counters.count(MEMORY) == 0

    def test_report_lists_named_counters(self):
        counters = Counters()
        counters.set_name(RUNS, "runs")
        counters.set_name(MEMORY, "memory_bytes")
        counters.increment(RUNS, 3)
        assert counters.name(RUNS) == "runs"
        assert counters.report() == "runs: 3\nmemory_bytes: 0"

    def test_instances_are_independent(self):
        first = Counters()
        second = Counters()
        first.increment(RUNS)
        assert second.count(RUNS) == 0

    def test_bump_without_counters_is_noop(self):
        bump(None, RUNS, 5)

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            Counters(0)
