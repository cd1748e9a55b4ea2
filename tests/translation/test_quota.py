"""Tests for the cumulative character quota."""

import math
import threading

from localetranslator.translation.quota import (
    QuotaState,
    QuotaTracker,
    default_quota_state,
)


class TestQuotaTracker:
    def test_check_reserves_characters(self):
        state = QuotaState(ceiling=100)
        tracker = QuotaTracker(state)
        assert tracker.check({"a": "Hello", "b": "World"})
        assert state.consumed == 10

    def test_rejection_does_not_mutate(self):
        state = QuotaState(consumed=95, ceiling=100)
        tracker = QuotaTracker(state)
        assert not tracker.check({"a": "Hello!"})
        assert state.consumed == 95

    def test_exact_ceiling_succeeds_once(self):
        state = QuotaState(ceiling=10)
        tracker = QuotaTracker(state)
        assert tracker.check({"a": "0123456789"})
        assert state.consumed == 10
        assert not tracker.check({"a": "x"})
        assert state.consumed == 10

    def test_unlimited_is_not_tracked(self):
        state = QuotaState()
        tracker = QuotaTracker(state)
        assert tracker.check({"a": "x" * 10_000})
        assert state.consumed == 0
        assert state.unlimited

    def test_consumed_accumulates_across_checks(self):
        state = QuotaState(consumed=3, ceiling=20)
        tracker = QuotaTracker(state)
        tracker.check({"a": "abc"})
        tracker.check({"b": "defg"})
        assert state.consumed == 10
        assert state.remaining == 10

    def test_concurrent_checks_never_overshoot(self):
        state = QuotaState(ceiling=1000)
        tracker = QuotaTracker(state)
        accepted = []

        def worker():
            for _ in range(100):
                if tracker.check({"k": "abcdefg"}):
                    accepted.append(1)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert state.consumed == len(accepted) * 7
        assert state.consumed <= 1000


class TestDefaultQuotaState:
    def test_default_state_is_shared(self, process_quota):
        first = default_quota_state()
        assert default_quota_state() is first
        assert QuotaTracker().state is first

    def test_ceiling_defaults_to_infinity(self):
        assert math.isinf(QuotaState().ceiling)

    def test_later_ceiling_replaces_unlimited_state(self, process_quota):
        QuotaTracker()
        state = default_quota_state(ceiling=3)
        assert state.ceiling == 3
        assert not QuotaTracker().check({"b": "World"})

    def test_start_only_raises_consumed(self, process_quota):
        state = default_quota_state(start=50, ceiling=100)
        assert state.consumed == 50
        default_quota_state(start=10, ceiling=100)
        assert state.consumed == 50

    def test_bare_call_leaves_state_unchanged(self, process_quota):
        state = default_quota_state(start=5, ceiling=20)
        assert default_quota_state() is state
        assert state.ceiling == 20
        assert state.consumed == 5
