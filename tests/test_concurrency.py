"""Tests for the settle-all combinator."""

import threading
import time

from marine_route.core.concurrency import settle_all


class TestSettleAll:
    def test_empty(self):
        assert settle_all([]) == []

    def test_mixed_outcomes_keep_submission_order(self):
        def boom():
            raise RuntimeError("down")

        results = settle_all([lambda: 1, boom, lambda: "three"])

        assert [r.status for r in results] == ["fulfilled", "rejected", "fulfilled"]
        assert results[0].value == 1
        assert isinstance(results[1].error, RuntimeError)
        assert results[1].value is None
        assert results[2].value == "three"
        assert results[0].ok and not results[1].ok

    def test_failure_does_not_cancel_slow_siblings(self):
        def slow():
            time.sleep(0.05)
            return "done"

        def fast_fail():
            raise ValueError("nope")

        results = settle_all([fast_fail, slow, slow])
        assert [r.value for r in results[1:]] == ["done", "done"]

    def test_branches_run_concurrently(self):
        barrier = threading.Barrier(3, timeout=2)

        def meet():
            barrier.wait()
            return True

        results = settle_all([meet, meet, meet])
        assert all(r.ok and r.value for r in results)
