"""Tests for Debouncer."""

import threading
import time

from vault_publisher.core.debounce import Debouncer


class TestDebouncer:
    """Tests for Debouncer class."""

    def test_burst_runs_once(self):
        calls = []
        done = threading.Event()
        debouncer = Debouncer(0.05)

        def callback(value):
            calls.append(value)
            done.set()

        for value in range(5):
            debouncer.trigger(callback, value)

        assert done.wait(2.0)
        time.sleep(0.1)
        assert calls == [4]
        assert not debouncer.pending

    def test_cancel_drops_pending_run(self):
        calls = []
        debouncer = Debouncer(0.05)

        debouncer.trigger(calls.append, "x")
        assert debouncer.pending
        debouncer.cancel()
        time.sleep(0.15)

        assert calls == []
        assert not debouncer.pending

    def test_cancel_without_pending(self):
        Debouncer(0.05).cancel()

    def test_separate_bursts_run_separately(self):
        calls = []
        debouncer = Debouncer(0.02)
        first = threading.Event()
        second = threading.Event()

        debouncer.trigger(lambda: (calls.append(1), first.set()))
        assert first.wait(2.0)
        debouncer.trigger(lambda: (calls.append(2), second.set()))
        assert second.wait(2.0)

        assert calls == [1, 2]
