import threading

import pytest

from fittrack.services.refresh import RefreshGuard


def test_newest_ticket_commits():
    guard = RefreshGuard()
    ticket = guard.begin("u1")
    assert guard.commit("u1", ticket, "fresh")
    assert guard.latest("u1") == "fresh"


def test_stale_result_is_discarded():
    guard = RefreshGuard()
    slow = guard.begin("u1")
    fast = guard.begin("u1")

    assert guard.commit("u1", fast, "newer")
    assert not guard.commit("u1", slow, "older")
    assert guard.latest("u1") == "newer"


def test_keys_are_independent():
    guard = RefreshGuard()
    a = guard.begin("a")
    guard.begin("b")
    assert guard.commit("a", a, 1)
    assert guard.latest("b") is None


def test_run_returns_newer_value_when_overtaken():
    guard = RefreshGuard()
    slow_started = threading.Event()
    release_slow = threading.Event()
    results = {}

    def slow_compute():
        slow_started.set()
        release_slow.wait(timeout=5)
        return "stale"

    worker = threading.Thread(target=lambda: results.setdefault("slow", guard.run("u1", slow_compute)))
    worker.start()
    slow_started.wait(timeout=5)

    # A second refresh starts later but finishes first
    results["fast"] = guard.run("u1", lambda: "fresh")
    release_slow.set()
    worker.join(timeout=5)

    assert results["fast"] == "fresh"
    assert results["slow"] == "fresh"
    # Both refreshes are done, so nothing is kept for the user
    assert guard.latest("u1") is None
    assert guard.tracked() == 0


def test_run_without_contention():
    guard = RefreshGuard()
    assert guard.run("u1", lambda: 42) == 42
    assert guard.run("u1", lambda: 43) == 43
    assert guard.tracked() == 0


def test_finish_forgets_key_after_last_refresh():
    guard = RefreshGuard()
    first = guard.begin("u1")
    second = guard.begin("u1")
    assert guard.commit("u1", second, "newer")

    guard.finish("u1")
    assert guard.latest("u1") == "newer"
    assert guard.tracked() == 1

    guard.finish("u1")
    assert guard.latest("u1") is None
    assert guard.tracked() == 0

    # Tickets start over once the key is forgotten
    assert guard.begin("u1") == 1
    assert first == 1


def test_failed_compute_is_released():
    guard = RefreshGuard()

    def boom():
        raise RuntimeError("db down")

    with pytest.raises(RuntimeError):
        guard.run("u1", boom)
    assert guard.tracked() == 0
