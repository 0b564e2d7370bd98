"""Tests for the candidate set."""

import pytest

from lmk.candidates import CandidateSet, DisplayHandle


class Tracker:
    """Handle factory that records allocations and releases."""

    def __init__(self):
        self.allocated = []
        self.released = []

    def factory(self, name):
        handle = object()
        self.allocated.append((name, handle))
        return handle

    def release(self, handle):
        self.released.append(handle)


@pytest.fixture
def tracker():
    return Tracker()


def test_add_is_idempotent():
    candidates = CandidateSet()
    candidates.add("alpha")
    candidates.add("alpha")
    assert candidates.size() == 1


def test_remove_restores_size():
    candidates = CandidateSet(["alpha"])
    candidates.add("beta")
    candidates.remove("beta")
    assert len(candidates) == 1
    assert "beta" not in candidates


def test_unknown_remove_is_noop(tracker):
    candidates = CandidateSet(["alpha"], tracker.factory, tracker.release)
    candidates.remove("missing")
    assert len(candidates) == 1
    assert tracker.released == []


def test_duplicate_initial_names_collapse():
    assert CandidateSet(["b", "a", "b"]).names() == ["b", "a"]


def test_empty_name_rejected():
    with pytest.raises(ValueError):
        CandidateSet().add("")


def test_each_name_gets_its_own_handle(tracker):
    candidates = CandidateSet(["alpha", "beta"], tracker.factory, tracker.release)
    candidates.add("alpha")

    assert [name for name, _ in tracker.allocated] == ["alpha", "beta"]
    assert candidates.handle("alpha") is not candidates.handle("beta")


def test_remove_releases_handle_once(tracker):
    candidates = CandidateSet(["alpha"], tracker.factory, tracker.release)
    handle = candidates.handle("alpha")

    candidates.remove("alpha")
    candidates.remove("alpha")

    assert tracker.released == [handle]


def test_close_releases_remaining_handles(tracker):
    with CandidateSet(["alpha", "beta", "gamma"], tracker.factory, tracker.release) as candidates:
        candidates.remove("beta")

    assert len(candidates) == 0
    assert len(tracker.released) == 3
    assert len(set(map(id, tracker.released))) == 3


def test_default_handles_are_labelled_and_released():
    candidates = CandidateSet(["alpha"])
    handle = candidates.handle("alpha")
    assert isinstance(handle, DisplayHandle)
    assert handle.label == "alpha"

    candidates.remove("alpha")
    assert handle.released


def test_iteration_is_restartable():
    candidates = CandidateSet(["alpha", "beta"])
    first = [name for name, _ in candidates]
    second = [name for name, _ in candidates]
    assert first == second == ["alpha", "beta"]


def test_iteration_sees_new_names():
    candidates = CandidateSet(["alpha"])
    candidates.add("beta")
    assert [name for name, _ in candidates] == ["alpha", "beta"]
