"""Tests for committing reschedules."""

import threading
import time

import pytest

from roadmap.service.reschedule import RescheduleCoordinator, apply_reschedule

REQUEST = {"task_id": "1", "start_date": "2024-03-11", "due_date": "2024-03-21"}


def test_apply_reschedule_returns_new_list():
    tasks = [
        {"id": "1", "start_date": "2024-03-10", "due_date": "2024-03-20"},
        {"id": "2", "start_date": "2024-03-01"},
    ]
    updated = apply_reschedule(tasks, REQUEST)
    assert updated[0]["start_date"] == "2024-03-11"
    assert updated[0]["due_date"] == "2024-03-21"
    assert updated[1] == tasks[1]
    assert tasks[0]["start_date"] == "2024-03-10"
    assert updated[1] is not tasks[1]


class TestRescheduleCoordinator:
    def setup_method(self):
        self.updates = []
        self.resyncs = 0
        self.messages = []

    def resync(self):
        self.resyncs += 1

    def test_successful_commit(self):
        coordinator = RescheduleCoordinator(self.updates.append, self.resync)
        assert coordinator.commit(REQUEST) is True
        assert self.updates == [REQUEST]
        assert self.resyncs == 0

    def test_failed_commit_resyncs_and_notifies(self):
        def fail(request):
            raise RuntimeError("server unavailable")

        coordinator = RescheduleCoordinator(fail, self.resync, self.messages.append)
        assert coordinator.commit(REQUEST) is False
        assert self.resyncs == 1
        assert len(self.messages) == 1
        assert "1" in self.messages[0]

    def test_failure_without_notify(self):
        def fail(request):
            raise RuntimeError("boom")

        coordinator = RescheduleCoordinator(fail, self.resync)
        assert coordinator.commit(REQUEST) is False
        assert self.resyncs == 1

    def test_superseded_commit_is_dropped(self):
        release = threading.Event()
        entered = threading.Event()

        def update(request):
            if request["start_date"] == "first":
                entered.set()
                assert release.wait(timeout=5)
            self.updates.append(request["start_date"])

        coordinator = RescheduleCoordinator(update, self.resync)
        results = {}

        def run(name):
            results[name] = coordinator.commit(
                {"task_id": "1", "start_date": name, "due_date": name}
            )

        first = threading.Thread(target=run, args=("first",))
        first.start()
        assert entered.wait(timeout=5)

        second = threading.Thread(target=run, args=("second",))
        second.start()
        deadline = time.monotonic() + 5
        while coordinator._latest_sequence.get("1", 0) < 2 and time.monotonic() < deadline:
            time.sleep(0.01)
        third = threading.Thread(target=run, args=("third",))
        third.start()
        while coordinator._latest_sequence.get("1", 0) < 3 and time.monotonic() < deadline:
            time.sleep(0.01)

        release.set()
        for thread in (first, second, third):
            thread.join(timeout=5)

        assert results == {"first": True, "second": False, "third": True}
        assert self.updates == ["first", "third"]
        assert coordinator.pending_task_ids() == set()

    def test_task_entries_released_after_commits(self):
        def fail(request):
            raise RuntimeError("server unavailable")

        coordinator = RescheduleCoordinator(self.updates.append, self.resync)
        assert coordinator.commit(REQUEST) is True
        assert coordinator.pending_task_ids() == set()
        assert coordinator._locks == {}
        assert coordinator._latest_sequence == {}

        failing = RescheduleCoordinator(fail, self.resync)
        assert failing.commit(REQUEST) is False
        assert failing._locks == {}

    def test_task_entry_kept_while_commit_runs(self):
        release = threading.Event()
        entered = threading.Event()

        def update(request):
            entered.set()
            assert release.wait(timeout=5)

        coordinator = RescheduleCoordinator(update, self.resync)
        thread = threading.Thread(target=coordinator.commit, args=(REQUEST,))
        thread.start()
        assert entered.wait(timeout=5)
        assert coordinator.pending_task_ids() == {"1"}

        release.set()
        thread.join(timeout=5)
        assert coordinator.pending_task_ids() == set()

    def test_different_tasks_do_not_supersede(self):
        coordinator = RescheduleCoordinator(self.updates.append, self.resync)
        other = {"task_id": "2", "start_date": "2024-01-01", "due_date": "2024-01-02"}
        assert coordinator.commit(REQUEST) is True
        assert coordinator.commit(other) is True
        assert self.updates == [REQUEST, other]


def test_update_errors_are_not_raised():
    def fail(request):
        raise ValueError("bad request")

    coordinator = RescheduleCoordinator(fail, lambda: None)
    try:
        coordinator.commit(REQUEST)
    except ValueError:
        pytest.fail("commit should not propagate update errors")
