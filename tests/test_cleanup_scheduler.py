import json
from datetime import date, timedelta

import pytest

from pickup_tracker.core.clock import to_iso
from pickup_tracker.services.cleanup_scheduler import CleanupScheduler


class CountingRecycleBin:
    def __init__(self, result=None, error=None):
        self.calls = 0
        self.result = result or []
        self.error = error

    def auto_cleanup(self):
        self.calls += 1
        if self.error:
            raise self.error
        return list(self.result)


@pytest.fixture
def state_path(tmp_path):
    return tmp_path / "cleanup_state.json"


def test_run_now_records_last_run(state_path):
    service = CountingRecycleBin(result=["WHS-001"])
    scheduler = CleanupScheduler(service, state_path)

    assert scheduler.run_now() == ["WHS-001"]
    status = scheduler.get_status()
    assert status["last_purged"] == 1
    assert status["last_run_at"] is not None
    assert status["running"] is False


def test_daily_job_runs_once_per_day(state_path):
    service = CountingRecycleBin()
    today = date(2026, 10, 19)
    scheduler = CleanupScheduler(service, state_path, today=lambda: today)

    scheduler._daily_job()
    scheduler._daily_job()

    assert service.calls == 1
    assert json.loads(state_path.read_text())["last_run_date"] == "2026-10-19"


def test_daily_job_runs_again_next_day(state_path):
    service = CountingRecycleBin()
    days = [date(2026, 10, 19)]
    scheduler = CleanupScheduler(service, state_path, today=lambda: days[0])

    scheduler._daily_job()
    days[0] = days[0] + timedelta(days=1)
    scheduler._daily_job()

    assert service.calls == 2


def test_daily_job_respects_state_from_previous_process(state_path):
    state_path.write_text(json.dumps({"last_run_date": "2026-10-19"}))
    service = CountingRecycleBin()
    scheduler = CleanupScheduler(service, state_path, today=lambda: date(2026, 10, 19))

    scheduler._daily_job()

    assert service.calls == 0


def test_failed_daily_job_does_not_mark_the_day(state_path):
    service = CountingRecycleBin(error=RuntimeError("disk gone"))
    scheduler = CleanupScheduler(service, state_path, today=lambda: date(2026, 10, 19))

    scheduler._daily_job()

    assert service.calls == 1
    assert not state_path.exists()


def test_start_runs_startup_cleanup_and_schedules_daily_job(state_path):
    service = CountingRecycleBin()
    scheduler = CleanupScheduler(service, state_path, run_at="02:00", poll_seconds=1)

    scheduler.start()
    try:
        assert service.calls == 1
        status = scheduler.get_status()
        assert status["running"] is True
        assert status["thread_alive"] is True
        assert status["next_run"].endswith("02:00:00")
    finally:
        scheduler.stop()

    assert scheduler.get_status()["running"] is False


def test_start_survives_failing_startup_cleanup(state_path):
    scheduler = CleanupScheduler(CountingRecycleBin(error=RuntimeError("boom")), state_path, poll_seconds=1)

    scheduler.start()
    try:
        assert scheduler.running is True
    finally:
        scheduler.stop()


def test_scheduler_drives_real_cleanup(container, order_service, clock, state_path):
    order_service.create_order("Old", "071", [{"sku": "A"}], "cash", "s")
    container.recycle_bin_service.soft_delete("WHS-001", "manager")
    with container.deleted_store.transaction() as deleted:
        deleted[0]["deleted_at"] = to_iso(clock() - timedelta(days=9))

    scheduler = CleanupScheduler(container.recycle_bin_service, state_path)

    assert scheduler.run_now() == ["WHS-001"]
    assert scheduler.run_now() == []
