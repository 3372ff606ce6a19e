from datetime import datetime, timedelta, timezone

import pytest

from pickup_tracker.core.config import Settings
from pickup_tracker.services.container import build_container


class FixedClock:
    """Callable clock that only moves when a test moves it"""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def clock():
    return FixedClock(datetime(2026, 10, 19, 10, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATA_DIR=tmp_path,
        CLEANUP_SCHEDULER_ENABLED=False,
        LOG_JSON=False,
        STAFF_USERS={},
    )


@pytest.fixture
def container(settings, clock):
    container = build_container(settings, clock=clock)
    container.initialize()
    return container


@pytest.fixture
def order_service(container):
    return container.order_service


@pytest.fixture
def recycle_bin_service(container):
    return container.recycle_bin_service


@pytest.fixture
def lookup_service(container):
    return container.lookup_service


@pytest.fixture
def audit_log(container):
    return container.audit_log


@pytest.fixture
def jane_order(order_service):
    return order_service.create_order(
        "Jane", "0771234567", [{"sku": "X1", "qty": 2}], "cash", "staff1"
    )
