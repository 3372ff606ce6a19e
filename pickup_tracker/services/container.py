"""
Builds the stores and services for one application instance
"""
from dataclasses import dataclass

from pickup_tracker.core.clock import Clock, utc_now
from pickup_tracker.core.config import Settings
from pickup_tracker.db.json_store import JsonListStore
from pickup_tracker.services.audit_log import AuditLog
from pickup_tracker.services.auth_service import AuthService
from pickup_tracker.services.cleanup_scheduler import CleanupScheduler
from pickup_tracker.services.export_service import SnapshotExporter
from pickup_tracker.services.lookup_service import LookupService
from pickup_tracker.services.order_numbers import build_policy
from pickup_tracker.services.order_service import OrderService
from pickup_tracker.services.recycle_bin_service import RecycleBinService


@dataclass
class ServiceContainer:
    settings: Settings
    orders_store: JsonListStore
    deleted_store: JsonListStore
    sequence_store: JsonListStore
    audit_log: AuditLog
    order_service: OrderService
    lookup_service: LookupService
    recycle_bin_service: RecycleBinService
    cleanup_scheduler: CleanupScheduler
    auth_service: AuthService

    def initialize(self):
        """Create empty data files on first run"""
        self.orders_store.initialize()
        self.deleted_store.initialize()
        self.sequence_store.initialize()
        self.audit_log.initialize()
        self.settings.exports_path.mkdir(parents=True, exist_ok=True)


def build_container(settings: Settings, clock: Clock = utc_now) -> ServiceContainer:
    orders_store = JsonListStore(settings.orders_path, name="orders")
    deleted_store = JsonListStore(settings.deleted_orders_path, name="deleted_orders")
    sequence_store = JsonListStore(settings.order_sequence_path, name="order_sequence")
    audit_log = AuditLog(settings.audit_log_path, clock=clock)

    order_service = OrderService(
        orders_store,
        deleted_store,
        audit_log,
        number_policy=build_policy(settings.ORDER_NUMBER_SCHEME, settings.ORDER_NUMBER_PREFIX),
        required_approvals=settings.REQUIRED_APPROVALS,
        clock=clock,
        sequence_store=sequence_store,
    )
    recycle_bin_service = RecycleBinService(
        orders_store,
        deleted_store,
        audit_log,
        SnapshotExporter(settings.exports_path, clock=clock),
        retention_days=settings.RECYCLE_BIN_RETENTION_DAYS,
        warning_days=settings.RECYCLE_BIN_WARNING_DAYS,
        clock=clock,
    )

    return ServiceContainer(
        settings=settings,
        orders_store=orders_store,
        deleted_store=deleted_store,
        sequence_store=sequence_store,
        audit_log=audit_log,
        order_service=order_service,
        lookup_service=LookupService(orders_store),
        recycle_bin_service=recycle_bin_service,
        cleanup_scheduler=CleanupScheduler(
            recycle_bin_service,
            settings.cleanup_state_path,
            run_at=settings.CLEANUP_TIME,
            poll_seconds=settings.CLEANUP_POLL_SECONDS,
        ),
        auth_service=AuthService(settings.STAFF_USERS, audit_log=audit_log),
    )
