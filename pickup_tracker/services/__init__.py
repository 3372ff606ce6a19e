# Domain services
from .audit_log import AuditLog
from .auth_service import AuthService
from .cleanup_scheduler import CleanupScheduler
from .container import ServiceContainer, build_container
from .export_service import SnapshotExporter
from .lookup_service import LookupService
from .order_service import OrderService
from .recycle_bin_service import RecycleBinService

__all__ = [
    "AuditLog", "AuthService", "CleanupScheduler", "ServiceContainer", "build_container",
    "SnapshotExporter", "LookupService", "OrderService", "RecycleBinService",
]
